"""Pydantic models for slide parsing and diff report configuration.

A DiffConfig is usually loaded from a YAML file (see configs/default.yaml).
The core diff algorithms take no configuration; these settings only shape
how documents are split into slides and how reports are rendered.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class ParsingConfig(BaseModel):
    """How markdown documents are split into slides."""

    max_heading_level: int = Field(
        default=2,
        ge=1,
        le=6,
        description="Deepest heading level that starts a new slide (2 = '#' and '##')",
    )
    untitled_title: str = Field(
        default="Untitled Slide",
        description="Title given to slides with no heading and no text",
    )
    title_max_length: int = Field(
        default=50,
        ge=4,
        description="First-line titles longer than this are truncated with '...'",
    )


class ReportConfig(BaseModel):
    """How a presentation diff is rendered as text."""

    show_unchanged: bool = Field(
        default=False,
        description="List unchanged slides in the report",
    )
    show_line_numbers: bool = Field(
        default=True,
        description="Prefix content changes with their position in the edit script",
    )
    max_changed_lines: int = Field(
        default=0,
        ge=0,
        description="Maximum content-change lines printed per slide (0 = unlimited)",
    )


class DiffConfig(BaseModel):
    """Top-level configuration."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "DiffConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        data = self.model_dump(exclude_none=True)
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
