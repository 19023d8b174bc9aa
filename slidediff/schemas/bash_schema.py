"""Pydantic model for commands extracted from bash code blocks."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BashCommand(BaseModel):
    """A single (possibly multi-line) shell command."""

    model_config = ConfigDict(frozen=True)

    command: str
    description: Optional[str] = Field(
        default=None,
        description="Text of the comment line directly preceding the command",
    )
    line: int = Field(description="1-based line the command starts on")
