"""Pydantic models describing the difference between two presentations."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .presentation_schema import Presentation, Slide


class DiffStatus(str, Enum):
    """Status of a slide when comparing two presentations."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"
    MOVED = "moved"


class TextDiffType(str, Enum):
    """Type of a single line change within a slide."""

    ADD = "add"
    REMOVE = "remove"
    UNCHANGED = "unchanged"


class TextDiff(BaseModel):
    """One line of a line-level edit script."""

    model_config = ConfigDict(frozen=True)

    type: TextDiffType
    value: str = Field(description="The line text, without its terminator")
    line_number: Optional[int] = Field(
        default=None,
        description="1-based position in the edit script, not in either input",
    )


class SlideMatch(BaseModel):
    """A pairing between a before-slide and an after-slide.

    Matched entries carry both slides; unmatched entries carry exactly one.
    """

    model_config = ConfigDict(frozen=True)

    before_slide: Optional[Slide] = None
    after_slide: Optional[Slide] = None
    before_index: Optional[int] = None
    after_index: Optional[int] = None
    matched_by: Literal["title", "position", "none"]


class SlideDiff(BaseModel):
    """The comparison result for one slide pairing."""

    model_config = ConfigDict(frozen=True)

    status: DiffStatus
    before_slide: Optional[Slide] = None
    after_slide: Optional[Slide] = None
    before_index: Optional[int] = None
    after_index: Optional[int] = None
    content_changes: Optional[list[TextDiff]] = Field(
        default=None,
        description="Line-by-line changes, populated for modified slides only",
    )
    title_changed: bool = False


class DiffSummary(BaseModel):
    """Per-status slide counts for a presentation diff."""

    model_config = ConfigDict(frozen=True)

    total_slides_before: int = Field(default=0, ge=0)
    total_slides_after: int = Field(default=0, ge=0)
    added: int = Field(default=0, ge=0)
    removed: int = Field(default=0, ge=0)
    modified: int = Field(default=0, ge=0)
    unchanged: int = Field(default=0, ge=0)
    moved: int = Field(default=0, ge=0)


class PresentationDiff(BaseModel):
    """Complete slide-by-slide comparison of two presentations."""

    model_config = ConfigDict(frozen=True)

    before: Presentation
    after: Presentation
    slide_diffs: list[SlideDiff] = Field(default_factory=list)
    summary: DiffSummary = Field(default_factory=DiffSummary)
