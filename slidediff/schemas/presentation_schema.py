"""Pydantic models for parsed markdown presentations."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .chunk_schema import Chunk


class MarkdownSourceType(str, Enum):
    """Where a markdown document was loaded from."""

    WORKSPACE_FILE = "workspace_file"
    REMOTE_FILE = "remote_file"
    GITHUB_FILE = "github_file"
    DRAFT = "draft"
    GITHUB_ISSUE = "github_issue"
    GITHUB_PULL_REQUEST = "github_pull_request"
    GITHUB_GIST = "github_gist"


class RepositoryInfo(BaseModel):
    """GitHub coordinates used to resolve relative image URLs."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    branch: str = Field(default="main", description="Branch or ref used for raw URLs")
    base_path: str = Field(
        default="",
        description="Directory of the markdown file within the repository",
    )


class MarkdownSource(BaseModel):
    """Raw markdown document plus metadata about its origin."""

    model_config = ConfigDict(frozen=True)

    type: MarkdownSourceType
    content: str
    file_path: Optional[str] = None
    workspace_root: Optional[str] = None
    editable: Optional[bool] = None
    deletable: Optional[bool] = None
    repository_info: Optional[RepositoryInfo] = None


class SlideLocation(BaseModel):
    """Where a slide sits in its source document (0-based, inclusive)."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    end_line: int
    content: str


class Slide(BaseModel):
    """One contiguous markdown section, usually opened by a heading."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique within its presentation")
    title: str
    location: SlideLocation
    chunks: list[Chunk] = Field(default_factory=list)

    @property
    def content(self) -> str:
        return self.location.content

    @property
    def start_line(self) -> int:
        return self.location.start_line

    @property
    def end_line(self) -> int:
        return self.location.end_line


class Presentation(BaseModel):
    """Ordered slides parsed from one markdown document.

    Slide order encodes document position; the index of a slide in
    ``slides`` is its positional identity when detecting moves.
    """

    model_config = ConfigDict(frozen=True)

    slides: list[Slide] = Field(default_factory=list)
    original_content: str = ""
    source: Optional[MarkdownSource] = None
    repository_info: Optional[RepositoryInfo] = None
