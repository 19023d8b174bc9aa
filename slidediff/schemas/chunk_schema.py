"""Pydantic models for the content chunks a slide is split into.

Chunks form a tagged union over ``ChunkType``: the ``type`` field selects
the concrete model when chunks are loaded back from JSON.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ChunkType(str, Enum):
    """Kinds of content chunk produced by the markdown splitter."""

    MARKDOWN = "markdown_chunk"
    MERMAID = "mermaid_chunk"
    SLIDE = "slide_chunk"
    CODE = "code_chunk"


class BaseChunk(BaseModel):
    """A contiguous piece of slide content."""

    model_config = ConfigDict(frozen=True)

    type: ChunkType
    content: str
    id: str


class MarkdownChunk(BaseChunk):
    type: Literal[ChunkType.MARKDOWN] = ChunkType.MARKDOWN


class MermaidChunk(BaseChunk):
    type: Literal[ChunkType.MERMAID] = ChunkType.MERMAID


class SlideChunk(BaseChunk):
    type: Literal[ChunkType.SLIDE] = ChunkType.SLIDE


class CodeChunk(BaseChunk):
    """A fenced code block, tagged with its info-string language."""

    type: Literal[ChunkType.CODE] = ChunkType.CODE
    language: Optional[str] = None


Chunk = Annotated[
    Union[MarkdownChunk, MermaidChunk, SlideChunk, CodeChunk],
    Field(discriminator="type"),
]


def is_markdown_chunk(chunk: BaseChunk) -> bool:
    return chunk.type == ChunkType.MARKDOWN


def is_mermaid_chunk(chunk: BaseChunk) -> bool:
    return chunk.type == ChunkType.MERMAID


def is_code_chunk(chunk: BaseChunk) -> bool:
    return chunk.type == ChunkType.CODE
