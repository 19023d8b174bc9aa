from .chunk_schema import (
    ChunkType, BaseChunk, MarkdownChunk, MermaidChunk, SlideChunk, CodeChunk, Chunk,
    is_markdown_chunk, is_mermaid_chunk, is_code_chunk,
)
from .presentation_schema import (
    MarkdownSourceType, RepositoryInfo, MarkdownSource, SlideLocation, Slide, Presentation,
)
from .bash_schema import BashCommand
from .diff_schema import (
    DiffStatus, TextDiffType, TextDiff, SlideMatch, SlideDiff, DiffSummary, PresentationDiff,
)
from .config_schema import ParsingConfig, ReportConfig, DiffConfig

__all__ = [
    "ChunkType",
    "BaseChunk",
    "MarkdownChunk",
    "MermaidChunk",
    "SlideChunk",
    "CodeChunk",
    "Chunk",
    "is_markdown_chunk",
    "is_mermaid_chunk",
    "is_code_chunk",
    "MarkdownSourceType",
    "RepositoryInfo",
    "MarkdownSource",
    "SlideLocation",
    "Slide",
    "Presentation",
    "BashCommand",
    "DiffStatus",
    "TextDiffType",
    "TextDiff",
    "SlideMatch",
    "SlideDiff",
    "DiffSummary",
    "PresentationDiff",
    "ParsingConfig",
    "ReportConfig",
    "DiffConfig",
]
