import logging
from pathlib import Path
from typing import Optional

from slidediff.schemas.config_schema import ParsingConfig
from slidediff.schemas.presentation_schema import MarkdownSource, MarkdownSourceType, Presentation

from .text_parser import parse_text
from .pptx_parser import parse_pptx
from .markdown_parser import ChunkParser, hash_markdown_string, parse_markdown_chunks, parse_code_chunks
from .presentation_parser import (
    extract_slide_title,
    parse_markdown_into_presentation,
    parse_markdown_into_presentation_from_source,
    serialize_presentation_to_markdown,
    update_presentation_slide,
)
from .bash_parser import parse_bash_commands, get_command_display_name

logger = logging.getLogger(__name__)

_PARSER_MAP = {
    ".md": parse_text,
    ".markdown": parse_text,
    ".txt": parse_text,
    ".pptx": parse_pptx,
}


def parse(path: str | Path) -> str:
    """Read a document file and return its content as markdown.

    Dispatches to the appropriate parser based on file extension.
    Supported formats: .md, .markdown, .txt, .pptx
    """
    path = Path(path)
    ext = path.suffix.lower()
    parser = _PARSER_MAP.get(ext)
    if parser is None:
        supported = ", ".join(sorted(_PARSER_MAP.keys()))
        raise ValueError(f"Unsupported file format '{ext}'. Supported: {supported}")
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return parser(path)


def load_presentation(
    path: str | Path,
    config: Optional[ParsingConfig] = None,
    custom_parsers: Optional[list[ChunkParser]] = None,
) -> Presentation:
    """Parse a document file into a presentation of slides."""
    path = Path(path)
    content = parse(path)
    source = MarkdownSource(
        type=MarkdownSourceType.WORKSPACE_FILE,
        content=content,
        file_path=str(path),
    )
    presentation = parse_markdown_into_presentation_from_source(source, custom_parsers, config)
    logger.info(f"Loaded {len(presentation.slides)} slides from {path}")
    return presentation


__all__ = [
    "parse",
    "load_presentation",
    "parse_text",
    "parse_pptx",
    "ChunkParser",
    "hash_markdown_string",
    "parse_markdown_chunks",
    "parse_code_chunks",
    "extract_slide_title",
    "parse_markdown_into_presentation",
    "parse_markdown_into_presentation_from_source",
    "serialize_presentation_to_markdown",
    "update_presentation_slide",
    "parse_bash_commands",
    "get_command_display_name",
]
