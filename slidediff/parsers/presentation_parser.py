"""Split a markdown document into a presentation of slides.

Slides start at H1/H2 headings (configurable) that sit outside fenced code
blocks. A document with at most one such heading is a single slide.
"""

import logging
import re
from typing import Optional

from slidediff.schemas.config_schema import ParsingConfig
from slidediff.schemas.presentation_schema import (
    MarkdownSource,
    Presentation,
    RepositoryInfo,
    Slide,
    SlideLocation,
)

from .markdown_parser import ChunkParser, hash_markdown_string, parse_markdown_chunks

logger = logging.getLogger(__name__)

_HEADING = re.compile(r"^#+\s+(.+)$")


def extract_slide_title(content: str, config: Optional[ParsingConfig] = None) -> str:
    """Title of a slide: its first heading, else its first non-blank line.

    Long first lines are truncated with '...'; content with no text at all
    gets the configured placeholder ("Untitled Slide").
    """
    config = config or ParsingConfig()
    lines = [line for line in content.split("\n") if line.strip()]

    for line in lines:
        match = _HEADING.match(line)
        if match:
            return match.group(1).strip()

    if lines:
        first_line = lines[0].rstrip()
        if len(first_line) > config.title_max_length:
            return first_line[: config.title_max_length - 3] + "..."
        return first_line

    return config.untitled_title


def parse_markdown_into_presentation(
    markdown_content: str,
    repository_info: Optional[RepositoryInfo] = None,
    custom_parsers: Optional[list[ChunkParser]] = None,
    config: Optional[ParsingConfig] = None,
) -> Presentation:
    """Parse markdown into slides.

    Args:
        markdown_content: The whole document.
        repository_info: Optional GitHub coordinates kept on the result.
        custom_parsers: Chunk parsers forwarded to ``parse_markdown_chunks``.
        config: Slide-boundary and title settings.

    Returns:
        A Presentation whose slides cover every line of the document.
    """
    config = config or ParsingConfig()
    lines = markdown_content.split("\n")

    if not _has_multiple_headers(lines, config.max_heading_level):
        slide = _build_slide(
            markdown_content, 0, 0, len(lines) - 1, custom_parsers, config
        )
        return Presentation(
            slides=[slide],
            original_content=markdown_content,
            repository_info=repository_info,
        )

    slides: list[Slide] = []
    current_lines: list[str] = []
    current_start = 0
    fence = _FenceTracker()

    for i, line in enumerate(lines):
        fence.feed(line)
        if not fence.inside and _is_slide_heading(line, config.max_heading_level) and current_lines:
            slides.append(
                _build_slide(
                    "\n".join(current_lines), len(slides), current_start, i - 1, custom_parsers, config
                )
            )
            current_lines = [line]
            current_start = i
        else:
            current_lines.append(line)

    if current_lines:
        slides.append(
            _build_slide(
                "\n".join(current_lines), len(slides), current_start, len(lines) - 1, custom_parsers, config
            )
        )

    logger.debug(f"Split document into {len(slides)} slides")
    return Presentation(
        slides=slides,
        original_content=markdown_content,
        repository_info=repository_info,
    )


def parse_markdown_into_presentation_from_source(
    source: MarkdownSource,
    custom_parsers: Optional[list[ChunkParser]] = None,
    config: Optional[ParsingConfig] = None,
) -> Presentation:
    """Parse a MarkdownSource and attach the source to the result."""
    presentation = parse_markdown_into_presentation(
        source.content,
        source.repository_info,
        custom_parsers,
        config,
    )
    return presentation.model_copy(update={"source": source})


def serialize_presentation_to_markdown(presentation: Presentation) -> str:
    """Join slide contents back into a single markdown document."""
    return "\n".join(slide.location.content for slide in presentation.slides)


def update_presentation_slide(
    presentation: Presentation,
    slide_index: int,
    new_content: str,
    custom_parsers: Optional[list[ChunkParser]] = None,
    config: Optional[ParsingConfig] = None,
) -> Presentation:
    """Return a copy of the presentation with one slide's content replaced.

    The slide keeps its id and line range; its chunks and title are derived
    again from the new content.

    Raises:
        IndexError: If ``slide_index`` is outside the presentation.
    """
    if slide_index < 0 or slide_index >= len(presentation.slides):
        raise IndexError(f"Invalid slide index: {slide_index}")

    slide = presentation.slides[slide_index]
    updated_slide = slide.model_copy(
        update={
            "location": slide.location.model_copy(update={"content": new_content}),
            "chunks": parse_markdown_chunks(new_content, slide.id, custom_parsers),
            "title": extract_slide_title(new_content, config),
        }
    )
    slides = list(presentation.slides)
    slides[slide_index] = updated_slide

    updated = presentation.model_copy(update={"slides": slides})
    return updated.model_copy(
        update={"original_content": serialize_presentation_to_markdown(updated)}
    )


def _build_slide(
    content: str,
    index: int,
    start_line: int,
    end_line: int,
    custom_parsers: Optional[list[ChunkParser]],
    config: ParsingConfig,
) -> Slide:
    slide_id = f"slide-{index}-{hash_markdown_string(content)}"
    return Slide(
        id=slide_id,
        title=extract_slide_title(content, config),
        location=SlideLocation(start_line=start_line, end_line=end_line, content=content),
        chunks=parse_markdown_chunks(content, slide_id, custom_parsers),
    )


def _is_slide_heading(line: str, max_level: int) -> bool:
    stripped = line.strip()
    return stripped.startswith("#") and not stripped.startswith("#" * (max_level + 1))


def _has_multiple_headers(lines: list[str], max_level: int) -> bool:
    fence = _FenceTracker()
    count = 0
    for line in lines:
        fence.feed(line)
        if not fence.inside and _is_slide_heading(line, max_level):
            count += 1
            if count > 1:
                return True
    return False


class _FenceTracker:
    """Tracks whether the current line is inside a ``` or ~~~ fenced block."""

    def __init__(self) -> None:
        self.inside = False
        self._delimiter = ""

    def feed(self, line: str) -> None:
        stripped = line.strip()
        if not (stripped.startswith("```") or stripped.startswith("~~~")):
            return
        if not self.inside:
            self.inside = True
            self._delimiter = stripped[:3]
        elif stripped.startswith(self._delimiter):
            self.inside = False
            self._delimiter = ""
