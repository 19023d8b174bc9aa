"""Parser for PPTX files using python-pptx.

Renders each slide of a deck as a markdown section opened by a '#'
heading, so two decks can be diffed slide by slide.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_pptx(path: Path) -> str:
    """Convert a PowerPoint deck to slide-per-heading markdown.

    Each slide starts with ``# <title>`` (the title placeholder text, or
    "Slide N" when there is none). Body text follows with bullet levels as
    indented list items, tables as markdown tables, and speaker notes as a
    ``> Speaker notes:`` quote.
    """
    from pptx import Presentation
    from pptx.enum.shapes import PP_PLACEHOLDER

    title_types = (PP_PLACEHOLDER.TITLE, PP_PLACEHOLDER.CENTER_TITLE)

    prs = Presentation(str(path))
    sections: list[str] = []

    for slide_idx, slide in enumerate(prs.slides, 1):
        title_parts: list[str] = []
        body: list[str] = []

        for shape in slide.shapes:
            if shape.has_text_frame:
                is_title = _is_title_shape(shape, title_types)

                for para in shape.text_frame.paragraphs:
                    text = para.text.strip()
                    if not text:
                        continue
                    if is_title:
                        title_parts.append(text)
                    elif para.level and para.level > 0:
                        indent = "  " * (para.level - 1)
                        body.append(f"{indent}- {_escape_heading(text)}")
                    else:
                        body.append(_escape_heading(text))

            if shape.has_table:
                for row_idx, row in enumerate(shape.table.rows):
                    cells = [cell.text.strip() for cell in row.cells]
                    body.append("| " + " | ".join(cells) + " |")
                    if row_idx == 0:
                        body.append("|" + "|".join(["---"] * len(cells)) + "|")

        if slide.has_notes_slide and slide.notes_slide.notes_text_frame:
            notes = slide.notes_slide.notes_text_frame.text.strip()
            if notes:
                body.append("")
                body.append(f"> Speaker notes: {' '.join(notes.split())}")

        title = " ".join(title_parts) or f"Slide {slide_idx}"
        section = [f"# {title}"]
        if body:
            section.append("")
            section.extend(body)
        sections.append("\n".join(section))

    if not sections:
        raise ValueError(f"No slides could be extracted from {path}")

    logger.debug(f"Extracted {len(sections)} slides from {path.name}")
    return "\n\n".join(sections)


def _escape_heading(text: str) -> str:
    # Body lines must not be mistaken for slide headings
    if text.startswith("#"):
        return "\\" + text
    return text


def _is_title_shape(shape, title_types) -> bool:
    if shape.is_placeholder:
        return shape.placeholder_format.type in title_types
    name = shape.name.lower()
    return "title" in name and "subtitle" not in name
