"""Heading-based slide title helpers."""

import re
from typing import Optional, Protocol, Sequence, TypeVar

_H1_H2 = re.compile(r"^#{1,2}\s+(.+)$")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")


class _Titled(Protocol):
    title: str


T = TypeVar("T", bound=_Titled)


def extract_heading_title(content: str, slide_index: int) -> str:
    """Plain text of the first '#' or '##' heading, or "Slide N".

    Bold, italic and code markers are dropped and links are reduced to
    their text.
    """
    for line in content.split("\n"):
        match = _H1_H2.match(line.strip())
        if match:
            title = match.group(1).replace("**", "").replace("*", "").replace("`", "")
            return _LINK.sub(r"\1", title).strip()
    return f"Slide {slide_index + 1}"


def extract_all_slide_titles(slides: Sequence[str]) -> list[str]:
    return [extract_heading_title(slide, index) for index, slide in enumerate(slides)]


def get_all_slide_titles(slides: Sequence[_Titled]) -> list[str]:
    return [slide.title for slide in slides]


def find_slide_by_title(slides: Sequence[T], title: str) -> Optional[T]:
    """First slide whose title equals ``title`` exactly."""
    return next((slide for slide in slides if slide.title == title), None)


def find_slide_index_by_title(slides: Sequence[_Titled], title: str) -> int:
    """Index of the first slide titled ``title``, or -1."""
    for index, slide in enumerate(slides):
        if slide.title == title:
            return index
    return -1
