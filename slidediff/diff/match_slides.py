"""Pairing of slides between a before and an after presentation."""

import re

from slidediff.schemas.diff_schema import SlideMatch
from slidediff.schemas.presentation_schema import Slide

from .text_diff import normalize_text

_WHITESPACE_RUN = re.compile(r"\s+")


def match_slides(before_slides: list[Slide], after_slides: list[Slide]) -> list[SlideMatch]:
    """Match slides between two presentations.

    Matching runs in three phases, and each slide index is consumed at most
    once:

    1. Title: each before-slide, in order, claims the first unmatched
       after-slide with the same normalized title. Duplicate titles are
       therefore paired by order of appearance, even when their content is
       unrelated.
    2. Position: the k-th leftover before-slide pairs with the k-th leftover
       after-slide, regardless of content.
    3. Residue: remaining before-slides become removals and remaining
       after-slides become additions.

    The result is sorted by before index, falling back to after index for
    additions, so it roughly follows the before document's order.

    Args:
        before_slides: Slides from the before presentation.
        after_slides: Slides from the after presentation.

    Returns:
        One SlideMatch per pairing. Every before index and every after
        index appears in exactly one of them.
    """
    matches: list[SlideMatch] = []
    matched_before: set[int] = set()
    matched_after: set[int] = set()

    after_titles = [normalize_title_for_matching(s.title) for s in after_slides]

    # Phase 1: title
    for before_index, before_slide in enumerate(before_slides):
        before_title = normalize_title_for_matching(before_slide.title)
        for after_index, after_title in enumerate(after_titles):
            if after_index in matched_after:
                continue
            if after_title == before_title:
                matches.append(
                    SlideMatch(
                        before_slide=before_slide,
                        after_slide=after_slides[after_index],
                        before_index=before_index,
                        after_index=after_index,
                        matched_by="title",
                    )
                )
                matched_before.add(before_index)
                matched_after.add(after_index)
                break

    # Phase 2: position
    unmatched_before = [i for i in range(len(before_slides)) if i not in matched_before]
    unmatched_after = [i for i in range(len(after_slides)) if i not in matched_after]

    for before_index, after_index in zip(unmatched_before, unmatched_after):
        matches.append(
            SlideMatch(
                before_slide=before_slides[before_index],
                after_slide=after_slides[after_index],
                before_index=before_index,
                after_index=after_index,
                matched_by="position",
            )
        )
        matched_before.add(before_index)
        matched_after.add(after_index)

    # Phase 3: whatever is left was removed or added
    for before_index, before_slide in enumerate(before_slides):
        if before_index not in matched_before:
            matches.append(
                SlideMatch(before_slide=before_slide, before_index=before_index, matched_by="none")
            )

    for after_index, after_slide in enumerate(after_slides):
        if after_index not in matched_after:
            matches.append(
                SlideMatch(after_slide=after_slide, after_index=after_index, matched_by="none")
            )

    matches.sort(key=_sort_index)
    return matches


def _sort_index(match: SlideMatch) -> int:
    if match.before_index is not None:
        return match.before_index
    if match.after_index is not None:
        return match.after_index
    return 0


def slides_are_equal(slide1: Slide, slide2: Slide) -> bool:
    """True if the two slides have the same normalized content.

    Titles are not compared separately; the heading line is part of the
    content.
    """
    return normalize_slide_content(slide1) == normalize_slide_content(slide2)


def normalize_slide_content(slide: Slide) -> str:
    return normalize_text(slide.location.content)


def normalize_title_for_matching(title: str) -> str:
    """Trim, collapse internal whitespace and lowercase a title."""
    return _WHITESPACE_RUN.sub(" ", title.strip()).lower()
