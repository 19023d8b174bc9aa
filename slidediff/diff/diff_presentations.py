"""Presentation-level diff: match slides, classify each pairing, summarize."""

from slidediff.schemas.diff_schema import (
    DiffStatus,
    PresentationDiff,
    SlideDiff,
    SlideMatch,
    TextDiff,
)
from slidediff.schemas.presentation_schema import Presentation

from .diff_summary import calculate_diff_summary
from .match_slides import match_slides, slides_are_equal
from .text_diff import diff_text


def diff_presentations(before: Presentation, after: Presentation) -> PresentationDiff:
    """Compare two presentations slide by slide.

    1. Match slides between the presentations (by title, then position)
    2. Classify each pairing as added, removed, modified, unchanged or moved
    3. Compute line-by-line content changes for modified slides
    4. Tally a summary

    Both inputs are left untouched; the result is a new value.
    """
    matches = match_slides(before.slides, after.slides)
    slide_diffs = [create_slide_diff(match) for match in matches]

    diff = PresentationDiff(before=before, after=after, slide_diffs=slide_diffs)
    return diff.model_copy(update={"summary": calculate_diff_summary(diff)})


def create_slide_diff(match: SlideMatch) -> SlideDiff:
    """Classify a single slide pairing.

    ============  ===========  =============  ==============  =========
    before slide  after slide  content equal  position equal  status
    ============  ===========  =============  ==============  =========
    absent        present      -              -               added
    present       absent       -              -               removed
    present       present      yes            yes             unchanged
    present       present      yes            no              moved
    present       present      no             -               modified
    ============  ===========  =============  ==============  =========

    ``title_changed`` is an exact, case-sensitive comparison and is only set
    when both slides exist. Since the heading line is part of the content,
    a retitled slide is reported as modified.
    """
    before_slide = match.before_slide
    after_slide = match.after_slide
    content_changes: list[TextDiff] | None = None
    title_changed = False

    if before_slide is None and after_slide is not None:
        status = DiffStatus.ADDED
    elif before_slide is not None and after_slide is None:
        status = DiffStatus.REMOVED
    elif before_slide is not None and after_slide is not None:
        title_changed = before_slide.title != after_slide.title
        if slides_are_equal(before_slide, after_slide):
            if match.before_index == match.after_index:
                status = DiffStatus.UNCHANGED
            else:
                status = DiffStatus.MOVED
        else:
            status = DiffStatus.MODIFIED
            # Raw content: the line differ does its own exact comparison
            content_changes = diff_text(before_slide.location.content, after_slide.location.content)
    else:
        # Not produced by match_slides
        status = DiffStatus.UNCHANGED

    return SlideDiff(
        status=status,
        before_slide=before_slide,
        after_slide=after_slide,
        before_index=match.before_index,
        after_index=match.after_index,
        content_changes=content_changes,
        title_changed=title_changed,
    )
