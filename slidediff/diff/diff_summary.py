"""Summary statistics and small derived views over a presentation diff."""

from collections import Counter

from slidediff.schemas.diff_schema import DiffStatus, DiffSummary, PresentationDiff


def calculate_diff_summary(diff: PresentationDiff) -> DiffSummary:
    """Count slide diffs per status.

    Slide totals are taken from the two presentations as-is; statuses are
    read from the slide diffs, never recomputed.
    """
    counts = Counter(slide_diff.status for slide_diff in diff.slide_diffs)
    return DiffSummary(
        total_slides_before=len(diff.before.slides),
        total_slides_after=len(diff.after.slides),
        added=counts[DiffStatus.ADDED],
        removed=counts[DiffStatus.REMOVED],
        modified=counts[DiffStatus.MODIFIED],
        unchanged=counts[DiffStatus.UNCHANGED],
        moved=counts[DiffStatus.MOVED],
    )


def has_changes(diff: PresentationDiff) -> bool:
    """True if any slide was added, removed, modified or moved."""
    return get_total_changed_slides(diff.summary) > 0


def get_total_changed_slides(summary: DiffSummary) -> int:
    """Number of slides whose status is anything but unchanged."""
    return summary.added + summary.removed + summary.modified + summary.moved


def format_diff_summary(summary: DiffSummary) -> str:
    """Short human-readable description, e.g. ``"1 added, 2 modified"``."""
    parts: list[str] = []
    if summary.added > 0:
        parts.append(f"{summary.added} added")
    if summary.removed > 0:
        parts.append(f"{summary.removed} removed")
    if summary.modified > 0:
        parts.append(f"{summary.modified} modified")
    if summary.moved > 0:
        parts.append(f"{summary.moved} moved")

    if not parts:
        return "No changes"
    return ", ".join(parts)
