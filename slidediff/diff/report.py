"""Plain-text rendering of a presentation diff for terminals and logs."""

from typing import Optional

from slidediff.schemas.config_schema import DiffConfig
from slidediff.schemas.diff_schema import DiffStatus, PresentationDiff, SlideDiff, TextDiffType

from .diff_summary import format_diff_summary

STATUS_MARKERS: dict[DiffStatus, str] = {
    DiffStatus.ADDED: "+",
    DiffStatus.REMOVED: "-",
    DiffStatus.MODIFIED: "~",
    DiffStatus.MOVED: ">",
    DiffStatus.UNCHANGED: "=",
}

_LINE_PREFIXES: dict[TextDiffType, str] = {
    TextDiffType.ADD: "+",
    TextDiffType.REMOVE: "-",
    TextDiffType.UNCHANGED: " ",
}


def render_text_report(diff: PresentationDiff, config: Optional[DiffConfig] = None) -> str:
    """Render a diff as a human-readable report.

    The header gives slide totals and the one-line change summary; each
    slide diff follows as a status marker, its title and its indices.
    Modified slides list their content changes as +/-/space prefixed lines.
    """
    report = (config or DiffConfig()).report
    summary = diff.summary

    lines = [
        f"Slides: {summary.total_slides_before} before, {summary.total_slides_after} after",
        f"Changes: {format_diff_summary(summary)}",
    ]

    for slide_diff in diff.slide_diffs:
        if slide_diff.status == DiffStatus.UNCHANGED and not report.show_unchanged:
            continue
        lines.append("")
        lines.append(_slide_heading(slide_diff))

        if not slide_diff.content_changes:
            continue
        changes = slide_diff.content_changes
        if report.max_changed_lines and len(changes) > report.max_changed_lines:
            hidden = len(changes) - report.max_changed_lines
            changes = changes[: report.max_changed_lines]
        else:
            hidden = 0
        for change in changes:
            prefix = _LINE_PREFIXES[change.type]
            if report.show_line_numbers and change.line_number is not None:
                lines.append(f"    {change.line_number:>4} {prefix} {change.value}")
            else:
                lines.append(f"    {prefix} {change.value}")
        if hidden:
            lines.append(f"    ... {hidden} more line(s)")

    return "\n".join(lines)


def _slide_heading(slide_diff: SlideDiff) -> str:
    marker = STATUS_MARKERS[slide_diff.status]
    status = slide_diff.status.value

    if slide_diff.status == DiffStatus.ADDED:
        return f"{marker} [{status}] {slide_diff.after_slide.title} (after #{slide_diff.after_index + 1})"
    if slide_diff.status == DiffStatus.REMOVED:
        return f"{marker} [{status}] {slide_diff.before_slide.title} (before #{slide_diff.before_index + 1})"

    title = slide_diff.after_slide.title
    if slide_diff.title_changed:
        title = f"{slide_diff.before_slide.title} -> {slide_diff.after_slide.title}"
    if slide_diff.before_index == slide_diff.after_index:
        position = f"#{slide_diff.before_index + 1}"
    else:
        position = f"#{slide_diff.before_index + 1} -> #{slide_diff.after_index + 1}"
    return f"{marker} [{status}] {title} ({position})"
