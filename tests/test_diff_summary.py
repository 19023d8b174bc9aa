"""Tests for diff summary helpers and the text report."""

from slidediff.diff.diff_presentations import diff_presentations
from slidediff.diff.diff_summary import (
    calculate_diff_summary,
    format_diff_summary,
    get_total_changed_slides,
    has_changes,
)
from slidediff.diff.report import render_text_report
from slidediff.parsers.presentation_parser import parse_markdown_into_presentation
from slidediff.schemas.config_schema import DiffConfig, ReportConfig
from slidediff.schemas.diff_schema import DiffStatus, DiffSummary, PresentationDiff, SlideDiff
from slidediff.schemas.presentation_schema import Presentation


def _diff(before: str, after: str) -> PresentationDiff:
    return diff_presentations(
        parse_markdown_into_presentation(before),
        parse_markdown_into_presentation(after),
    )


class TestCalculateDiffSummary:
    def test_counts_statuses(self):
        statuses = [
            DiffStatus.ADDED,
            DiffStatus.ADDED,
            DiffStatus.REMOVED,
            DiffStatus.MODIFIED,
            DiffStatus.UNCHANGED,
            DiffStatus.MOVED,
            DiffStatus.MOVED,
            DiffStatus.MOVED,
        ]
        diff = PresentationDiff(
            before=Presentation(),
            after=Presentation(),
            slide_diffs=[SlideDiff(status=s) for s in statuses],
        )
        summary = calculate_diff_summary(diff)
        assert (summary.added, summary.removed, summary.modified, summary.unchanged, summary.moved) == (
            2, 1, 1, 1, 3,
        )

    def test_totals_come_from_presentations(self):
        diff = _diff("# A\na\n# B\nb\n# C\nc", "# A\na")
        assert diff.summary.total_slides_before == 3
        assert diff.summary.total_slides_after == 1


class TestHasChanges:
    def test_no_changes(self):
        assert not has_changes(_diff("# A\na\n# B\nb", "# A\na\n# B\nb"))

    def test_moved_counts_as_change(self):
        assert has_changes(_diff("# A\na\n# B\nb", "# B\nb\n# A\na"))

    def test_total_changed(self):
        summary = DiffSummary(added=1, removed=2, modified=3, unchanged=10, moved=4)
        assert get_total_changed_slides(summary) == 10


class TestFormatDiffSummary:
    def test_no_changes(self):
        assert format_diff_summary(DiffSummary(unchanged=5)) == "No changes"

    def test_parts_in_fixed_order(self):
        summary = DiffSummary(added=1, removed=0, modified=2, moved=3)
        assert format_diff_summary(summary) == "1 added, 2 modified, 3 moved"

    def test_all_parts(self):
        summary = DiffSummary(added=1, removed=1, modified=1, moved=1)
        assert format_diff_summary(summary) == "1 added, 1 removed, 1 modified, 1 moved"


class TestRenderTextReport:
    def test_modified_slide(self):
        report = render_text_report(_diff("# Slide 1\n\nOriginal content", "# Slide 1\n\nModified content"))
        assert "Slides: 1 before, 1 after" in report
        assert "Changes: 1 modified" in report
        assert "~ [modified] Slide 1 (#1)" in report
        assert "- Original content" in report
        assert "+ Modified content" in report

    def test_unchanged_hidden_by_default(self):
        diff = _diff("# A\na\n# B\nb", "# A\na\n# B\nb changed")
        assert "[unchanged]" not in render_text_report(diff)

        config = DiffConfig(report=ReportConfig(show_unchanged=True))
        assert "= [unchanged] A (#1)" in render_text_report(diff, config)

    def test_added_removed_and_moved(self):
        diff = _diff("# A\na\n# B\nb\n# C\nc", "# B\nb\n# A\na")
        report = render_text_report(diff)
        assert "> [moved] A (#1 -> #2)" in report
        assert "> [moved] B (#2 -> #1)" in report
        assert "- [removed] C (before #3)" in report

        diff = _diff("# A\na", "# A\na\n# New\nn")
        assert "+ [added] New (after #2)" in render_text_report(diff)

    def test_title_change_shown(self):
        report = render_text_report(_diff("# Old\n\nbody", "# New\n\nbody"))
        assert "~ [modified] Old -> New (#1)" in report

    def test_line_numbers_optional(self):
        diff = _diff("# T\none", "# T\ntwo")
        with_numbers = render_text_report(diff)
        assert "   2 - one" in with_numbers

        config = DiffConfig(report=ReportConfig(show_line_numbers=False))
        without = render_text_report(diff, config)
        assert "    - one" in without
        assert "   2 - one" not in without

    def test_max_changed_lines(self):
        diff = _diff("# T\n1\n2\n3", "# T\n4\n5\n6")
        config = DiffConfig(report=ReportConfig(max_changed_lines=2))
        report = render_text_report(diff, config)
        assert "... 5 more line(s)" in report
