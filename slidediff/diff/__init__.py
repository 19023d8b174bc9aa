"""Slide matching, classification and line-level diffing."""

from .text_diff import diff_text, normalize_text, normalized_text_equals
from .match_slides import (
    match_slides,
    slides_are_equal,
    normalize_slide_content,
    normalize_title_for_matching,
)
from .diff_presentations import diff_presentations, create_slide_diff
from .diff_summary import (
    calculate_diff_summary,
    has_changes,
    get_total_changed_slides,
    format_diff_summary,
)
from .report import render_text_report

__all__ = [
    "diff_text",
    "normalize_text",
    "normalized_text_equals",
    "match_slides",
    "slides_are_equal",
    "normalize_slide_content",
    "normalize_title_for_matching",
    "diff_presentations",
    "create_slide_diff",
    "calculate_diff_summary",
    "has_changes",
    "get_total_changed_slides",
    "format_diff_summary",
    "render_text_report",
]
