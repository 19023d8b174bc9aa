"""Tests for slide matching."""

import itertools

import pytest

from slidediff.diff.match_slides import (
    match_slides,
    normalize_title_for_matching,
    slides_are_equal,
)
from slidediff.schemas.presentation_schema import Slide, SlideLocation


def make_slide(title: str, body: str = "", index: int = 0) -> Slide:
    content = f"# {title}\n\n{body}" if body else f"# {title}"
    return Slide(
        id=f"slide-{index}-{title}",
        title=title,
        location=SlideLocation(start_line=0, end_line=content.count("\n"), content=content),
    )


def make_slides(*titles: str) -> list[Slide]:
    return [make_slide(title, f"Body of {title}", i) for i, title in enumerate(titles)]


def assert_partition(matches, before, after):
    before_indices = [m.before_index for m in matches if m.before_index is not None]
    after_indices = [m.after_index for m in matches if m.after_index is not None]
    assert sorted(before_indices) == list(range(len(before)))
    assert sorted(after_indices) == list(range(len(after)))
    for m in matches:
        assert (m.before_slide is None) == (m.before_index is None)
        assert (m.after_slide is None) == (m.after_index is None)
        assert m.before_slide is not None or m.after_slide is not None


class TestMatchSlides:
    def test_empty(self):
        assert match_slides([], []) == []

    def test_all_added_when_before_is_empty(self):
        after = make_slides("A", "B")
        matches = match_slides([], after)
        assert [m.matched_by for m in matches] == ["none", "none"]
        assert [m.after_index for m in matches] == [0, 1]
        assert all(m.before_slide is None for m in matches)

    def test_all_removed_when_after_is_empty(self):
        before = make_slides("A", "B")
        matches = match_slides(before, [])
        assert [m.before_index for m in matches] == [0, 1]
        assert all(m.after_slide is None for m in matches)

    def test_title_match_across_positions(self):
        before = make_slides("Slide A", "Slide B")
        after = make_slides("Slide B", "Slide A")
        matches = match_slides(before, after)

        assert [m.matched_by for m in matches] == ["title", "title"]
        assert [(m.before_index, m.after_index) for m in matches] == [(0, 1), (1, 0)]

    def test_title_match_ignores_case_and_spacing(self):
        before = [make_slide("  Quarterly   Results ")]
        after = [make_slide("quarterly results")]
        matches = match_slides(before, after)
        assert len(matches) == 1
        assert matches[0].matched_by == "title"

    def test_position_fallback(self):
        before = make_slides("Intro", "Old Name")
        after = make_slides("Intro", "New Name")
        matches = match_slides(before, after)

        assert [m.matched_by for m in matches] == ["title", "position"]
        assert (matches[1].before_index, matches[1].after_index) == (1, 1)

    def test_leftovers_pair_in_order(self):
        before = make_slides("Keep", "Old 1", "Old 2", "Old 3")
        after = make_slides("New 1", "Keep", "New 2")
        matches = match_slides(before, after)

        by_before = {m.before_index: m for m in matches if m.before_index is not None}
        assert by_before[0].after_index == 1
        assert by_before[0].matched_by == "title"
        assert (by_before[1].after_index, by_before[1].matched_by) == (0, "position")
        assert (by_before[2].after_index, by_before[2].matched_by) == (2, "position")
        assert by_before[3].after_slide is None
        assert by_before[3].matched_by == "none"

    def test_duplicate_titles_claim_in_order(self):
        before = [make_slide("Same", "one", 0), make_slide("Same", "two", 1)]
        after = [make_slide("Same", "one changed", 0), make_slide("Same", "two", 1)]
        matches = match_slides(before, after)

        assert [(m.before_index, m.after_index) for m in matches] == [(0, 0), (1, 1)]
        assert all(m.matched_by == "title" for m in matches)

    def test_extra_duplicate_is_added(self):
        before = [make_slide("Same", "x", 0)]
        after = [make_slide("Same", "x", 0), make_slide("Same", "x", 1)]
        matches = match_slides(before, after)

        assert [(m.before_index, m.after_index, m.matched_by) for m in matches] == [
            (0, 0, "title"),
            (None, 1, "none"),
        ]

    def test_sorted_by_before_then_after_index(self):
        before = make_slides("A", "B", "C")
        after = make_slides("C", "D", "E", "F", "A")
        matches = match_slides(before, after)

        keys = [m.before_index if m.before_index is not None else m.after_index for m in matches]
        assert keys == sorted(keys)
        # B pairs with the first leftover after-slide (D) by position
        assert matches[1].before_slide.title == "B"
        assert matches[1].after_slide.title == "D"

    @pytest.mark.parametrize(
        "before_titles,after_titles",
        [
            (("A", "B", "C"), ("C", "B", "A")),
            (("A", "A", "A"), ("A", "A")),
            (("X",), ("Y", "Z", "X", "X")),
            ((), ("A",)),
            (("A", "B"), ()),
            (("a", "B", "c", "D"), ("b", "E", "A", "a", "F")),
        ],
    )
    def test_partition_invariant(self, before_titles, after_titles):
        before = make_slides(*before_titles)
        after = make_slides(*after_titles)
        matches = match_slides(before, after)
        assert_partition(matches, before, after)

    def test_partition_invariant_exhaustive_small(self):
        titles = ["A", "B", "A"]
        for n_before, n_after in itertools.product(range(4), repeat=2):
            for before_titles in itertools.product(titles, repeat=n_before):
                for after_titles in itertools.product(titles, repeat=n_after):
                    before = make_slides(*before_titles)
                    after = make_slides(*after_titles)
                    assert_partition(match_slides(before, after), before, after)


class TestSlideEquality:
    def test_whitespace_differences_are_equal(self):
        a = make_slide("Title", "Line one   \nLine two")
        b = Slide(
            id="other",
            title="Title",
            location=SlideLocation(start_line=5, end_line=9, content="# Title\r\n\r\nLine one\r\nLine two\n\n"),
        )
        assert slides_are_equal(a, b)

    def test_content_difference(self):
        assert not slides_are_equal(make_slide("T", "one"), make_slide("T", "two"))

    def test_title_not_compared_separately(self):
        a = make_slide("Title", "same")
        b = a.model_copy(update={"title": "Different"})
        assert slides_are_equal(a, b)


class TestNormalizeTitle:
    def test_normalization(self):
        assert normalize_title_for_matching("  Hello \t  World  ") == "hello world"

    def test_case_insensitive(self):
        assert normalize_title_for_matching("ABC") == normalize_title_for_matching("abc")
