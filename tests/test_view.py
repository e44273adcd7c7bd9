"""Tests for hebras.view — zero-copy windows."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hebras.errors import ConstructionError
from hebras.view import View, view


class TestConstruction:
    def test_view_covers_source(self) -> None:
        v = view("hello")
        assert (v.offset, v.length) == (0, 5)

    def test_view_of_view_is_unchanged(self) -> None:
        v = view("hello").slice(1)
        assert view(v) is v

    def test_out_of_bounds_window_rejected(self) -> None:
        with pytest.raises(ConstructionError):
            View("abc", 2, 5)

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ConstructionError):
            View("abc", -1, 1)


class TestAccess:
    def test_at_inside_window(self) -> None:
        assert view("hello").slice(1).at(0) == "e"

    def test_at_outside_window_is_none(self) -> None:
        v = view("hello").slice(0, 2)
        assert v.at(2) is None
        assert v.at(-1) is None

    def test_to_source_returns_original_when_whole(self) -> None:
        text = "hello"
        assert view(text).to_source() is text

    def test_to_source_copies_window(self) -> None:
        assert view("hello world").slice(6).to_source() == "world"
        assert view([1, 2, 3, 4]).slice(1, 3).to_source() == [2, 3]

    def test_iteration(self) -> None:
        assert list(view([1, 2, 3, 4, 5]).slice(1, 3)) == [2, 3]


class TestSlice:
    def test_slice_shares_source(self) -> None:
        text = "hello world"
        v = view(text).slice(6)
        assert v.source is text
        assert v.offset == 6

    def test_slice_clamps_bounds(self) -> None:
        v = view("abc")
        assert v.slice(10).is_empty()
        assert v.slice(-5).to_source() == "abc"
        assert v.slice(1, 99).to_source() == "bc"

    def test_end_before_start_is_empty(self) -> None:
        assert view("abcdef").slice(4, 2).is_empty()

    def test_nested_slices_accumulate_offset(self) -> None:
        assert view("abcdef").slice(1).slice(2).offset == 3


class TestStartsWith:
    def test_string_prefix(self) -> None:
        assert view("hello").starts_with("he")
        assert not view("hello").starts_with("lo")

    def test_prefix_limited_to_window(self) -> None:
        assert not view("hello").slice(0, 2).starts_with("hel")

    def test_array_prefix(self) -> None:
        assert view([1, 2, 3]).slice(1).starts_with([2, 3])


class TestEquality:
    def test_equal_content_different_offsets(self) -> None:
        assert view("xab").slice(1) == view("ab")

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(view("xab").slice(1)) == hash(view("ab"))

    def test_str(self) -> None:
        assert str(view("ab")) == "view('ab')"


class TestViewInvariants:
    @given(st.text(min_size=1, max_size=100), st.data())
    @settings(max_examples=200)
    def test_slice_then_at_zero_equals_at(self, text: str, data: st.DataObject) -> None:
        """v.slice(i).at(0) == v.at(i) for every valid i."""
        v = view(text)
        i = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
        assert v.slice(i).at(0) == v.at(i)

    @given(st.lists(st.integers(), max_size=50), st.integers(), st.integers())
    @settings(max_examples=200)
    def test_slice_stays_within_source(self, items: list[int], start: int, end: int) -> None:
        v = view(items).slice(start, end)
        assert 0 <= v.offset <= len(items)
        assert v.end <= len(items)
