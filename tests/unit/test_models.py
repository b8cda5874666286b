"""Tests for models.py: enums and fragment dataclasses."""

import dataclasses

import pytest

from mdchain.errors import MarkdownHeadingError
from mdchain.models import (
    BreakFragment,
    FragmentKind,
    HeadingFragment,
    HeadingLevel,
    ListEntry,
    ListFragment,
    RawFragment,
)


class TestHeadingLevel:

    @pytest.mark.parametrize("level", list(HeadingLevel))
    def test_prefix(self, level):
        assert level.prefix == "#" * int(level)

    def test_coerce_int(self):
        assert HeadingLevel.coerce(3) is HeadingLevel.H3

    def test_coerce_member(self):
        assert HeadingLevel.coerce(HeadingLevel.H6) is HeadingLevel.H6

    def test_coerce_out_of_range(self):
        with pytest.raises(MarkdownHeadingError) as exc_info:
            HeadingLevel.coerce(7)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_coerce_wrong_type(self):
        with pytest.raises(MarkdownHeadingError):
            HeadingLevel.coerce("2")  # type: ignore[arg-type]


class TestFragments:

    def test_kind_is_fixed(self):
        assert HeadingFragment(level=HeadingLevel.H1, text="t").kind is FragmentKind.HEADING
        assert BreakFragment().kind is FragmentKind.BREAK

    def test_kind_not_an_init_argument(self):
        with pytest.raises(TypeError):
            BreakFragment(kind=FragmentKind.RAW)  # type: ignore[call-arg]

    def test_list_kind_follows_ordered_flag(self):
        assert ListFragment(entries=()).kind is FragmentKind.LIST
        assert ListFragment(entries=(), ordered=True).kind is FragmentKind.NUMERIC_LIST

    def test_frozen(self):
        frag = RawFragment(content="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            frag.content = "y"  # type: ignore[misc]

    def test_list_entry_defaults(self):
        entry = ListEntry()
        assert entry.label is None
        assert entry.text == ""
        assert entry.description is None
        assert entry.subitems == ()
        assert entry.nested is False
