"""Tests for render/escape.py."""

from mdchain.config import DocumentConfig
from mdchain.models import ListEntry
from mdchain.render.escape import escape


def table_for(chars):
    return DocumentConfig(newline="\n", escape_chars=chars).escape_table


class TestEscapeStrings:

    def test_single_char(self):
        assert escape("Item 1.", table_for(".")) == "Item 1\\."

    def test_every_occurrence(self):
        assert escape("a.b.c.", table_for(".")) == "a\\.b\\.c\\."

    def test_multiple_chars(self):
        assert escape("Sub-item 1.", table_for([".", "-"])) == "Sub\\-item 1\\."

    def test_order_independent(self):
        text = "*_a_*"
        assert escape(text, table_for("*_")) == escape(text, table_for("_*"))

    def test_no_table_returns_input(self):
        value = "a.b"
        assert escape(value, None) is value

    def test_empty_table_returns_input(self):
        assert escape("a.b", {}) == "a.b"

    def test_backslash_with_other_chars(self):
        assert escape("a\\b.c", table_for(["\\", "."])) == "a\\\\b\\.c"

    def test_not_idempotent(self):
        table = table_for(".")
        once = escape("a.b", table)
        assert once == "a\\.b"
        assert escape(once, table) == "a\\\\.b"


class TestEscapeStructures:

    def test_list_of_strings(self):
        assert escape(["a.", "b."], table_for(".")) == ["a\\.", "b\\."]

    def test_tuple_keeps_type(self):
        assert escape(("a.",), table_for(".")) == ("a\\.",)

    def test_mapping_keys_and_values(self):
        result = escape({"**Item 1.**": "Description."}, table_for("."))
        assert result == {"**Item 1\\.**": "Description\\."}

    def test_nested_sequences(self):
        result = escape({"K.": ["D.", "S."]}, table_for("."))
        assert result == {"K\\.": ["D\\.", "S\\."]}

    def test_non_strings_untouched(self):
        assert escape([1, None, 2.5], table_for(".")) == [1, None, 2.5]

    def test_list_entry(self):
        entry = ListEntry(
            label="L.", text="", description="D.", subitems=("S-1.",), nested=True
        )
        result = escape(entry, table_for(".-"))
        assert result == ListEntry(
            label="L\\.",
            text="",
            description="D\\.",
            subitems=("S\\-1\\.",),
            nested=True,
        )

    def test_list_entry_none_fields_stay_none(self):
        result = escape(ListEntry(text="a."), table_for("."))
        assert result.label is None
        assert result.description is None
        assert result.text == "a\\."
