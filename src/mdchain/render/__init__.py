"""Rendering engine: fragments to Markdown text.

Public API:

- :class:`MarkdownSerializer` -- fragment sequence to Markdown.
- :func:`normalize_tree` -- caller list trees to :class:`ListEntry` records.
- :func:`render_list` -- list entries to bullet or numbered Markdown.
- :func:`render_table` -- headers and rows to a pipe table.
- :func:`escape` -- backslash-escape configured characters.
"""

from mdchain.render.escape import escape
from mdchain.render.lists import normalize_tree, render_list
from mdchain.render.serializer import MarkdownSerializer, trim_end
from mdchain.render.tables import render_table

__all__ = [
    "MarkdownSerializer",
    "escape",
    "normalize_tree",
    "render_list",
    "render_table",
    "trim_end",
]
