"""Backslash escaping for prose content.

Escaping runs once, when a fragment is appended, and only over content
meant to be read as prose: heading and paragraph text, list trees, quote
lines and image title/alt.  URLs, code, language tags, raw passthrough and
table cells are stored byte-exact.

The substitution is a single :meth:`str.translate` pass over a table built
by :attr:`mdchain.config.DocumentConfig.escape_table`, so the order of the
configured characters never matters and an inserted backslash is never
itself re-escaped.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from mdchain.models import ListEntry


def escape(value: Any, table: Mapping[int, str] | None) -> Any:
    """Escape every configured character found in *value*.

    Parameters
    ----------
    value:
        A string, a :class:`~mdchain.models.ListEntry`, or any nesting of
        lists, tuples and dicts of those.  String dict keys are escaped as
        well as values.  Other objects are returned untouched.
    table:
        ``str.translate`` table mapping code points to their escaped form.
        ``None`` or an empty table disables escaping.

    Returns
    -------
    Any
        A value of the same shape with all strings escaped.

    Examples
    --------
    >>> escape("v1.2", {ord("."): "\\\\."})
    'v1\\\\.2'
    """
    if not table:
        return value
    if isinstance(value, str):
        return value.translate(table)
    if isinstance(value, ListEntry):
        return _escape_entry(value, table)
    if isinstance(value, Mapping):
        return {escape(k, table): escape(v, table) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(escape(item, table) for item in value)
    return value


def _escape_entry(entry: ListEntry, table: Mapping[int, str]) -> ListEntry:
    return dataclasses.replace(
        entry,
        label=escape(entry.label, table),
        text=escape(entry.text, table),
        description=escape(entry.description, table),
        subitems=tuple(escape(item, table) for item in entry.subitems),
    )
