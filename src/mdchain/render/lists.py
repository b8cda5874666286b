"""List trees: normalisation and rendering.

Callers describe a list as a *tree*: a mapping or a sequence whose items
are plain values, labelled values, or nested sequences.  The first element
of a nested sequence is an optional description and the remaining elements
are sub-items, rendered one indentation level deeper.  Only one level of
nesting exists; sub-items are always rendered as flat text.

Accepted shapes::

    ["Item 1", "Item 2"]                           # plain items
    {"**Item 1**": "Description", 0: "Item 2"}     # str keys are labels
    ["Intro", {"**Group**": ["Desc", "A", "B"]}]   # dicts splice in place
    {"**Group**": ["Desc", "A", "B"]}              # nested sub-items

:func:`normalize_tree` turns any of these into a tuple of
:class:`~mdchain.models.ListEntry` records and :func:`render_list` turns
those records into Markdown text.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from mdchain.models import ListEntry


def normalize_tree(tree: Mapping[Any, Any] | Iterable[Any]) -> tuple[ListEntry, ...]:
    """Normalise a caller-supplied list tree into :class:`ListEntry` records.

    Non-``str`` mapping keys (integers, ``None``) mean "no label".  A
    mapping found inside a sequence contributes its entries at that
    position.  Values that are neither a list nor a tuple are treated as
    plain scalars and rendered through ``str()`` (``None`` becomes empty
    text).
    """
    entries: list[ListEntry] = []

    if isinstance(tree, Mapping):
        for key, value in tree.items():
            entries.append(_make_entry(key, value))
        return tuple(entries)

    for item in tree:
        if isinstance(item, ListEntry):
            entries.append(item)
        elif isinstance(item, Mapping):
            entries.extend(normalize_tree(item))
        else:
            entries.append(_make_entry(None, item))
    return tuple(entries)


def render_list(
    entries: Iterable[ListEntry],
    newline: str,
    indent: str,
    ordered: bool = False,
) -> str:
    """Render normalised list entries as Markdown.

    Every rendered line, sub-items included, ends with *newline*; entries
    are concatenated without any separator in between.

    Parameters
    ----------
    entries:
        Output of :func:`normalize_tree`.
    newline:
        Line terminator.
    indent:
        Prefix for sub-item lines (one nesting level).
    ordered:
        Use ``1.``, ``2.``, ... markers instead of ``-``.

    Returns
    -------
    str
        The list text, ending with *newline* unless *entries* is empty.
    """
    parts: list[str] = []

    for number, entry in enumerate(entries, start=1):
        marker = f"{number}." if ordered else "-"

        if entry.nested:
            line = marker
            if entry.label is not None:
                line += f" {entry.label}"
            if entry.description:
                line += f" - {entry.description}"
            parts.append(line + newline)
            for item in entry.subitems:
                parts.append(f"{indent}- {item}{newline}")
        elif entry.label is not None:
            parts.append(f"{marker} {entry.label} - {entry.text}{newline}")
        else:
            parts.append(f"{marker} {entry.text}{newline}")

    return "".join(parts)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _make_entry(key: Any, value: Any) -> ListEntry:
    label = key if isinstance(key, str) else None

    if isinstance(value, (list, tuple)):
        description = as_text(value[0]) if value else None
        return ListEntry(
            label=label,
            description=description or None,
            subitems=tuple(as_text(item) for item in value[1:]),
            nested=True,
        )

    return ListEntry(label=label, text=as_text(value))


def as_text(value: Any) -> str:
    """Natural text representation of a tree leaf."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
