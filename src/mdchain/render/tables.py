"""Pipe table rendering.

Produces a GFM pipe table::

    | Name | Value |
    | --- | --- |
    | a | 1 |

Cells are emitted exactly as stored: no escaping, no padding and no arity
check.  A row with more or fewer cells than the header is rendered as
given; :func:`render_table` logs a warning so that the mismatch can be
spotted without failing the render.
"""

from __future__ import annotations

from collections.abc import Sequence

from mdchain.observability import get_logger

log = get_logger("mdchain.render")


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    newline: str,
) -> str:
    """Render *headers* and *rows* as a pipe table.

    Parameters
    ----------
    headers:
        Header cells.  One ``---`` separator cell is emitted per header.
    rows:
        Data rows, each a sequence of cells.
    newline:
        String used to join the table lines.

    Returns
    -------
    str
        The table text.  There is no trailing newline.
    """
    lines: list[str] = [
        _render_row(headers),
        _render_row(["---"] * len(headers)),
    ]

    for index, row in enumerate(rows):
        if len(row) != len(headers):
            log.warning(
                "Table row arity differs from header",
                extra={
                    "extra_fields": {
                        "op": "render_table",
                        "row": index,
                        "expected": len(headers),
                        "actual": len(row),
                    }
                },
            )
        lines.append(_render_row(row))

    return newline.join(lines)


def _render_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"
