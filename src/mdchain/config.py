"""Document configuration for mdchain.

:class:`DocumentConfig` is a frozen dataclass that captures every knob a
:class:`~mdchain.document.Document` is rendered with.  A configuration is
fixed for the lifetime of a document; the suppression operations derive a
new configuration with :meth:`DocumentConfig.replace` and hand it to a new
document instead of mutating the current one.

Two module-level constants define the defaults:

* :data:`DEFAULT_NEWLINE` -- the platform line terminator.
* :data:`DEFAULT_INDENT` -- three spaces, one unit per list nesting level.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Any

from mdchain.errors import MarkdownConfigError

DEFAULT_NEWLINE: str = os.linesep
"""Line terminator used when none is configured."""

DEFAULT_INDENT: str = "   "
"""Indentation emitted once before every list sub-item."""


@dataclass(frozen=True)
class DocumentConfig:
    """Rendering configuration for a document.

    Parameters
    ----------
    newline:
        String emitted at the end of every line.  It is also the line-end
        marker appended after each fragment when the document is not
        suppressed.  Must be non-empty.
    indent:
        Indentation unit placed in front of list sub-items.
    suppressed:
        When ``True`` fragments are separated by a single newline instead
        of a blank line.
    escape_chars:
        Characters to backslash-escape in prose content (headings,
        paragraphs, list trees, quotes, image title and alt).  Accepts any
        iterable of single-character strings, or a string whose every
        character is escaped.  Duplicates are dropped, order is kept.
    metrics:
        Optional :class:`~mdchain.observability.MetricsHook` backend.
    """

    newline: str = DEFAULT_NEWLINE

    indent: str = DEFAULT_INDENT

    suppressed: bool = False

    escape_chars: tuple[str, ...] | None = None

    metrics: Any | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate and normalise configuration after initialization."""
        if not isinstance(self.newline, str) or not self.newline:
            raise MarkdownConfigError(
                "newline must be a non-empty string",
                context={"field": "newline", "value": self.newline},
            )
        if not isinstance(self.indent, str):
            raise MarkdownConfigError(
                "indent must be a string",
                context={"field": "indent", "value": self.indent},
            )

        if self.escape_chars is None:
            return

        chars: list[str] = []
        for char in self.escape_chars:
            if not isinstance(char, str) or len(char) != 1:
                raise MarkdownConfigError(
                    f"escape_chars entries must be single characters, got {char!r}",
                    context={"field": "escape_chars", "value": char},
                )
            if char not in chars:
                chars.append(char)

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "escape_chars", tuple(chars) or None)

    @property
    def line_end(self) -> str:
        """Marker appended after each fragment: empty while suppressed."""
        return "" if self.suppressed else self.newline

    @property
    def escape_table(self) -> dict[int, str] | None:
        """``str.translate`` table for :attr:`escape_chars`, or ``None``."""
        if not self.escape_chars:
            return None
        return {ord(char): "\\" + char for char in self.escape_chars}

    def replace(self, **changes: Any) -> DocumentConfig:
        """Return a copy of this configuration with *changes* applied."""
        return dataclasses.replace(self, **changes)
