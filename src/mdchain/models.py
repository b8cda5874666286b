"""Fragment model for mdchain documents.

A document is an ordered sequence of fragments.  Each fragment kind is a
frozen dataclass carrying exactly the fields it needs plus a ``kind``
discriminator from :class:`FragmentKind`; the serializer dispatches on that
discriminator.  Text stored on a fragment has already been escaped, so
rendering never has to consult the escape configuration again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Union

from mdchain.errors import MarkdownHeadingError

if TYPE_CHECKING:
    from mdchain.document import Document


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FragmentKind(str, Enum):
    """Discriminator for every fragment a document can hold."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    NUMERIC_LIST = "numeric_list"
    LIST = "list"
    QUOTE = "quote"
    CODE = "code"
    LINK = "link"
    IMAGE = "image"
    RAW = "raw"
    BREAK = "break"
    TABLE = "table"


class HeadingLevel(IntEnum):
    """ATX heading levels."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6

    @property
    def prefix(self) -> str:
        """The run of ``#`` characters that opens the heading line."""
        return "#" * self.value

    @classmethod
    def coerce(cls, level: int | HeadingLevel) -> HeadingLevel:
        """Return *level* as a :class:`HeadingLevel`.

        Raises
        ------
        MarkdownHeadingError
            If *level* is not an integer between 1 and 6.
        """
        if isinstance(level, cls):
            return level
        try:
            return cls(level)
        except ValueError as exc:
            raise MarkdownHeadingError(
                f"heading level must be between 1 and 6, got {level!r}",
                context={"level": level},
                cause=exc,
            ) from exc


# ---------------------------------------------------------------------------
# List entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ListEntry:
    """One normalised item of a bullet or numbered list.

    An entry takes one of three shapes:

    * plain, unlabelled -- ``text`` only: ``- text``
    * plain, labelled -- ``label`` and ``text``: ``- label - text``
    * nested -- ``nested=True`` with an optional ``label``, an optional
      ``description`` and flat ``subitems`` rendered one level deeper.
    """

    label: str | None = None
    text: str = ""
    description: str | None = None
    subitems: tuple[str, ...] = ()
    nested: bool = False


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HeadingFragment:
    level: HeadingLevel
    text: str
    kind: FragmentKind = field(default=FragmentKind.HEADING, init=False)


@dataclass(frozen=True)
class ParagraphFragment:
    text: str
    prefix: str = ""
    kind: FragmentKind = field(default=FragmentKind.PARAGRAPH, init=False)


@dataclass(frozen=True)
class ListFragment:
    """A bullet list, or a numbered one when ``ordered`` is set."""

    entries: tuple[ListEntry, ...]
    ordered: bool = False

    @property
    def kind(self) -> FragmentKind:
        return FragmentKind.NUMERIC_LIST if self.ordered else FragmentKind.LIST


@dataclass(frozen=True)
class QuoteFragment:
    lines: tuple[str, ...]
    kind: FragmentKind = field(default=FragmentKind.QUOTE, init=False)


@dataclass(frozen=True)
class CodeFragment:
    code: str
    lang: str = ""
    kind: FragmentKind = field(default=FragmentKind.CODE, init=False)


@dataclass(frozen=True)
class LinkFragment:
    url: str
    name: str | None = None
    kind: FragmentKind = field(default=FragmentKind.LINK, init=False)


@dataclass(frozen=True)
class ImageFragment:
    url: str
    title: str | None = None
    alt: str | None = None
    kind: FragmentKind = field(default=FragmentKind.IMAGE, init=False)


@dataclass(frozen=True)
class RawFragment:
    """Literal Markdown, or another document rendered in place.

    An embedded document is held by reference: whatever it contains when
    the outer document is serialized is what gets rendered.
    """

    content: str | Document
    kind: FragmentKind = field(default=FragmentKind.RAW, init=False)


@dataclass(frozen=True)
class BreakFragment:
    kind: FragmentKind = field(default=FragmentKind.BREAK, init=False)


@dataclass(frozen=True)
class TableFragment:
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    kind: FragmentKind = field(default=FragmentKind.TABLE, init=False)


Fragment = Union[
    HeadingFragment,
    ParagraphFragment,
    ListFragment,
    QuoteFragment,
    CodeFragment,
    LinkFragment,
    ImageFragment,
    RawFragment,
    BreakFragment,
    TableFragment,
]
"""Any fragment a :class:`~mdchain.document.Document` may hold."""
