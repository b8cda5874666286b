"""Fluent Markdown document builder.

A :class:`Document` accumulates fragments in call order and renders them
to Markdown on demand::

    from mdchain import Document

    md = (
        Document.make(escape_chars=".")
        .heading("Release notes")
        .line("Version 2.0 is out.")
        .list({"**Parser**": ["Rewritten", "Faster", "Smaller"]})
        .suppress(lambda d: d.line("Tight line one").line("Tight line two"))
        .link("https://example.com", "Changelog")
    )
    print(md)

Every append operation returns the same document, so calls chain left
to right.  The suppression operations are the exception: they return a
new document that embeds the current one (see :meth:`Document.
start_suppressing`).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from mdchain.config import DEFAULT_INDENT, DEFAULT_NEWLINE, DocumentConfig
from mdchain.models import (
    BreakFragment,
    CodeFragment,
    Fragment,
    FragmentKind,
    HeadingFragment,
    HeadingLevel,
    ImageFragment,
    LinkFragment,
    ListFragment,
    ParagraphFragment,
    QuoteFragment,
    RawFragment,
    TableFragment,
)
from mdchain.observability import NoopMetricsHook, get_logger
from mdchain.render.escape import escape
from mdchain.render.lists import as_text, normalize_tree
from mdchain.render.serializer import MarkdownSerializer

log = get_logger("mdchain.document")

ListTree = Mapping[Any, Any] | Sequence[Any]
"""Caller-side list description accepted by :meth:`Document.list`."""


class Document:
    """An ordered sequence of Markdown fragments with a fixed configuration.

    ``None`` and empty input (``""``, ``[]``, ``{}``) given to a
    text-bearing append operation is ignored: no fragment is added and
    the document is returned unchanged.  Prose content is escaped once,
    at append time, with the characters in
    :attr:`DocumentConfig.escape_chars`.

    Parameters
    ----------
    config:
        Rendering configuration.  Defaults to ``DocumentConfig()``.
    """

    def __init__(self, config: DocumentConfig | None = None) -> None:
        self._config = config if config is not None else DocumentConfig()
        self._fragments: list[Fragment] = []
        self._escape_table = self._config.escape_table
        self._serializer = MarkdownSerializer(self._config)
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def make(
        cls,
        newline: str = DEFAULT_NEWLINE,
        indent: str = DEFAULT_INDENT,
        suppressed: bool = False,
        escape_chars: Iterable[str] | None = None,
        metrics: Any | None = None,
    ) -> Document:
        """Create a document from individual configuration values.

        See :class:`~mdchain.config.DocumentConfig` for the meaning of
        each parameter.
        """
        return cls(
            DocumentConfig(
                newline=newline,
                indent=indent,
                suppressed=suppressed,
                escape_chars=tuple(escape_chars) if escape_chars is not None else None,
                metrics=metrics,
            )
        )

    @classmethod
    def from_config(cls, config: DocumentConfig) -> Document:
        """Create an empty document rendered with *config*."""
        return cls(config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> DocumentConfig:
        return self._config

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Read-only snapshot of the fragments appended so far."""
        return tuple(self._fragments)

    def is_empty(self) -> bool:
        return not self._fragments

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        return len(self._fragments)

    # ------------------------------------------------------------------
    # Suppression scoping
    # ------------------------------------------------------------------

    def start_suppressing(self) -> Document:
        """Return a suppressed document seeded with this one.

        The new document shares newline, indent, escape and metrics
        configuration.  This document is embedded as raw content, so what
        was built so far keeps its normal spacing while everything
        appended to the returned document is separated by single line
        breaks.
        """
        log.debug(
            "suppression started",
            extra={"extra_fields": {"op": "start_suppressing", "fragments": len(self)}},
        )
        return type(self)(self._config.replace(suppressed=True)).raw(self)

    def end_suppressing(self) -> Document:
        """Return a normally spaced document seeded with this one."""
        log.debug(
            "suppression ended",
            extra={"extra_fields": {"op": "end_suppressing", "fragments": len(self)}},
        )
        return type(self)(self._config.replace(suppressed=False)).raw(self)

    def suppress(self, transform: Callable[[Document], Document]) -> Document:
        """Apply *transform* to a suppressed scope and return to normal spacing.

        Equivalent to ``transform(self.start_suppressing()).end_suppressing()``.
        """
        return transform(self.start_suppressing()).end_suppressing()

    # ------------------------------------------------------------------
    # Append operations
    # ------------------------------------------------------------------

    def heading(
        self,
        text: str | None,
        level: int | HeadingLevel = HeadingLevel.H1,
    ) -> Document:
        """Append an ATX heading; *level* is 1-6 or a :class:`HeadingLevel`."""
        level = HeadingLevel.coerce(level)
        if _is_blank(text):
            return self._omit(FragmentKind.HEADING)
        return self._append(HeadingFragment(level=level, text=self._escape(text)))

    def line(self, text: str | None, prefix: str = "") -> Document:
        """Append a paragraph line.  *prefix* is emitted verbatim before it."""
        if _is_blank(text):
            return self._omit(FragmentKind.PARAGRAPH)
        return self._append(ParagraphFragment(text=self._escape(text), prefix=prefix))

    def paragraph(self, text: str | None, prefix: str = "") -> Document:
        """Alias of :meth:`line`."""
        return self.line(text, prefix)

    def numeric_list(self, tree: ListTree | None) -> Document:
        """Append a numbered list built from *tree* (see :meth:`list`)."""
        return self._append_list(tree, ordered=True)

    def list(self, tree: ListTree | None) -> Document:
        """Append a bullet list.

        *tree* is either a mapping or a sequence.  String keys become
        labels (``- label - value``); a list or tuple value is a nested
        entry whose first element is a description and whose remaining
        elements are sub-items::

            doc.list({
                "**Category**": ["Description", "Sub-item 1", "Sub-item 2"],
                "Plain": "value",
            })
        """
        return self._append_list(tree, ordered=False)

    def quote(self, lines: str | Sequence[str] | None) -> Document:
        """Append a blockquote; a single string is a one-line quote."""
        if _is_blank(lines):
            return self._omit(FragmentKind.QUOTE)
        if isinstance(lines, str):
            lines = [lines]
        quoted = tuple(as_text(line) for line in lines)
        return self._append(QuoteFragment(lines=self._escape(quoted)))

    def block(self, code: str | None, lang: str = "") -> Document:
        """Append a fenced code block.  Code and language are never escaped."""
        if _is_blank(code):
            return self._omit(FragmentKind.CODE)
        return self._append(CodeFragment(code=code, lang=lang))

    def link(self, url: str | None, name: str | None = None) -> Document:
        """Append ``[name](url)``; the url doubles as the name when absent."""
        if _is_blank(url):
            return self._omit(FragmentKind.LINK)
        return self._append(LinkFragment(url=url, name=name))

    def image(
        self,
        url: str | None,
        title: str | None = None,
        alt: str | None = None,
    ) -> Document:
        """Append ``![title](url "alt")``.

        A missing title renders as ``![]``; the quoted alt attribute is
        emitted only when *alt* is non-empty.
        """
        if _is_blank(url):
            return self._omit(FragmentKind.IMAGE)
        return self._append(
            ImageFragment(
                url=url,
                title=None if _is_blank(title) else self._escape(title),
                alt=None if _is_blank(alt) else self._escape(alt),
            )
        )

    def raw(self, content: str | Document | None) -> Document:
        """Append literal Markdown or embed another document.

        A string is always appended, even when empty.  A document is
        appended only if it is non-empty, and it is embedded by reference:
        fragments added to it later still show up when this document is
        rendered.
        """
        if content is None:
            return self._omit(FragmentKind.RAW)
        if isinstance(content, Document):
            if content.is_empty():
                return self._omit(FragmentKind.RAW)
            return self._append(RawFragment(content=content))
        return self._append(RawFragment(content=as_text(content)))

    def break_(self) -> Document:
        """Append a single newline, even inside a suppressed run."""
        return self._append(BreakFragment())

    br = break_

    def table(
        self,
        headers: Sequence[Any] | None,
        rows: Iterable[Sequence[Any]] | None,
    ) -> Document:
        """Append a pipe table.  Ignored when *headers* or *rows* is empty.

        Cells are rendered as given, without escaping.
        """
        rows = tuple(rows) if rows is not None else ()
        if _is_blank(headers) or not rows:
            return self._omit(FragmentKind.TABLE)
        return self._append(
            TableFragment(
                headers=tuple(as_text(cell) for cell in headers),
                rows=tuple(tuple(as_text(cell) for cell in row) for row in rows),
            )
        )

    # ------------------------------------------------------------------
    # Conditional chaining
    # ------------------------------------------------------------------

    def when(
        self,
        condition: Any = None,
        transform: Callable[[Document, Any], Document] | None = None,
    ) -> Document:
        """Apply *transform* only when *condition* is truthy.

        *condition* may be a plain value or a callable that receives this
        document and returns the value.  The resolved value is passed to
        *transform* as its second argument::

            doc.when(user.bio, lambda d, bio: d.heading("About").line(bio))
        """
        if callable(condition):
            condition = condition(self)
        if condition and transform is not None:
            return transform(self, condition)
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Render the document to Markdown.  Does not modify the document."""
        return self._serializer.render(self._fragments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fragments={len(self._fragments)}, "
            f"suppressed={self._config.suppressed})"
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _append_list(self, tree: ListTree | None, ordered: bool) -> Document:
        kind = FragmentKind.NUMERIC_LIST if ordered else FragmentKind.LIST
        if _is_blank(tree):
            return self._omit(kind)
        if isinstance(tree, str):
            tree = [tree]
        entries = self._escape(normalize_tree(tree))
        return self._append(ListFragment(entries=entries, ordered=ordered))

    def _escape(self, value: Any) -> Any:
        return escape(value, self._escape_table)

    def _append(self, fragment: Fragment) -> Document:
        self._fragments.append(fragment)
        self._metrics.increment(
            "mdchain.fragments_appended_total",
            tags={"kind": fragment.kind.value},
        )
        return self

    def _omit(self, kind: FragmentKind) -> Document:
        self._metrics.increment(
            "mdchain.fragments_omitted_total",
            tags={"kind": kind.value},
        )
        return self


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _is_blank(value: Any) -> bool:
    """``None`` or an empty string / collection."""
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False
