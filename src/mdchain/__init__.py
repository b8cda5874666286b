"""mdchain: fluent Markdown document builder.

Public re-exports
-----------------

* **Builder:** :class:`Document`
* **Configuration:** :class:`DocumentConfig`
* **Errors:** :class:`MarkdownError`, its subclasses and :class:`ErrorCode`
* **Models:** fragment dataclasses, :class:`FragmentKind`,
  :class:`HeadingLevel` and :class:`ListEntry`

Usage::

    from mdchain import Document, HeadingLevel

    md = (
        Document.make()
        .heading("Title")
        .heading("Details", HeadingLevel.H2)
        .numeric_list(["First", "Second"])
        .block("print('hi')", "python")
    )
    text = md.to_string()
"""

from __future__ import annotations

# ── Builder ─────────────────────────────────────────────────────────────
from mdchain.document import Document

# ── Configuration ───────────────────────────────────────────────────────
from mdchain.config import DEFAULT_INDENT, DEFAULT_NEWLINE, DocumentConfig

# ── Errors ──────────────────────────────────────────────────────────────
from mdchain.errors import (
    ErrorCode,
    MarkdownConfigError,
    MarkdownError,
    MarkdownHeadingError,
)

# ── Models ──────────────────────────────────────────────────────────────
from mdchain.models import (
    BreakFragment,
    CodeFragment,
    Fragment,
    FragmentKind,
    HeadingFragment,
    HeadingLevel,
    ImageFragment,
    LinkFragment,
    ListEntry,
    ListFragment,
    ParagraphFragment,
    QuoteFragment,
    RawFragment,
    TableFragment,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Builder
    "Document",
    # Configuration
    "DocumentConfig",
    "DEFAULT_NEWLINE",
    "DEFAULT_INDENT",
    # Errors
    "MarkdownError",
    "MarkdownConfigError",
    "MarkdownHeadingError",
    "ErrorCode",
    # Models: enums
    "FragmentKind",
    "HeadingLevel",
    # Models: list entries
    "ListEntry",
    # Models: fragments
    "Fragment",
    "HeadingFragment",
    "ParagraphFragment",
    "ListFragment",
    "QuoteFragment",
    "CodeFragment",
    "LinkFragment",
    "ImageFragment",
    "RawFragment",
    "BreakFragment",
    "TableFragment",
]

__version__ = "0.1.0"
