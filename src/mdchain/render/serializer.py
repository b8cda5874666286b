"""Fragment sequence to Markdown serializer.

Walks a document's fragments in order and concatenates their renderings
with no separator of its own: every fragment renderer emits its own
trailing text.  Spacing is driven by two mechanisms:

* **Line end** -- each fragment (other than a break) ends with the
  configured newline followed by the *line-end marker*, which is the
  newline again in normal mode and empty in suppressed mode.  Normal
  documents therefore separate fragments by a blank line, suppressed ones
  by a single line break.
* **Break** -- a break fragment always emits exactly one newline, which
  restores a blank line inside a suppressed run.

Trailing newlines, tabs and spaces are stripped from the very end of the
concatenated text only.

Usage::

    from mdchain.config import DocumentConfig
    from mdchain.render.serializer import MarkdownSerializer

    md = MarkdownSerializer(DocumentConfig()).render(fragments)
"""

from __future__ import annotations

import time
from collections.abc import Callable as _Callable
from collections.abc import Iterable, Sequence

from mdchain.config import DocumentConfig
from mdchain.models import (
    BreakFragment,
    CodeFragment,
    Fragment,
    FragmentKind,
    HeadingFragment,
    ImageFragment,
    LinkFragment,
    ListFragment,
    ParagraphFragment,
    QuoteFragment,
    RawFragment,
    TableFragment,
)
from mdchain.observability import NoopMetricsHook, get_logger

from .lists import render_list
from .tables import render_table

log = get_logger("mdchain.render")


class MarkdownSerializer:
    """Render fragments under a fixed :class:`DocumentConfig`.

    The serializer holds no per-render state, so one instance may render
    any number of fragment sequences and rendering the same sequence twice
    yields the same text.
    """

    def __init__(self, config: DocumentConfig) -> None:
        self._config = config
        self._nl = config.newline
        self._line_end = config.line_end
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, fragments: Sequence[Fragment]) -> str:
        """Render *fragments* to a Markdown string.

        Parameters
        ----------
        fragments:
            Fragments in document order.

        Returns
        -------
        str
            The Markdown text with trailing whitespace removed.
        """
        t0 = time.monotonic()
        text = trim_end("".join(self._render_all(fragments)), self._nl)
        elapsed_ms = (time.monotonic() - t0) * 1000

        self._metrics.timing("mdchain.render_duration_ms", elapsed_ms)
        self._metrics.gauge("mdchain.render_fragments", len(fragments))
        log.debug(
            "document rendered",
            extra={
                "extra_fields": {
                    "op": "to_string",
                    "fragments": len(fragments),
                    "chars": len(text),
                    "suppressed": self._config.suppressed,
                }
            },
        )
        return text

    def render_fragment(self, fragment: Fragment) -> str:
        """Render a single fragment, including its line-end marker."""
        return _FRAGMENT_RENDERERS[fragment.kind](self, fragment)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _render_all(self, fragments: Iterable[Fragment]) -> list[str]:
        return [self.render_fragment(fragment) for fragment in fragments]

    def _render_heading(self, fragment: HeadingFragment) -> str:
        return f"{fragment.level.prefix} {fragment.text}{self._nl}{self._line_end}"

    def _render_paragraph(self, fragment: ParagraphFragment) -> str:
        return f"{fragment.prefix}{fragment.text}{self._nl}{self._line_end}"

    def _render_list(self, fragment: ListFragment) -> str:
        body = render_list(
            fragment.entries,
            self._nl,
            self._config.indent,
            ordered=fragment.ordered,
        )
        return body + self._line_end

    def _render_quote(self, fragment: QuoteFragment) -> str:
        quoted = self._nl.join(f"> {line}" for line in fragment.lines)
        return f"{quoted}{self._nl}{self._line_end}"

    def _render_code(self, fragment: CodeFragment) -> str:
        nl = self._nl
        return f"```{fragment.lang}{nl}{fragment.code}{nl}```{nl}{self._line_end}"

    def _render_link(self, fragment: LinkFragment) -> str:
        name = fragment.name or fragment.url
        return f"[{name}]({fragment.url}){self._nl}{self._line_end}"

    def _render_image(self, fragment: ImageFragment) -> str:
        title = fragment.title or ""
        alt = f' "{fragment.alt}"' if fragment.alt else ""
        return f"![{title}]({fragment.url}{alt}){self._nl}{self._line_end}"

    def _render_raw(self, fragment: RawFragment) -> str:
        # embedded documents render under their own configuration
        return f"{fragment.content}{self._nl}{self._line_end}"

    def _render_break(self, fragment: BreakFragment) -> str:
        return self._nl

    def _render_table(self, fragment: TableFragment) -> str:
        table = render_table(fragment.headers, fragment.rows, self._nl)
        return f"{table}{self._nl}{self._line_end}"


# ------------------------------------------------------------------
# Fragment renderer dispatch table
# ------------------------------------------------------------------

_FragmentRenderer = _Callable[["MarkdownSerializer", Fragment], str]

_FRAGMENT_RENDERERS: dict[FragmentKind, _FragmentRenderer] = {
    FragmentKind.HEADING: MarkdownSerializer._render_heading,
    FragmentKind.PARAGRAPH: MarkdownSerializer._render_paragraph,
    FragmentKind.NUMERIC_LIST: MarkdownSerializer._render_list,
    FragmentKind.LIST: MarkdownSerializer._render_list,
    FragmentKind.QUOTE: MarkdownSerializer._render_quote,
    FragmentKind.CODE: MarkdownSerializer._render_code,
    FragmentKind.LINK: MarkdownSerializer._render_link,
    FragmentKind.IMAGE: MarkdownSerializer._render_image,
    FragmentKind.RAW: MarkdownSerializer._render_raw,
    FragmentKind.BREAK: MarkdownSerializer._render_break,
    FragmentKind.TABLE: MarkdownSerializer._render_table,
}  # type: ignore[dict-item]

# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def trim_end(text: str, newline: str) -> str:
    """Strip trailing *newline* strings, tabs and spaces from *text*.

    A whitespace terminator (``"\\n"``, ``"\\r\\n"``) is stripped character
    by character.  Any other terminator is removed as a whole string, so a
    terminator such as ``"<br>"`` never eats the end of the last word.

    >>> trim_end("a<br><br> ", "<br>")
    'a'
    """
    if newline.isspace():
        return text.rstrip(newline + "\t ")
    while True:
        stripped = text.rstrip("\t ")
        if stripped.endswith(newline):
            stripped = stripped[: -len(newline)]
        if stripped == text:
            return text
        text = stripped
