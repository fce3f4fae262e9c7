#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/inline/flow.py
"""Inline markup formatting.

The InlineFormatter turns the raw text of a paragraph, heading or list label
into a *flow* string: HTML-escaped text in which inline styles have become
tags and special spans have become links. The typographic pass in
``rdoc2html.inline.typography`` runs over the flow string afterwards.

Recognized inline styles:

======================  ==========
Markup                  Output
======================  ==========
``*word*``              ``<b>``
``_word_``              ``<em>``
``+word+``              ``<tt>``
``<b>...</b>``          ``<b>``
``<em>``, ``<i>``       ``<em>``
``<tt>``, ``<code>``    ``<tt>``
======================  ==========

Styles and special spans are taken left to right, whichever starts first; a
special span wins when both start at the same offset. Bold and emphasis
bodies are formatted again, so they may hold links. Teletype bodies are only
escaped.

A backslash before any of these, or before a special span, leaves it as text.
The backslash itself is kept so that the typographic pass can consume it.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Protocol

from rdoc2html.constants import DEFAULT_FROM_PATH, TELETYPE_CLOSE, TELETYPE_OPEN
from rdoc2html.inline.specials import SpecialSpanRenderer, SpecialSpanScanner
from rdoc2html.utils.html_utils import escape_html

_TAG_NAMES = {"b": "b", "em": "em", "i": "em", "tt": "tt", "code": "tt"}
_PAIR_MARKS = {"*": "b", "_": "em", "+": "tt"}

_STYLE_OPEN_RE = re.compile(r"(?<!\\)<(?P<tag>b|em|i|tt|code)>|(?<![\w\\])[*_+]")
_WORD_PAIR_RE = re.compile(r"([*_+])((?:(?!\1)\S)+)\1(?!\w)")


class FlowFormatter(Protocol):
    """Anything that can turn raw inline text into flow HTML."""

    def format(self, text: str) -> str:
        """Return flow HTML for ``text``."""
        ...


@dataclass(frozen=True)
class InlineStyle:
    """A styled region found in a text.

    Parameters
    ----------
    name : {"b", "em", "tt"}
        Output tag name
    start : int
        Offset of the opening markup
    end : int
        Offset just past the closing markup
    body : str
        Raw text between the markup

    """

    name: str
    start: int
    end: int
    body: str


class InlineStyleScanner:
    """Find the inline styles of one text from left to right.

    The position of the next close tag is remembered per tag name, so an
    open tag with no close costs no more than one lookup. Positions passed to
    ``find`` must not decrease.

    Parameters
    ----------
    text : str
        Raw inline text

    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._closes: dict[str, int] = {}
        self._candidate: Optional[InlineStyle] = None
        self._searched = False

    def find(self, pos: int) -> Optional[InlineStyle]:
        """Return the earliest style starting at or after ``pos``."""
        if self._searched and (self._candidate is None or self._candidate.start >= pos):
            return self._candidate

        self._candidate = self._search(pos)
        self._searched = True
        return self._candidate

    def _search(self, pos: int) -> Optional[InlineStyle]:
        while True:
            match = _STYLE_OPEN_RE.search(self.text, pos)
            if match is None:
                return None

            tag = match.group("tag")
            if tag:
                close = self._close_after(tag, match.end())
                if close >= 0:
                    end = close + len(f"</{tag}>")
                    return InlineStyle(_TAG_NAMES[tag], match.start(), end, self.text[match.end() : close])
            else:
                pair = _WORD_PAIR_RE.match(self.text, match.start())
                if pair:
                    return InlineStyle(_PAIR_MARKS[pair.group(1)], pair.start(), pair.end(), pair.group(2))
            pos = match.start() + 1

    def _close_after(self, tag: str, start: int) -> int:
        close = self._closes.get(tag)
        if close is None or 0 <= close < start:
            close = self.text.find(f"</{tag}>", start)
            self._closes[tag] = close
        return close


class InlineFormatter:
    """Default inline formatter.

    Parameters
    ----------
    from_path : str, default ""
        Output path of the current document, for ``link:`` URLs

    Examples
    --------
        >>> InlineFormatter().format("a *bold* & +mono+ word")
        'a <b>bold</b> &amp; <tt>mono</tt> word'
        >>> InlineFormatter().format("<em>see www.x.org</em>")
        '<em>see <a href="http://www.x.org">www.x.org</a></em>'

    """

    def __init__(self, from_path: str = DEFAULT_FROM_PATH) -> None:
        """Initialize the formatter and its special span renderer."""
        self.specials = SpecialSpanRenderer(from_path, label_formatter=self.format_markup)

    def format(self, text: str) -> str:
        """Convert raw inline text into flow HTML.

        Parameters
        ----------
        text : str
            Raw inline text from a document node

        Returns
        -------
        str
            Escaped text with inline tags and rendered special spans

        """
        return self._format(text, links=True)

    def format_markup(self, text: str) -> str:
        """Convert inline styles only, leaving special spans as text.

        Used for link labels, which cannot hold further links.
        """
        return self._format(text, links=False)

    def _format(self, text: str, links: bool) -> str:
        styles = InlineStyleScanner(text)
        spans = SpecialSpanScanner(text) if links else None
        flow: list[str] = []
        pos = 0
        # escaped spans end before this offset
        link_floor = 0

        while True:
            style = styles.find(pos)
            span = None
            if spans is not None:
                span = spans.find(max(pos, link_floor))
                while span is not None and span.start > 0 and text[span.start - 1] == "\\":
                    link_floor = span.end
                    span = spans.find(link_floor)

            if span is not None and (style is None or span.start <= style.start):
                flow.append(escape_html(text[pos : span.start]))
                flow.append(self.specials.render(span.kind, text[span.start : span.end]))
                pos = span.end
            elif style is not None:
                flow.append(escape_html(text[pos : style.start]))
                flow.append(self._format_style(style, links))
                pos = style.end
            else:
                break

        flow.append(escape_html(text[pos:]))
        return "".join(flow)

    def _format_style(self, style: InlineStyle, links: bool) -> str:
        if style.name == "tt":
            return f"{TELETYPE_OPEN}{escape_html(style.body)}{TELETYPE_CLOSE}"
        return f"<{style.name}>{self._format(style.body, links)}</{style.name}>"
