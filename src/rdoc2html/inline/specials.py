#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/inline/specials.py
"""Recognition and rendering of special spans: bare hyperlinks and labeled links.

Special spans are recognized by pattern rather than by delimiters:

- HYPERLINK: ``http://example.com``, ``mailto:me@example.com``,
  ``www.example.com``, ``link:other/page.html``
- TIDYLINK: ``label[url]`` or ``{longer label}[url]``

The ``link:`` scheme names a file relative to the output root, and is
rewritten relative to the document being rendered. Links whose target is a
bitmap image become ``<img>`` tags.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from rdoc2html.constants import (
    BRACED_LINK_PATTERN,
    DEFAULT_FROM_PATH,
    DEFAULT_URL_SCHEME,
    HYPERLINK_PATTERN,
    IMAGE_SCHEMES,
    IMAGE_URL_RE,
    LOCAL_LINK_SCHEME,
    WORD_LINK_PATTERN,
)
from rdoc2html.utils.html_utils import escape_attribute, escape_html
from rdoc2html.utils.paths import gen_relative_url

logger = logging.getLogger(__name__)

_HYPERLINK_RE = re.compile(HYPERLINK_PATTERN)
_BRACED_LINK_RE = re.compile(BRACED_LINK_PATTERN)
_WORD_LINK_RE = re.compile(WORD_LINK_PATTERN)
_SCHEME_RE = re.compile(r"([A-Za-z]+):(.*)", re.DOTALL)

# (kind, pattern, group holding the span start); order breaks ties
_FINDERS: tuple[tuple[str, re.Pattern[str], Union[int, str]], ...] = (
    ("hyperlink", _HYPERLINK_RE, 0),
    ("tidylink", _BRACED_LINK_RE, 0),
    ("tidylink", _WORD_LINK_RE, "label"),
)


@dataclass(frozen=True)
class SpecialSpan:
    """A special span found in a text.

    Parameters
    ----------
    kind : {"hyperlink", "tidylink"}
        Which handler renders the span
    start : int
        Offset of the first character of the span
    end : int
        Offset just past the span

    """

    kind: str
    start: int
    end: int


class SpecialSpanScanner:
    """Find the special spans of one text from left to right.

    Each pattern keeps its most recent candidate, so a sequence of ``find``
    calls with non-decreasing positions reads the text once per pattern.

    Parameters
    ----------
    text : str
        Raw inline text

    Examples
    --------
        >>> scanner = SpecialSpanScanner("see RDoc[http://x.org] or www.x.org")
        >>> scanner.find(0)
        SpecialSpan(kind='tidylink', start=4, end=22)
        >>> scanner.find(22)
        SpecialSpan(kind='hyperlink', start=26, end=35)

    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._candidates: dict[int, Optional[SpecialSpan]] = {}

    def find(self, pos: int) -> Optional[SpecialSpan]:
        """Return the earliest span starting at or after ``pos``.

        A hyperlink wins over a labeled link starting at the same offset.
        """
        found = [span for span in (self._candidate(index, pos) for index in range(len(_FINDERS))) if span]
        return min(found, key=lambda span: span.start, default=None)

    def _candidate(self, index: int, pos: int) -> Optional[SpecialSpan]:
        if index in self._candidates:
            span = self._candidates[index]
            if span is None or span.start >= pos:
                return span

        span = self._search(index, pos)
        self._candidates[index] = span
        return span

    def _search(self, index: int, pos: int) -> Optional[SpecialSpan]:
        kind, pattern, group = _FINDERS[index]
        while True:
            match = pattern.search(self.text, pos)
            if match is None:
                return None
            if kind == "hyperlink" or "." in match.group("url")[1:-1]:
                return SpecialSpan(kind, match.start(group), match.end())
            pos = match.start() + 1


class SpecialSpanRenderer:
    """Turn special span text into ``<a>`` or ``<img>`` markup.

    Parameters
    ----------
    from_path : str, default ""
        Output path of the current document, used to resolve ``link:`` URLs
    label_formatter : callable, default escape_html
        Converts raw label text into flow HTML

    """

    def __init__(
        self,
        from_path: str = DEFAULT_FROM_PATH,
        label_formatter: Callable[[str], str] = escape_html,
    ) -> None:
        """Initialize the renderer for one output document."""
        self.from_path = from_path
        self.label_formatter = label_formatter

    def render(self, kind: str, text: str) -> str:
        """Render a span found by ``SpecialSpanScanner``.

        Parameters
        ----------
        kind : {"hyperlink", "tidylink"}
            Kind of the span
        text : str
            Full text of the span

        """
        if kind == "hyperlink":
            return self.handle_hyperlink(text)
        return self.handle_tidylink(text)

    def handle_hyperlink(self, text: str) -> str:
        """Render a bare URL, labeled with itself."""
        return self.gen_url(text, text)

    def handle_tidylink(self, text: str) -> str:
        """Render ``label[url]`` or ``{label}[url]``.

        Text matching neither form is returned unchanged.
        """
        match = _BRACED_LINK_RE.fullmatch(text) or _WORD_LINK_RE.fullmatch(text)
        if match is None:
            logger.debug("Labeled link %r did not match either form, leaving as text", text)
            return text

        label, url = match.group("label", "url")
        return self.gen_url(url, label)

    def gen_url(self, url: str, text: str) -> str:
        """Generate a hyperlink for ``url`` labeled with ``text``.

        Parameters
        ----------
        url : str
            Target, optionally prefixed with a scheme. Without a scheme it is
            treated as an ``http`` address.
        text : str
            Raw label text. A leading ``scheme:`` plus slashes matching the
            URL's own scheme is dropped.

        Returns
        -------
        str
            ``<img>`` tag for http, https and link images, ``<a>`` otherwise

        """
        match = _SCHEME_RE.fullmatch(url)
        if match:
            scheme, path = match.groups()
        else:
            scheme, path = DEFAULT_URL_SCHEME, url
            url = f"{DEFAULT_URL_SCHEME}://{url}"

        if scheme == LOCAL_LINK_SCHEME:
            url = path if path.startswith("#") else gen_relative_url(self.from_path, path)

        if scheme in IMAGE_SCHEMES and IMAGE_URL_RE.search(url):
            return f'<img src="{escape_attribute(url)}" />'

        label = re.sub(rf"^{re.escape(scheme)}:/*", "", text)
        return f'<a href="{escape_attribute(url)}">{self.label_formatter(label)}</a>'
