#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/inline/typography.py
"""Typographic conversion of inline HTML flow text.

The InlineTextTransformer walks a flow string (plain escaped text mixed with
the inline tags produced by the inline formatter) once from left to right and
rewrites:

- backslash escapes (``\\*`` becomes ``*``)
- ``...`` and ``....`` into an ellipsis
- ``(c)`` and ``(r)`` into the copyright and registered marks
- ``--`` and ``---`` into an em-dash
- quote characters and quote pairs into directional quotes

Tags are copied untouched, and the body of a ``<tt>`` span is copied without
any substitution at all.

At every position the rules are tried in a fixed order and the first match
wins. The order is significant: reordering it changes the output.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable

from rdoc2html.constants import (
    ENTITY_COPYRIGHT,
    ENTITY_ELLIPSIS,
    ENTITY_EM_DASH,
    ENTITY_LDQUO,
    ENTITY_LSQUO,
    ENTITY_RDQUO,
    ENTITY_REGISTERED,
    ENTITY_RSQUO,
    TELETYPE_CLOSE,
    TELETYPE_OPEN,
)

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^<>]+>")
_TELETYPE_BODY_RE = re.compile(r".*?" + re.escape(TELETYPE_CLOSE), re.DOTALL)
_ESCAPE_RE = re.compile(r"\\(\S)")
_ELLIPSIS_RE = re.compile(r"\.\.\.(\.?)")
_COPYRIGHT_RE = re.compile(r"\(c\)")
_REGISTERED_RE = re.compile(r"\(r\)")
_EM_DASH_RE = re.compile(r"---?")
_DOUBLE_QUOTE_RE = re.compile(r"&quot;")
_OPEN_DOUBLE_QUOTE_RE = re.compile(r"``")
_CLOSE_DOUBLE_QUOTE_RE = re.compile(r"''")
_SINGLE_QUOTE_RE = re.compile(r"'")

# Anything up to the next character that may start one of the rules above
_PLAIN_RUN_RE = re.compile(r".+?(?=[-<\\.(\"'`&])", re.DOTALL)
_WORD_END_RE = re.compile(r"\w\Z")


@dataclass
class ScanState:
    """Cursor and quote state for one ``convert`` call.

    Attributes
    ----------
    pos : int
        Index of the next unread character
    in_single_quotes : bool
        A single quote has been opened and not yet closed
    in_double_quotes : bool
        A ``&quot;`` has been opened and not yet closed
    after_word : bool
        The last plain run ended in a word character, so an apostrophe here
        is a possessive or contraction rather than an opening quote

    """

    pos: int = 0
    in_single_quotes: bool = False
    in_double_quotes: bool = False
    after_word: bool = False


_Handler = Callable[[Match[str], str, ScanState], str]


class InlineTextTransformer:
    """Convert inline flow text to typographically correct HTML.

    The transformer holds no per-call state, so one instance can be shared
    by any number of renders.

    Examples
    --------
        >>> InlineTextTransformer().convert("wait... it's (c) 2010")
        'wait&#8230; it&#8217;s &#169; 2010'

    """

    def __init__(self) -> None:
        """Build the ordered rule table."""
        self._rules: tuple[tuple[Pattern[str], _Handler], ...] = (
            (_TAG_RE, self._tag),
            (_ESCAPE_RE, self._escape),
            (_ELLIPSIS_RE, self._ellipsis),
            (_COPYRIGHT_RE, self._replace_with(ENTITY_COPYRIGHT)),
            (_REGISTERED_RE, self._replace_with(ENTITY_REGISTERED)),
            (_EM_DASH_RE, self._replace_with(ENTITY_EM_DASH)),
            (_DOUBLE_QUOTE_RE, self._double_quote),
            (_OPEN_DOUBLE_QUOTE_RE, self._replace_with(ENTITY_LDQUO)),
            (_CLOSE_DOUBLE_QUOTE_RE, self._replace_with(ENTITY_RDQUO)),
            (_SINGLE_QUOTE_RE, self._single_quote),
        )

    def convert(self, text: str) -> str:
        """Convert one flow string.

        Parameters
        ----------
        text : str
            Escaped text and inline tags

        Returns
        -------
        str
            HTML with numeric character references for every substitution

        """
        html: list[str] = []
        state = ScanState()
        end = len(text)

        while state.pos < end:
            for pattern, handler in self._rules:
                match = pattern.match(text, state.pos)
                if match:
                    state.pos = match.end()
                    html.append(handler(match, text, state))
                    break
            else:
                match = _PLAIN_RUN_RE.match(text, state.pos)
                if match is None:
                    html.append(text[state.pos :])
                    break
                run = match.group()
                html.append(run)
                state.after_word = _WORD_END_RE.search(run) is not None
                state.pos = match.end()

        return "".join(html)

    @staticmethod
    def _tag(match: Match[str], text: str, state: ScanState) -> str:
        tag = match.group()
        if tag != TELETYPE_OPEN:
            return tag

        body = _TELETYPE_BODY_RE.match(text, state.pos)
        if body is None:
            logger.debug("Unterminated %s span at offset %d, copying remainder", TELETYPE_OPEN, match.start())
            rest = text[state.pos :]
            state.pos = len(text)
            return tag + rest

        state.pos = body.end()
        return tag + body.group().replace("\\\\", "\\")

    @staticmethod
    def _escape(match: Match[str], text: str, state: ScanState) -> str:
        state.after_word = False
        return match.group(1)

    @staticmethod
    def _ellipsis(match: Match[str], text: str, state: ScanState) -> str:
        state.after_word = False
        return match.group(1) + ENTITY_ELLIPSIS

    @staticmethod
    def _replace_with(entity: str) -> _Handler:
        def handler(match: Match[str], text: str, state: ScanState) -> str:
            state.after_word = False
            return entity

        return handler

    @staticmethod
    def _double_quote(match: Match[str], text: str, state: ScanState) -> str:
        quote = ENTITY_RDQUO if state.in_double_quotes else ENTITY_LDQUO
        state.in_double_quotes = not state.in_double_quotes
        state.after_word = False
        return quote

    @staticmethod
    def _single_quote(match: Match[str], text: str, state: ScanState) -> str:
        if state.in_single_quotes:
            quote = ENTITY_RSQUO
            state.in_single_quotes = False
        elif state.after_word:
            # Mary's dog, my parents' house: no quote pair is opened
            quote = ENTITY_RSQUO
        else:
            quote = ENTITY_LSQUO
            state.in_single_quotes = True
        state.after_word = False
        return quote
