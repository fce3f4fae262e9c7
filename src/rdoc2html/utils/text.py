#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/utils/text.py
"""Text layout helpers."""

from __future__ import annotations

from rdoc2html.constants import DEFAULT_LINE_WIDTH


def wrap(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Greedily wrap ``text`` at spaces so lines stay within ``width``.

    Breaks only ever replace runs of spaces with a newline; no other
    character is added, removed or split. A word longer than ``width`` is
    kept whole on a line of its own.

    Parameters
    ----------
    text : str
        Text to wrap
    width : int, default 76
        Preferred maximum line length

    Returns
    -------
    str
        Wrapped text with leading and trailing whitespace removed

    Examples
    --------
        >>> wrap("aaa bbb ccc", width=8)
        'aaa bbb\\nccc'

    """
    lines: list[str] = []
    start = 0
    end = len(text)

    while start < end:
        # scan back for a space
        pos = start + width - 1
        if pos >= end:
            pos = end
        else:
            while pos > start and text[pos] != " ":
                pos -= 1
            if pos <= start:
                # no space in the window, run forward to the next one
                pos = start + width
                while pos < end and text[pos] != " ":
                    pos += 1
        lines.append(text[start:pos])
        start = pos
        while start < end and text[start] == " ":
            start += 1

    return "\n".join(lines).strip()
