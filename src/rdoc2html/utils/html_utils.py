#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/utils/html_utils.py
"""HTML helpers shared by the renderer and the inline formatter."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for use in HTML text.

    Apostrophes are left alone so the typographic pass can still turn them
    into directional quotes. Double quotes become ``&quot;``, which that pass
    recognizes as well.

    Parameters
    ----------
    text : str
        Plain text

    Returns
    -------
    str
        Escaped text

    """
    return _html_escape(text, quote=False).replace('"', "&quot;")


def escape_attribute(value: str) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return _html_escape(value, quote=True)
