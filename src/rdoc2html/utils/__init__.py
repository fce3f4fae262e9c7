#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/utils/__init__.py
"""Utility modules for the rdoc2html package.

This package contains the path, text layout and HTML escaping helpers used
by the renderer and the inline formatter.
"""

from rdoc2html.utils.html_utils import escape_attribute, escape_html
from rdoc2html.utils.paths import gen_relative_url
from rdoc2html.utils.text import wrap

__all__ = [
    "escape_attribute",
    "escape_html",
    "gen_relative_url",
    "wrap",
]
