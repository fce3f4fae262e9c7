#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/inline/__init__.py
"""Inline text processing.

Raw node text goes through two stages:

1. ``InlineFormatter`` escapes it, turns inline styles into tags and special
   spans into links, producing a flow string.
2. ``InlineTextTransformer`` applies typographic substitutions to the flow
   string while leaving tags and teletype spans alone.

"""

from rdoc2html.inline.flow import FlowFormatter, InlineFormatter, InlineStyleScanner
from rdoc2html.inline.specials import SpecialSpanRenderer, SpecialSpanScanner
from rdoc2html.inline.typography import InlineTextTransformer

__all__ = [
    "FlowFormatter",
    "InlineFormatter",
    "InlineStyleScanner",
    "InlineTextTransformer",
    "SpecialSpanRenderer",
    "SpecialSpanScanner",
]
