#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/rdoc2html/renderers/__init__.py
"""Renderers for document event streams.

- HtmlRenderer: Render to an HTML fragment

Examples
--------
    >>> from rdoc2html.ast import Document, Heading
    >>> from rdoc2html.options import HtmlRendererOptions
    >>> from rdoc2html.renderers import HtmlRenderer
    >>> doc = Document(children=[Heading(level=1, text="Title")])
    >>> html = HtmlRenderer(HtmlRendererOptions(wrap_paragraphs=False)).render_to_string(doc)

"""

from rdoc2html.renderers.base import BaseRenderer
from rdoc2html.renderers.html import HtmlRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
]
