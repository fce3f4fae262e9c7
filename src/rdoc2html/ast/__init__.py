#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/ast/__init__.py
"""Document event model.

- nodes: event classes produced by an upstream markup parser
- visitors: visitor base class used by renderers

Examples
--------
    >>> from rdoc2html.ast import Document, Heading, Paragraph
    >>> from rdoc2html.renderers.html import HtmlRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, text="Title"),
    ...     Paragraph(text="Hello world"),
    ... ])
    >>> html = HtmlRenderer().render_to_string(doc)

"""

from rdoc2html.ast.nodes import (
    BlankLine,
    Document,
    Heading,
    ListEnd,
    ListItemEnd,
    ListItemStart,
    ListStart,
    ListType,
    Node,
    Paragraph,
    Raw,
    Rule,
    SourceLocation,
    Verbatim,
)
from rdoc2html.ast.visitors import NodeVisitor

__all__ = [
    "BlankLine",
    "Document",
    "Heading",
    "ListEnd",
    "ListItemEnd",
    "ListItemStart",
    "ListStart",
    "ListType",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Raw",
    "Rule",
    "SourceLocation",
    "Verbatim",
]
