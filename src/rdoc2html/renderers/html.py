#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/renderers/html.py
"""HTML rendering of document events.

This module provides the HtmlRenderer class, which converts a stream of
document events into an HTML fragment. There is no ``<html>`` or ``<body>``
wrapper; the page around the fragment is assembled elsewhere.

Events are processed strictly in arrival order. Lists are tracked with a
ListStackTracker so item close tags can be deferred until the next sibling
item or the end of the list, without looking ahead in the stream.

"""

from __future__ import annotations

import logging

from rdoc2html.ast.nodes import (
    BlankLine,
    Document,
    Heading,
    ListEnd,
    ListItemEnd,
    ListItemStart,
    ListStart,
    Node,
    Paragraph,
    Raw,
    Rule,
    Verbatim,
)
from rdoc2html.ast.visitors import NodeVisitor
from rdoc2html.exceptions import RenderingError
from rdoc2html.inline.flow import FlowFormatter, InlineFormatter
from rdoc2html.inline.typography import InlineTextTransformer
from rdoc2html.options.html import HtmlRendererOptions
from rdoc2html.renderers._list_stack import ListStackTracker, list_item_close, list_item_open, list_tags
from rdoc2html.renderers.base import BaseRenderer, DocumentInput
from rdoc2html.utils.html_utils import escape_html
from rdoc2html.utils.text import wrap

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render document events to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    inline_formatter : FlowFormatter or None, default = None
        Converts raw node text to flow HTML. Defaults to an InlineFormatter
        resolving ``link:`` URLs against ``options.from_path``.

    Examples
    --------
        >>> from rdoc2html.ast import Document, Heading, Paragraph
        >>> doc = Document(children=[
        ...     Heading(level=1, text="Title"),
        ...     Paragraph(text="It's *here*..."),
        ... ])
        >>> HtmlRenderer().render_to_string(doc)
        '\\n<h1>Title</h1>\\n\\n<p>It&#8217;s <b>here</b>&#8230;</p>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None, inline_formatter: FlowFormatter | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._inline_formatter: FlowFormatter = inline_formatter or InlineFormatter(options.from_path)
        self._transformer = InlineTextTransformer()
        self._output: list[str] = []
        self._lists = ListStackTracker()

    def render_to_string(self, doc: DocumentInput) -> str:
        """Render a document to an HTML fragment.

        Parameters
        ----------
        doc : Document or iterable of Node
            The document, or its events in order

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        InvalidListTypeError
            If a list event carries a type with no tag mapping
        RenderingError
            If a list end or list item event arrives with no list open

        """
        self._output = []
        self._lists = ListStackTracker()
        logger.debug("Rendering HTML fragment (from_path=%r)", self.options.from_path)

        if isinstance(doc, Document):
            doc.accept(self)
        else:
            for node in doc:
                node.accept(self)

        if self._lists:
            logger.debug("Document ended with %d list(s) still open", len(self._lists))

        html = "".join(self._output)
        logger.debug("Rendered %d characters of HTML", len(html))
        return html

    def to_html(self, text: str) -> str:
        """Convert raw inline text to HTML."""
        return self._transformer.convert(self._inline_formatter.format(text))

    def _require_open_list(self, node: Node) -> None:
        if self._lists:
            return
        where = node.source_location.describe() if node.source_location else ""
        message = f"{type(node).__name__} event with no open list"
        if where:
            message = f"{message} ({where})"
        raise RenderingError(message, rendering_stage="list")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph."""
        text = self.to_html(node.text)
        if self.options.wrap_paragraphs:
            text = wrap(text, self.options.line_width)
        self._output.append(f"\n<p>{text}</p>\n")

    def visit_verbatim(self, node: Verbatim) -> None:
        """Render a verbatim block without any inline processing."""
        self._output.append(f"\n<pre>{escape_html(node.text.rstrip())}</pre>\n")

    def visit_rule(self, node: Rule) -> None:
        """Render a horizontal rule."""
        size = min(node.weight, self.options.max_rule_weight)
        self._output.append(f'<hr style="height: {size}px">\n')

    def visit_heading(self, node: Heading) -> None:
        """Render a heading.

        The level is emitted as given, including values outside 1-6.
        """
        self._output.append(f"\n<h{node.level}>{self.to_html(node.text)}</h{node.level}>\n")

    def visit_blank_line(self, node: BlankLine) -> None:
        """Blank lines produce no output."""
        pass

    def visit_raw(self, node: Raw) -> None:
        """Emit raw HTML as-is."""
        self._output.append("\n".join(node.parts))

    def visit_list_start(self, node: ListStart) -> None:
        """Open a list."""
        open_tag, _ = list_tags(node.list_type)
        self._lists.push(node.list_type)
        self._output.append(open_tag)

    def visit_list_end(self, node: ListEnd) -> None:
        """Close the last open item, if any, and then the list."""
        self._require_open_list(node)
        _, close_tag = list_tags(node.list_type)
        pending = self._lists.take_pending_close()
        self._lists.pop()
        if pending:
            self._output.append(pending)
        self._output.append(f"{close_tag}\n")

    def visit_list_item_start(self, node: ListItemStart) -> None:
        """Close the previous sibling item, if any, and open a new one."""
        self._require_open_list(node)
        list_type = self._lists.current()
        label_html = self.to_html(node.label) if node.label is not None else ""
        item_open = list_item_open(list_type, label_html)
        pending = self._lists.take_pending_close()
        if pending:
            self._output.append(pending)
        self._output.append(item_open)

    def visit_list_item_end(self, node: ListItemEnd) -> None:
        """Defer the item's close tag until the next item or the list end."""
        self._require_open_list(node)
        self._lists.set_pending_close(list_item_close(self._lists.current()))
