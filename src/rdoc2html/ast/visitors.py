#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/ast/visitors.py
"""Visitor pattern base class for document event traversal.

Renderers subclass NodeVisitor and implement one visit_* method per event
kind. Events are dispatched through ``Node.accept`` so that adding a new
algorithm never touches the node classes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from rdoc2html.ast.nodes import (
    BlankLine,
    Document,
    Heading,
    ListEnd,
    ListItemEnd,
    ListItemStart,
    ListStart,
    Paragraph,
    Raw,
    Rule,
    Verbatim,
)


class NodeVisitor(ABC):
    """Abstract base class for document event visitors.

    Examples
    --------
    Visitor that counts headings. Every event kind needs a method, even when it
    does nothing:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...
        ...     def visit_paragraph(self, node): pass
        ...     def visit_verbatim(self, node): pass
        ...     def visit_rule(self, node): pass
        ...     def visit_blank_line(self, node): pass
        ...     def visit_raw(self, node): pass
        ...     def visit_list_start(self, node): pass
        ...     def visit_list_end(self, node): pass
        ...     def visit_list_item_start(self, node): pass
        ...     def visit_list_item_end(self, node): pass
        >>> counter = HeadingCounter()
        >>> Document(children=[Heading(level=1, text="a"), Paragraph(text="b")]).accept(counter)
        >>> counter.count
        1

    """

    def visit_document(self, node: Document) -> Any:
        """Visit every event of a document in order.

        Parameters
        ----------
        node : Document
            The document to traverse

        """
        for child in node.children:
            child.accept(self)

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph event."""
        pass

    @abstractmethod
    def visit_verbatim(self, node: Verbatim) -> Any:
        """Visit a Verbatim event."""
        pass

    @abstractmethod
    def visit_rule(self, node: Rule) -> Any:
        """Visit a Rule event."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading event."""
        pass

    @abstractmethod
    def visit_blank_line(self, node: BlankLine) -> Any:
        """Visit a BlankLine event."""
        pass

    @abstractmethod
    def visit_raw(self, node: Raw) -> Any:
        """Visit a Raw event."""
        pass

    @abstractmethod
    def visit_list_start(self, node: ListStart) -> Any:
        """Visit a ListStart event."""
        pass

    @abstractmethod
    def visit_list_end(self, node: ListEnd) -> Any:
        """Visit a ListEnd event."""
        pass

    @abstractmethod
    def visit_list_item_start(self, node: ListItemStart) -> Any:
        """Visit a ListItemStart event."""
        pass

    @abstractmethod
    def visit_list_item_end(self, node: ListItemEnd) -> Any:
        """Visit a ListItemEnd event."""
        pass
