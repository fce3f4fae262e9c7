#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/ast/nodes.py
"""Document event nodes.

This module defines the nodes an upstream markup parser hands to a renderer.
Unlike a nested tree, lists are flattened into start/end events so that a
renderer can process the document strictly in arrival order without holding
more than the currently open list context.

Node Kinds
----------
Block events:
    - Paragraph, Verbatim, Heading, Rule, BlankLine, Raw

List events:
    - ListStart, ListEnd, ListItemStart, ListItemEnd

Container:
    - Document (an ordered sequence of the events above)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ListType(str, Enum):
    """Kinds of list the parser can produce."""

    BULLET = "BULLET"
    LABEL = "LABEL"
    LALPHA = "LALPHA"
    NOTE = "NOTE"
    NUMBER = "NUMBER"
    UALPHA = "UALPHA"


@dataclass
class SourceLocation:
    """Position of a node in the markup source.

    Parameters
    ----------
    line : int or None, default = None
        Line number in the source text
    column : int or None, default = None
        Column number in the source text

    """

    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        """Return a short human readable form, e.g. ``line 4, column 2``."""
        parts = []
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.column is not None:
            parts.append(f"column {self.column}")
        return ", ".join(parts)


class Node(ABC):
    """Base class for all document nodes.

    All nodes support the visitor pattern through ``accept``.

    """

    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Container
# ============================================================================


@dataclass
class Document(Node):
    """Ordered sequence of document events.

    Parameters
    ----------
    children : list of Node, default = empty list
        Events in the order the parser produced them
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


# ============================================================================
# Block events
# ============================================================================


@dataclass
class Paragraph(Node):
    """Paragraph of inline text.

    Parameters
    ----------
    text : str
        Raw inline text; inline markup is resolved by the renderer

    """

    text: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Verbatim(Node):
    """Preformatted block rendered literally.

    Parameters
    ----------
    text : str
        Literal text, including line breaks

    """

    text: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this verbatim block."""
        return visitor.visit_verbatim(self)


@dataclass
class Rule(Node):
    """Horizontal rule.

    Parameters
    ----------
    weight : int
        Thickness requested by the source markup

    """

    weight: int
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_rule(self)


@dataclass
class Heading(Node):
    """Heading with inline text.

    The level is not range-checked; whatever the parser supplies is rendered.

    Parameters
    ----------
    level : int
        Heading level
    text : str
        Raw inline text of the heading

    """

    level: int
    text: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class BlankLine(Node):
    """Blank line between blocks."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this blank line."""
        return visitor.visit_blank_line(self)


@dataclass
class Raw(Node):
    """Literal HTML passed through without any escaping.

    Parameters
    ----------
    parts : list of str, default = empty list
        Lines of raw HTML, joined with newlines on output

    Warnings
    --------
    Security: content is emitted as-is. Only feed trusted HTML here.

    """

    parts: list[str] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw(self)


# ============================================================================
# List events
# ============================================================================


@dataclass
class ListStart(Node):
    """Opening of a list.

    Parameters
    ----------
    list_type : ListType
        Kind of list being opened

    """

    list_type: ListType
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list start."""
        return visitor.visit_list_start(self)


@dataclass
class ListEnd(Node):
    """Closing of a list.

    Parameters
    ----------
    list_type : ListType
        Kind of list being closed

    """

    list_type: ListType
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list end."""
        return visitor.visit_list_end(self)


@dataclass
class ListItemStart(Node):
    """Opening of a list item.

    Parameters
    ----------
    label : str or None, default = None
        Term for LABEL and NOTE lists, raw inline text

    """

    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item start."""
        return visitor.visit_list_item_start(self)


@dataclass
class ListItemEnd(Node):
    """Closing of a list item."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item end."""
        return visitor.visit_list_item_end(self)
