#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/renderers/_list_stack.py
"""List tag lookups and open-list bookkeeping for the HTML renderer."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rdoc2html.ast.nodes import ListType
from rdoc2html.constants import LIST_ITEM_CLOSE, LIST_TYPE_TO_HTML
from rdoc2html.exceptions import InvalidListTypeError

logger = logging.getLogger(__name__)

_PLAIN_ITEM_TYPES = frozenset({ListType.BULLET, ListType.LALPHA, ListType.NUMBER, ListType.UALPHA})


def _lookup(table: Any, list_type: Any) -> Any:
    try:
        return table[list_type]
    except (KeyError, TypeError) as e:
        raise InvalidListTypeError(list_type, original_error=e) from e


def list_tags(list_type: ListType) -> tuple[str, str]:
    """Return the ``(open, close)`` tags for a list.

    Raises
    ------
    InvalidListTypeError
        If ``list_type`` has no mapping

    """
    return _lookup(LIST_TYPE_TO_HTML, list_type)


def list_item_close(list_type: ListType) -> str:
    """Return the tag that closes an item of ``list_type``."""
    return _lookup(LIST_ITEM_CLOSE, list_type)


def list_item_open(list_type: ListType, label_html: str = "") -> str:
    """Return the markup that opens an item of ``list_type``.

    Parameters
    ----------
    list_type : ListType
        Type of the innermost open list
    label_html : str, default ""
        Rendered item label, used by LABEL and NOTE lists

    Raises
    ------
    InvalidListTypeError
        If ``list_type`` has no mapping

    """
    if list_type in _PLAIN_ITEM_TYPES:
        return "<li>"
    if list_type == ListType.LABEL:
        return f"<dt>{label_html}</dt>\n<dd>"
    if list_type == ListType.NOTE:
        return f'<tr><td class="rdoc-term"><p>{label_html}</p></td>\n<td>'
    raise InvalidListTypeError(list_type)


class ListStackTracker:
    """Stack of open lists with a deferred item close tag per list.

    Each open list has one pending-close slot. It is empty while no item of
    that list is open, and otherwise holds the tag that closes the item.
    Emitting the tag is deferred until the next sibling item or the end of
    the list, so nested lists land inside their parent item.

    The two stacks always have the same length.

    """

    def __init__(self) -> None:
        """Create an empty tracker."""
        self._types: list[ListType] = []
        self._pending: list[Optional[str]] = []

    def __len__(self) -> int:
        """Return the current nesting depth."""
        return len(self._types)

    def push(self, list_type: ListType) -> None:
        """Open a list with no item open."""
        self._types.append(list_type)
        self._pending.append(None)
        logger.debug("Opened %s list at depth %d", list_type, len(self._types))

    def pop(self) -> ListType:
        """Close the innermost list and return its type.

        Any pending close tag of the list is discarded; call
        ``take_pending_close`` first to emit it.
        """
        self._pending.pop()
        list_type = self._types.pop()
        logger.debug("Closed %s list, depth now %d", list_type, len(self._types))
        return list_type

    def current(self) -> ListType:
        """Return the type of the innermost open list."""
        return self._types[-1]

    def take_pending_close(self) -> Optional[str]:
        """Remove and return the innermost list's pending close tag."""
        tag = self._pending[-1]
        self._pending[-1] = None
        return tag

    def set_pending_close(self, tag: str) -> None:
        """Record the tag that will close the innermost list's open item."""
        self._pending[-1] = tag
