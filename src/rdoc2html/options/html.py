#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from rdoc2html.constants import (
    DEFAULT_FROM_PATH,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MAX_RULE_WEIGHT,
    DEFAULT_WRAP_PARAGRAPHS,
)
from rdoc2html.options.base import BaseRendererOptions


# src/rdoc2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering document events to HTML.

    Parameters
    ----------
    from_path : str, default ""
        Output path of the document being rendered, relative to the output
        root. ``link:`` URLs are made relative to its directory.
    line_width : int, default 76
        Preferred maximum line length for wrapped paragraph text.
    wrap_paragraphs : bool, default True
        Wrap paragraph text at spaces. Wrapping only inserts newlines.
    max_rule_weight : int, default 10
        Thickness in pixels above which horizontal rules are capped.

    """

    from_path: str = field(
        default=DEFAULT_FROM_PATH,
        metadata={"help": "Output path of the current document, used to resolve link: URLs", "importance": "core"},
    )
    line_width: int = field(
        default=DEFAULT_LINE_WIDTH,
        metadata={"help": "Preferred maximum line length for paragraph text", "type": int, "importance": "advanced"},
    )
    wrap_paragraphs: bool = field(
        default=DEFAULT_WRAP_PARAGRAPHS,
        metadata={"help": "Wrap paragraph text at spaces", "importance": "advanced"},
    )
    max_rule_weight: int = field(
        default=DEFAULT_MAX_RULE_WEIGHT,
        metadata={"help": "Maximum horizontal rule thickness in pixels", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If line_width or max_rule_weight is not positive.

        """
        super().__post_init__()
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")
        if self.max_rule_weight <= 0:
            raise ValueError(f"max_rule_weight must be positive, got {self.max_rule_weight}")
