#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options."""

from rdoc2html.options.base import BaseRendererOptions, CloneFrozenMixin
from rdoc2html.options.html import HtmlRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
]
