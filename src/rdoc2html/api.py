#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/api.py
"""Top-level rendering entry point."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rdoc2html.options.html import HtmlRendererOptions
from rdoc2html.renderers.base import DocumentInput
from rdoc2html.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


def render_html(
    doc: DocumentInput,
    *,
    renderer_options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a document event stream to an HTML fragment.

    A new renderer is created for every call, so concurrent calls never share
    state.

    Parameters
    ----------
    doc : Document or iterable of Node
        The document, or its events in order
    renderer_options : HtmlRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual renderer options overriding fields of renderer_options

    Returns
    -------
    str
        HTML fragment

    Raises
    ------
    InvalidListTypeError
        If a list event carries a type with no tag mapping
    RenderingError
        If list events are unbalanced

    Examples
    --------
        >>> from rdoc2html.ast import Paragraph
        >>> render_html([Paragraph(text="see link:b/c.html")], from_path="a/x.html")
        '\\n<p>see <a href="../b/c.html">b/c.html</a></p>\\n'

    """
    final_options: Optional[HtmlRendererOptions]
    if kwargs and renderer_options:
        final_options = renderer_options.create_updated(**kwargs)
    elif kwargs:
        final_options = HtmlRendererOptions(**kwargs)
    else:
        final_options = renderer_options

    logger.debug("Rendering HTML with options %s", final_options)
    return HtmlRenderer(final_options).render_to_string(doc)
