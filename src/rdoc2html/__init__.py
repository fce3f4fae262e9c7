"""rdoc2html - HTML rendering for parsed lightweight documentation markup.

rdoc2html is the last stage of a documentation toolchain. An upstream parser
turns markup text into an ordered stream of document events (paragraphs,
headings, verbatim blocks, list start/end events and so on); rdoc2html turns
that stream into an HTML fragment for a page template to embed.

Key Features
------------
- Event-order rendering with deferred list item close tags
- Inline styles (``*bold*``, ``_em_``, ``+tt+``) and their HTML forms
- Bare hyperlinks and ``label[url]`` links, with ``link:`` URLs made
  relative to the current document and image targets rendered as ``<img>``
- Typographic substitution: directional quotes, em-dashes, ellipses,
  copyright and registered marks, with backslash escapes
- Literal verbatim blocks and raw HTML passthrough

Requirements
------------
- Python 3.10+

Examples
--------
    >>> from rdoc2html import render_html
    >>> from rdoc2html.ast import ListEnd, ListItemEnd, ListItemStart, ListStart, ListType, Paragraph
    >>> html = render_html([
    ...     ListStart(ListType.BULLET),
    ...     ListItemStart(),
    ...     Paragraph(text="one"),
    ...     ListItemEnd(),
    ...     ListEnd(ListType.BULLET),
    ... ])

"""

from rdoc2html.api import render_html
from rdoc2html.exceptions import (
    InvalidListTypeError,
    InvalidOptionsError,
    Rdoc2HtmlError,
    RenderingError,
    ValidationError,
)
from rdoc2html.logging_utils import configure_logging
from rdoc2html.options import HtmlRendererOptions
from rdoc2html.renderers.html import HtmlRenderer

__version__ = "1.0.0"

__all__ = [
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidListTypeError",
    "InvalidOptionsError",
    "Rdoc2HtmlError",
    "RenderingError",
    "ValidationError",
    "configure_logging",
    "render_html",
    "__version__",
]
