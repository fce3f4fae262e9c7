#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/renderers/base.py
"""Base class for document renderers.

Renderers turn a document event stream into an output string. Each render
call owns its own buffers, so separate instances may render independent
documents in parallel.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Union

from rdoc2html.ast.nodes import Document, Node
from rdoc2html.exceptions import InvalidOptionsError
from rdoc2html.options.base import BaseRendererOptions

DocumentInput = Union[Document, Iterable[Node]]


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class TextRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: DocumentInput) -> str:
        """Render a document to a string.

        Parameters
        ----------
        doc : Document or iterable of Node
            The document, or its events in order

        Returns
        -------
        str
            Rendered output

        Raises
        ------
        RenderingError
            If the event stream violates the renderer's expectations

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
