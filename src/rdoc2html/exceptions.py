#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the rdoc2html library.

This module defines specialized exception classes for the error conditions
that can occur while rendering a document event stream to HTML.

Exception Hierarchy
-------------------
- Rdoc2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - InvalidListTypeError (list type with no tag mapping)

Malformed inline markup never raises; it is passed through verbatim.

"""

from typing import Any


class Rdoc2HtmlError(Exception):
    """Base exception class for all rdoc2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Rdoc2HtmlError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(Rdoc2HtmlError):
    """Exception raised when output rendering fails.

    Raised for contract violations between the event producer and the
    renderer, such as a list end event with no list open.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class InvalidListTypeError(RenderingError):
    """Exception raised when a list type has no HTML tag mapping.

    This always indicates a bug in whatever produced the event stream, never
    bad user markup, and aborts rendering of the current document.

    Parameters
    ----------
    list_type : any
        The unrecognized list type value

    """

    def __init__(self, list_type: Any, original_error: Exception | None = None):
        """Initialize the invalid list type error."""
        super().__init__(
            f"Invalid list type: {list_type!r}", rendering_stage="list", original_error=original_error
        )
        self.list_type = list_type
