#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by lexdoc.

Document content never raises: malformed or unrecognized editor states
degrade to empty or best-effort output. These exceptions report mistakes
made by the caller, such as an option value out of range or a template
file that does not exist.

Exception Hierarchy
-------------------
- LexdocError

  - ValidationError (option values)
    - InvalidOptionsError (options class does not match the renderer)

  - RenderingError (template loading and rendering)

"""

from typing import Any


class LexdocError(Exception):
    """Base class for lexdoc errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        Exception that caused this one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional cause."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(LexdocError):
    """An option or argument has an invalid value.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_name : str, optional
        Name of the offending option
    parameter_value : any, optional
        Value that was rejected
    original_error : Exception, optional
        Exception that caused this one

    Examples
    --------
    >>> from lexdoc import NormalizeOptions
    >>> try:
    ...     NormalizeOptions(max_depth=0)
    ... except ValidationError as e:
    ...     print(e.parameter_name)
    max_depth

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the error with the rejected option."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer received options meant for another renderer.

    For example ``HtmlRenderer(PlainTextOptions())``.

    Parameters
    ----------
    renderer_name : str
        Short name of the renderer ("html", "plaintext")
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Options class that was passed

    """

    def __init__(self, renderer_name: str, expected_type: type, received_type: type):
        """Initialize the error from the expected and received classes."""
        super().__init__(
            f"{renderer_name} renderer expects {expected_type.__name__}, got {received_type.__name__}",
            parameter_name="options",
            parameter_value=received_type,
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(LexdocError):
    """HTML output could not be produced through a template.

    Parameters
    ----------
    message : str
        Description of the failure
    template_file : str, optional
        Template that was being loaded or rendered
    original_error : Exception, optional
        Jinja2 exception, when there is one

    """

    def __init__(self, message: str, template_file: str | None = None, original_error: Exception | None = None):
        """Initialize the error with the template involved."""
        super().__init__(message, original_error)
        self.template_file = template_file


__all__ = [
    "LexdocError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
]
