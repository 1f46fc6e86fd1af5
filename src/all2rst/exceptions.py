#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the all2rst library.

This module defines specialized exception classes for the error conditions
that can occur while turning a document AST into reStructuredText.

Exception Hierarchy
-------------------
- All2RstError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - FileError (file access and I/O)
    - MalformedFileError (input AST JSON that cannot be decoded)

  - RenderingError (output generation failures)
    - NestingDepthError (document nested beyond the configured limit)
    - TemplateError (standalone template could not be rendered)
    - OutputWriteError (file write failures)

Content the writer cannot represent (for example a raw inline in an unknown
format) is not an exception; it is logged and recorded on the renderer.

"""

from typing import Any


class All2RstError(Exception):
    """Base exception class for all all2rst-specific errors.

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


class ValidationError(All2RstError):
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
    """Exception raised when an incorrect options class is given to a renderer.

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
                f"{renderer_name} renderer expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(All2RstError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class MalformedFileError(FileError):
    """Exception raised when an AST JSON document cannot be decoded."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(All2RstError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class NestingDepthError(RenderingError):
    """Exception raised when the document nests deeper than allowed.

    Parameters
    ----------
    depth : int
        Depth that was reached
    limit : int
        Configured ``max_nesting_depth``
    node_type : str, optional
        Name of the node being entered when the limit was hit

    """

    def __init__(self, depth: int, limit: int, node_type: str | None = None):
        """Initialize the nesting depth error."""
        where = f" while entering {node_type}" if node_type else ""
        super().__init__(
            f"Document nesting depth {depth} exceeds the limit of {limit}{where}",
            rendering_stage="traversal",
        )
        self.depth = depth
        self.limit = limit
        self.node_type = node_type


class TemplateError(RenderingError):
    """Exception raised when the standalone template cannot be loaded or rendered."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the template error."""
        super().__init__(message, rendering_stage="template", original_error=original_error)


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
