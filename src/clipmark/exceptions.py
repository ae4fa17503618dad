#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the clipmark library.

The renderer itself is total: any tree BeautifulSoup can produce renders to
some Markdown string. These exceptions are only raised by the entry point
while validating options and turning the caller's input into a tree.

Exception Hierarchy
-------------------
- ClipmarkError (base exception)

  - ValidationError (unsupported input type, invalid option values)

  - FileError (HTML file cannot be read)

  - ParsingError (input cannot be decoded or parsed)

  - DependencyError (selected HTML tree builder is not installed)

"""

from typing import Any


class ClipmarkError(Exception):
    """Base exception class for all clipmark-specific errors.

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


class ValidationError(ClipmarkError):
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


class FileError(ClipmarkError):
    """Exception raised when an HTML file cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the file that failed
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(ClipmarkError):
    """Exception raised when input cannot be decoded or parsed into a tree.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage that failed (e.g. "decoding", "parsing")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class DependencyError(ClipmarkError):
    """Exception raised when a required package is not installed.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates one with an
        install hint.
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    converter_name : str
        The component that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.converter_name = converter_name
        self.missing_packages = missing_packages

        packages = [f"{name}{spec}" for name, spec in missing_packages]
        self.install_command = f"pip install {' '.join(packages)}" if packages else ""

        if message is None:
            message = f"'{converter_name}' requires missing packages: {', '.join(packages) or 'unknown'}"
            if self.install_command:
                message += f". Install with: {self.install_command}"

        super().__init__(message, original_error=original_error)


__all__ = [
    "ClipmarkError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "DependencyError",
]
