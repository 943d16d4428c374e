#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html_to_text library.

This module defines specialized exception classes for the error conditions
that can surface to callers of the converter. The core walker and layout
engine never raise on malformed trees; everything here is either a
configuration contract violation detected at the boundary or a failure of
the external HTML parser backend.

Exception Hierarchy
-------------------
- HtmlToTextError (base exception)

  - ValidationError (parameter/option validation)
    - FormatterNotFoundError (tag mapped to an unregistered formatter)

  - ParsingError (HTML parser backend failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class HtmlToTextError(Exception):
    """Base exception class for all html_to_text-specific errors.

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


class ValidationError(HtmlToTextError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class FormatterNotFoundError(ValidationError):
    """Exception raised when a formatter id has no registered implementation.

    Parameters
    ----------
    formatter_name : str
        The formatter id that could not be resolved
    tag_name : str, optional
        The tag whose mapping referenced the formatter, if known

    Attributes
    ----------
    formatter_name : str
        The unresolved formatter id
    tag_name : str or None
        The tag mapping that referenced it

    """

    def __init__(self, formatter_name: str, tag_name: str | None = None):
        """Initialize the error with the missing formatter id."""
        if tag_name is None:
            message = f"No formatter registered under the name '{formatter_name}'"
        else:
            display_tag = tag_name or "<default>"
            message = (
                f"Tag mapping for '{display_tag}' references formatter '{formatter_name}', "
                f"which is not registered"
            )
        super().__init__(message, parameter_name="tags", parameter_value=formatter_name)
        self.formatter_name = formatter_name
        self.tag_name = tag_name


class ParsingError(HtmlToTextError):
    """Exception raised when the HTML parser backend fails.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage at which parsing failed (e.g., "backend", "tree conversion")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class DependencyError(HtmlToTextError):
    """Exception raised when required dependencies are missing or have incompatible versions.

    Parameters
    ----------
    converter_name : str
        Name of the component that requires the dependencies
    missing_packages : list of tuple
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list of tuple, optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command
    original_import_error : ImportError, optional
        The original ImportError that triggered this exception

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error

        if not install_command:
            packages = [f"{name}{spec}" if spec else name for name, spec in missing_packages]
            packages.extend(f"{name}{required}" for name, required, _ in self.version_mismatches)
            install_command = "pip install " + " ".join(f'"{pkg}"' for pkg in packages) if packages else ""
        self.install_command = install_command

        if message is None:
            message_parts = []
            if missing_packages:
                names = ", ".join(name for name, _ in missing_packages)
                message_parts.append(f"'{converter_name}' requires the following packages: {names}")
            for name, required, installed in self.version_mismatches:
                message_parts.append(f"'{name}' version {installed} is installed, but {required} is required")
            if install_command:
                message_parts.append(f"Install with: {install_command}")
            message = ". ".join(message_parts)

        super().__init__(message, original_error=original_import_error)
