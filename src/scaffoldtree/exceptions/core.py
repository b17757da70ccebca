"""
Exception classes for scaffold structure file processing.

This module defines the exception types raised when a structure file cannot
be parsed under the fail-fast policy or when parser/formatter options are
invalid.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scaffoldtree.parsing.diagnostics import Diagnostic


class ScaffoldTreeError(Exception):
    """Base exception for all scaffoldtree errors."""

    pass


class StructureParseError(ScaffoldTreeError):
    """Raised on the first structural violation under the fail-fast policy."""

    def __init__(self, file_name: str, diagnostic: "Diagnostic"):
        """
        Initialize the exception.

        Params:
            file_name: Name of the structure file being parsed
            diagnostic: The diagnostic that stopped parsing
        """
        self.file_name = file_name
        self.diagnostic = diagnostic
        self.line = diagnostic.line
        self.code = diagnostic.code
        super().__init__(
            f"{file_name}: {diagnostic.message} (line {diagnostic.line}, {diagnostic.code.value})"
        )


class InvalidOptionsError(ScaffoldTreeError, ValueError):
    """Raised when parser or formatter options fail validation."""

    def __init__(self, options_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            options_name: Name of the options model that rejected the values
            reason: Why the options are invalid
        """
        self.options_name = options_name
        self.reason = reason
        super().__init__(f"Invalid {options_name}: {reason}")
