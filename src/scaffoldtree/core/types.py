"""
Core type definitions for the structure file DSL.

This module contains the closed sets of values shared by the line
classifier, the parser, the diagnostics and the formatter.
"""

from enum import Enum


class LineKind(Enum):
    """How a physical line of a structure file was classified."""

    BLANK = "blank"
    COMMENT = "comment"
    ENTRY = "entry"


class NodeKind(Enum):
    """Kind of a structure tree node."""

    DIR = "dir"
    FILE = "file"


class Severity(Enum):
    """Diagnostic severity."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ParseMode(Enum):
    """Severity profile used when reporting structural problems."""

    LOOSE = "loose"  # Repairs with warnings
    STRICT = "strict"  # Same repairs, reported as errors


class ErrorPolicy(Enum):
    """What the parser does with an error-level diagnostic."""

    COLLECT = "collect"
    FAIL_FAST = "fail-fast"


class DiagnosticCode(Enum):
    """Stable diagnostic codes consumed by editor tooling."""

    INDENT_TABS = "indent-tabs"
    INDENT_SKIP_LEVEL = "indent-skip-level"
    INDENT_MISALIGNED = "indent-misaligned"
    CHILD_OF_FILE_LOOSE = "child-of-file-loose"
    CHILD_OF_FILE = "child-of-file"
    PATH_COLON = "path-colon"
    MISSING_PARENT = "missing-parent"
    UNKNOWN_ANNOTATION = "unknown-annotation"
