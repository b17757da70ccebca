"""
Structure file formatting.

This package provides the canonical re-printer for structure files.
"""

from scaffoldtree.formatting.formatter import (
    FormatResult,
    detect_preferred_eol,
    format_annotations,
    format_structure_text,
)

__all__ = [
    "FormatResult",
    "detect_preferred_eol",
    "format_annotations",
    "format_structure_text",
]
