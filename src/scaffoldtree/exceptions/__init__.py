"""
Scaffoldtree exception classes.

This package provides the exception types raised by the structure parser
and its option models.
"""

from scaffoldtree.exceptions.core import (
    InvalidOptionsError,
    ScaffoldTreeError,
    StructureParseError,
)

__all__ = [
    "ScaffoldTreeError",
    "StructureParseError",
    "InvalidOptionsError",
]
