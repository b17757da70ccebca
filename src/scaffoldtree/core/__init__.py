"""
Core scaffoldtree components.

This package provides the type definitions, option models, path helpers and
the tree node shared by the parser and the formatter.
"""

from scaffoldtree.core.options import (
    FormatConfig,
    FormatOptions,
    ParseOptions,
    resolve_options,
)
from scaffoldtree.core.path_utils import (
    join_node_path,
    strip_trailing_slashes,
    to_posix_path,
)
from scaffoldtree.core.tree_node import StructureNode
from scaffoldtree.core.types import (
    DiagnosticCode,
    ErrorPolicy,
    LineKind,
    NodeKind,
    ParseMode,
    Severity,
)

__all__ = [
    "StructureNode",
    "DiagnosticCode",
    "ErrorPolicy",
    "LineKind",
    "NodeKind",
    "ParseMode",
    "Severity",
    "ParseOptions",
    "FormatOptions",
    "FormatConfig",
    "resolve_options",
    "join_node_path",
    "strip_trailing_slashes",
    "to_posix_path",
]
