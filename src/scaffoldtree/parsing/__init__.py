"""
Structure file parsing components.

This package provides line classification, depth resolution, entry parsing,
tree construction and the unified parser entry point.
"""

from scaffoldtree.parsing.builder import TreeBuilder
from scaffoldtree.parsing.depth import DepthResolution, DepthState, resolve_depth
from scaffoldtree.parsing.diagnostics import (
    SEVERITY_TABLE,
    Diagnostic,
    DiagnosticCollector,
    severity_for,
)
from scaffoldtree.parsing.entry import (
    ParsedEntry,
    find_inline_comment,
    parse_entry,
    split_inline_comment,
)
from scaffoldtree.parsing.lines import Line, classify_lines, split_lines
from scaffoldtree.parsing.parser import ParseResult, flatten_nodes, parse_structure

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "SEVERITY_TABLE",
    "severity_for",
    "Line",
    "classify_lines",
    "split_lines",
    "DepthState",
    "DepthResolution",
    "resolve_depth",
    "ParsedEntry",
    "find_inline_comment",
    "parse_entry",
    "split_inline_comment",
    "TreeBuilder",
    "ParseResult",
    "flatten_nodes",
    "parse_structure",
]
