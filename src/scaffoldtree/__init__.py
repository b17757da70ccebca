"""
Scaffoldtree - parser and canonical formatter for scaffold structure files

Structure files describe a directory layout with indentation: directories end
with "/", files are everything else, and entries may carry @stub:, @include:
and @exclude: annotations.
"""

from importlib.metadata import version

from scaffoldtree.core import (
    DiagnosticCode,
    ErrorPolicy,
    FormatConfig,
    FormatOptions,
    NodeKind,
    ParseMode,
    ParseOptions,
    Severity,
    StructureNode,
)
from scaffoldtree.exceptions import (
    InvalidOptionsError,
    ScaffoldTreeError,
    StructureParseError,
)
from scaffoldtree.formatting import FormatResult, format_structure_text
from scaffoldtree.parsing import Diagnostic, ParseResult, parse_structure
from scaffoldtree.structure import (
    DirEntry,
    FileEntry,
    flatten_entries,
    parse_structure_text,
    render_structure_text,
    to_structure_entries,
)

__version__ = version("scaffoldtree")

__all__ = [
    "__version__",
    "parse_structure",
    "parse_structure_text",
    "format_structure_text",
    "flatten_entries",
    "to_structure_entries",
    "render_structure_text",
    "ParseResult",
    "FormatResult",
    "Diagnostic",
    "StructureNode",
    "DirEntry",
    "FileEntry",
    "DiagnosticCode",
    "ErrorPolicy",
    "NodeKind",
    "ParseMode",
    "Severity",
    "ParseOptions",
    "FormatOptions",
    "FormatConfig",
    "ScaffoldTreeError",
    "StructureParseError",
    "InvalidOptionsError",
]
