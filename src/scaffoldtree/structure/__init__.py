"""
Structure entries for the apply engine.

This package converts parse trees into the declarative entry model consumed
by the apply engine and renders entry trees back to structure file text.
"""

from scaffoldtree.structure.entries import (
    DirEntry,
    FileEntry,
    FlatEntry,
    StructureEntry,
    flatten_entries,
    parse_structure_text,
    render_structure_text,
    to_structure_entries,
)

__all__ = [
    "DirEntry",
    "FileEntry",
    "FlatEntry",
    "StructureEntry",
    "flatten_entries",
    "parse_structure_text",
    "render_structure_text",
    "to_structure_entries",
]
