"""
Structure entries handed to the apply engine.

The apply engine works on plain declarative entries rather than parse
nodes: a nested `DirEntry`/`FileEntry` tree, or a flat depth-first list.
Each entry carries only the annotations declared on its own line; stub
inheritance from ancestor directories is the apply engine's concern.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from scaffoldtree.core.options import DEFAULT_INDENT_STEP, ParseOptions
from scaffoldtree.core.tree_node import StructureNode
from scaffoldtree.core.types import ErrorPolicy, NodeKind
from scaffoldtree.formatting.formatter import format_annotations
from scaffoldtree.parsing.parser import parse_structure


class BaseEntry(BaseModel):
    """
    Options shared by file and directory entries.

    Params:
        path: POSIX path relative to the structure root
        stub: Stub used to create the entry's content
        include: Glob patterns; at least one must match for the entry to apply
        exclude: Glob patterns; any match excludes the entry
    """

    model_config = ConfigDict(extra="forbid")

    path: str
    stub: str | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None


class FileEntry(BaseEntry):
    """A file entry; its path never ends with "/"."""

    type: Literal["file"] = "file"


class DirEntry(BaseEntry):
    """A directory entry; its path ends with "/"."""

    type: Literal["dir"] = "dir"
    children: list["StructureEntry"] = Field(default_factory=list)


StructureEntry = Annotated[Union[FileEntry, DirEntry], Field(discriminator="type")]

DirEntry.model_rebuild()


class FlatEntry(BaseModel):
    """One entry of the flattened tree."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: NodeKind
    stub: str | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    line: int | None = None


def _annotations(node: StructureNode) -> dict:
    return {
        "stub": node.stub,
        "include": list(node.include) if node.include else None,
        "exclude": list(node.exclude) if node.exclude else None,
    }


def to_structure_entries(nodes: list[StructureNode]) -> list[FileEntry | DirEntry]:
    """Convert parse nodes into a nested entry tree."""
    entries: list[FileEntry | DirEntry] = []
    for node in nodes:
        if node.is_dir:
            entries.append(
                DirEntry(
                    path=node.path,
                    children=to_structure_entries(node.children),
                    **_annotations(node),
                )
            )
        else:
            entries.append(FileEntry(path=node.path, **_annotations(node)))
    return entries


def flatten_entries(nodes: list[StructureNode]) -> list[FlatEntry]:
    """Flatten parse nodes into a depth-first list of entries."""
    flat: list[FlatEntry] = []
    for root in nodes:
        for node in root.walk():
            flat.append(
                FlatEntry(
                    path=node.path, kind=node.kind, line=node.line, **_annotations(node)
                )
            )
    return flat


def parse_structure_text(
    file_name: str, text: str, indent_step: int = DEFAULT_INDENT_STEP
) -> list[FileEntry | DirEntry]:
    """
    Parse a structure file for the apply pipeline.

    Uses the fail-fast policy: the first structural violation (misaligned
    indent, skipped level, child under a file, colon in a path) raises.

    Params:
        file_name: Structure file name used in error messages
        text: Structure file text
        indent_step: Spaces per indent level

    Returns:
        Nested list of file and directory entries

    Raises:
        StructureParseError: On the first structural violation
    """
    result = parse_structure(
        text,
        ParseOptions(
            indent_step=indent_step, policy=ErrorPolicy.FAIL_FAST, file_name=file_name
        ),
    )
    return to_structure_entries(result.root_nodes)


def _entry_name(entry: FileEntry | DirEntry, parent_path: str) -> str:
    path = entry.path
    if parent_path and path.startswith(parent_path):
        path = path[len(parent_path) :]
    return path


def render_structure_text(
    entries: list[FileEntry | DirEntry], indent_step: int = DEFAULT_INDENT_STEP
) -> str:
    """
    Render an entry tree as structure file text.

    Directories are suffixed with "/" and annotations are written in
    canonical order. Child paths are written relative to their parent.

    Params:
        entries: Nested entries, as produced by `to_structure_entries`
        indent_step: Spaces per indent level

    Returns:
        Structure file text (LF line endings, no trailing newline)
    """
    lines: list[str] = []

    def walk(items: list[FileEntry | DirEntry], level: int, parent_path: str) -> None:
        for entry in items:
            name = _entry_name(entry, parent_path)
            if entry.type == "dir" and not name.endswith("/"):
                name += "/"
            tokens = format_annotations(entry.stub, entry.include, entry.exclude)
            lines.append(" ".join([" " * (indent_step * level) + name, *tokens]))
            if entry.type == "dir":
                walk(entry.children, level + 1, entry.path.rstrip("/") + "/")

    walk(entries, 0, "")
    return "\n".join(lines)
