"""
Structure tree node.

A `StructureNode` is either a directory or a file. The tree owns its nodes
top-down through `children`; the parent link is a weak back-reference used
only for path and ancestor queries.
"""

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field

from scaffoldtree.core.types import NodeKind


@dataclass(eq=False)
class StructureNode:
    """
    One entry of a parsed structure file.

    Params:
        kind: NodeKind.DIR or NodeKind.FILE
        name: Segment name as written, trailing slashes stripped
        depth: Resolved nesting depth (0 = root level)
        line: 1-based source line number
        path: Canonical forward-slash path, directories end with "/"
        stub: Stub name declared on this entry
        include: Include globs declared on this entry, in source order
        exclude: Exclude globs declared on this entry, in source order
        children: Child nodes in source order (always empty for files)
    """

    kind: NodeKind
    name: str
    depth: int
    line: int
    path: str
    stub: str | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    children: list["StructureNode"] = field(default_factory=list)
    _parent_ref: weakref.ReferenceType | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def is_dir(self) -> bool:
        return self.kind == NodeKind.DIR

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def display_name(self) -> str:
        """Name as printed in a structure file ("src/" for directories)."""
        return f"{self.name}/" if self.is_dir else self.name

    @property
    def parent(self) -> "StructureNode | None":
        """Parent directory, or None for root nodes and released trees."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def add_child(self, child: "StructureNode") -> None:
        """Append a child node and point its back-reference at this node."""
        if not self.is_dir:
            raise ValueError(f"File node '{self.path}' cannot have children")
        child._parent_ref = weakref.ref(self)
        self.children.append(child)

    def ancestors(self) -> Iterator["StructureNode"]:
        """Yield ancestors from the direct parent up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["StructureNode"]:
        """Yield this node and all of its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()
