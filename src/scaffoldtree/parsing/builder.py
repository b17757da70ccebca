"""
Tree construction for parsed entries.

The builder keeps an explicit stack of open directories indexed by depth.
Entries are attached greedily in source order; once attached a node is
never moved, so every tree it produces is well-formed even when the input
indentation is not.
"""

from scaffoldtree.core.options import ParseOptions
from scaffoldtree.core.path_utils import join_node_path
from scaffoldtree.core.tree_node import StructureNode
from scaffoldtree.core.types import DiagnosticCode, NodeKind
from scaffoldtree.parsing.diagnostics import (
    DiagnosticCollector,
    child_of_file_code,
    make_diagnostic,
)
from scaffoldtree.parsing.entry import ParsedEntry


class TreeBuilder:
    """Attach parsed entries at their resolved depth into a node tree."""

    def __init__(self, options: ParseOptions, collector: DiagnosticCollector):
        self.options = options
        self.collector = collector
        self.root_nodes: list[StructureNode] = []
        # Index = depth; None marks a depth with no open directory
        self._stack: list[StructureNode | None] = []

    def _pop_to(self, depth: int) -> None:
        del self._stack[depth:]

    def _find_parent(
        self, depth: int, line_number: int
    ) -> tuple[StructureNode | None, int]:
        """
        Pick the parent for an entry at `depth`.

        Returns:
            Tuple of (parent node or None for a root, depth to record)
        """
        if depth == 0:
            return None, depth

        candidate = self._stack[depth - 1] if len(self._stack) >= depth else None

        if candidate is None:
            self.collector.add(
                make_diagnostic(
                    DiagnosticCode.MISSING_PARENT,
                    line_number,
                    f"Entry has indent depth {depth} but no parent at depth {depth - 1}. Treating as root.",
                    self.options,
                )
            )
            return None, depth

        if candidate.is_file:
            code = child_of_file_code(self.options)
            if self.options.is_strict:
                self.collector.add(
                    make_diagnostic(
                        code,
                        line_number,
                        f'Cannot attach child under file "{candidate.path}".',
                        self.options,
                    )
                )
                return None, depth

            self.collector.add(
                make_diagnostic(
                    code,
                    line_number,
                    f'Entry appears under file "{candidate.path}". Attaching as sibling at depth {candidate.depth}.',
                    self.options,
                )
            )
            self._pop_to(candidate.depth)
            return candidate.parent, candidate.depth

        return candidate, depth

    def attach(
        self, entry: ParsedEntry, depth: int, line_number: int
    ) -> StructureNode:
        """
        Attach one entry to the tree.

        Params:
            entry: The parsed entry
            depth: Depth resolved for the entry line
            line_number: 1-based source line number

        Returns:
            The newly attached node
        """
        self._pop_to(depth)
        parent, depth = self._find_parent(depth, line_number)

        node = StructureNode(
            kind=NodeKind.DIR if entry.is_dir else NodeKind.FILE,
            name=entry.segment_name,
            depth=depth,
            line=line_number,
            path=join_node_path(
                parent.path if parent else None, entry.segment_name, entry.is_dir
            ),
            stub=entry.stub,
            include=list(entry.include) or None,
            exclude=list(entry.exclude) or None,
        )

        if parent is not None:
            parent.add_child(node)
        else:
            self.root_nodes.append(node)

        if node.is_dir:
            self._pop_to(depth)
            self._stack.extend([None] * (depth - len(self._stack)))
            self._stack.append(node)

        return node
