"""
Structure file parser.

One engine serves both consumers of the grammar: the apply pipeline
(fail-fast policy, raises on the first structural error) and editor tooling
and the formatter (collect policy, never raises). Both run the same
classification, depth and tree rules, so they cannot disagree on what is
valid.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from scaffoldtree.core.options import ParseOptions, resolve_options
from scaffoldtree.core.tree_node import StructureNode
from scaffoldtree.core.types import Severity
from scaffoldtree.parsing.builder import TreeBuilder
from scaffoldtree.parsing.depth import DepthState, resolve_depth
from scaffoldtree.parsing.diagnostics import Diagnostic, DiagnosticCollector
from scaffoldtree.parsing.entry import parse_entry
from scaffoldtree.parsing.lines import Line, classify_lines

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """
    Everything produced by one parse.

    Params:
        root_nodes: Top-level nodes in source order
        lines: One Line per physical line
        diagnostics: Diagnostics in emission order
        options: The effective options used by the parser
    """

    root_nodes: list[StructureNode]
    lines: list[Line]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    options: ParseOptions = field(default_factory=ParseOptions)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    @property
    def entry_lines(self) -> list[Line]:
        return [line for line in self.lines if line.is_entry]

    def iter_nodes(self) -> Iterator[StructureNode]:
        """Yield every node depth-first in source order."""
        for root in self.root_nodes:
            yield from root.walk()


def flatten_nodes(
    nodes: list[StructureNode], level: int = 0
) -> list[tuple[StructureNode, int]]:
    """
    Flatten a node tree depth-first.

    Params:
        nodes: Sibling nodes to flatten
        level: Tree level of `nodes`

    Returns:
        List of (node, level) pairs in source order; level is the position in
        the tree, not the recorded depth
    """
    flattened: list[tuple[StructureNode, int]] = []
    for node in nodes:
        flattened.append((node, level))
        if node.children:
            flattened.extend(flatten_nodes(node.children, level + 1))
    return flattened


def parse_structure(
    text: str, options: ParseOptions | None = None, **overrides: Any
) -> ParseResult:
    """
    Parse structure file text into a node tree with diagnostics.

    Under the collect policy this never raises and always returns a complete
    best-effort tree; under the fail-fast policy the first error-level
    diagnostic raises and no tree is returned.

    Params:
        text: Structure file text (LF or CRLF line endings)
        options: Parser options
        **overrides: Individual option values (indent_step, mode, policy, file_name)

    Returns:
        ParseResult with nodes, lines, diagnostics and the effective options

    Raises:
        StructureParseError: Under the fail-fast policy, on the first error
        InvalidOptionsError: If the option overrides are invalid
    """
    options = resolve_options(ParseOptions, options, overrides)
    collector = DiagnosticCollector(options)

    lines, line_diagnostics = classify_lines(text, options)
    collector.extend(line_diagnostics)

    builder = TreeBuilder(options, collector)
    state = DepthState()

    for line in lines:
        if not line.is_entry:
            continue

        resolution = resolve_depth(state, line, options)
        collector.extend(list(resolution.diagnostics))

        entry, entry_diagnostics = parse_entry(line.content, line.line_number, options)
        collector.extend(entry_diagnostics)

        if entry is None:
            state = resolution.state
            continue

        builder.attach(entry, resolution.depth, line.line_number)
        state = resolution.commit(is_file=not entry.is_dir)

    logger.debug(
        "Parsed %s: %d lines, %d root nodes, %d diagnostics",
        options.file_name,
        len(lines),
        len(builder.root_nodes),
        len(collector.diagnostics),
    )
    return ParseResult(
        root_nodes=builder.root_nodes,
        lines=lines,
        diagnostics=collector.diagnostics,
        options=options,
    )
