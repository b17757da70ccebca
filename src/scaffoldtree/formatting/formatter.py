"""
Canonical formatter for structure files.

The formatter parses the text with the collect policy, re-prints every
entry line from the resulting tree (indentation from tree level, canonical
annotation order) and merges the result back with the untouched blank and
comment lines and the original inline comments.

If the tree cannot be mapped one-to-one onto the entry lines, structural
re-printing is skipped and only whitespace and line endings are normalized.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from scaffoldtree.core.options import FormatOptions, resolve_options
from scaffoldtree.core.tree_node import StructureNode
from scaffoldtree.parsing.entry import (
    EXCLUDE_PREFIX,
    INCLUDE_PREFIX,
    STUB_PREFIX,
    ParsedEntry,
    parse_entry,
    split_inline_comment,
)
from scaffoldtree.parsing.lines import Line, split_lines
from scaffoldtree.parsing.parser import ParseResult, flatten_nodes, parse_structure

logger = logging.getLogger(__name__)

TRAILING_WHITESPACE_PATTERN = re.compile(r"[ \t]+$")
CRLF_PATTERN = re.compile(r"\r\n")
LONE_LF_PATTERN = re.compile(r"(?<!\r)\n")


@dataclass
class FormatResult:
    """
    Output of `format_structure_text`.

    Params:
        text: The formatted text
        original: The input text
        result: The parse the formatting was based on
        used_fallback: True when only whitespace/EOL normalization was applied
    """

    text: str
    original: str
    result: ParseResult
    used_fallback: bool = False

    @property
    def changed(self) -> bool:
        return self.text != self.original


def trim_trailing_whitespace(line: str) -> str:
    return TRAILING_WHITESPACE_PATTERN.sub("", line)


def detect_preferred_eol(text: str) -> str:
    """Dominant line ending of `text`; ties and texts without one give LF."""
    crlf_count = len(CRLF_PATTERN.findall(text))
    lf_count = len(LONE_LF_PATTERN.findall(text))
    return "\r\n" if crlf_count > lf_count else "\n"


def detect_raw_eol(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def _output_eol(text: str, options: FormatOptions) -> str:
    if options.normalize_newlines:
        return detect_preferred_eol(text)
    return detect_raw_eol(text)


def format_annotations(
    stub: str | None,
    include: list[str] | tuple[str, ...] | None,
    exclude: list[str] | tuple[str, ...] | None,
) -> list[str]:
    """Annotation tokens in canonical order: @stub, @include, @exclude."""
    tokens = []
    if stub:
        tokens.append(f"{STUB_PREFIX}{stub}")
    if include:
        tokens.append(f"{INCLUDE_PREFIX}{','.join(include)}")
    if exclude:
        tokens.append(f"{EXCLUDE_PREFIX}{','.join(exclude)}")
    return tokens


def _source_tokens(line: Line) -> list[str]:
    structural, _ = split_inline_comment(line.content)
    return structural.split()[1:]


def format_node_line(
    node: StructureNode,
    level: int,
    line: Line,
    entry: ParsedEntry,
    options: FormatOptions,
) -> str:
    """
    Re-print one entry line.

    Params:
        node: The node built from the line
        level: Tree level of the node
        line: The original source line (for its inline comment)
        entry: The line's parsed entry (for unrecognized tokens)
        options: Formatter options

    Returns:
        The canonical line, inline comment reattached
    """
    if options.normalize_annotations:
        tokens = format_annotations(node.stub, node.include, node.exclude)
        tokens.extend(entry.extra_tokens)
    else:
        tokens = _source_tokens(line)

    indent = " " * (options.indent_step * level)
    base = trim_trailing_whitespace(" ".join([indent + node.display_name, *tokens]))

    _, inline_comment = split_inline_comment(line.content)
    if inline_comment:
        return f"{base} {inline_comment}"
    return base


def basic_normalize(text: str, options: FormatOptions) -> str:
    """Fallback pass: trailing whitespace and line endings only."""
    lines = split_lines(text)
    if options.trim_trailing_whitespace:
        lines = [trim_trailing_whitespace(line) for line in lines]
    return _output_eol(text, options).join(lines)


def format_structure_text(
    text: str, options: FormatOptions | None = None, **overrides: Any
) -> FormatResult:
    """
    Format structure file text into canonical form.

    Never raises on malformed input. Blank lines, full-line comments and
    inline comments keep their positions; formatting canonical text returns
    it unchanged.

    Params:
        text: Structure file text
        options: Formatter options
        **overrides: Individual option values

    Returns:
        FormatResult with the formatted text and the underlying parse

    Raises:
        InvalidOptionsError: If the option overrides are invalid
    """
    options = resolve_options(FormatOptions, options, overrides)
    parse_options = options.to_parse_options()
    result = parse_structure(text, parse_options)

    entry_lines = result.entry_lines
    flattened = flatten_nodes(result.root_nodes)
    by_line = {node.line: (node, level) for node, level in flattened}

    if len(flattened) != len(entry_lines) or any(
        line.line_number not in by_line for line in entry_lines
    ):
        logger.warning(
            "Structure has %d entry lines but %d nodes; skipping structural formatting",
            len(entry_lines),
            len(flattened),
        )
        return FormatResult(
            text=basic_normalize(text, options),
            original=text,
            result=result,
            used_fallback=True,
        )

    canonical: dict[int, str] = {}
    for line in entry_lines:
        node, level = by_line[line.line_number]
        entry, _ = parse_entry(line.content, line.line_number, parse_options)
        canonical[line.index] = format_node_line(node, level, line, entry, options)

    output_lines = []
    for line in result.lines:
        if line.index in canonical:
            output_lines.append(canonical[line.index])
        elif options.trim_trailing_whitespace:
            output_lines.append(trim_trailing_whitespace(line.raw))
        else:
            output_lines.append(line.raw)

    formatted = _output_eol(text, options).join(output_lines)
    logger.debug("Formatted %d lines (changed=%s)", len(output_lines), formatted != text)
    return FormatResult(text=formatted, original=text, result=result)
