"""
Line classification for structure files.

Every physical line becomes exactly one `Line`, classified as blank, comment
or entry, with its indentation measured in spaces.
"""

import re

from attrs import frozen

from scaffoldtree.core.options import ParseOptions
from scaffoldtree.core.types import DiagnosticCode, LineKind
from scaffoldtree.parsing.diagnostics import Diagnostic, make_diagnostic

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
LEADING_WHITESPACE_PATTERN = re.compile(r"^(\s*)(.*)$", re.DOTALL)
COMMENT_PREFIXES = ("#", "//")


@frozen
class Line:
    """
    One physical line of a structure file.

    Params:
        index: 0-based line index
        line_number: 1-based line number
        raw: The line exactly as written (without its line terminator)
        kind: BLANK, COMMENT or ENTRY
        indent_width: Leading indentation in spaces (tabs count as one step)
        content: Everything after the leading whitespace
    """

    index: int
    line_number: int
    raw: str
    kind: LineKind
    indent_width: int
    content: str

    @property
    def is_entry(self) -> bool:
        return self.kind == LineKind.ENTRY


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF, keeping a trailing empty line."""
    return LINE_SPLIT_PATTERN.split(text)


def measure_indent(indent: str, indent_step: int) -> tuple[int, bool]:
    """
    Measure leading whitespace.

    Params:
        indent: The leading whitespace run
        indent_step: Width added for each tab

    Returns:
        Tuple of (width in spaces, whether a tab was seen)
    """
    width = 0
    has_tabs = False
    for char in indent:
        if char == " ":
            width += 1
        elif char == "\t":
            has_tabs = True
            width += indent_step
    return width, has_tabs


def classify_content(content: str) -> LineKind:
    trimmed = content.strip()
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith(COMMENT_PREFIXES):
        return LineKind.COMMENT
    return LineKind.ENTRY


def classify_lines(
    text: str, options: ParseOptions
) -> tuple[list[Line], list[Diagnostic]]:
    """
    Classify every physical line of a structure file.

    Never raises. Tabs in the indentation are converted to one indent step
    each; on entry lines they are reported as `indent-tabs`.

    Params:
        text: Raw structure file text
        options: Parser options (indent step and severity profile)

    Returns:
        Tuple of (one Line per physical line, tab diagnostics)
    """
    lines: list[Line] = []
    diagnostics: list[Diagnostic] = []

    for index, raw in enumerate(split_lines(text)):
        line_number = index + 1
        match = LEADING_WHITESPACE_PATTERN.match(raw)
        indent, content = match.group(1), match.group(2)
        width, has_tabs = measure_indent(indent, options.indent_step)
        kind = classify_content(content)

        if has_tabs and kind == LineKind.ENTRY:
            diagnostics.append(
                make_diagnostic(
                    DiagnosticCode.INDENT_TABS,
                    line_number,
                    "Tabs detected in indentation. Consider using spaces only for consistent levels.",
                    options,
                )
            )

        lines.append(
            Line(
                index=index,
                line_number=line_number,
                raw=raw,
                kind=kind,
                indent_width=width,
                content=content,
            )
        )

    return lines, diagnostics
