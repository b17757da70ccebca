"""
Relative depth resolution for entry lines.

Depth is a function of the current entry's indentation and the previous
entry line only. The resolver is a pure step function over an immutable
`DepthState`; the parser folds it over the entry lines in source order.

Rules for an entry with indentation `width` after an entry with
indentation `prev` at depth `prev_depth`:

- first entry: depth 0
- width > prev: one level deeper (`indent-skip-level` if the jump is more
  than one step); under a file the entry stays a sibling instead and
  `child-of-file-loose` / `child-of-file` is reported
- width == prev: same depth
- width < prev: up round((prev - width) / step) levels, clamped at 0
  (`indent-misaligned` if the decrease is not a multiple of the step)
"""

from attrs import evolve, frozen

from scaffoldtree.core.options import ParseOptions
from scaffoldtree.core.types import DiagnosticCode
from scaffoldtree.parsing.diagnostics import (
    Diagnostic,
    child_of_file_code,
    make_diagnostic,
)
from scaffoldtree.parsing.lines import Line


@frozen
class DepthState:
    """Accumulator carried from one entry line to the next."""

    previous_indent_width: int | None = None
    previous_depth: int | None = None
    previous_was_file: bool = False

    @property
    def is_initial(self) -> bool:
        return self.previous_indent_width is None or self.previous_depth is None

    def advance(self, width: int, depth: int, is_file: bool) -> "DepthState":
        """State after an entry line at `width`/`depth` of the given kind."""
        return DepthState(
            previous_indent_width=width, previous_depth=depth, previous_was_file=is_file
        )


@frozen
class DepthResolution:
    """Result of resolving one entry line."""

    depth: int
    diagnostics: tuple[Diagnostic, ...]
    state: DepthState

    def commit(self, is_file: bool) -> DepthState:
        """Successor state once the entry kind of the line is known."""
        return evolve(self.state, previous_was_file=is_file)


def _round_half_up(value: float) -> int:
    # Half-step dedents round up (1.5 -> 2), unlike round()
    return int(value + 0.5)


def resolve_depth(
    state: DepthState, line: Line, options: ParseOptions
) -> DepthResolution:
    """
    Resolve the logical depth of one entry line.

    Params:
        state: Accumulator from the previous entry line
        line: The entry line being resolved
        options: Parser options (indent step and severity profile)

    Returns:
        DepthResolution with the depth, diagnostics and the successor state
        (the successor keeps `previous_was_file` until `commit` is called)
    """
    width = max(line.indent_width, 0)
    step = options.indent_step
    diagnostics: list[Diagnostic] = []

    if state.is_initial:
        depth = 0
    else:
        prev_width = state.previous_indent_width
        prev_depth = state.previous_depth

        if width > prev_width:
            if state.previous_was_file:
                diagnostics.append(
                    make_diagnostic(
                        child_of_file_code(options),
                        line.line_number,
                        "Entry appears indented under a file; treating it as a sibling of the file instead of a child.",
                        options,
                    )
                )
                depth = prev_depth
            else:
                if width - prev_width > step:
                    diagnostics.append(
                        make_diagnostic(
                            DiagnosticCode.INDENT_SKIP_LEVEL,
                            line.line_number,
                            f"Indentation jumps from {prev_width} to {width} spaces; treating as one level deeper.",
                            options,
                        )
                    )
                depth = prev_depth + 1
        elif width == prev_width:
            depth = prev_depth
        else:
            diff = prev_width - width
            if diff % step != 0:
                diagnostics.append(
                    make_diagnostic(
                        DiagnosticCode.INDENT_MISALIGNED,
                        line.line_number,
                        f"Indentation decreases from {prev_width} to {width} spaces, which is not a multiple of indent step ({step}).",
                        options,
                    )
                )
            depth = max(prev_depth - _round_half_up(diff / step), 0)

    return DepthResolution(
        depth=depth,
        diagnostics=tuple(diagnostics),
        state=state.advance(width, depth, state.previous_was_file),
    )
