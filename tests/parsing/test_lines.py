"""
Tests for line classification.
"""

import pytest

from scaffoldtree import DiagnosticCode, ParseOptions, Severity
from scaffoldtree.core.types import LineKind
from scaffoldtree.parsing.lines import classify_lines, measure_indent, split_lines


class TestSplitLines:
    """Tests for physical line splitting."""

    def test_lf_and_crlf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_trailing_newline_keeps_empty_last_line(self):
        assert split_lines("a\n") == ["a", ""]


class TestClassifyLines:
    """Tests for classify_lines."""

    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("", LineKind.BLANK),
            ("    ", LineKind.BLANK),
            ("# comment", LineKind.COMMENT),
            ("   // another comment", LineKind.COMMENT),
            ("src/", LineKind.ENTRY),
            ("  index.ts # inline", LineKind.ENTRY),
        ],
    )
    def test_kinds(self, raw, kind):
        lines, _ = classify_lines(raw, ParseOptions())
        assert lines[0].kind == kind

    def test_one_line_per_physical_line(self):
        text = "src/\r\n  index.ts\n\n# done"
        lines, diagnostics = classify_lines(text, ParseOptions())

        assert [line.line_number for line in lines] == [1, 2, 3, 4]
        assert [line.index for line in lines] == [0, 1, 2, 3]
        assert lines[1].raw == "  index.ts"
        assert lines[1].indent_width == 2
        assert lines[1].content == "index.ts"
        assert diagnostics == []

    def test_tabs_count_as_one_step_and_are_reported(self):
        lines, diagnostics = classify_lines("src/\n\tschema/", ParseOptions(indent_step=4))

        assert lines[1].indent_width == 4
        assert len(diagnostics) == 1
        assert diagnostics[0].code == DiagnosticCode.INDENT_TABS
        assert diagnostics[0].line == 2
        assert diagnostics[0].severity == Severity.INFO

    def test_tabs_are_warnings_in_strict_mode(self):
        _, diagnostics = classify_lines("src/\n\tschema/", ParseOptions(mode="strict"))
        assert diagnostics[0].severity == Severity.WARNING

    def test_tabs_on_comment_lines_are_not_reported(self):
        _, diagnostics = classify_lines("\t# comment\n\t\n", ParseOptions())
        assert diagnostics == []


def test_measure_indent_mixes_spaces_and_tabs():
    assert measure_indent(" \t ", 2) == (4, True)
    assert measure_indent("    ", 2) == (4, False)
