"""
Tests for parser and formatter option models.
"""

import pytest
from pydantic import ValidationError

from scaffoldtree import (
    ErrorPolicy,
    FormatConfig,
    FormatOptions,
    InvalidOptionsError,
    ParseMode,
    ParseOptions,
)
from scaffoldtree.core.options import resolve_options


class TestParseOptions:
    """Tests for ParseOptions defaults and validation."""

    def test_defaults(self):
        options = ParseOptions()
        assert options.indent_step == 2
        assert options.mode == ParseMode.LOOSE
        assert options.policy == ErrorPolicy.COLLECT
        assert options.file_name == "<structure>"

    def test_string_values_are_accepted(self):
        options = ParseOptions(mode="strict", policy="collect")
        assert options.mode == ParseMode.STRICT
        assert options.policy == ErrorPolicy.COLLECT

    def test_fail_fast_forces_strict_mode(self):
        """Fail-fast parsing always reports with strict severities."""
        options = ParseOptions(policy="fail-fast", mode="loose")
        assert options.mode == ParseMode.STRICT
        assert options.is_strict

    @pytest.mark.parametrize("indent_step", [0, -2])
    def test_indent_step_must_be_positive(self, indent_step):
        with pytest.raises(ValidationError):
            ParseOptions(indent_step=indent_step)

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(ValidationError):
            ParseOptions(indent=4)


class TestResolveOptions:
    """Tests for merging options with keyword overrides."""

    def test_instance_without_overrides_is_returned_as_is(self):
        options = ParseOptions(indent_step=4)
        assert resolve_options(ParseOptions, options, {}) is options

    def test_overrides_win_over_instance(self):
        options = ParseOptions(indent_step=4, file_name="a.txt")
        merged = resolve_options(ParseOptions, options, {"indent_step": 3})
        assert merged.indent_step == 3
        assert merged.file_name == "a.txt"

    def test_invalid_override_raises_invalid_options_error(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            resolve_options(ParseOptions, None, {"indent_step": 0})
        assert exc_info.value.options_name == "ParseOptions"


class TestFormatOptionsFromConfig:
    """Tests for building formatter options from the scaffold config."""

    def test_missing_config_gives_defaults(self):
        assert FormatOptions.from_config(None) == FormatOptions()

    def test_format_section_indent_step_wins(self):
        options = FormatOptions.from_config(FormatConfig(indent_step=4), indent_step=3)
        assert options.indent_step == 4

    def test_falls_back_to_top_level_indent_step(self):
        options = FormatOptions.from_config({"enabled": True}, indent_step=3)
        assert options.indent_step == 3

    def test_raw_mapping_is_validated(self):
        options = FormatOptions.from_config(
            {"mode": "strict", "normalize_annotations": False, "sort_entries": True}
        )
        assert options.mode == ParseMode.STRICT
        assert options.normalize_annotations is False

    def test_invalid_mapping_raises(self):
        with pytest.raises(InvalidOptionsError):
            FormatOptions.from_config({"indent_step": 0})

    def test_parse_options_always_collect(self):
        parse_options = FormatOptions(indent_step=4, mode="strict").to_parse_options()
        assert parse_options.policy == ErrorPolicy.COLLECT
        assert parse_options.mode == ParseMode.STRICT
        assert parse_options.indent_step == 4
