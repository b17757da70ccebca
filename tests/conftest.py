"""
Shared test fixtures and utilities for the scaffoldtree test suite.
"""

import pytest


@pytest.fixture
def nested_structure_text():
    """A clean, annotated structure file used across parser and formatter tests."""
    return "\n".join(
        [
            "# project layout",
            "src/ @stub:root",
            "  index.ts # entry point",
            "",
            "  schema/ @stub:schema @include:schema/** @exclude:schema/legacy/**",
            "    index.ts",
            "    field.ts",
            "README.md",
        ]
    )
