"""
Tests for node path helpers.
"""

import pytest

from scaffoldtree.core.path_utils import (
    join_node_path,
    strip_trailing_slashes,
    to_posix_path,
)


class TestJoinNodePath:
    """Tests for join_node_path."""

    @pytest.mark.parametrize(
        "parent,segment,is_dir,expected",
        [
            (None, "src", True, "src/"),
            (None, "README.md", False, "README.md"),
            ("src/", "index.ts", False, "src/index.ts"),
            ("src/", "schema", True, "src/schema/"),
            ("src/schema/", "field.ts", False, "src/schema/field.ts"),
            ("src/", "nested\\deep", True, "src/nested/deep/"),
        ],
    )
    def test_join(self, parent, segment, is_dir, expected):
        assert join_node_path(parent, segment, is_dir) == expected


def test_to_posix_path_replaces_backslashes():
    assert to_posix_path("src\\schema\\index.ts") == "src/schema/index.ts"


def test_strip_trailing_slashes():
    assert strip_trailing_slashes("src//") == "src"
    assert strip_trailing_slashes("index.ts") == "index.ts"
