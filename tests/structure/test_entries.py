"""
Tests for the entry model handed to the apply engine.
"""

import pytest
from pydantic import TypeAdapter

from scaffoldtree import (
    DiagnosticCode,
    DirEntry,
    FileEntry,
    NodeKind,
    StructureParseError,
    flatten_entries,
    parse_structure,
    parse_structure_text,
    render_structure_text,
    to_structure_entries,
)
from scaffoldtree.structure import StructureEntry


class TestToStructureEntries:
    """Tests for nested entry conversion."""

    def test_nested_entries(self, nested_structure_text):
        entries = to_structure_entries(parse_structure(nested_structure_text).root_nodes)

        assert [e.path for e in entries] == ["src/", "README.md"]
        src = entries[0]
        assert isinstance(src, DirEntry)
        assert src.stub == "root"
        assert [c.path for c in src.children] == ["src/index.ts", "src/schema/"]
        schema = src.children[1]
        assert schema.include == ["schema/**"]
        assert schema.exclude == ["schema/legacy/**"]
        assert isinstance(schema.children[0], FileEntry)
        assert schema.children[0].stub is None

    def test_entries_serialize(self):
        entries = to_structure_entries(parse_structure("src/ @stub:x\n  a.ts").root_nodes)
        dumped = entries[0].model_dump(exclude_none=True)

        assert dumped == {
            "path": "src/",
            "stub": "x",
            "type": "dir",
            "children": [{"path": "src/a.ts", "type": "file"}],
        }

    def test_entries_validate_from_plain_data(self):
        adapter = TypeAdapter(list[StructureEntry])
        entries = adapter.validate_python(
            [{"type": "dir", "path": "src/", "children": [{"type": "file", "path": "src/a.ts"}]}]
        )
        assert isinstance(entries[0], DirEntry)
        assert isinstance(entries[0].children[0], FileEntry)


class TestFlattenEntries:
    """Tests for the flat entry list."""

    def test_depth_first_order(self, nested_structure_text):
        flat = flatten_entries(parse_structure(nested_structure_text).root_nodes)

        assert [(e.path, e.kind) for e in flat] == [
            ("src/", NodeKind.DIR),
            ("src/index.ts", NodeKind.FILE),
            ("src/schema/", NodeKind.DIR),
            ("src/schema/index.ts", NodeKind.FILE),
            ("src/schema/field.ts", NodeKind.FILE),
            ("README.md", NodeKind.FILE),
        ]
        assert flat[2].stub == "schema"
        assert flat[2].line == 5


class TestParseStructureText:
    """Tests for the fail-fast production path."""

    def test_valid_text(self, nested_structure_text):
        entries = parse_structure_text("structure.txt", nested_structure_text)
        assert [e.path for e in entries] == ["src/", "README.md"]

    def test_indent_step(self):
        entries = parse_structure_text("s.txt", "src/\n    a.ts", indent_step=4)
        assert entries[0].children[0].path == "src/a.ts"

    @pytest.mark.parametrize(
        "text,code",
        [
            ("src/\n  a:b.ts", DiagnosticCode.PATH_COLON),
            ("a.ts\n  b.ts", DiagnosticCode.CHILD_OF_FILE),
            ("src/\n      a.ts", DiagnosticCode.INDENT_SKIP_LEVEL),
        ],
    )
    def test_violations_raise(self, text, code):
        with pytest.raises(StructureParseError) as exc_info:
            parse_structure_text("app.txt", text)

        assert exc_info.value.code == code
        assert exc_info.value.line == 2
        assert "app.txt" in str(exc_info.value)


class TestRenderStructureText:
    """Tests for rendering entries back to structure text."""

    def test_render_round_trips_through_parser(self, nested_structure_text):
        entries = to_structure_entries(parse_structure(nested_structure_text).root_nodes)
        rendered = render_structure_text(entries)

        assert rendered == "\n".join(
            [
                "src/ @stub:root",
                "  index.ts",
                "  schema/ @stub:schema @include:schema/** @exclude:schema/legacy/**",
                "    index.ts",
                "    field.ts",
                "README.md",
            ]
        )
        reparsed = to_structure_entries(parse_structure(rendered).root_nodes)
        assert reparsed == entries

    def test_render_custom_indent_and_missing_slash(self):
        entries = [DirEntry(path="app", children=[FileEntry(path="app/main.py")])]
        assert render_structure_text(entries, indent_step=4) == "app/\n    main.py"
