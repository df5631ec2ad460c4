"""
Tests for loading constants from YAML and JSON documents.
"""

import pytest

from echo.style.constants import (
    ConstantDefinitionError,
    ResolverConfig,
    load_constants,
    parse_constant_entries,
)

YAML_DOCUMENT = """
constants:
  - {n: gap, t: Extent, v: 4px}
  - {n: wide_gap, t: Extent, v: "@gap*2"}
  - name: pad
    type: Insets
    value: "@gap @wide_gap"
  - {n: columns, v: 3}
"""


class TestParseConstantEntries:
    """Tests for raw entry parsing."""

    def test_yaml_with_short_keys(self):
        entries = parse_constant_entries(YAML_DOCUMENT)
        assert [e.name for e in entries] == ["gap", "wide_gap", "pad", "columns"]
        assert entries[0].type == "Extent"
        assert entries[2].value == "@gap @wide_gap"
        assert entries[3].value == "3"

    def test_json_list(self):
        entries = parse_constant_entries('[{"n": "gap", "v": "2px"}, {"name": "c", "value": "#fff"}]')
        assert [(e.name, e.value) for e in entries] == [("gap", "2px"), ("c", "#fff")]

    def test_json_object_with_constants(self):
        entries = parse_constant_entries('{"constants": [{"n": "gap", "v": "2px"}]}', format="json")
        assert entries[0].name == "gap"

    def test_object_without_constants_key_is_rejected(self):
        with pytest.raises(ConstantDefinitionError, match="no 'constants' key: gap"):
            parse_constant_entries("gap: 4px")
        with pytest.raises(ConstantDefinitionError):
            load_constants('{"items": []}')

    def test_empty_constants_list(self):
        assert parse_constant_entries("constants:\n") == []
        assert parse_constant_entries('{"constants": []}') == []

    def test_empty_document(self):
        assert parse_constant_entries("") == []
        assert parse_constant_entries("# nothing here\n") == []

    @pytest.mark.parametrize(
        "content",
        [
            '{"constants": [',
            "constants: [unclosed",
            "just a string",
            "constants: 12",
            "- plain item",
        ],
    )
    def test_invalid_documents(self, content):
        with pytest.raises(ConstantDefinitionError):
            parse_constant_entries(content)


class TestLoadConstants:
    """Tests for building a constant table from a document."""

    def test_builds_table_in_document_order(self):
        table = load_constants(YAML_DOCUMENT)
        assert [c.name for c in table] == ["gap", "wide_gap", "pad", "columns"]
        assert table.get("pad").is_composite
        assert table.get("wide_gap").source == 1

    def test_loaded_table_resolves(self):
        resolved = load_constants(YAML_DOCUMENT).resolve()
        assert resolved.value("wide_gap") == "8px"
        assert resolved.value("pad") == "4px 8px"
        assert resolved.numeric_values["columns"] == 3

    def test_uses_given_config(self):
        config = ResolverConfig(multi_valued_types=frozenset())
        table = load_constants(YAML_DOCUMENT, config=config)
        assert table.config is config
        assert not table.get("pad").is_composite

    def test_blank_value_is_rejected(self):
        with pytest.raises(ConstantDefinitionError, match="no value"):
            load_constants("- {n: gap, v: ''}")
