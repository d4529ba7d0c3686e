"""Unit tests for the block definition registry."""

import logging

import orjson
import pytest

from toolbox_search.blocks.builtin import BUILTIN_BLOCK_DEFINITIONS
from toolbox_search.blocks.registry import BlockDefinitionError, BlockDefinitionRegistry


pytestmark = pytest.mark.unit


class TestDefineBlocks:
    def test_registers_definitions_by_type(self):
        registry = BlockDefinitionRegistry()

        registered = registry.define_blocks_with_json_array(
            [{"type": "custom_one", "message0": "first"}, {"type": "custom_two", "message0": "second %1"}]
        )

        assert registered == ["custom_one", "custom_two"]
        assert "custom_one" in registry
        assert len(registry) == 2
        assert registry.get("custom_two").messages == ["second %1"]

    def test_get_unknown_or_empty_type_returns_none(self):
        registry = BlockDefinitionRegistry()
        assert registry.get("missing") is None
        assert registry.get("") is None
        assert registry.get(None) is None

    def test_numbered_messages_and_args_are_ordered(self):
        registry = BlockDefinitionRegistry(
            [
                {
                    "type": "two_rows",
                    "message1": "do %1",
                    "args1": [{"type": "input_statement", "name": "DO"}],
                    "message0": "if %1",
                    "args0": [{"type": "input_value", "name": "IF"}],
                }
            ]
        )

        definition = registry.get("two_rows")
        assert definition.messages == ["if %1", "do %1"]
        assert [field.name for field in definition.fields] == ["IF", "DO"]

    def test_redefinition_replaces_and_warns(self, caplog):
        registry = BlockDefinitionRegistry([{"type": "dup", "message0": "old"}])

        with caplog.at_level(logging.WARNING, logger="toolbox_search.blocks.registry"):
            registry.define_blocks_with_json_array([{"type": "dup", "message0": "new"}])

        assert registry.get("dup").messages == ["new"]
        assert "dup" in caplog.text

    @pytest.mark.parametrize("definition", [{"message0": "no type"}, {"type": ""}, {"type": 7}, "lists_sort"])
    def test_definition_without_type_is_rejected(self, definition):
        registry = BlockDefinitionRegistry()
        with pytest.raises(BlockDefinitionError):
            registry.define_blocks_with_json_array([definition])

    def test_invalid_field_values_are_blanked_not_rejected(self):
        definition = {
            "type": "odd_image",
            "message0": "pick %1 %2",
            "args0": [
                {"type": "field_dropdown", "options": [[{"src": "x.png", "width": "wide", "alt": "Wide"}, "X"]]},
                "not a field",
            ],
        }

        registry = BlockDefinitionRegistry([definition])

        registered = registry.get("odd_image")
        assert registered.messages == ["pick %1 %2"]
        assert [field.search_texts() for field in registered.fields] == [["Wide"]]


class TestBuiltins:
    def test_with_builtins_registers_every_stock_block(self):
        registry = BlockDefinitionRegistry.with_builtins()

        assert len(registry) == len(BUILTIN_BLOCK_DEFINITIONS)
        assert {"lists_sort", "lists_split", "math_constrain", "text_replace"} <= set(registry.types())

    def test_registries_are_independent(self):
        first = BlockDefinitionRegistry.with_builtins()
        second = BlockDefinitionRegistry.with_builtins()

        first.define_blocks_with_json_array([{"type": "only_in_first"}])

        assert "only_in_first" in first
        assert "only_in_first" not in second


class TestLoadJsonFile:
    def test_loads_array_of_definitions(self, tmp_path):
        path = tmp_path / "blocks.json"
        path.write_bytes(orjson.dumps([{"type": "from_file", "message0": "loaded from disk"}]))

        registry = BlockDefinitionRegistry()
        assert registry.load_json_file(path) == ["from_file"]
        assert registry.get("from_file").messages == ["loaded from disk"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(BlockDefinitionError, match="missing"):
            BlockDefinitionRegistry().load_json_file(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(BlockDefinitionError, match="not valid JSON"):
            BlockDefinitionRegistry().load_json_file(path)

    def test_non_array_payload_raises(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_bytes(orjson.dumps({"type": "lonely"}))
        with pytest.raises(BlockDefinitionError, match="JSON array"):
            BlockDefinitionRegistry().load_json_file(str(path))
