"""Unit tests for block text extraction."""

import pytest

from toolbox_search.blocks.models import BlockDefinition, ToolboxBlock
from toolbox_search.search.extraction import (
    extract_block_text,
    normalize_type_id,
    strip_placeholders,
)


pytestmark = pytest.mark.unit


def test_normalize_type_id_replaces_underscores():
    assert normalize_type_id("lists_create_with") == "lists create with"


def test_strip_placeholders_removes_arguments_and_references():
    assert strip_placeholders("replace %1 with %2 in %3").split() == ["replace", "with", "in"]
    assert strip_placeholders("%{BKY_MATH_ADD} %1 now").split() == ["now"]


def test_type_only_descriptor_contributes_type_text():
    assert extract_block_text({"kind": "block", "type": "math_constrain"}) == "math constrain"


def test_definition_messages_and_dropdowns_are_lowercased():
    definition = BlockDefinition.model_validate(
        {
            "type": "lists_sort",
            "message0": "Sort %1 %2",
            "args0": [
                {"type": "field_dropdown", "name": "TYPE", "options": [["Numeric", "NUMERIC"]]},
                {"type": "input_value", "name": "LIST"},
            ],
        }
    )

    text = extract_block_text({"type": "lists_sort"}, definition)

    assert text.split() == ["lists", "sort", "sort", "numeric"]


def test_image_dropdown_labels_use_alt_text(dropdown_alt_definition):
    definition = BlockDefinition.model_validate(dropdown_alt_definition)

    text = extract_block_text({"type": "searcher_dropdown_alt"}, definition)

    assert "sunny" in text
    assert "cloudy" in text
    assert "data:image" not in text


def test_inline_messages_on_descriptor_are_indexed():
    descriptor = {"type": "custom_thing", "message0": "launch rocket %1", "args0": [{"type": "input_value"}]}
    assert "launch rocket" in extract_block_text(descriptor)


def test_label_and_text_input_fields_contribute():
    definition = BlockDefinition.model_validate(
        {
            "type": "greeter",
            "message0": "%1 %2",
            "args0": [
                {"type": "field_label", "text": "Say"},
                {"type": "field_input", "name": "NAME", "text": "Hello"},
                {"type": "field_number", "name": "N", "value": 3},
            ],
        }
    )
    assert extract_block_text({"type": "greeter"}, definition).split() == ["greeter", "say", "hello"]


def test_shadow_stub_types_and_fields_contribute():
    descriptor = {
        "kind": "block",
        "type": "text_print",
        "inputs": {"TEXT": {"shadow": {"type": "text_multiline", "fields": {"TEXT": "Abracadabra"}}}},
    }

    text = extract_block_text(descriptor)

    assert "text multiline" in text
    assert "abracadabra" in text


def test_typed_toolbox_block_is_supported():
    block = ToolboxBlock(type="text_replace", inputs={"FROM": {"shadow": {"type": "text"}}})
    assert extract_block_text(block).split() == ["text", "replace", "text"]


def test_malformed_parts_contribute_nothing():
    descriptor = {
        "type": "broken_block",
        "message0": 42,
        "args0": "not a list",
        "inputs": {"A": "oops", "B": {"shadow": {"type": ["x"]}}, "C": {"shadow": {"type": "logic_null"}}},
    }

    assert extract_block_text(descriptor) == "broken block logic null"


def test_malformed_dropdown_options_are_skipped():
    definition = BlockDefinition.model_validate(
        {
            "type": "odd",
            "args0": [
                {"type": "field_dropdown", "options": [None, [], [5, "X"], ["kept", "K"], [{"src": "a.png"}, "IMG"]]},
                {"type": "field_dropdown", "options": "generateOptions"},
            ],
        }
    )
    assert extract_block_text({"type": "odd"}, definition) == "odd kept"


def test_image_option_without_alt_keeps_neighbouring_text():
    descriptor = {
        "type": "x",
        "message0": "launch rocket %1",
        "args0": [
            {"type": "field_dropdown", "name": "A", "options": [["fast", "F"], [{"src": "a", "alt": None}, "B"]]}
        ],
    }
    assert extract_block_text(descriptor).split() == ["x", "launch", "rocket", "fast"]


def test_bad_block_stub_keeps_its_shadow():
    descriptor = {"type": "x", "inputs": {"A": {"shadow": {"type": "text_replace"}, "block": "oops"}}}
    assert extract_block_text(descriptor) == "x text replace"


def test_non_string_field_name_keeps_field_text():
    descriptor = {"type": "x", "message0": "launch rocket", "args0": [{"type": "field_label", "name": 5, "text": "go"}]}
    assert extract_block_text(descriptor).split() == ["x", "launch", "rocket", "go"]


def test_unreadable_argument_is_skipped_alone():
    definition = BlockDefinition.model_validate(
        {
            "type": "mixed",
            "message0": "%1 %2 %3",
            "args0": ["junk", {"type": "field_label", "text": "first"}, {"type": "field_input", "text": "second"}],
        }
    )
    assert extract_block_text({"type": "mixed"}, definition).split() == ["mixed", "first", "second"]


@pytest.mark.parametrize("descriptor", [{}, {"kind": "block"}, {"type": ""}, None, "lists_sort"])
def test_descriptor_without_text_yields_empty_string(descriptor):
    assert extract_block_text(descriptor) == ""
