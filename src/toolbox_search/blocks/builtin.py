"""Stock block definitions with English message text.

Toolbox entries for these blocks usually carry only ``{"kind": "block", "type": ...}``,
so their searchable text comes from the definitions below.
"""

from __future__ import annotations

from typing import Any


def _dropdown(name: str, *options: tuple[str, str]) -> dict[str, Any]:
    return {"type": "field_dropdown", "name": name, "options": [list(option) for option in options]}


def _value(name: str, check: str | None = None) -> dict[str, Any]:
    arg: dict[str, Any] = {"type": "input_value", "name": name}
    if check:
        arg["check"] = check
    return arg


BUILTIN_BLOCK_DEFINITIONS: list[dict[str, Any]] = [
    # Logic
    {
        "type": "controls_if",
        "message0": "if %1",
        "args0": [_value("IF0", "Boolean")],
        "message1": "do %1",
        "args1": [{"type": "input_statement", "name": "DO0"}],
    },
    {
        "type": "logic_compare",
        "message0": "%1 %2 %3",
        "args0": [
            _value("A"),
            _dropdown("OP", ("=", "EQ"), ("≠", "NEQ"), ("<", "LT"), ("≤", "LTE"), (">", "GT"), ("≥", "GTE")),
            _value("B"),
        ],
    },
    {
        "type": "logic_operation",
        "message0": "%1 %2 %3",
        "args0": [_value("A", "Boolean"), _dropdown("OP", ("and", "AND"), ("or", "OR")), _value("B", "Boolean")],
    },
    {"type": "logic_negate", "message0": "not %1", "args0": [_value("BOOL", "Boolean")]},
    {"type": "logic_boolean", "message0": "%1", "args0": [_dropdown("BOOL", ("true", "TRUE"), ("false", "FALSE"))]},
    {"type": "logic_null", "message0": "null"},
    # Loops
    {
        "type": "controls_repeat_ext",
        "message0": "repeat %1 times",
        "args0": [_value("TIMES", "Number")],
        "message1": "do %1",
        "args1": [{"type": "input_statement", "name": "DO"}],
    },
    {
        "type": "controls_whileUntil",
        "message0": "%1 %2",
        "args0": [_dropdown("MODE", ("repeat while", "WHILE"), ("repeat until", "UNTIL")), _value("BOOL", "Boolean")],
        "message1": "do %1",
        "args1": [{"type": "input_statement", "name": "DO"}],
    },
    # Math
    {"type": "math_number", "message0": "%1", "args0": [{"type": "field_number", "name": "NUM", "value": 0}]},
    {
        "type": "math_arithmetic",
        "message0": "%1 %2 %3",
        "args0": [
            _value("A", "Number"),
            _dropdown("OP", ("+", "ADD"), ("-", "MINUS"), ("×", "MULTIPLY"), ("÷", "DIVIDE"), ("^", "POWER")),
            _value("B", "Number"),
        ],
    },
    {
        "type": "math_single",
        "message0": "%1 %2",
        "args0": [
            _dropdown(
                "OP",
                ("square root", "ROOT"),
                ("absolute", "ABS"),
                ("-", "NEG"),
                ("ln", "LN"),
                ("log10", "LOG10"),
                ("e^", "EXP"),
                ("10^", "POW10"),
            ),
            _value("NUM", "Number"),
        ],
    },
    {
        "type": "math_constrain",
        "message0": "constrain %1 low %2 high %3",
        "args0": [_value("VALUE", "Number"), _value("LOW", "Number"), _value("HIGH", "Number")],
    },
    {
        "type": "math_random_int",
        "message0": "random integer from %1 to %2",
        "args0": [_value("FROM", "Number"), _value("TO", "Number")],
    },
    # Text
    {"type": "text", "message0": "%1", "args0": [{"type": "field_input", "name": "TEXT", "text": ""}]},
    {"type": "text_join", "message0": "create text with"},
    {"type": "text_length", "message0": "length of %1", "args0": [_value("VALUE", ["String", "Array"])]},
    {"type": "text_isEmpty", "message0": "%1 is empty", "args0": [_value("VALUE", ["String", "Array"])]},
    {
        "type": "text_replace",
        "message0": "replace %1 with %2 in %3",
        "args0": [_value("FROM", "String"), _value("TO", "String"), _value("TEXT", "String")],
    },
    {
        "type": "text_changeCase",
        "message0": "%1 %2",
        "args0": [
            _dropdown("CASE", ("to UPPER CASE", "UPPERCASE"), ("to lower case", "LOWERCASE"), ("to Title Case", "TITLECASE")),
            _value("TEXT", "String"),
        ],
    },
    {"type": "text_print", "message0": "print %1", "args0": [_value("TEXT")]},
    # Lists
    {"type": "lists_create_empty", "message0": "create empty list"},
    {"type": "lists_create_with", "message0": "create list with"},
    {
        "type": "lists_repeat",
        "message0": "create list with item %1 repeated %2 times",
        "args0": [_value("ITEM"), _value("NUM", "Number")],
    },
    {"type": "lists_length", "message0": "length of %1", "args0": [_value("VALUE", ["String", "Array"])]},
    {"type": "lists_isEmpty", "message0": "%1 is empty", "args0": [_value("VALUE", ["String", "Array"])]},
    {"type": "lists_reverse", "message0": "reverse %1", "args0": [_value("LIST", "Array")]},
    {
        "type": "lists_sort",
        "message0": "sort %1 %2 %3",
        "args0": [
            _dropdown("TYPE", ("numeric", "NUMERIC"), ("alphabetic", "TEXT"), ("alphabetic, ignore case", "IGNORE_CASE")),
            _dropdown("DIRECTION", ("ascending", "1"), ("descending", "-1")),
            _value("LIST", "Array"),
        ],
    },
    {
        "type": "lists_split",
        "message0": "make %1 %2 with delimiter %3",
        "args0": [
            _dropdown("MODE", ("list from text", "SPLIT"), ("text from list", "JOIN")),
            _value("INPUT"),
            _value("DELIM", "String"),
        ],
    },
    # Variables
    {
        "type": "variables_set",
        "message0": "set %1 to %2",
        "args0": [{"type": "field_variable", "name": "VAR", "variable": "item"}, _value("VALUE")],
    },
    {
        "type": "math_change",
        "message0": "change %1 by %2",
        "args0": [{"type": "field_variable", "name": "VAR", "variable": "item"}, _value("DELTA", "Number")],
    },
]
