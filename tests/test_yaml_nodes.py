"""Tests for building node trees from JSON/YAML text."""

from __future__ import annotations

import pytest

from json_checker import validate_text
from json_checker.checker import number
from json_checker.exceptions import NodeConversionError
from json_checker.file_io.yaml_nodes import from_value, load_nodes, load_nodes_from_file
from json_checker.models.nodes import (
    JsonArrayNode,
    JsonBooleanNode,
    JsonNullNode,
    JsonNumberNode,
    JsonObjectNode,
    JsonStringNode,
    Range,
)


def test_json_object_offsets_match_source():
    text = '{"a": "x", "n": 12}'

    node = load_nodes(text)

    assert isinstance(node, JsonObjectNode)
    assert node.range == Range(0, len(text))
    first, second = node.children
    assert text[first.key.range.start:first.key.range.end] == '"a"'
    assert first.key.value == "a"
    assert text[second.value.range.start:second.value.range.end] == "12"


def test_scalar_kinds():
    node = load_nodes('[1, 2.5, true, null, "s", "true"]')

    assert isinstance(node, JsonArrayNode)
    kinds = [type(child) for child in node.children]
    assert kinds == [
        JsonNumberNode,
        JsonNumberNode,
        JsonBooleanNode,
        JsonNullNode,
        JsonStringNode,
        JsonStringNode,
    ]
    assert node.children[0].value == 1 and node.children[0].is_integer
    assert node.children[1].value == 2.5 and not node.children[1].is_integer
    assert node.children[2].value is True
    assert node.children[5].value == "true"


def test_block_yaml_is_accepted():
    text = "name: demo\nitems:\n  - 1\n  - 2\n"

    node = load_nodes(text)

    assert node.given_keys() == ["name", "items"]
    items = node.children[1].value
    assert [child.value for child in items.children] == [1, 2]
    assert text[items.children[1].range.start] == "2"


def test_empty_document_is_null():
    node = load_nodes("")

    assert isinstance(node, JsonNullNode)
    assert node.range == Range(0, 0)


def test_invalid_document_raises():
    with pytest.raises(NodeConversionError):
        load_nodes('{"a": [1, 2}')


def test_load_from_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text('{"k": "v"}', encoding="utf-8")

    node = load_nodes_from_file(path)

    assert node.given_keys() == ["k"]
    with pytest.raises(NodeConversionError):
        load_nodes_from_file(tmp_path / "missing.json")


def test_from_value():
    node = from_value({"a": [1, 2.0, None], "b": False, "c": "x"})

    assert isinstance(node, JsonObjectNode)
    values = {pair.key.value: pair.value for pair in node.children}
    assert isinstance(values["a"], JsonArrayNode)
    assert [type(c) for c in values["a"].children] == [JsonNumberNode, JsonNumberNode, JsonNullNode]
    assert values["a"].children[1].is_integer is False
    assert isinstance(values["b"], JsonBooleanNode)
    assert values["c"].value == "x"

    with pytest.raises(NodeConversionError):
        from_value({"bad": object()})


def test_json_exponent_numbers_are_floats():
    node = load_nodes('[1e5, -2E-3, 0.5e+2, 7, "1e5"]')

    numbers = node.children[:4]
    assert all(isinstance(child, JsonNumberNode) for child in numbers)
    assert [child.value for child in numbers] == [100000.0, -0.002, 50.0, 7]
    assert [child.is_integer for child in numbers] == [False, False, False, True]
    assert isinstance(node.children[4], JsonStringNode)


def test_exponent_number_passes_number_checker():
    assert validate_text(number(), "1e5").diagnostics == []
