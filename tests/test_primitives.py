"""Tests for leaf, collection and reference checkers."""

from __future__ import annotations

import pytest

from json_checker import check, validate_text
from json_checker.checker import (
    SchemaRegistry,
    any_,
    any_of,
    boolean,
    float_range,
    int_range,
    list_of,
    literal,
    number,
    opt,
    record,
    ref,
    string,
)
from json_checker.exceptions import SchemaDefinitionError, UnknownSchemaError
from json_checker.models.expectation import JsonArrayExpectation, JsonObjectExpectation


def _messages(result):
    return [d.message for d in result.diagnostics]


@pytest.mark.parametrize(
    "checker, text, expected",
    [
        (boolean(), "true", []),
        (boolean(), '"true"', ["Expected a boolean"]),
        (string(), '"x"', []),
        (string(), "1", ["Expected a string"]),
        (number(), "1.5", []),
        (number(), "null", ["Expected a number"]),
        (int_range(), "2", []),
        (int_range(), "2.5", ["Expected an integer"]),
        (int_range(0, 3), "4", ["Expected a number between 0 and 3"]),
        (int_range(min_value=1), "0", ["Expected a number between 1 and ∞"]),
        (float_range(0.0, 1.0), "0.5", []),
        (float_range(0.0, 1.0), "1", []),
        (float_range(max_value=1.0), "1.5", ["Expected a number between -∞ and 1.0"]),
        (any_(), "[1, {}]", []),
    ],
)
def test_leaf_checkers(checker, text, expected):
    assert _messages(validate_text(checker, text)) == expected


def test_literal_accepts_namespaced_values():
    checker = literal(["stone", "dirt"])

    assert validate_text(checker, '"stone"').diagnostics == []
    assert validate_text(checker, '"minecraft:dirt"').diagnostics == []
    assert _messages(validate_text(checker, '"sand"')) == ["Expected “stone” or “dirt” but got “sand”"]

    expectation = validate_text(checker, '"stone"').node.expectation[0]
    assert expectation.values == ["stone", "dirt"]
    assert expectation.typedoc == "String('stone' | 'dirt')"


def test_list_of_checks_every_item():
    checker = list_of(int_range())

    result = validate_text(checker, '[1, "a", 3, true]')

    assert _messages(result) == ["Expected an integer", "Expected an integer"]
    assert _messages(validate_text(checker, "{}")) == ["Expected an array"]

    array_expectation = result.node.expectation[0]
    assert isinstance(array_expectation, JsonArrayExpectation)
    assert array_expectation.items[0].typedoc == "Integer"


def test_any_of_keeps_the_matching_alternative():
    checker = any_of([string(), record({"name": string()})])

    assert validate_text(checker, '"x"').diagnostics == []
    assert validate_text(checker, '{"name": "x"}').diagnostics == []

    result = validate_text(checker, '{"name": "x"}')
    assert [e.typedoc for e in result.node.expectation] == ["String", "Object"]


def test_any_of_reports_first_alternative_when_nothing_matches():
    checker = any_of([string(), boolean()])

    assert _messages(validate_text(checker, "1")) == ["Expected a string"]


def test_any_of_prefers_exact_match_over_warnings():
    checker = any_of([
        record({"a": string()}),
        record({"a": string(), "b": string()}),
    ])

    assert validate_text(checker, '{"a": "x", "b": "y"}').diagnostics == []


def test_any_of_keeps_warnings_when_no_alternative_is_clean():
    checker = any_of([string(), record({"a": string()})])

    result = validate_text(checker, '{"a": "x", "b": "y"}')

    assert [d.message for d in result.diagnostics] == ["Unknown property “b”"]


def test_any_of_hover_comes_from_selected_alternative():
    checker = any_of([record({"a": number()}), record({"a": string()})])

    result = validate_text(checker, '{"a": "x"}', path="root")

    assert result.diagnostics == []
    assert result.node.children[0].key.hover == "```typescript\nroot.a: String\n```"


def test_ref_resolves_self_referential_schema():
    registry = SchemaRegistry()
    registry.register("tree", record({
        "name": string(),
        "children": opt(list_of(ref("tree"))),
    }))
    checker = ref("tree")

    result = validate_text(
        checker,
        '{"name": "root", "children": [{"name": "leaf"}, {"children": []}]}',
        registry=registry,
    )

    assert _messages(result) == ["Missing property “name”"]
    fields = result.node.expectation[0].fields
    assert [f.key for f in fields] == ["name", "children"]
    assert fields[1].value[0].items is None

    nested = result.node.children[1].value.children[0].expectation[0]
    assert isinstance(nested, JsonObjectExpectation)
    assert [f.key for f in nested.fields] == ["name", "children"]


def test_registry_loader_runs_once():
    registry = SchemaRegistry()
    loads = []

    async def load():
        loads.append("leaf")
        return string()

    registry.register_loader("leaf", load)
    checker = list_of(ref("leaf"))

    result = validate_text(checker, '["a", 1, "c"]', registry=registry)

    assert _messages(result) == ["Expected a string"]
    assert loads == ["leaf"]
    assert "leaf" in registry
    assert registry.names() == ["leaf"]


def test_registry_keeps_loader_after_failure():
    registry = SchemaRegistry()
    calls = []

    async def load():
        calls.append("load")
        if len(calls) == 1:
            raise OSError("schema file unavailable")
        return string()

    registry.register_loader("x", load)

    with pytest.raises(OSError):
        validate_text(ref("x"), '"a"', registry=registry)

    assert "x" in registry
    assert validate_text(ref("x"), '"a"', registry=registry).diagnostics == []
    assert calls == ["load", "load"]


def test_registry_rejects_duplicates_and_unknown_names():
    registry = SchemaRegistry()
    registry.register("a", string())

    with pytest.raises(SchemaDefinitionError):
        registry.register("a", string())

    with pytest.raises(UnknownSchemaError):
        validate_text(ref("b"), '"x"', registry=registry)


def test_ref_without_registry_is_a_schema_error():
    with pytest.raises(SchemaDefinitionError):
        check(ref("a"), validate_text(string(), '"x"').node)
