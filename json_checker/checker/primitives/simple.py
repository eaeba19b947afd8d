# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Leaf and collection checkers."""

from typing import List, Optional, Sequence, Union

from ...config import checker_config
from ...exceptions import SchemaDefinitionError
from ...locales import locale_or, locale_quote, localize
from ...models.expectation import JsonArrayExpectation, JsonExpectation, JsonStringExpectation
from ...models.nodes import (
    JsonArrayNode,
    JsonBooleanNode,
    JsonNode,
    JsonNumberNode,
    JsonStringNode,
)
from ...report import ErrorReporter
from ..context import Checker, CheckerContext
from ..util import expectation, strip_namespace


Number = Union[int, float]


def any_() -> Checker:
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        node.expectation = [JsonExpectation(type='json:any', typedoc='Any')]

    return check


def boolean() -> Checker:
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        node.expectation = [JsonExpectation(type='json:boolean', typedoc='Boolean')]
        if not isinstance(node, JsonBooleanNode):
            ctx.err.report(localize('expected', localize('boolean')), node)

    return check


def string() -> Checker:
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        node.expectation = [JsonStringExpectation()]
        if not isinstance(node, JsonStringNode):
            ctx.err.report(localize('expected', localize('string')), node)

    return check


def literal(values: Sequence[str], namespace: Optional[str] = None) -> Checker:
    """String restricted to ``values``; namespaced spellings are accepted.

    ``namespace`` defaults to the configured one, read when the node is checked.
    """
    allowed = list(values)
    typedoc = f"String({' | '.join(repr(v) for v in allowed)})"

    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        node.expectation = [JsonStringExpectation(typedoc=typedoc, values=list(allowed))]
        if not isinstance(node, JsonStringNode):
            ctx.err.report(localize('expected', localize('string')), node)
        elif strip_namespace(node.value, checker_config.namespace if namespace is None else namespace) not in allowed:
            ctx.err.report(localize('expected-got', locale_or(allowed), locale_quote(node.value)), node)

    return check


def _number(min_value: Optional[Number], max_value: Optional[Number], integer: bool) -> Checker:
    label = 'integer' if integer else 'number'
    typedoc = 'Integer' if integer else 'Number'
    if min_value is not None or max_value is not None:
        lo = '' if min_value is None else min_value
        hi = '' if max_value is None else max_value
        typedoc = f"{typedoc}({lo}..{hi})"

    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        node.expectation = [JsonExpectation(type='json:number', typedoc=typedoc)]
        if not isinstance(node, JsonNumberNode) or (integer and not node.is_integer):
            ctx.err.report(localize('expected', localize(label)), node)
        elif (min_value is not None and node.value < min_value) or (max_value is not None and node.value > max_value):
            lo = '-∞' if min_value is None else min_value
            hi = '∞' if max_value is None else max_value
            ctx.err.report(localize('expected', localize('number.between', lo, hi)), node)

    return check


def number() -> Checker:
    return _number(None, None, integer=False)


def int_range(min_value: Optional[int] = None, max_value: Optional[int] = None) -> Checker:
    return _number(min_value, max_value, integer=True)


def float_range(min_value: Optional[float] = None, max_value: Optional[float] = None) -> Checker:
    return _number(min_value, max_value, integer=False)


def list_of(item: Checker) -> Checker:
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        array_expectation = JsonArrayExpectation()
        node.expectation = [array_expectation]
        if ctx.collects_expectation:
            array_expectation.items = await expectation(item, ctx)

        if not isinstance(node, JsonArrayNode):
            ctx.err.report(localize('expected', localize('array')), node)
            return
        for child in node.children:
            await item(child, ctx)

    return check


def any_of(checkers: Sequence[Checker]) -> Checker:
    """Accept a node matching any of ``checkers``.

    Each alternative is tried against a throw-away reporter. The first one
    producing no diagnostics at all wins; failing that, the first one without
    errors, and otherwise the first alternative. The winner is then run for
    real so its diagnostics and hover text are the ones kept. The node's
    expectation is the union of all alternatives.
    """
    alternatives = list(checkers)
    if not alternatives:
        return any_()

    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        expectations: List[JsonExpectation] = []
        clean: Optional[Checker] = None
        passing: Optional[Checker] = None
        for alternative in alternatives:
            trial = ErrorReporter()
            await alternative(node, ctx.with_reporter(trial))
            expectations.extend(node.expectation or [])
            if clean is None and not trial.errors:
                clean = alternative
            if passing is None and not trial.has_errors:
                passing = alternative

        selected = clean or passing or alternatives[0]
        await selected(node, ctx)
        node.expectation = expectations

    return check


def ref(name: str) -> Checker:
    """Checker registered as ``name`` in the context's registry."""
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        if ctx.registry is None:
            raise SchemaDefinitionError(f"Schema reference '{name}' used without a registry")
        resolved = await ctx.registry.resolve(name)
        await resolved(node, ctx)

    return check
