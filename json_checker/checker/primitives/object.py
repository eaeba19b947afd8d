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

"""Object checkers and the resolvers that pick an object's property record.

A property record maps key names to a ``PropertySpec``: either a bare checker
or a :class:`Property` carrying the optional/deprecated flags. ``record`` and
``object_`` validate shape; ``dispatch``, ``pick``, ``when`` and ``having``
compute which record applies to a polymorphic object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from lsprotocol import types as lsp

from ...config import checker_config
from ...exceptions import SchemaDefinitionError
from ...locales import locale_or, locale_quote, localize
from ...models.expectation import (
    FieldExpectation,
    JsonObjectExpectation,
    string_expectations,
    typedoc_union,
)
from ...models.nodes import JsonNode, JsonObjectNode, JsonStringNode, PairNode, Range, null_placeholder
from ..context import Checker, CheckerContext
from ..util import expectation, strip_namespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Property:
    checker: Checker
    opt: bool = False
    deprecated: bool = False
    # documentation path segment inserted before the key, e.g. a dispatch case
    context: Optional[str] = None

    @property
    def skips_missing(self) -> bool:
        return self.opt or self.deprecated


PropertySpec = Union[Checker, Property]
CheckerRecord = Dict[str, PropertySpec]
Cases = Mapping[str, Union[CheckerRecord, Callable[[], CheckerRecord]]]


def as_property(spec: PropertySpec) -> Property:
    return spec if isinstance(spec, Property) else Property(checker=spec)


def opt(checker: Checker) -> Property:
    return Property(checker=checker, opt=True)


def deprecated(checker: Checker) -> Property:
    return Property(checker=checker, deprecated=True)


def _missing_anchor(node: JsonNode) -> Range:
    return Range.span(node.range.start, 1)


def _hover(path: str, node: JsonNode, doc: Optional[str]) -> str:
    fence = checker_config.hover_language
    text = f"```{fence}\n{path}: {typedoc_union(node.expectation)}\n```"
    if doc:
        text += f"\n******\n{doc}"
    return text


def object_(
    keys: Union[None, Sequence[str], Checker] = None,
    values: Optional[Callable[[str], PropertySpec]] = None,
) -> Checker:
    """Build an object checker.

    ``object_()`` accepts any object. With a list of ``keys`` the object has
    fixed fields whose specs come from ``values(key)``. With a checker as
    ``keys`` the object has dynamic keys: every key is checked by that
    checker and its value by ``values(key)``.

    Raises:
        SchemaDefinitionError: If a fixed key list contains duplicates
    """
    fixed_keys: Optional[List[str]] = None
    key_checker: Optional[Checker] = None
    if values is not None and keys is not None:
        if callable(keys):
            key_checker = keys
        else:
            fixed_keys = list(keys)
            duplicates = sorted({k for k in fixed_keys if fixed_keys.count(k) > 1})
            if duplicates:
                raise SchemaDefinitionError(f"Duplicate property keys in object schema: {duplicates}")

    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        object_expectation = JsonObjectExpectation()
        node.expectation = [object_expectation]
        if ctx.collects_expectation:
            if fixed_keys is not None:
                fields = []
                for key in fixed_keys:
                    prop = as_property(values(key))
                    fields.append(FieldExpectation(
                        key=key,
                        value=await expectation(prop.checker, ctx),
                        opt=prop.skips_missing,
                        deprecated=prop.deprecated,
                    ))
                object_expectation.fields = fields
            elif key_checker is not None:
                object_expectation.keys = string_expectations(await expectation(key_checker, ctx))

        if not isinstance(node, JsonObjectNode):
            ctx.err.report(localize('expected', localize('object')), node)
        elif fixed_keys is not None:
            await _check_fixed(node, ctx, fixed_keys, values)
        elif key_checker is not None:
            await _check_dynamic(node, ctx, key_checker, values)

    return check


async def _check_fixed(
    node: JsonObjectNode,
    ctx: CheckerContext,
    keys: List[str],
    values: Callable[[str], PropertySpec],
) -> None:
    given_keys = set(node.given_keys())
    for key in keys:
        if as_property(values(key)).skips_missing:
            continue
        if key not in given_keys:
            ctx.err.report(localize('json.checker.property.missing', locale_quote(key)), _missing_anchor(node))

    for pair in node.children:
        if pair.key is None:
            continue
        key = pair.key.value
        if key not in keys:
            ctx.err.report(
                localize('json.checker.property.unknown', locale_quote(key)),
                pair.key,
                lsp.DiagnosticSeverity.Warning,
            )
            continue

        prop = as_property(values(key))
        if prop.deprecated:
            ctx.err.report(
                localize('json.checker.property.deprecated', locale_quote(key)),
                pair.key,
                lsp.DiagnosticSeverity.Hint,
                deprecated=True,
            )
        prop_ctx = ctx.nested(prop.context).nested(key) if prop.context else ctx.nested(key)
        prop_node = pair.value if pair.value is not None else null_placeholder()
        await prop.checker(prop_node, prop_ctx)
        pair.key.hover = _hover(prop_ctx.path, prop_node, ctx.doc_lookup(prop_ctx.path))


async def _check_dynamic(
    node: JsonObjectNode,
    ctx: CheckerContext,
    key_checker: Checker,
    values: Callable[[str], PropertySpec],
) -> None:
    for pair in node.children:
        if pair.key is None:
            continue
        await key_checker(pair.key, ctx)
        if pair.value is not None:
            await as_property(values(pair.key.value)).checker(pair.value, ctx)


def record(properties: Mapping[str, PropertySpec]) -> Checker:
    """Fixed-key object checker for a property record."""
    normalized = {key: as_property(spec) for key, spec in properties.items()}
    return object_(list(normalized), normalized.__getitem__)


def dispatch(
    key: str,
    selector: Callable[[Optional[str], List[PairNode]], Checker],
) -> Checker:
    """Choose the object checker from the string value of sibling ``key``.

    The discriminant is not validated here; the selected checker treats it
    as an ordinary property.
    """
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        if not isinstance(node, JsonObjectNode):
            ctx.err.report(localize('expected', localize('object')), node)
            return
        pair = next((p for p in node.children if p.key is not None and p.key.value == key), None)
        value = pair.value.value if pair is not None and isinstance(pair.value, JsonStringNode) else None
        logger.debug(f"Dispatching on '{key}' = {value!r} at '{ctx.path}'")
        await selector(value, node.children)(node, ctx)

    return check


def per_node(builder: Callable[[JsonNode, CheckerContext], Checker]) -> Checker:
    """Checker built from the node itself, e.g. ``record(having(node, ctx, ...))``."""
    async def check(node: JsonNode, ctx: CheckerContext) -> None:
        await builder(node, ctx)(node, ctx)

    return check


def pick(
    value: Optional[str],
    cases: Mapping[str, CheckerRecord],
    namespace: Optional[str] = None,
) -> CheckerRecord:
    """Property record of the case named by ``value``.

    Every property of the chosen case documents itself under the case name.
    Unknown or missing values select no extra properties.
    """
    if value is None:
        return {}
    case = strip_namespace(value, checker_config.namespace if namespace is None else namespace)
    properties = cases.get(case)
    if properties is None:
        return {}
    return {key: replace(as_property(spec), context=case) for key, spec in properties.items()}


def when(
    value: Optional[str],
    values: Sequence[str],
    properties: CheckerRecord,
    not_properties: Optional[CheckerRecord] = None,
    namespace: Optional[str] = None,
) -> CheckerRecord:
    if value is None:
        return {}
    if strip_namespace(value, checker_config.namespace if namespace is None else namespace) not in values:
        return not_properties if not_properties is not None else {}
    return properties


def _resolve_case(case: Union[CheckerRecord, Callable[[], CheckerRecord]]) -> CheckerRecord:
    return case() if callable(case) else case


def having(node: JsonNode, ctx: CheckerContext, cases: Cases) -> CheckerRecord:
    """Property record of the case whose marker key is present on ``node``.

    Markers are tried in declaration order. When none is present one missing
    property diagnostic names every marker, and the returned record only
    documents each marker key as optional.
    """
    given_keys = set(node.given_keys()) if isinstance(node, JsonObjectNode) else set()
    marker = next((m for m in cases if m in given_keys), None)

    if marker is None:
        ctx.err.report(localize('json.checker.property.missing', locale_or(cases)), _missing_anchor(node))
        fallback: CheckerRecord = {}
        for m, case in cases.items():
            spec = _resolve_case(case).get(m)
            if spec is not None:
                fallback[m] = replace(as_property(spec), opt=True)
        return fallback

    logger.debug(f"Marker '{marker}' selected at '{ctx.path}'")
    return _resolve_case(cases[marker])
