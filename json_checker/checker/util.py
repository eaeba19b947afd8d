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

from typing import List, Optional, Sequence

from ..models.expectation import JsonExpectation
from ..models.nodes import JsonNode, JsonStringNode, PairNode, null_placeholder
from .context import Checker, CheckerContext


def strip_namespace(value: str, namespace: str) -> str:
    """Drop a leading ``<namespace>:`` from a resource-like value."""
    prefix = f"{namespace}:"
    return value[len(prefix):] if namespace and value.startswith(prefix) else value


async def expectation(checker: Checker, ctx: CheckerContext) -> Optional[List[JsonExpectation]]:
    """Run ``checker`` only to learn what it expects.

    The checker sees a placeholder node one level deeper than ``ctx`` and a
    throw-away reporter, so nested objects stop harvesting their own fields.
    """
    node: JsonNode = null_placeholder()
    await checker(node, ctx.for_expectation())
    return node.expectation


def extract(key: str, children: Sequence[PairNode]) -> Optional[str]:
    """String value of the sibling named ``key``, if there is one."""
    pair = next((p for p in children if p.key is not None and p.key.value == key), None)
    if pair is not None and isinstance(pair.value, JsonStringNode):
        return pair.value.value
    return None
