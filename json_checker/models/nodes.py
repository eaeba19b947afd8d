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

"""Positioned tree nodes consumed by the checkers.

Ranges are character offsets into the source text, ``end`` exclusive.
Every node carries an ``expectation`` slot that checkers fill in for
documentation purposes; string nodes used as property keys additionally
receive ``hover`` text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from .expectation import JsonExpectation


@dataclass(frozen=True)
class Range:
    start: int
    end: int

    @classmethod
    def create(cls, start: int, end: Optional[int] = None) -> "Range":
        return cls(start, start if end is None else end)

    @classmethod
    def span(cls, start: int, length: int = 1) -> "Range":
        return cls(start, start + length)

    def contains(self, offset: int, end_inclusive: bool = False) -> bool:
        if end_inclusive:
            return self.start <= offset <= self.end
        return self.start <= offset < self.end


@dataclass(eq=False)
class JsonNode:
    range: Range
    expectation: Optional[List["JsonExpectation"]] = field(default=None, init=False)

    type = "json:unknown"


@dataclass(eq=False)
class JsonNullNode(JsonNode):
    type = "json:null"


@dataclass(eq=False)
class JsonBooleanNode(JsonNode):
    value: bool = False
    type = "json:boolean"


@dataclass(eq=False)
class JsonNumberNode(JsonNode):
    value: Union[int, float] = 0
    is_integer: bool = True
    type = "json:number"


@dataclass(eq=False)
class JsonStringNode(JsonNode):
    value: str = ""
    hover: Optional[str] = field(default=None, init=False)
    type = "json:string"


@dataclass(eq=False)
class PairNode:
    range: Range
    key: Optional[JsonStringNode] = None
    value: Optional[JsonNode] = None


@dataclass(eq=False)
class JsonArrayNode(JsonNode):
    children: List[JsonNode] = field(default_factory=list)
    type = "json:array"


@dataclass(eq=False)
class JsonObjectNode(JsonNode):
    children: List[PairNode] = field(default_factory=list)
    type = "json:object"

    def given_keys(self) -> List[str]:
        """Key names in input order, skipping pairs without a key."""
        return [pair.key.value for pair in self.children if pair.key is not None]


def null_placeholder() -> JsonNullNode:
    """Synthetic null used where a pair has no value."""
    return JsonNullNode(Range.create(0))
