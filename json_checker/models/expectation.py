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

"""Expectation metadata attached to nodes for hover and documentation.

Expectations describe what a checker accepts. They are written while
checking and read by editor tooling afterwards; they never influence the
outcome of a check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class JsonExpectation:
    type: str
    typedoc: str


@dataclass
class FieldExpectation:
    key: str
    value: Optional[List[JsonExpectation]] = None
    opt: bool = False
    deprecated: bool = False


@dataclass
class JsonStringExpectation(JsonExpectation):
    type: str = "json:string"
    typedoc: str = "String"
    values: Optional[List[str]] = None


@dataclass
class JsonObjectExpectation(JsonExpectation):
    type: str = "json:object"
    typedoc: str = "Object"
    fields: Optional[List[FieldExpectation]] = None
    keys: Optional[List[JsonStringExpectation]] = None


@dataclass
class JsonArrayExpectation(JsonExpectation):
    type: str = "json:array"
    typedoc: str = "Array"
    items: Optional[List[JsonExpectation]] = None


def typedoc_union(expectations: Optional[List[JsonExpectation]]) -> str:
    """Render type labels the way hover signatures show them."""
    return " | ".join(e.typedoc for e in expectations or [])


def string_expectations(expectations: Optional[List[JsonExpectation]]) -> List[JsonStringExpectation]:
    return [e for e in expectations or [] if isinstance(e, JsonStringExpectation)]
