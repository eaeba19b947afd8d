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

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from ..locales import lookup_doc
from ..models.nodes import JsonNode
from ..report import ErrorReporter

if TYPE_CHECKING:
    from .registry import SchemaRegistry

DocLookup = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class CheckerContext:
    """Per-call state threaded through a check.

    ``depth`` is the expectation depth guard: expectations are only harvested
    while it is at most zero. ``path`` is the dotted documentation path of
    the node being checked.
    """

    err: ErrorReporter = field(default_factory=ErrorReporter)
    depth: int = 0
    path: str = ""
    doc_lookup: DocLookup = lookup_doc
    registry: Optional["SchemaRegistry"] = None

    def nested(self, segment: str) -> "CheckerContext":
        path = f"{self.path}.{segment}" if self.path else segment
        return replace(self, path=path)

    def for_expectation(self) -> "CheckerContext":
        return replace(self, depth=self.depth + 1, err=ErrorReporter())

    def with_reporter(self, err: ErrorReporter) -> "CheckerContext":
        return replace(self, err=err)

    @property
    def collects_expectation(self) -> bool:
        return self.depth <= 0


Checker = Callable[[JsonNode, CheckerContext], Awaitable[None]]
