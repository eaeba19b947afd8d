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

"""Diagnostic reporting for the checkers."""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from lsprotocol import types as lsp

from .models.nodes import JsonNode, PairNode, Range
from .utils.text_utils import line_starts, offset_to_position

Anchor = Union[JsonNode, PairNode, Range]

DIAGNOSTIC_SOURCE = "json-checker"


@dataclass(frozen=True)
class Diagnostic:
    message: str
    range: Range
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error
    tags: Tuple[lsp.DiagnosticTag, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity == lsp.DiagnosticSeverity.Error


class ErrorReporter:
    """Ordered collector of diagnostics for one check pass."""

    def __init__(self):
        self.errors: List[Diagnostic] = []

    def report(
        self,
        message: str,
        anchor: Anchor,
        severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
        tags: Iterable[lsp.DiagnosticTag] = (),
        deprecated: bool = False,
    ) -> Diagnostic:
        """Add a diagnostic.

        Args:
            message: Human readable message
            anchor: Node, pair or range the diagnostic points at
            severity: Diagnostic severity, Error when omitted
            tags: Extra diagnostic tags
            deprecated: Shorthand for adding the Deprecated tag
        """
        tag_list = list(tags)
        if deprecated and lsp.DiagnosticTag.Deprecated not in tag_list:
            tag_list.append(lsp.DiagnosticTag.Deprecated)
        rng = anchor if isinstance(anchor, Range) else anchor.range
        diagnostic = Diagnostic(message=message, range=rng, severity=severity, tags=tuple(tag_list))
        self.errors.append(diagnostic)
        return diagnostic

    def absorb(self, other: "ErrorReporter") -> None:
        self.errors.extend(other.errors)

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.errors)

    def to_lsp(self, text: str) -> List[lsp.Diagnostic]:
        """Convert collected diagnostics to LSP diagnostics for ``text``."""
        starts = line_starts(text)
        diagnostics = []
        for d in self.errors:
            start_line, start_char = offset_to_position(starts, d.range.start)
            end_line, end_char = offset_to_position(starts, d.range.end)
            diagnostics.append(lsp.Diagnostic(
                range=lsp.Range(
                    start=lsp.Position(line=start_line, character=start_char),
                    end=lsp.Position(line=end_line, character=end_char)
                ),
                message=d.message,
                severity=d.severity,
                tags=list(d.tags) or None,
                source=DIAGNOSTIC_SOURCE
            ))
        return diagnostics
