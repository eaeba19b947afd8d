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

"""Entry points for checking a whole document."""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from lsprotocol import types as lsp

from .checker.context import Checker, CheckerContext, DocLookup
from .checker.registry import SchemaRegistry
from .file_io.yaml_nodes import load_nodes
from .locales import lookup_doc
from .models.nodes import JsonArrayNode, JsonNode, JsonObjectNode
from .report import Diagnostic, ErrorReporter

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    node: JsonNode
    reporter: ErrorReporter

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.reporter.errors

    @property
    def has_errors(self) -> bool:
        return self.reporter.has_errors

    def to_lsp(self, text: str) -> List[lsp.Diagnostic]:
        return self.reporter.to_lsp(text)

    def hover_at(self, offset: int) -> Optional[str]:
        return hover_at(self.node, offset)


async def validate_node(
    checker: Checker,
    node: JsonNode,
    *,
    path: str = "",
    registry: Optional[SchemaRegistry] = None,
    doc_lookup: Optional[DocLookup] = None,
) -> ValidationResult:
    """Check ``node`` against ``checker`` with a fresh context.

    Args:
        checker: Root checker of the schema
        node: Root node of the document
        path: Documentation path of the root, e.g. the schema name
        registry: Registry used to resolve ``ref`` checkers
        doc_lookup: Documentation lookup, defaults to the current locale
    """
    ctx = CheckerContext(
        err=ErrorReporter(),
        path=path,
        registry=registry,
        doc_lookup=doc_lookup or lookup_doc,
    )
    await checker(node, ctx)
    logger.debug(f"Checked '{path}': {len(ctx.err.errors)} diagnostic(s)")
    return ValidationResult(node=node, reporter=ctx.err)


def check(checker: Checker, node: JsonNode, **kwargs) -> ValidationResult:
    """Synchronous wrapper around :func:`validate_node`."""
    return asyncio.run(validate_node(checker, node, **kwargs))


def validate_text(checker: Checker, content: str, **kwargs) -> ValidationResult:
    """Parse JSON/YAML ``content`` and check it.

    Raises:
        NodeConversionError: If the content cannot be parsed
    """
    return check(checker, load_nodes(content), **kwargs)


def hover_at(node: JsonNode, offset: int) -> Optional[str]:
    """Hover text of the innermost property key covering ``offset``."""
    if isinstance(node, JsonObjectNode):
        for pair in node.children:
            if pair.key is not None and pair.key.range.contains(offset, end_inclusive=True):
                return pair.key.hover
            if pair.value is not None and pair.value.range.contains(offset, end_inclusive=True):
                return hover_at(pair.value, offset)
    elif isinstance(node, JsonArrayNode):
        for child in node.children:
            if child.range.contains(offset, end_inclusive=True):
                return hover_at(child, offset)
    return None
