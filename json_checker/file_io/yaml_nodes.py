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

"""Build positioned node trees from JSON or YAML text.

Parsing is done by PyYAML's composer (``yaml.compose``), which keeps the
start/end marks of every node; JSON documents are read as YAML flow
content. Offsets are taken from ``Mark.index``.
"""

import logging
import re
from pathlib import Path
from typing import Any, Union

import yaml
from yaml.constructor import SafeConstructor

from ..exceptions import NodeConversionError
from ..models.nodes import (
    JsonArrayNode,
    JsonBooleanNode,
    JsonNode,
    JsonNullNode,
    JsonNumberNode,
    JsonObjectNode,
    JsonStringNode,
    PairNode,
    Range,
)

logger = logging.getLogger(__name__)

_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_NULL_TAG = "tag:yaml.org,2002:null"

_constructor = SafeConstructor()


class _JsonLoader(yaml.SafeLoader):
    """Safe loader that also resolves JSON exponent numbers such as ``1e5``."""


# YAML 1.1 floats need a dot; JSON allows an exponent alone. Added after the
# inherited resolvers so plain integers still resolve as ints.
_JsonLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(r"^-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?[eE][-+]?[0-9]+$"),
    list("-0123456789"),
)


def _range(node: yaml.nodes.Node) -> Range:
    return Range(node.start_mark.index, node.end_mark.index)


def _convert_key(node: yaml.nodes.Node) -> JsonStringNode:
    value = node.value if isinstance(node, yaml.nodes.ScalarNode) else ""
    return JsonStringNode(_range(node), value=str(value))


def _convert(node: yaml.nodes.Node) -> JsonNode:
    rng = _range(node)

    if isinstance(node, yaml.nodes.MappingNode):
        children = []
        for key_node, value_node in node.value:
            children.append(PairNode(
                range=Range(key_node.start_mark.index, value_node.end_mark.index),
                key=_convert_key(key_node),
                value=_convert(value_node),
            ))
        return JsonObjectNode(rng, children=children)

    if isinstance(node, yaml.nodes.SequenceNode):
        return JsonArrayNode(rng, children=[_convert(item) for item in node.value])

    if node.tag == _INT_TAG:
        return JsonNumberNode(rng, value=_constructor.construct_yaml_int(node), is_integer=True)
    if node.tag == _FLOAT_TAG:
        return JsonNumberNode(rng, value=_constructor.construct_yaml_float(node), is_integer=False)
    if node.tag == _BOOL_TAG:
        return JsonBooleanNode(rng, value=_constructor.construct_yaml_bool(node))
    if node.tag == _NULL_TAG:
        return JsonNullNode(rng)
    return JsonStringNode(rng, value=str(node.value))


def load_nodes(content: str) -> JsonNode:
    """Parse ``content`` into a node tree.

    An empty document becomes a null node at offset 0.

    Raises:
        NodeConversionError: If the content is not valid JSON/YAML
    """
    try:
        root = yaml.compose(content, Loader=_JsonLoader)
    except yaml.YAMLError as exc:
        raise NodeConversionError(f"Failed to parse document: {exc}") from exc

    if root is None:
        return JsonNullNode(Range.create(0))
    return _convert(root)


def load_nodes_from_file(file_path: Union[str, Path]) -> JsonNode:
    """Read a JSON/YAML file and parse it into a node tree.

    Raises:
        NodeConversionError: If the file cannot be read or parsed
    """
    path = Path(file_path)
    if not path.is_file():
        raise NodeConversionError(f"Document not found: {path}")

    logger.debug(f"Loading document: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NodeConversionError(f"Failed to read document {path}: {exc}") from exc
    return load_nodes(content)


def from_value(value: Any) -> JsonNode:
    """Build an unpositioned node tree from plain Python data.

    Raises:
        NodeConversionError: For values with no JSON counterpart
    """
    rng = Range.create(0)
    if value is None:
        return JsonNullNode(rng)
    if isinstance(value, bool):
        return JsonBooleanNode(rng, value=value)
    if isinstance(value, (int, float)):
        return JsonNumberNode(rng, value=value, is_integer=isinstance(value, int))
    if isinstance(value, str):
        return JsonStringNode(rng, value=value)
    if isinstance(value, (list, tuple)):
        return JsonArrayNode(rng, children=[from_value(item) for item in value])
    if isinstance(value, dict):
        return JsonObjectNode(rng, children=[
            PairNode(range=rng, key=JsonStringNode(rng, value=str(k)), value=from_value(v))
            for k, v in value.items()
        ])
    raise NodeConversionError(f"Cannot convert value of type {type(value).__name__} to a node")
