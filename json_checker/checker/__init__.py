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

"""Composable checkers for JSON-like node trees."""

from .context import Checker, CheckerContext
from .registry import SchemaRegistry
from .util import expectation, extract, strip_namespace
from .primitives import (
    Property,
    PropertySpec,
    CheckerRecord,
    any_,
    any_of,
    as_property,
    boolean,
    deprecated,
    dispatch,
    float_range,
    having,
    int_range,
    list_of,
    literal,
    number,
    object_,
    opt,
    per_node,
    pick,
    record,
    ref,
    string,
    when,
)

__all__ = [
    'Checker', 'CheckerContext', 'SchemaRegistry', 'expectation', 'extract', 'strip_namespace',
    'Property', 'PropertySpec', 'CheckerRecord', 'as_property',
    'deprecated', 'dispatch', 'having', 'object_', 'opt', 'per_node', 'pick', 'record', 'when',
    'any_', 'any_of', 'boolean', 'float_range', 'int_range', 'list_of', 'literal', 'number', 'ref', 'string',
]
