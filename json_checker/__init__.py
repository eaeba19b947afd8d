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

"""Declarative shape checking for JSON-like documents with hover metadata."""

__version__ = "0.1.0"

from .document import ValidationResult, check, hover_at, validate_node, validate_text
from .report import Diagnostic, ErrorReporter

__all__ = [
    '__version__',
    'ValidationResult', 'check', 'hover_at', 'validate_node', 'validate_text',
    'Diagnostic', 'ErrorReporter',
]
