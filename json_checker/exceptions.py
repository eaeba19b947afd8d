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

"""Custom exceptions for the json_checker library.

Problems found in a checked document are never raised; they are reported as
diagnostics. These exceptions cover schema authoring and input adaptation.
"""


class JsonCheckerError(Exception):
    """Base exception for json_checker related errors."""
    pass


class SchemaDefinitionError(JsonCheckerError):
    """Exception raised when a schema is declared inconsistently."""
    pass


class UnknownSchemaError(SchemaDefinitionError):
    """Exception raised when a referenced schema name is not registered."""
    pass


class NodeConversionError(JsonCheckerError):
    """Exception raised when a document cannot be turned into a node tree."""
    pass


class LocaleError(JsonCheckerError):
    """Exception raised when a message catalog cannot be loaded."""
    pass
