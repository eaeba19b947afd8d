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

"""Named sub-schemas referenced by ``ref`` checkers."""

import logging
from typing import Awaitable, Callable, Dict, List

from ..exceptions import SchemaDefinitionError, UnknownSchemaError
from .context import Checker

logger = logging.getLogger(__name__)

SchemaLoader = Callable[[], Awaitable[Checker]]


class SchemaRegistry:
    """Registry of checkers by name.

    Entries are either checkers or async loaders producing a checker on
    first use. Loader results are cached for the life of the registry.
    """

    def __init__(self):
        self._checkers: Dict[str, Checker] = {}
        self._loaders: Dict[str, SchemaLoader] = {}

    def register(self, name: str, checker: Checker) -> None:
        if name in self._checkers or name in self._loaders:
            raise SchemaDefinitionError(f"Schema '{name}' is already registered")
        self._checkers[name] = checker

    def register_loader(self, name: str, loader: SchemaLoader) -> None:
        if name in self._checkers or name in self._loaders:
            raise SchemaDefinitionError(f"Schema '{name}' is already registered")
        self._loaders[name] = loader

    async def resolve(self, name: str) -> Checker:
        """Return the checker registered as ``name``.

        Raises:
            UnknownSchemaError: If nothing is registered under ``name``
        """
        if name in self._checkers:
            return self._checkers[name]
        if name not in self._loaders:
            raise UnknownSchemaError(f"Unknown schema '{name}'. Registered: {self.names()}")

        logger.debug(f"Loading schema '{name}'")
        checker = await self._loaders[name]()
        # a failing loader stays registered so a later resolve can retry it
        self._checkers[name] = checker
        del self._loaders[name]
        return checker

    def names(self) -> List[str]:
        return sorted(set(self._checkers) | set(self._loaders))

    def __contains__(self, name: str) -> bool:
        return name in self._checkers or name in self._loaders
