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

"""Message catalogs for diagnostics and documentation lookup.

Catalogs are flat JSON objects mapping dotted keys to text. Diagnostic
messages use ``str.format`` placeholders. Documentation entries live under
``json.doc.<path>`` where ``<path>`` is the dotted documentation path a
checker builds while descending into a document.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..config import checker_config
from ..exceptions import LocaleError

logger = logging.getLogger(__name__)

DOC_PREFIX = "json.doc"

# Catalog cache to avoid reloading files
_LOCALE_CACHE: Dict[str, "Locale"] = {}


def get_catalog_path(name: str) -> Path:
    return Path(__file__).parent / f"{name}.json"


class Locale:
    """A loaded message catalog."""

    def __init__(self, name: str, messages: Optional[Mapping[str, str]] = None):
        self.name = name
        self._messages: Dict[str, str] = dict(messages or {})

    @classmethod
    def from_file(cls, name: str, path: Union[str, Path]) -> "Locale":
        locale = cls(name)
        locale.load_file(path)
        return locale

    def load_file(self, path: Union[str, Path]) -> None:
        """Merge the entries of a JSON catalog file into this locale.

        Raises:
            LocaleError: If the file is missing or not a flat JSON object
        """
        catalog_path = Path(path)
        if not catalog_path.is_file():
            raise LocaleError(f"Message catalog not found: {catalog_path}")

        try:
            with open(catalog_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LocaleError(f"Invalid JSON in message catalog {catalog_path}: {e.msg}") from e

        if not isinstance(data, dict):
            raise LocaleError(f"Message catalog must be a JSON object: {catalog_path}")

        logger.debug(f"Loaded {len(data)} messages from {catalog_path}")
        self.update(data)

    def update(self, messages: Mapping[str, Any]) -> None:
        self._messages.update({str(k): str(v) for k, v in messages.items()})

    def lookup(self, key: str) -> Optional[str]:
        return self._messages.get(key)

    def localize(self, key: str, *args: Any) -> str:
        text = self._messages.get(key)
        if text is None:
            logger.warning(f"Missing message '{key}' in locale '{self.name}'")
            return key
        return text.format(*args) if args else text

    def doc(self, path: str) -> Optional[str]:
        """Documentation text for a dotted documentation path."""
        return self.lookup(f"{DOC_PREFIX}.{path}")


def load_locale(name: str) -> Locale:
    """Load a bundled locale (cached).

    Raises:
        LocaleError: If no catalog ships for ``name``
    """
    if name in _LOCALE_CACHE:
        return _LOCALE_CACHE[name]

    locale = Locale.from_file(name, get_catalog_path(name))
    _LOCALE_CACHE[name] = locale
    return locale


def clear_cache() -> None:
    """Clear the locale cache. Useful for testing."""
    _LOCALE_CACHE.clear()


def current_locale() -> Locale:
    """The locale selected by configuration, with the configured doc file merged in."""
    cached = checker_config.locale in _LOCALE_CACHE
    locale = load_locale(checker_config.locale)
    if not cached and checker_config.doc_file:
        locale.load_file(checker_config.doc_file)
    return locale


def localize(key: str, *args: Any) -> str:
    return current_locale().localize(key, *args)


def locale_quote(text: Any) -> str:
    return f"“{text}”"


def locale_or(names: Iterable[Any]) -> str:
    """Quote each name and join them with the localized "or"."""
    return localize("conjunction.or").join(locale_quote(n) for n in names)


def lookup_doc(path: str) -> Optional[str]:
    """Default documentation lookup: ``json.doc.<path>`` in the current locale."""
    return current_locale().doc(path)
