"""Shared fixtures for the checker tests."""

from __future__ import annotations

from typing import Callable, Dict, Optional

import pytest

from json_checker import locales


@pytest.fixture(autouse=True)
def fresh_locales():
    """Each test starts from the bundled catalogs."""
    locales.clear_cache()
    yield
    locales.clear_cache()


@pytest.fixture
def docs() -> Callable[[Dict[str, str]], Callable[[str], Optional[str]]]:
    """Build a documentation lookup from a plain mapping."""

    def _docs(entries: Dict[str, str]) -> Callable[[str], Optional[str]]:
        return entries.get

    return _docs
