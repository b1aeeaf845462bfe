from __future__ import annotations

from collections.abc import Iterator

import pytest

from apps.api.app.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
