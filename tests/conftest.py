# tests/conftest.py
from __future__ import annotations
import pytest

from dlnaprofile.common import settings as s
from dlnaprofile.domain.policies import registry as r
from dlnaprofile.domain.policies.registry import ProfileRegistry, build_registry


@pytest.fixture(autouse=True)
def _fresh_caches():
    """Settings and the process-wide registry are lru_cached; start and end every test clean."""
    s.get_settings.cache_clear()
    r.get_registry.cache_clear()
    yield
    s.get_settings.cache_clear()
    r.get_registry.cache_clear()


@pytest.fixture()
def registry() -> ProfileRegistry:
    """All families, default precedence, no extension checking."""
    return build_registry()
