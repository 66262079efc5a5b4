"""Common test fixtures."""

import pytest

from cronpattern.core.triggers.pattern import _compiled


@pytest.fixture(autouse=True)
def clear_pattern_cache():
    """Start every test with an empty compiled-pattern cache."""
    _compiled.cache_clear()
    yield
    _compiled.cache_clear()
