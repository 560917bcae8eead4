"""Pytest configuration."""

import pytest

from fracindex.config import get_default_keyspace


@pytest.fixture(autouse=True)
def fresh_default_keyspace():
    get_default_keyspace.cache_clear()
    yield
    get_default_keyspace.cache_clear()
