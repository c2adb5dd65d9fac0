"""Root conftest — shared test configuration and record fixtures."""

import os

import pytest

from recordstore.config import get_settings
from recordstore.schemas.records import Customer

# Ensure tests never pick up a developer's RECORDSTORE_* overrides
for _key in list(os.environ):
    if _key.startswith("RECORDSTORE_"):
        del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def blank_customer():
    return Customer.blank()


@pytest.fixture
def abc():
    """Three active customers A, B, C in insertion order."""
    return [
        Customer(id=1, name="A"),
        Customer(id=2, name="B"),
        Customer(id=3, name="C"),
    ]
