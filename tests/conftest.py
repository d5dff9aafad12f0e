"""
Pytest configuration and shared fixtures for FastRules tests.
"""

import pytest
from faker import Faker

from fast_rules import MacroRegistry, MappingResult

fake = Faker()


@pytest.fixture
def sample_data():
    """Provide a nested payload with arrays at several levels."""
    return {
        "name": fake.name(),
        "address": {"city": fake.city(), "street": fake.street_address()},
        "nums": [10, -5, 3],
        "groups": [{"members": [1, 2]}, {"members": [5]}],
    }


@pytest.fixture
def result_factory():
    """Build a `MappingResult` over a value tree with optional failed paths."""
    def factory(values, failed=()):
        return MappingResult(values, failed)
    return factory


@pytest.fixture
def macros():
    """Fresh macro registry so tests never leak into the process-wide one."""
    return MacroRegistry()


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
