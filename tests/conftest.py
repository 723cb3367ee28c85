"""Pytest configuration and fixtures."""

import pytest

from metamark import RepeatableMetaMarkedElement, collectors, generic_mapping
from tests.fakes import Nested


@pytest.fixture(autouse=True)
def clear_collector_caches():
    """Reset shared collector caches between tests."""
    yield
    collectors.clear_caches()


@pytest.fixture
def nested_element() -> RepeatableMetaMarkedElement:
    """Provide the resolved nested container example."""
    return RepeatableMetaMarkedElement.create(Nested, generic_mapping)
