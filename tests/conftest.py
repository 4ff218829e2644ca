"""
Pytest configuration and shared fixtures

Fun fact: The name "conftest" comes from pytest's configuration testing
framework. Files named conftest.py are automatically discovered and their
fixtures are available to all tests in the same directory and subdirectories!
"""

import pytest

from idkit.kernel.ids import AtomicCounter, RandomIdGenerator, TimeOrderedIdGenerator
from idkit.kernel.time import TestClockProvider
from idkit.service import IdService

# 2023-11-14 22:13:20 UTC
FIXED_MS = 1_700_000_000_000


@pytest.fixture
def test_clock() -> TestClockProvider:
    """Provide a controllable clock pinned to FIXED_MS"""
    return TestClockProvider(FIXED_MS)


@pytest.fixture
def time_ordered_generator(test_clock: TestClockProvider) -> TimeOrderedIdGenerator:
    """Fresh time-ordered generator with its own counter starting at zero"""
    return TimeOrderedIdGenerator(clock=test_clock, counter=AtomicCounter())


@pytest.fixture
def random_generator() -> RandomIdGenerator:
    return RandomIdGenerator()


@pytest.fixture
def service(test_clock: TestClockProvider) -> IdService:
    """IdService wired to the test clock"""
    return IdService(clock=test_clock)
