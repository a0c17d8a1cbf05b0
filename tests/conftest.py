"""Pytest fixtures for factory container tests."""

import pytest

from factorycontainer import FactoryContainer, TableTypeDescriptor
from factorycontainer.testing import CountingFactory, RecordingModule


@pytest.fixture
def container():
    """Provide an empty, unlocked container."""
    return FactoryContainer()


@pytest.fixture
def table_types():
    """Provide an empty table-driven type descriptor."""
    return TableTypeDescriptor()


@pytest.fixture
def counting_factory():
    """Provide a factory returning a fresh object per call."""
    return CountingFactory(produce=lambda c: object())


@pytest.fixture(autouse=True)
def reset_recording_module():
    """Clear the class-level provide log between tests."""
    RecordingModule.reset()
    yield
    RecordingModule.reset()
