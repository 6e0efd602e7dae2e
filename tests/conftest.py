"""Shared pytest fixtures for workout log tests."""

import pytest

from application.workout_store import WorkoutStore
from backend.settings import get_settings
from tests.fakes import FakeWorkoutStorage


@pytest.fixture
def storage() -> FakeWorkoutStorage:
    """Create a fresh, never-written fake storage."""
    return FakeWorkoutStorage()


@pytest.fixture
def store(storage: FakeWorkoutStorage) -> WorkoutStore:
    """Create an empty WorkoutStore backed by the fake storage."""
    return WorkoutStore(storage=storage)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure no cached Settings leaks between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
