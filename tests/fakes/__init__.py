"""
Fake Storage Implementations for Testing.

This package provides in-memory fake implementations of the storage port
for fast, isolated testing. No files or external dependencies required.

Features:
- Fakes implement the same Protocol interface as real implementations
- Supports seeding with raw persisted data (valid or corrupt)
- Supports failure injection and reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutStorage, running_entry

    storage = FakeWorkoutStorage()
    storage.seed([running_entry(id="w1"), cycling_entry(id="w2")])
"""
from typing import Any, Dict

from tests.fakes.workout_storage import FakeWorkoutStorage


# =============================================================================
# Factory Functions
# =============================================================================


def running_entry(**overrides: Any) -> Dict[str, Any]:
    """
    Build a persisted running entry in storage format.

    Args:
        **overrides: Keys to replace (camelCase, as stored)

    Returns:
        Flat storage dict for a valid running workout
    """
    entry = {
        "id": "run-1",
        "createdAt": "2024-04-14T09:30:00+00:00",
        "coords": [39.7, -8.1],
        "distance": 5.0,
        "duration": 30.0,
        "type": "running",
        "description": "Running on April 14",
        "clicks": 0,
        "cadence": 170.0,
        "pace": 6.0,
    }
    entry.update(overrides)
    return entry


def cycling_entry(**overrides: Any) -> Dict[str, Any]:
    """
    Build a persisted cycling entry in storage format.

    Args:
        **overrides: Keys to replace (camelCase, as stored)

    Returns:
        Flat storage dict for a valid cycling workout
    """
    entry = {
        "id": "ride-1",
        "createdAt": "2024-05-02T17:00:00+00:00",
        "coords": [38.7, -9.1],
        "distance": 27.0,
        "duration": 95.0,
        "type": "cycling",
        "description": "Cycling on May 2",
        "clicks": 2,
        "elevationGain": 523.0,
        "speed": 27.0 / (95.0 / 60),
    }
    entry.update(overrides)
    return entry


def create_storage(*entries: Dict[str, Any]) -> FakeWorkoutStorage:
    """
    Create a FakeWorkoutStorage pre-populated with the given entries.

    With no entries the storage is left empty (never written).
    """
    storage = FakeWorkoutStorage()
    if entries:
        storage.seed(list(entries))
    return storage


__all__ = [
    "FakeWorkoutStorage",
    "running_entry",
    "cycling_entry",
    "create_storage",
]
