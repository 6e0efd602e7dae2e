"""
Domain converters between persisted storage entries and workout records.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import workout_to_storage_entry, storage_entry_to_workout

    >>> entry = workout_to_storage_entry(workout)
    >>> workout = storage_entry_to_workout(entry)
"""

from domain.converters.storage_converters import (
    storage_entry_to_workout,
    workout_to_storage_entry,
    workouts_to_storage,
)

__all__ = [
    "storage_entry_to_workout",
    "workout_to_storage_entry",
    "workouts_to_storage",
]
