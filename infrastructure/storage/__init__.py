"""
Infrastructure Storage Layer.

This package provides implementations of the WorkoutStorage port defined
in application.ports. They can be injected into the WorkoutStore for
clean separation of concerns and testability.

Usage:
    from infrastructure.storage import JsonFileWorkoutStorage

    store = WorkoutStore(storage=JsonFileWorkoutStorage("~/.mapty/workouts.json"))
"""

from infrastructure.storage.json_file_storage import JsonFileWorkoutStorage
from infrastructure.storage.memory_storage import InMemoryWorkoutStorage

__all__ = [
    "JsonFileWorkoutStorage",
    "InMemoryWorkoutStorage",
]
