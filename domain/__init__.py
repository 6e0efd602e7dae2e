"""
Domain layer for the workout log.

This package contains pure domain models and errors that are independent
of infrastructure concerns (storage medium, presentation, map).
"""

from domain.errors import (
    CorruptRecordError,
    InvalidInputError,
    PersistenceError,
    WorkoutError,
    WorkoutNotFoundError,
)
from domain.models import (
    CyclingWorkout,
    RunningWorkout,
    WorkoutRecord,
    WorkoutType,
)

__all__ = [
    "CyclingWorkout",
    "RunningWorkout",
    "WorkoutRecord",
    "WorkoutType",
    "WorkoutError",
    "InvalidInputError",
    "WorkoutNotFoundError",
    "CorruptRecordError",
    "PersistenceError",
]
