"""
Domain models for the workout log.

This package contains pure domain models that are independent of
infrastructure concerns (storage, presentation, map collaborators).

These models represent the core business concepts:
- RunningWorkout: a run with cadence and derived pace
- CyclingWorkout: a ride with elevation gain and derived speed
- WorkoutRecord: the tagged union of both, discriminated by ``type``

Usage:
    >>> from domain.models import create_running, workout_record_adapter

    >>> run = create_running((39.7, -8.1), distance=5.2, duration=24, cadence=178)
    >>> run.description
    'Running on April 14'

    >>> # Serialize to JSON
    >>> json_str = run.model_dump_json(by_alias=True)

    >>> # Deserialize into the right variant
    >>> workout = workout_record_adapter.validate_json(json_str)
"""

from domain.models.workout import (
    MONTHS,
    CyclingWorkout,
    RunningWorkout,
    WorkoutBase,
    WorkoutRecord,
    WorkoutType,
    create_cycling,
    create_running,
    create_workout,
    describe_workout,
    record_click,
    workout_record_adapter,
)

__all__ = [
    # Main entities
    "WorkoutBase",
    "RunningWorkout",
    "CyclingWorkout",
    "WorkoutRecord",
    # Enums and constants
    "WorkoutType",
    "MONTHS",
    # Factories and helpers
    "create_running",
    "create_cycling",
    "create_workout",
    "describe_workout",
    "record_click",
    "workout_record_adapter",
]
