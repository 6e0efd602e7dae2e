"""
Converters: persisted storage entries <-> workout records.

Storage entry format (one flat dict per workout, camelCase keys):
- id: UUID string
- createdAt: ISO-8601 timestamp
- coords: [latitude, longitude]
- distance: km
- duration: minutes
- type: "running" | "cycling"
- description: display title (recomputed on load)
- clicks: focus counter
- running only: cadence, pace
- cycling only: elevationGain, speed

Derived values (pace, speed, description) are written for display
consumers but never trusted on the way back in; they are recomputed
from the base fields.
"""

from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from domain.errors import CorruptRecordError
from domain.models.workout import (
    WorkoutBase,
    format_validation_errors,
    workout_record_adapter,
)


def workout_to_storage_entry(workout: WorkoutBase) -> Dict[str, Any]:
    """Serialize a workout to its flat JSON-compatible storage dict."""
    return workout.model_dump(mode="json", by_alias=True)


def workouts_to_storage(workouts: Iterable[WorkoutBase]) -> List[Dict[str, Any]]:
    """Serialize a sequence of workouts, keeping order."""
    return [workout_to_storage_entry(w) for w in workouts]


def storage_entry_to_workout(entry: Any, index: int = 0) -> WorkoutBase:
    """
    Reconstruct the typed workout variant from a storage entry.

    Args:
        entry: Raw persisted entry (expected to be a dict)
        index: Position of the entry in the persisted list, for error reporting

    Returns:
        RunningWorkout or CyclingWorkout, chosen by the entry's ``type``

    Raises:
        CorruptRecordError: If the entry is not a dict, has an unknown type,
            misses required fields or carries invalid values.
    """
    if not isinstance(entry, dict):
        raise CorruptRecordError(
            index, entry, [f"expected an object, got {type(entry).__name__}"]
        )
    try:
        return workout_record_adapter.validate_python(entry)
    except ValidationError as exc:
        raise CorruptRecordError(index, entry, format_validation_errors(exc)) from exc
