"""
Domain exceptions for the workout log.

These exceptions are shared by the domain model, the WorkoutStore and the
storage adapters. Each failure mode has its own type so callers can tell
bad user input apart from missing records, damaged persisted entries and
storage failures.
"""
from typing import Any, List, Optional


class WorkoutError(Exception):
    """Base class for all workout log errors."""

    pass


class InvalidInputError(WorkoutError, ValueError):
    """Raised when a numeric field or workout type is rejected at create/edit time."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class WorkoutNotFoundError(WorkoutError, LookupError):
    """Raised when an operation references a workout id that is not in the store."""

    def __init__(self, workout_id: Optional[str], message: Optional[str] = None):
        super().__init__(message or f"Workout not found: {workout_id}")
        self.workout_id = workout_id


class CorruptRecordError(WorkoutError):
    """
    A single persisted entry could not be reconstructed.

    Raised per entry during load and contained there: the store skips
    the entry and keeps the error in ``WorkoutStore.corrupt_records``.
    """

    def __init__(
        self,
        index: int,
        entry: Any,
        errors: Optional[List[str]] = None,
    ):
        self.index = index
        self.entry = entry
        self.errors = errors or []
        detail = "; ".join(self.errors) or "invalid entry"
        super().__init__(f"Corrupt workout entry at index {index}: {detail}")


class PersistenceError(WorkoutError):
    """Raised when the storage port fails to read or write the collection."""

    pass
