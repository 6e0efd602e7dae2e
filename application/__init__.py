"""
Application Layer for the workout log.

This package contains:
- ports/: Abstract storage interface (what the store needs)
- workout_store: WorkoutStore, the ordered persisted workout collection
- sort_state: Per-field sort directions for the presentation layer
"""

from application.sort_state import SortField, SortState
from application.workout_store import WorkoutStore

__all__ = [
    "SortField",
    "SortState",
    "WorkoutStore",
]
