"""
Storage Interfaces (Ports) for the workout log.

This package defines abstract interfaces that decouple the WorkoutStore
from the storage medium. Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the store needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutStorage

    class WorkoutStore:
        def __init__(self, storage: WorkoutStorage):
            self._storage = storage
"""

from application.ports.workout_storage import WorkoutStorage

__all__ = [
    "WorkoutStorage",
]
