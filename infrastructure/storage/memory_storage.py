"""
In-memory implementation of WorkoutStorage.

Useful when the host keeps no durable state (embedding, demos, the
``memory`` storage backend setting).
"""
import copy
from typing import Optional, List, Dict, Any


class InMemoryWorkoutStorage:
    """
    Process-local implementation of WorkoutStorage protocol.

    Data is deep-copied on the way in and out, so callers can never
    mutate the stored collection by accident.
    """

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self._records: Optional[List[Dict[str, Any]]] = (
            copy.deepcopy(records) if records is not None else None
        )

    def read(self) -> Optional[List[Dict[str, Any]]]:
        """Return a copy of the stored collection, or None if never written."""
        if self._records is None:
            return None
        return copy.deepcopy(self._records)

    def write(self, records: List[Dict[str, Any]]) -> None:
        """Replace the stored collection."""
        self._records = copy.deepcopy(records)

    def clear(self) -> None:
        """Forget everything, as if nothing had ever been written."""
        self._records = None
