"""
Workout Storage Interface (Port).

This module defines the abstract interface for persisting the workout
collection. Implementations may use a JSON file, process memory, or any
other medium that can hold an ordered list of flat dicts.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutStorage(Protocol):
    """
    Abstract interface for workout collection persistence.

    The store always reads and writes the whole collection at once; the
    storage never sees individual workout operations.
    """

    def read(self) -> Optional[List[Dict[str, Any]]]:
        """
        Read the persisted workout collection.

        Returns:
            The stored list of flat workout dicts, in stored order, or
            None if nothing has ever been written

        Raises:
            PersistenceError: If the medium cannot be read or decoded
        """
        ...

    def write(self, records: List[Dict[str, Any]]) -> None:
        """
        Replace the persisted workout collection.

        Args:
            records: Full ordered list of flat workout dicts

        Raises:
            PersistenceError: If the medium rejects the write
                (e.g. disk full, permission denied)
        """
        ...
