"""
WorkoutStore - the ordered, persisted workout collection.

Owns the in-memory list of workout records and decides when the storage
port is read and written:

1. Every mutation (create, edit, delete, delete all) is applied in memory
   and then the full collection is written through the port.
2. Click counts are updated in memory only.
3. Sorting produces a new list and never changes stored order.
4. Loading rebuilds typed records from the persisted dicts, skipping
   (and reporting) entries that cannot be reconstructed.

A failed write raises PersistenceError after the in-memory change has
been applied; the change is not rolled back, the caller decides whether
to retry persist().

All public operations are serialized through a re-entrant lock, so a
store instance can be shared between threads without interleaving two
mutations.
"""

import logging
from threading import RLock
from typing import Any, Iterator, List, Optional, Tuple, Union

from application.ports import WorkoutStorage
from application.sort_state import SortField, SortState, sort_workouts
from domain.converters import storage_entry_to_workout, workouts_to_storage
from domain.errors import CorruptRecordError, PersistenceError, WorkoutNotFoundError
from domain.models import WorkoutBase, WorkoutType, create_workout

logger = logging.getLogger(__name__)


class WorkoutStore:
    """
    Ordered workout collection with edit tracking and persistence.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> store = WorkoutStore(storage=JsonFileWorkoutStorage(path))
        >>> store.load()
        >>> run = store.create("running", (39.7, -8.1), 5.2, 24, 178)
        >>> store.begin_edit(run.id)
        >>> store.commit_edit(6.0, 28, 176)
        >>> store.toggle_sort("distance")
    """

    def __init__(
        self,
        storage: WorkoutStorage,
        *,
        sort_state: Optional[SortState] = None,
    ) -> None:
        """
        Initialize an empty store.

        Call load() to pull previously persisted workouts.

        Args:
            storage: Port used to read and write the collection
            sort_state: Presentation sort directions (a fresh one by default)
        """
        self._storage = storage
        self._workouts: List[WorkoutBase] = []
        self._editing_id: Optional[str] = None
        self._sort_state = sort_state or SortState()
        self._corrupt_records: List[CorruptRecordError] = []
        self._lock = RLock()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def workouts(self) -> List[WorkoutBase]:
        """Snapshot of the workouts in stored (creation) order."""
        with self._lock:
            return list(self._workouts)

    @property
    def editing_id(self) -> Optional[str]:
        """Id of the workout currently open for editing, if any."""
        with self._lock:
            return self._editing_id

    @property
    def corrupt_records(self) -> List[CorruptRecordError]:
        """Entries skipped by the most recent load()."""
        with self._lock:
            return list(self._corrupt_records)

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    def __len__(self) -> int:
        with self._lock:
            return len(self._workouts)

    def __iter__(self) -> Iterator[WorkoutBase]:
        return iter(self.workouts)

    def __contains__(self, workout_id: object) -> bool:
        with self._lock:
            return any(w.id == workout_id for w in self._workouts)

    def get(self, workout_id: str) -> WorkoutBase:
        """
        Get a workout by id.

        Raises:
            WorkoutNotFoundError: If no workout has that id
        """
        with self._lock:
            return self._workouts[self._index_of(workout_id)]

    def _index_of(self, workout_id: Optional[str]) -> int:
        for index, workout in enumerate(self._workouts):
            if workout.id == workout_id:
                return index
        raise WorkoutNotFoundError(workout_id)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(
        self,
        workout_type: Union[str, WorkoutType],
        coords: Tuple[float, float],
        distance: Any,
        duration: Any,
        type_value: Any,
    ) -> WorkoutBase:
        """
        Create a workout, append it and persist the collection.

        Args:
            workout_type: "running" or "cycling"
            coords: (latitude, longitude) supplied by the map
            distance: Distance in km
            duration: Duration in minutes
            type_value: Cadence (running) or elevation gain (cycling)

        Returns:
            The new workout

        Raises:
            InvalidInputError: If any value fails validation (nothing is stored)
            PersistenceError: If the write fails (the workout stays in memory)
        """
        with self._lock:
            workout = create_workout(workout_type, coords, distance, duration, type_value)
            self._workouts.append(workout)
            logger.info(f"Created {workout.type} workout {workout.id}")
            self.persist()
            return workout

    def begin_edit(self, workout_id: str) -> WorkoutBase:
        """
        Open a workout for editing.

        Returns:
            The workout, so the caller can prefill its form

        Raises:
            WorkoutNotFoundError: If no workout has that id
        """
        with self._lock:
            workout = self._workouts[self._index_of(workout_id)]
            self._editing_id = workout.id
            logger.debug(f"Editing workout {workout.id}")
            return workout

    def commit_edit(
        self,
        distance: Any,
        duration: Any,
        type_value: Any,
        workout_type: Optional[Union[str, WorkoutType]] = None,
    ) -> WorkoutBase:
        """
        Apply new values to the workout opened with begin_edit().

        Keeping the type updates the workout at its position with the same
        id, creation time and clicks. Changing the type replaces it, at the
        same position, with a brand new workout (new id, creation time,
        zero clicks) that keeps only the coordinates.

        Args:
            distance: New distance in km
            duration: New duration in minutes
            type_value: New cadence or elevation gain (for the resulting type)
            workout_type: New type; None keeps the current one

        Returns:
            The workout now stored at that position

        Raises:
            WorkoutNotFoundError: If no edit is open or the workout is gone
            InvalidInputError: If a value fails validation (the edit stays open)
            PersistenceError: If the write fails (the edit stays applied)
        """
        with self._lock:
            if self._editing_id is None:
                raise WorkoutNotFoundError(None, "No workout is open for editing")

            try:
                index = self._index_of(self._editing_id)
            except WorkoutNotFoundError:
                logger.warning(f"Workout {self._editing_id} vanished while being edited")
                self._editing_id = None
                raise

            current = self._workouts[index]
            new_type = current.type if workout_type is None else workout_type

            if new_type != current.type:
                updated = create_workout(
                    new_type, current.coords, distance, duration, type_value
                )
                logger.info(
                    f"Replaced {current.type} workout {current.id} "
                    f"with {updated.type} workout {updated.id}"
                )
            else:
                updated = current.with_values(distance, duration, type_value)
                logger.info(f"Updated workout {updated.id}")

            self._workouts[index] = updated
            self._editing_id = None
            self.persist()
            return updated

    def cancel_edit(self) -> None:
        """Close the open edit without changes. Safe to call when none is open."""
        with self._lock:
            self._editing_id = None

    def delete(self, workout_id: str) -> None:
        """
        Delete a workout by id and persist the rest.

        Raises:
            WorkoutNotFoundError: If no workout has that id (nothing changes)
            PersistenceError: If the write fails (the workout stays deleted)
        """
        with self._lock:
            index = self._index_of(workout_id)
            del self._workouts[index]
            if self._editing_id == workout_id:
                self._editing_id = None
            logger.info(f"Deleted workout {workout_id}")
            self.persist()

    def delete_all(self) -> None:
        """
        Delete every workout and persist the empty collection.

        Raises:
            PersistenceError: If the write fails (memory is still emptied)
        """
        with self._lock:
            count = len(self._workouts)
            self._workouts = []
            self._editing_id = None
            logger.info(f"Deleted all {count} workouts")
            self.persist()

    def record_click(self, workout_id: str) -> WorkoutBase:
        """
        Count a focus on a workout (e.g. its marker was clicked).

        Only the in-memory record changes; nothing is written.

        Raises:
            WorkoutNotFoundError: If no workout has that id
        """
        with self._lock:
            index = self._index_of(workout_id)
            clicked = self._workouts[index].record_click()
            self._workouts[index] = clicked
            return clicked

    # -------------------------------------------------------------------------
    # Sorting (presentation only)
    # -------------------------------------------------------------------------

    def sorted_view(
        self, sort_field: Union[str, SortField], ascending: bool = True
    ) -> List[WorkoutBase]:
        """
        Return the workouts ordered by ``sort_field`` without touching stored order.

        Raises:
            InvalidInputError: If ``sort_field`` is not type, distance or duration
        """
        with self._lock:
            return sort_workouts(self._workouts, sort_field, ascending)

    def toggle_sort(self, sort_field: Union[str, SortField]) -> List[WorkoutBase]:
        """Flip the direction for ``sort_field`` and return the sorted view."""
        with self._lock:
            ascending = self._sort_state.toggle(sort_field)
            return self.sorted_view(sort_field, ascending)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> List[WorkoutBase]:
        """
        Replace the in-memory collection with the persisted one.

        Nothing persisted yet yields an empty list. Entries that cannot be
        reconstructed are skipped, logged and kept in ``corrupt_records``.

        Returns:
            The loaded workouts in stored order

        Raises:
            PersistenceError: If the storage cannot be read or does not
                hold a list (in-memory state is left untouched)
        """
        with self._lock:
            try:
                raw = self._storage.read()
            except PersistenceError:
                logger.exception("Failed to read stored workouts")
                raise
            except OSError as e:
                logger.exception("Failed to read stored workouts")
                raise PersistenceError(f"Failed to read stored workouts: {e}") from e

            if raw is not None and not isinstance(raw, list):
                raise PersistenceError(
                    f"Stored workouts must be a list, got {type(raw).__name__}"
                )

            workouts: List[WorkoutBase] = []
            corrupt: List[CorruptRecordError] = []
            seen_ids = set()

            for index, entry in enumerate(raw or []):
                try:
                    workout = storage_entry_to_workout(entry, index)
                    if workout.id in seen_ids:
                        raise CorruptRecordError(
                            index, entry, [f"id: duplicate workout id '{workout.id}'"]
                        )
                except CorruptRecordError as e:
                    logger.warning(f"Skipping stored workout: {e}")
                    corrupt.append(e)
                    continue
                seen_ids.add(workout.id)
                workouts.append(workout)

            self._workouts = workouts
            self._corrupt_records = corrupt
            self._editing_id = None

            if raw is None:
                logger.info("No stored workouts found")
            else:
                logger.info(
                    f"Loaded {len(workouts)} workouts ({len(corrupt)} skipped)"
                )
            return list(workouts)

    def persist(self) -> None:
        """
        Write the full collection through the storage port.

        Raises:
            PersistenceError: If the storage rejects the write
        """
        with self._lock:
            payload = workouts_to_storage(self._workouts)
            try:
                self._storage.write(payload)
            except PersistenceError:
                logger.exception(f"Failed to persist {len(payload)} workouts")
                raise
            except OSError as e:
                logger.exception(f"Failed to persist {len(payload)} workouts")
                raise PersistenceError(f"Failed to persist workouts: {e}") from e
