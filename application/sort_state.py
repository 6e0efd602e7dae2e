"""
Presentation sort state for the workout list.

Sorting never touches the stored order. The direction of each sortable
field is tracked separately and flipped by an explicit toggle, so sorting
by distance twice reverses the list while the duration direction stays
where it was.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from domain.errors import InvalidInputError
from domain.models import WorkoutBase


class SortField(str, Enum):
    """Fields the workout list can be sorted by."""

    TYPE = "type"
    DISTANCE = "distance"
    DURATION = "duration"


_SORT_KEYS: Dict[SortField, Callable[[WorkoutBase], Union[str, float]]] = {
    SortField.TYPE: lambda w: w.type,
    SortField.DISTANCE: lambda w: w.distance,
    SortField.DURATION: lambda w: w.duration,
}


def parse_sort_field(value: Union[str, SortField]) -> SortField:
    """Convert a field name to SortField, raising InvalidInputError if unknown."""
    try:
        return SortField(value)
    except ValueError:
        valid = ", ".join(f.value for f in SortField)
        raise InvalidInputError(
            f"Cannot sort by '{value}'. Must be one of: {valid}"
        ) from None


def sort_workouts(
    workouts: Iterable[WorkoutBase],
    sort_field: Union[str, SortField],
    ascending: bool = True,
) -> List[WorkoutBase]:
    """
    Return a new list of workouts ordered by ``sort_field``.

    The sort is stable in both directions: workouts with equal keys keep
    their relative input order.
    """
    key = _SORT_KEYS[parse_sort_field(sort_field)]
    return sorted(workouts, key=key, reverse=not ascending)


@dataclass
class SortState:
    """
    Per-field sort direction, owned by one presentation session.

    Every field starts out sorting ascending on its first toggle.
    """

    next_ascending: Dict[SortField, bool] = field(
        default_factory=lambda: {f: True for f in SortField}
    )

    def toggle(self, sort_field: Union[str, SortField]) -> bool:
        """
        Consume the pending direction for ``sort_field`` and flip it.

        Returns:
            True if this toggle sorts ascending, False for descending
        """
        parsed = parse_sort_field(sort_field)
        ascending = self.next_ascending[parsed]
        self.next_ascending[parsed] = not ascending
        return ascending

    def reset(self) -> None:
        """Forget all directions."""
        for f in SortField:
            self.next_ascending[f] = True
