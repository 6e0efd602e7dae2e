"""
Workout records - the core domain entities.

A workout record is either a RunningWorkout or a CyclingWorkout. The two
variants form a tagged union discriminated by the ``type`` field, so a
plain persisted dict can be turned back into the right variant without
knowing its class up front.

Records are immutable. Edits and click increments return new instances
that keep the same identity (``id``, ``created_at``), and derived values
(``pace``, ``speed``, ``description``) are computed from the current
fields on every access, so they can never go stale.
"""

import math
import uuid
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Tuple, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    computed_field,
    field_validator,
)
from pydantic.alias_generators import to_camel

from domain.errors import InvalidInputError


MONTHS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

INVALID_INPUT_MESSAGE = "Inputs have to be finite positive numbers"


class WorkoutType(str, Enum):
    """Workout disciplines supported by the log."""

    RUNNING = "running"
    CYCLING = "cycling"


def _parse_workout_type(workout_type: Union[str, WorkoutType]) -> WorkoutType:
    try:
        return WorkoutType(workout_type)
    except ValueError:
        valid = ", ".join(t.value for t in WorkoutType)
        raise InvalidInputError(
            f"Unknown workout type '{workout_type}'. Must be one of: {valid}",
            [f"type: unknown workout type '{workout_type}'"],
        ) from None


def describe_workout(
    workout_type: Union[str, WorkoutType], created_at: datetime
) -> str:
    """
    Build the human-readable workout title.

    The date is read in the timezone carried by ``created_at``.

    Examples:
        >>> describe_workout("running", datetime(2024, 4, 14, 9, 30))
        'Running on April 14'
    """
    label = _parse_workout_type(workout_type).value
    return f"{label[0].upper()}{label[1:]} on {MONTHS[created_at.month - 1]} {created_at.day}"


def _now_local() -> datetime:
    return datetime.now().astimezone()


def _new_id() -> str:
    return str(uuid.uuid4())


def _reject_bool(v: Any) -> Any:
    # bool is an int subclass and would otherwise pass as 1.0 / 0.0;
    # numeric strings from form fields are still coerced
    if isinstance(v, bool):
        raise ValueError("Input should be a number, not a boolean")
    return v


WorkoutT = TypeVar("WorkoutT", bound="WorkoutBase")


class WorkoutBase(BaseModel):
    """
    Fields shared by every workout variant.

    Not meant to be instantiated directly; use RunningWorkout,
    CyclingWorkout or the create_* factories below.
    """

    # Name of the variant's type-specific input field (cadence / elevation_gain)
    type_field: ClassVar[str] = ""

    # Identity
    id: str = Field(
        ...,
        min_length=1,
        description="Unique identifier (UUID), never reused",
    )
    created_at: datetime = Field(
        ...,
        description="When the workout was logged",
    )

    # Location
    coords: Tuple[float, float] = Field(
        ..., description="(latitude, longitude) picked on the map"
    )

    # Measurements
    distance: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Distance in kilometers"
    )
    duration: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Duration in minutes"
    )

    # Presentation counter
    clicks: int = Field(default=0, ge=0, description="Times the workout was focused")

    @field_validator("distance", "duration", mode="before")
    @classmethod
    def reject_bool_measurement(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("coords")
    @classmethod
    def validate_coords(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ensure coordinates are finite and on the globe."""
        lat, lng = v
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise ValueError("Coordinates must be finite numbers")
        if not -90 <= lat <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= lng <= 180:
            raise ValueError("Longitude must be between -180 and 180")
        return v

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @computed_field  # type: ignore[prop-decorator]
    @property
    def description(self) -> str:
        """Title such as "Running on April 14"."""
        return describe_workout(self.type, self.created_at)

    @property
    def type_value(self) -> float:
        """Value of the variant's type-specific field, used to prefill edit forms."""
        return getattr(self, self.type_field)

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def record_click(self: WorkoutT) -> WorkoutT:
        """Return a copy with the click counter incremented."""
        return self.model_copy(update={"clicks": self.clicks + 1})

    def with_values(
        self: WorkoutT, distance: Any, duration: Any, type_value: Any
    ) -> WorkoutT:
        """
        Return a re-validated copy with new measurements.

        Identity, creation time, coords and clicks are kept. Raises
        InvalidInputError through the same checks used at creation.
        """
        data = self.model_dump()
        data.update(
            {"distance": distance, "duration": duration, self.type_field: type_value}
        )
        return _build(type(self), data)

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }


class RunningWorkout(WorkoutBase):
    """
    A running session.

    Examples:
        >>> run = create_running((39.7, -8.1), distance=5, duration=30, cadence=170)
        >>> run.pace
        6.0
    """

    type_field: ClassVar[str] = "cadence"

    type: Literal["running"] = "running"
    cadence: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Cadence in steps per minute"
    )

    @field_validator("cadence", mode="before")
    @classmethod
    def reject_bool_cadence(cls, v: Any) -> Any:
        return _reject_bool(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def pace(self) -> float:
        """Pace in min/km."""
        return self.duration / self.distance

    @property
    def display_metric(self) -> str:
        return f"{self.pace:.1f} min/km"

    def __str__(self) -> str:
        return f"{self.description}: {self.distance} km, {self.duration} min, {self.display_metric}"


class CyclingWorkout(WorkoutBase):
    """
    A cycling session.

    ``elevation_gain`` may be zero or negative for rides that descend.
    """

    type_field: ClassVar[str] = "elevation_gain"

    type: Literal["cycling"] = "cycling"
    elevation_gain: float = Field(
        ..., allow_inf_nan=False, description="Elevation gain in meters"
    )

    @field_validator("elevation_gain", mode="before")
    @classmethod
    def reject_bool_elevation_gain(cls, v: Any) -> Any:
        return _reject_bool(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def speed(self) -> float:
        """Speed in km/h."""
        return self.distance / (self.duration / 60)

    @property
    def display_metric(self) -> str:
        return f"{self.speed:.1f} km/h"

    def __str__(self) -> str:
        return f"{self.description}: {self.distance} km, {self.duration} min, {self.display_metric}"


WorkoutRecord = Annotated[
    Union[RunningWorkout, CyclingWorkout], Field(discriminator="type")
]

workout_record_adapter: TypeAdapter = TypeAdapter(WorkoutRecord)

_VARIANTS: Dict[WorkoutType, Type[WorkoutBase]] = {
    WorkoutType.RUNNING: RunningWorkout,
    WorkoutType.CYCLING: CyclingWorkout,
}


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten a pydantic ValidationError into "field: message" strings."""
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return messages


def _new_identity() -> Dict[str, Any]:
    return {"id": _new_id(), "created_at": _now_local()}


def _build(model_cls: Type[WorkoutT], data: Dict[str, Any]) -> WorkoutT:
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(
            INVALID_INPUT_MESSAGE, format_validation_errors(exc)
        ) from exc


# -----------------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------------


def create_running(
    coords: Tuple[float, float], distance: Any, duration: Any, cadence: Any
) -> RunningWorkout:
    """Create a RunningWorkout, raising InvalidInputError on bad input."""
    return _build(
        RunningWorkout,
        {
            **_new_identity(),
            "coords": coords,
            "distance": distance,
            "duration": duration,
            "cadence": cadence,
        },
    )


def create_cycling(
    coords: Tuple[float, float], distance: Any, duration: Any, elevation_gain: Any
) -> CyclingWorkout:
    """Create a CyclingWorkout, raising InvalidInputError on bad input."""
    return _build(
        CyclingWorkout,
        {
            **_new_identity(),
            "coords": coords,
            "distance": distance,
            "duration": duration,
            "elevation_gain": elevation_gain,
        },
    )


def create_workout(
    workout_type: Union[str, WorkoutType],
    coords: Tuple[float, float],
    distance: Any,
    duration: Any,
    type_value: Any,
) -> Union[RunningWorkout, CyclingWorkout]:
    """
    Create a workout of the given type.

    ``type_value`` is the cadence for running and the elevation gain
    for cycling.
    """
    model_cls = _VARIANTS[_parse_workout_type(workout_type)]
    return _build(
        model_cls,
        {
            **_new_identity(),
            "coords": coords,
            "distance": distance,
            "duration": duration,
            model_cls.type_field: type_value,
        },
    )


def record_click(workout: WorkoutT) -> WorkoutT:
    """Return ``workout`` with one more click."""
    return workout.record_click()
