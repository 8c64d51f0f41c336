from __future__ import annotations
import datetime
import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from algorithms import DateTools, DistanceConverter, DurationConverter, MathTools

SEPARATOR = ";"
_INT_PATTERN = re.compile(r"^[+-]?\d+$")


class BaseEntry(BaseModel):
    """Fields and behaviour shared by every kind of log entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    date: datetime.date

    @property
    def formatted_date(self) -> str:
        return DateTools.format_display(self.date)

    def _record(self, *values: object) -> str:
        fields = [self.kind, self.name, *values, DateTools.format_iso(self.date)]
        return SEPARATOR.join(str(v) for v in fields)

    def __str__(self) -> str:
        return self.display()


class StrengthEntry(BaseEntry):
    """Repetition based exercise such as push-ups."""

    kind: Literal["strength"] = "strength"
    sets: int
    reps: int

    @property
    def total_reps(self) -> int:
        return MathTools.total_reps(self.sets, self.reps)

    def to_record(self) -> str:
        return self._record(self.sets, self.reps)

    def display(self) -> str:
        return (
            f"{self.formatted_date} - Strength: {self.name}: "
            f"{self.sets} sets of {self.reps} reps"
        )

    def summary(self) -> str:
        return f"{self.sets}x{self.reps} on {self.formatted_date}"


class CardioEntry(BaseEntry):
    """Timed exercise such as a plank, repeated for a number of sets."""

    kind: Literal["cardio"] = "cardio"
    duration: int = Field(ge=0)
    sets: int

    @property
    def formatted_duration(self) -> str:
        return DurationConverter.format(self.duration)

    @property
    def total_seconds(self) -> int:
        return MathTools.cardio_volume(self.duration, self.sets)

    def to_record(self) -> str:
        return self._record(self.duration, self.sets)

    def display(self) -> str:
        return (
            f"{self.formatted_date} - Cardio: {self.name}: "
            f"{self.sets} sets of {self.formatted_duration}"
        )

    def summary(self) -> str:
        return f"{self.sets} sets of {self.formatted_duration} on {self.formatted_date}"


class EnduranceEntry(BaseEntry):
    """Distance covered in a given time, e.g. running or swimming."""

    kind: Literal["endurance"] = "endurance"
    distance: int = Field(ge=0)
    duration: int = Field(ge=0)

    @property
    def formatted_distance(self) -> str:
        return DistanceConverter.format(self.distance)

    @property
    def formatted_duration(self) -> str:
        return DurationConverter.format(self.duration)

    @property
    def speed(self) -> float:
        """Average speed in meters per minute."""
        return MathTools.speed_m_per_min(self.distance, self.duration)

    def to_record(self) -> str:
        return self._record(self.distance, self.duration)

    def display(self) -> str:
        return (
            f"{self.formatted_date} - Endurance: {self.name}: "
            f"{self.formatted_distance} in {self.formatted_duration}"
        )

    def summary(self) -> str:
        return (
            f"{self.formatted_distance} in {self.formatted_duration} "
            f"on {self.formatted_date}"
        )


LogEntry = Annotated[
    Union[StrengthEntry, CardioEntry, EnduranceEntry],
    Field(discriminator="kind"),
]

# Numeric columns stored between the name and the date, per kind.
RECORD_FIELDS: dict[str, tuple[str, str]] = {
    "strength": ("sets", "reps"),
    "cardio": ("duration", "sets"),
    "endurance": ("distance", "duration"),
}

_entry_adapter: TypeAdapter = TypeAdapter(LogEntry)


def _stored_int(text: str) -> int:
    if not _INT_PATTERN.match(text):
        raise ValueError(f"invalid integer field: {text!r}")
    return int(text)


def serialize_entry(entry: BaseEntry) -> str:
    """Return the ``;`` separated line stored in the log file."""
    return entry.to_record()


def deserialize_entry(line: str) -> StrengthEntry | CardioEntry | EnduranceEntry | None:
    """Build an entry from a stored line.

    Returns ``None`` for an unknown kind tag and raises ``ValueError`` when a
    known kind has malformed fields.
    """
    parts = line.rstrip("\r\n").split(SEPARATOR)
    kind = parts[0].strip()
    if kind not in RECORD_FIELDS:
        return None
    if len(parts) != 5:
        raise ValueError(f"expected 5 fields for {kind}, got {len(parts)}")
    first, second = RECORD_FIELDS[kind]
    data = {
        "kind": kind,
        "name": parts[1],
        first: _stored_int(parts[2]),
        second: _stored_int(parts[3]),
        "date": DateTools.parse_iso(parts[4]),
    }
    return _entry_adapter.validate_python(data)
