from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from algorithms import MathTools
from log_entries import BaseEntry, CardioEntry, EnduranceEntry, StrengthEntry

NO_PROGRESS_MESSAGE = "No progress yet. Keep training!"


class ProgressRecord(BaseModel):
    """Comparison between the oldest and latest entry of one exercise."""

    model_config = ConfigDict(frozen=True)

    kind: str
    name: str
    first: str
    last: str
    delta: float
    delta_text: str

    def lines(self) -> list[str]:
        return [
            f"{self.kind.capitalize()}: {self.name}",
            f"  First: {self.first}",
            f"  Last: {self.last}",
            f"  Progress: {self.delta_text}",
        ]


class ProgressReport(BaseModel):
    """Ordered progress records, empty when nothing improved."""

    model_config = ConfigDict(frozen=True)

    records: List[ProgressRecord] = []

    @property
    def has_progress(self) -> bool:
        return bool(self.records)

    @property
    def message(self) -> Optional[str]:
        return None if self.has_progress else NO_PROGRESS_MESSAGE


def _strength(oldest: StrengthEntry, latest: StrengthEntry) -> Optional[ProgressRecord]:
    diff = latest.total_reps - oldest.total_reps
    if diff <= 0:
        return None
    return ProgressRecord(
        kind="strength",
        name=latest.name,
        first=oldest.summary(),
        last=latest.summary(),
        delta=diff,
        delta_text=f"+{diff} reps",
    )


def _cardio(oldest: CardioEntry, latest: CardioEntry) -> Optional[ProgressRecord]:
    diff = latest.total_seconds - oldest.total_seconds
    if diff <= 0:
        return None
    return ProgressRecord(
        kind="cardio",
        name=latest.name,
        first=oldest.summary(),
        last=latest.summary(),
        delta=diff,
        delta_text=f"+{diff // 60} min",
    )


def _endurance(oldest: EnduranceEntry, latest: EnduranceEntry) -> Optional[ProgressRecord]:
    # speed is undefined without elapsed time
    if oldest.duration <= 0 or latest.duration <= 0:
        return None
    diff = latest.speed - oldest.speed
    if diff <= 0:
        return None
    return ProgressRecord(
        kind="endurance",
        name=latest.name,
        first=oldest.summary(),
        last=latest.summary(),
        delta=diff,
        delta_text=f"+{MathTools.format_speed_delta(diff)}",
    )


_COMPARATORS: Dict[type, Callable] = {
    StrengthEntry: _strength,
    CardioEntry: _cardio,
    EnduranceEntry: _endurance,
}


def group_entries(entries: Iterable[BaseEntry]) -> Dict[type, Dict[str, List[BaseEntry]]]:
    """Partition ``entries`` by kind, then by lower-cased exercise name."""
    groups: Dict[type, Dict[str, List[BaseEntry]]] = {cls: {} for cls in _COMPARATORS}
    for entry in entries:
        by_name = groups[type(entry)]
        by_name.setdefault(entry.name.lower(), []).append(entry)
    return groups


def compute_progress(entries: Iterable[BaseEntry]) -> ProgressReport:
    """Compare the oldest and latest entry of every exercise logged at least twice.

    Entries with the same date keep their log order. Only strictly positive
    changes are reported.
    """
    records: list[ProgressRecord] = []
    for cls, by_name in group_entries(entries).items():
        compare = _COMPARATORS[cls]
        for group in by_name.values():
            if len(group) < 2:
                continue
            ordered = sorted(group, key=lambda e: e.date)
            record = compare(ordered[0], ordered[-1])
            if record is not None:
                records.append(record)
    return ProgressReport(records=records)


class ProgressService:
    """Compute progress reports for the entries held by a log store."""

    def __init__(self, store) -> None:
        self.store = store

    def report(self) -> ProgressReport:
        return compute_progress(self.store.entries)
