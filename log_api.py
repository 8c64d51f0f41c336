from __future__ import annotations
import datetime
import re

from algorithms import DateTools, DistanceConverter, DurationConverter
from errors import EntryValidationError
from log_entries import CardioEntry, EnduranceEntry, StrengthEntry
from log_store import LogStore
from progress_service import ProgressReport, ProgressService

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


class FitnessLogAPI:
    """Operations used by the console to record and inspect workouts."""

    def __init__(self, log_path: str = "log.txt", store: LogStore | None = None) -> None:
        self.store = store if store is not None else LogStore(log_path)
        self.progress = ProgressService(self.store)

    @staticmethod
    def _name(name: str) -> str:
        name = name.strip()
        if not name:
            raise EntryValidationError("name", "Exercise name must not be empty")
        if ";" in name or "\n" in name or "\r" in name:
            raise EntryValidationError(
                "name", "Exercise name must not contain ';' or line breaks"
            )
        return name

    @staticmethod
    def _int(value: int | str, field: str) -> int:
        if isinstance(value, bool):
            raise EntryValidationError(field, f"Invalid {field}!")
        if isinstance(value, int):
            return value
        text = str(value).strip()
        if not _INT_PATTERN.match(text):
            raise EntryValidationError(field, f"Invalid {field}!")
        return int(text)

    @staticmethod
    def _date(text: str) -> datetime.date:
        date = DateTools.parse_display(text)
        if date is None:
            raise EntryValidationError("date", "Invalid date! Use dd/MM/yyyy.")
        return date

    @staticmethod
    def _duration(text: str) -> int:
        seconds = DurationConverter.parse(text)
        if seconds is None:
            raise EntryValidationError(
                "duration", "Invalid duration! Use formats like 15m, 2h, 2h30m, 48s."
            )
        return seconds

    @staticmethod
    def _distance(text: str) -> int:
        meters = DistanceConverter.parse(text)
        if meters is None:
            raise EntryValidationError(
                "distance", "Invalid distance! Use formats like 100m, 2km."
            )
        return meters

    def add_strength_exercise(
        self, name: str, sets: int | str, reps: int | str, date_text: str = ""
    ) -> StrengthEntry:
        entry = StrengthEntry(
            name=self._name(name),
            sets=self._int(sets, "sets"),
            reps=self._int(reps, "reps"),
            date=self._date(date_text),
        )
        self.store.append(entry)
        return entry

    def add_cardio_exercise(
        self, name: str, duration_text: str, sets: int | str, date_text: str = ""
    ) -> CardioEntry:
        entry = CardioEntry(
            name=self._name(name),
            duration=self._duration(duration_text),
            sets=self._int(sets, "sets"),
            date=self._date(date_text),
        )
        self.store.append(entry)
        return entry

    def add_endurance_exercise(
        self, name: str, distance_text: str, duration_text: str, date_text: str = ""
    ) -> EnduranceEntry:
        entry = EnduranceEntry(
            name=self._name(name),
            distance=self._distance(distance_text),
            duration=self._duration(duration_text),
            date=self._date(date_text),
        )
        self.store.append(entry)
        return entry

    def list_entries(self) -> list[str]:
        return [entry.display() for entry in self.store]

    def clear_log(self) -> None:
        self.store.clear()

    def get_progress_report(self) -> ProgressReport:
        return self.progress.report()
