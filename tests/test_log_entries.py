import os
import sys
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from log_entries import (
    CardioEntry,
    EnduranceEntry,
    StrengthEntry,
    deserialize_entry,
    serialize_entry,
)

DAY = datetime.date(2025, 5, 18)


class LogEntryTestCase(unittest.TestCase):
    def test_strength(self) -> None:
        entry = StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY)
        self.assertEqual(entry.total_reps, 30)
        self.assertEqual(serialize_entry(entry), "strength;Push-ups;3;10;2025-05-18")
        self.assertEqual(str(entry), "18/05/2025 - Strength: Push-ups: 3 sets of 10 reps")
        self.assertEqual(entry.summary(), "3x10 on 18/05/2025")

    def test_cardio(self) -> None:
        entry = CardioEntry(name="Plank", duration=60, sets=2, date=DAY)
        self.assertEqual(entry.to_record(), "cardio;Plank;60;2;2025-05-18")
        self.assertEqual(entry.display(), "18/05/2025 - Cardio: Plank: 2 sets of 1m0s")
        self.assertEqual(entry.total_seconds, 120)

    def test_endurance(self) -> None:
        entry = EnduranceEntry(name="Swimming", distance=1000, duration=1200, date=DAY)
        self.assertEqual(entry.to_record(), "endurance;Swimming;1000;1200;2025-05-18")
        self.assertEqual(
            entry.display(), "18/05/2025 - Endurance: Swimming: 1.0km in 20m0s"
        )
        self.assertAlmostEqual(entry.speed, 50.0)
        self.assertEqual(entry.summary(), "1.0km in 20m0s on 18/05/2025")

    def test_round_trip_keeps_fields(self) -> None:
        entries = [
            StrengthEntry(name="Squats", sets=5, reps=5, date=DAY),
            CardioEntry(name="Jumping Jacks", duration=95, sets=3, date=DAY),
            EnduranceEntry(name="Running", distance=5200, duration=1830, date=DAY),
        ]
        for entry in entries:
            self.assertEqual(deserialize_entry(serialize_entry(entry)), entry)

    def test_deserialize_unknown_kind(self) -> None:
        self.assertIsNone(deserialize_entry("yoga;Sun salute;10;2025-05-18"))

    def test_deserialize_malformed(self) -> None:
        with self.assertRaises(ValueError):
            deserialize_entry("strength;Push-ups;three;10;2025-05-18")
        with self.assertRaises(ValueError):
            deserialize_entry("cardio;Plank;60;2025-05-18")
        with self.assertRaises(ValueError):
            deserialize_entry("endurance;Run;1000;600;18/05/2025")
        with self.assertRaises(ValueError):
            deserialize_entry("endurance;Run;-1000;600;2025-05-18")
        with self.assertRaises(ValueError):
            deserialize_entry("strength;Push-ups;1_000;10;2025-05-18")
        with self.assertRaises(ValueError):
            deserialize_entry("cardio;Plank; 60;2;2025-05-18")

    def test_entries_are_immutable(self) -> None:
        entry = StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY)
        with self.assertRaises(Exception):
            entry.sets = 4


if __name__ == "__main__":
    unittest.main()
