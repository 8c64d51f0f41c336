import os
import sys
import datetime
import warnings

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import StorageWarning
from log_entries import CardioEntry, StrengthEntry
from log_store import LogStore

DAY = datetime.date(2025, 5, 18)


class TestLogStore:
    def test_missing_file_is_empty_log(self, tmp_path):
        store = LogStore(str(tmp_path / "log.txt"))
        assert store.entries == []
        assert not (tmp_path / "log.txt").exists()

    def test_append_persists_whole_log(self, tmp_path):
        path = tmp_path / "log.txt"
        store = LogStore(str(path))
        store.append(StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY))
        store.append(CardioEntry(name="Plank", duration=60, sets=2, date=DAY))
        assert path.read_text(encoding="utf-8") == (
            "strength;Push-ups;3;10;2025-05-18\n" "cardio;Plank;60;2;2025-05-18\n"
        )
        reloaded = LogStore(str(path))
        assert reloaded.entries == store.entries
        assert len(reloaded) == 2

    def test_load_skips_blank_and_unknown_lines(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text(
            "yoga;Sun salute;5;2025-05-18\n\n   \ncardio;Plank;60;2;2025-05-18\n",
            encoding="utf-8",
        )
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            entries = LogStore(str(path)).entries
        assert len(entries) == 1
        assert entries[0].name == "Plank"

    def test_load_warns_on_malformed_line(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text(
            "strength;Push-ups;x;10;2025-05-18\nstrength;Squats;5;5;2025-05-18\n",
            encoding="utf-8",
        )
        with pytest.warns(StorageWarning, match="line 1"):
            store = LogStore(str(path))
        assert [e.name for e in store] == ["Squats"]

    def test_load_unreadable_file_warns(self, tmp_path):
        path = tmp_path / "log.txt"
        path.mkdir()
        with pytest.warns(StorageWarning):
            store = LogStore(str(path))
        assert store.entries == []

    def test_save_failure_keeps_memory(self, tmp_path):
        store = LogStore(str(tmp_path / "missing_dir" / "log.txt"))
        with pytest.warns(StorageWarning):
            store.append(StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY))
        assert len(store) == 1

    def test_clear_then_load_is_empty(self, tmp_path):
        path = tmp_path / "log.txt"
        store = LogStore(str(path))
        store.append(StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY))
        store.clear()
        assert store.entries == []
        assert path.read_text(encoding="utf-8") == ""
        assert store.load() == []
        assert LogStore(str(path)).entries == []

    def test_save_explicit_entries(self, tmp_path):
        path = tmp_path / "log.txt"
        store = LogStore(str(path), autoload=False)
        assert store.save([StrengthEntry(name="Dips", sets=2, reps=8, date=DAY)])
        assert path.read_text(encoding="utf-8") == "strength;Dips;2;8;2025-05-18\n"
        assert store.entries == []

    def test_entries_returns_copy(self, tmp_path):
        store = LogStore(str(tmp_path / "log.txt"))
        store.entries.append("junk")
        assert len(store) == 0

    def test_rewrite_keeps_file_mode(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("", encoding="utf-8")
        os.chmod(path, 0o644)
        store = LogStore(str(path))
        store.append(StrengthEntry(name="Push-ups", sets=3, reps=10, date=DAY))
        assert (os.stat(path).st_mode & 0o777) == 0o644
        store.clear()
        assert (os.stat(path).st_mode & 0o777) == 0o644
