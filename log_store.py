from __future__ import annotations
import os
import shutil
import warnings
from contextlib import contextmanager
from tempfile import NamedTemporaryFile
from typing import Iterable, Iterator, List

from errors import StorageWarning
from log_entries import BaseEntry, deserialize_entry, serialize_entry


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class LogStore:
    """Owns the ordered list of log entries and mirrors it to a text file.

    Each line of the file holds one entry (see ``log_entries.serialize_entry``).
    Every mutating call rewrites the whole file so the file always matches
    memory after it returns. Storage failures never raise; they are reported
    as :class:`StorageWarning` and memory stays authoritative.
    """

    def __init__(self, path: str = "log.txt", *, autoload: bool = True) -> None:
        self.path = path
        self._entries: List[BaseEntry] = []
        if autoload:
            self.load()

    @property
    def entries(self) -> list[BaseEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BaseEntry]:
        return iter(list(self._entries))

    @contextmanager
    def _writer(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp = NamedTemporaryFile(
            "w", dir=directory, delete=False, encoding="utf-8", newline="\n"
        )
        try:
            yield tmp
            tmp.close()
            if os.path.exists(self.path):
                shutil.copymode(self.path, tmp.name)
            else:
                os.chmod(tmp.name, 0o666 & ~_current_umask())
            os.replace(tmp.name, self.path)
        finally:
            tmp.close()
            if os.path.exists(tmp.name):
                os.remove(tmp.name)

    def _write(self, entries: Iterable[BaseEntry], action: str) -> bool:
        try:
            with self._writer() as fh:
                for entry in entries:
                    fh.write(serialize_entry(entry) + "\n")
        except OSError as e:
            warnings.warn(f"Error {action} log: {e}", StorageWarning, stacklevel=3)
            return False
        return True

    def load(self) -> list[BaseEntry]:
        """Replace the in-memory log with the contents of the file."""
        self._entries = []
        if not os.path.exists(self.path):
            return self.entries
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                for lineno, line in enumerate(fh, start=1):
                    if not line.strip():
                        continue
                    try:
                        entry = deserialize_entry(line)
                    except ValueError as e:
                        warnings.warn(
                            f"Skipping malformed line {lineno} in {self.path}: {e}",
                            StorageWarning,
                            stacklevel=2,
                        )
                        continue
                    if entry is not None:
                        self._entries.append(entry)
        except (OSError, UnicodeDecodeError) as e:
            warnings.warn(f"Error loading log: {e}", StorageWarning, stacklevel=2)
        return self.entries

    def save(self, entries: Iterable[BaseEntry] | None = None) -> bool:
        """Overwrite the file with ``entries`` (the current log by default)."""
        if entries is None:
            entries = self._entries
        return self._write(list(entries), "saving")

    def append(self, entry: BaseEntry) -> None:
        self._entries.append(entry)
        self.save()

    def clear(self) -> None:
        self._entries = []
        self._write([], "clearing")
