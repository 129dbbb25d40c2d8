"""Append-only JSONL record store keyed by ``(text, category)``.

Classes:
    RecordStore: Owns one log file; supports read-all, duplicate checks, appends, and clearing.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from embedding_api.core.errors import DuplicateRecordError, MalformedLogError
from embedding_api.models.record import Record

_LOGGER = logging.getLogger(__name__)


class RecordStore:
    """Durable record log bound to a single path for its lifetime.

    Every line of the log is one self-contained JSON record. Lines are only ever appended,
    so a crash mid-write can damage at most the final line.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_all(self) -> list[Record]:
        """Parse every line of the log, failing on the first malformed one."""

        if not self._path.exists():
            return []

        records: list[Record] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line_number, raw in enumerate(handle, start=1):
                line = raw.rstrip("\n")
                if not line.strip():
                    raise MalformedLogError(self._path, line_number, "blank line")
                try:
                    records.append(Record.from_line(line))
                except ValidationError as exc:
                    raise MalformedLogError(self._path, line_number, _summarise(exc)) from exc
        return records

    def contains(self, text: str, category: str) -> bool:
        return any(record.key == (text, category) for record in self.read_all())

    def append(self, text: str, vector: Sequence[float], model: str, category: str) -> Record:
        """Persist a new record unless ``(text, category)`` already exists.

        Raises:
            DuplicateRecordError: when the key is taken; the log is left untouched.
            MalformedLogError: when the existing log cannot be read.
        """

        if self.contains(text, category):
            _LOGGER.info("Rejected duplicate record for category %r", category)
            raise DuplicateRecordError(text, category)

        record = Record(text=text, vector=[float(value) for value in vector], model=model, category=category)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(record.to_line())
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())

        _LOGGER.debug("Appended record (category=%r, dim=%d) to %s", category, len(record.vector), self._path)
        return record

    def clear(self) -> None:
        """Remove the log and, if it is left empty, its parent directory.

        Safe to call when nothing has been written yet.
        """

        try:
            self._path.unlink()
        except FileNotFoundError:
            pass
        else:
            _LOGGER.info("Removed record log %s", self._path)

        parent = self._path.parent
        if parent.is_dir() and parent != Path(".") and not any(parent.iterdir()):
            parent.rmdir()
            _LOGGER.info("Removed empty data directory %s", parent)


def _summarise(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid record"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{location}: {first.get('msg', 'invalid value')}"
