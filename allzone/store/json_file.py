"""Whole-file JSON array storage shared by the flat-file stores."""

import json
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from allzone.exceptions import CorruptStoreError, InvalidRecordError, StorageUnavailableError
from allzone.logging import get_logger
from allzone.serialization import ensure_aware, utc_now
from allzone.store.bootstrap import ensure_data_dir

logger = get_logger(__name__)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def lock_for(path: str | Path) -> threading.Lock:
    """Return the process-wide lock guarding read-modify-write on ``path``."""
    key = Path(path).resolve()
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.Lock()
        return _locks[key]


class JsonArrayFile:
    """A JSON file holding one array, read and written in full."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> list[Any] | None:
        """Read the array, or return None when the file does not exist.

        Raises
        ------
        CorruptStoreError
            If the file is not UTF-8 JSON or its top-level value is not an array.
        StorageUnavailableError
            If the file exists but cannot be read.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc

        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise CorruptStoreError(f"{self.path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise CorruptStoreError(f"{self.path} must hold a JSON array, found {type(data).__name__}")
        return data

    def write(self, data: list[Any]) -> None:
        """Replace the file contents with ``data``.

        The array is written to a temporary sibling and moved over the
        target, so readers see either the old or the new array.
        """
        ensure_data_dir(self.path.parent)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def quarantine(self, now: datetime) -> Path:
        """Move the file aside as ``<name>.corrupt-<stamp>`` and return the new path.

        A numeric suffix is added when an earlier copy already holds the stamp.
        """
        base = f"{self.path.name}.corrupt-{ensure_aware(now).astimezone(timezone.utc):%Y%m%dT%H%M%S%fZ}"
        target = self.path.with_name(base)
        counter = 1
        while target.exists():
            target = self.path.with_name(f"{base}-{counter}")
            counter += 1
        try:
            os.replace(self.path, target)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot move corrupt file {self.path} aside: {exc}") from exc
        return target


class FlatFileStore:
    """Base for stores that keep one record type in a JSON array file.

    Subclasses set ``record_type`` to a class offering ``from_dict`` and
    ``to_dict``, and ``label`` for log messages.
    """

    record_type: Any = None
    label = "record"

    def __init__(
        self,
        path: str | Path,
        on_corrupt: str = "reseed",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.file = JsonArrayFile(path)
        self.on_corrupt = on_corrupt
        self.clock = clock

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self.file.path

    @property
    def lock(self) -> threading.Lock:
        """Lock shared by every store instance backed by the same file."""
        return lock_for(self.path)

    def _load(self) -> list[Any] | None:
        data = self.file.read()
        if data is None:
            return None

        try:
            records = [self.record_type.from_dict(item) for item in data]
        except InvalidRecordError as exc:
            raise CorruptStoreError(f"{self.path} holds an invalid {self.label}: {exc}") from exc

        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise CorruptStoreError(f"{self.path} holds duplicate {self.label} id {record.id!r}")
            seen.add(record.id)

        logger.debug(
            "Loaded %d %s records from %s",
            len(records),
            self.label,
            self.path,
            extra={"store_path": str(self.path), "record_count": len(records)},
        )
        return records

    def _load_or_recover(self) -> list[Any] | None:
        """Load the records, applying the corrupt-file policy.

        Returns None when the file is absent, or when it was corrupt and
        has been moved aside under the ``reseed`` policy.
        """
        try:
            return self._load()
        except CorruptStoreError as exc:
            if self.on_corrupt == "raise":
                raise
            moved = self.file.quarantine(self.clock())
            logger.warning(
                "Moved corrupt %s file to %s: %s",
                self.label,
                moved,
                exc,
                extra={"store_path": str(self.path)},
            )
            return None

    def _save(self, records: list[Any]) -> None:
        self.file.write([record.to_dict() for record in records])
        logger.debug(
            "Saved %d %s records to %s",
            len(records),
            self.label,
            self.path,
            extra={"store_path": str(self.path), "record_count": len(records)},
        )
