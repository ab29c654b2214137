"""File-backed property listing store."""

import re
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from allzone.config import StoreConfig
from allzone.exceptions import DuplicatePropertyIdError
from allzone.logging import get_logger
from allzone.models import PropertyRecord
from allzone.serialization import utc_now
from allzone.store.defaults import default_properties
from allzone.store.json_file import FlatFileStore

logger = get_logger(__name__)

_SEQUENTIAL_ID = re.compile(r"^prop_(\d+)$")


class PropertyStore(FlatFileStore):
    """Property listings kept as one JSON array on disk.

    The file is read in full on every call and rewritten in full on every
    save; nothing is cached, so each call hands back fresh record objects.

    ``save_all`` is last-writer-wins. Two callers that each load, modify
    and save can silently drop one another's changes. Route such cycles
    through ``update``, which holds a per-file lock for the whole cycle.
    """

    record_type = PropertyRecord
    label = "property"

    def __init__(
        self,
        config: StoreConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config or StoreConfig()
        super().__init__(self.config.properties_path, on_corrupt=self.config.on_corrupt, clock=clock)

    def list_all(self) -> list[PropertyRecord]:
        """Return every listing in stored order, seeding defaults when none exist."""
        records = self._load_or_recover()
        if records is None:
            records = self._seed()
        return records

    def get_by_id(self, property_id: str) -> PropertyRecord | None:
        """Return the listing with ``property_id``, or None when there is none."""
        for record in self.list_all():
            if record.id == property_id:
                return record
        return None

    def save_all(self, records: Sequence[PropertyRecord]) -> None:
        """Replace the whole collection with ``records``.

        Raises
        ------
        InvalidRecordError
            If a record was edited into an invalid state. Nothing is
            written in that case.
        DuplicatePropertyIdError
            If two records share an id. Nothing is written in that case.
        StorageUnavailableError
            If the data directory or file cannot be written.
        """
        records = list(records)
        seen: set[str] = set()
        for record in records:
            record.validate()
            if record.id in seen:
                raise DuplicatePropertyIdError(f"Duplicate property id {record.id!r}")
            seen.add(record.id)
        self._save(records)

    def featured(self) -> list[PropertyRecord]:
        """Return the promoted listings in stored order."""
        return [record for record in self.list_all() if record.featured]

    def next_id(self, records: Iterable[PropertyRecord] | None = None) -> str:
        """Return the next free ``prop_<n>`` identifier."""
        if records is None:
            records = self.list_all()
        highest = 0
        for record in records:
            match = _SEQUENTIAL_ID.match(record.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"prop_{highest + 1}"

    def update(
        self,
        mutator: Callable[[list[PropertyRecord]], list[PropertyRecord] | None],
    ) -> list[PropertyRecord]:
        """Run a load, modify, save cycle under the file's lock.

        ``mutator`` receives the current listings. It may edit the list in
        place and return None, or return a replacement list.
        """
        with self.lock:
            records = self.list_all()
            result = mutator(records)
            if result is not None:
                records = list(result)
            self.save_all(records)
            return records

    def _seed(self) -> list[PropertyRecord]:
        records = default_properties(self.clock())
        self.save_all(records)
        logger.info(
            "Seeded %d default properties into %s",
            len(records),
            self.path,
            extra={"store_path": str(self.path), "record_count": len(records)},
        )
        return records
