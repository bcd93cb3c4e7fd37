"""Keyed storage of sequence records."""

import itertools
import logging
from collections.abc import Iterator

from .records import SequenceRecord, record_kind

logger = logging.getLogger(__name__)

# Reserved id meaning "no sequence".
INVALID_ID = 0


class SequenceRegistry:
    """Records keyed by ids that increase monotonically and are never reused."""

    def __init__(self):
        self._records: dict[int, SequenceRecord] = {}
        self._ids = itertools.count(INVALID_ID + 1)
        self.modified = False

    def register(self, record: SequenceRecord) -> int:
        record_kind(record)
        sequence_id = next(self._ids)
        self._records[sequence_id] = record
        self.modified = True
        logger.debug("Registered %s %r as #%d", record.kind.name, record.name, sequence_id)
        return sequence_id

    def unregister(self, sequence_id: int) -> SequenceRecord:
        try:
            record = self._records.pop(sequence_id)
        except KeyError:
            raise KeyError(f"No sequence with id {sequence_id}") from None
        self.modified = True
        logger.debug("Unregistered #%d", sequence_id)
        return record

    def get(self, sequence_id: int) -> SequenceRecord:
        try:
            return self._records[sequence_id]
        except KeyError:
            raise KeyError(f"No sequence with id {sequence_id}") from None

    def clear(self) -> None:
        """Drop every record; the id counter keeps running."""
        self._records.clear()
        self.modified = False

    def __iter__(self) -> Iterator[tuple[int, SequenceRecord]]:
        # snapshot, so callers may unregister while iterating
        return iter(list(self._records.items()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, sequence_id: int) -> bool:
        return sequence_id in self._records
