from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from rank_browser.core.record import Record

if TYPE_CHECKING:
    from rank_browser.services.record_source import RecordSource

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Holds the full, ordered record set for the session.

    The source is read on first use and the result is kept for the lifetime
    of the store; later reads never go back to the source. A failed read
    leaves the store empty so a new session can try again.
    """

    def __init__(self, source: "RecordSource"):
        self._source = source
        self._records: Optional[Tuple[Record, ...]] = None

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "RecordStore":
        """Build an already-populated store (no source behind it)."""
        store = cls(source=None)  # type: ignore[arg-type]
        store._records = tuple(records)
        return store

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    def ensure_loaded(self) -> Tuple[Record, ...]:
        """
        Return the full record set, fetching it from the source the first time.

        Raises RecordSourceError if the source cannot be read.
        """
        if self._records is not None:
            return self._records

        records = tuple(self._source.fetch())
        self._records = records
        logger.info(
            "Record store populated",
            extra={"n_records": len(records), "source": self._source.describe()},
        )
        return records

    @property
    def records(self) -> Tuple[Record, ...]:
        """Records loaded so far, empty before the first successful fetch."""
        return self._records or ()

    def __len__(self) -> int:
        return len(self.records)
