from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from rank_browser.core.exceptions import RecordSourceError
from rank_browser.core.record import SOURCE_KEYS, Record

logger = logging.getLogger(__name__)


class RecordSource(ABC):
    """
    Abstract interface for wherever the record document lives
    (local file, HTTP, in-memory for tests).
    """

    @abstractmethod
    def fetch(self) -> Sequence[Record]:
        """
        Return every record in document order.
        Raises RecordSourceError when the document can't be read.
        """
        pass

    def describe(self) -> str:
        return type(self).__name__


class JsonRecordSource(RecordSource):
    """
    Reads a JSON array of record objects, e.g.:

    [
      {
        "college_rank": 1,
        "college_name": "Indian Institute of Technology Madras",
        "college_location": "Chennai, Tamil Nadu",
        "college_course": "B.Tech Computer Science",
        "college_fees": "₹2,09,550",
        "college_placement": "₹21,48,000",
        "college_review_rating": 8.6,
        "college_rating": 9.1
      },
      ...
    ]

    `location` is a filesystem path or an http(s) URL; pandas handles both.
    """

    def __init__(self, location: Union[str, Path]):
        self.location = location

    def describe(self) -> str:
        return str(self.location)

    def fetch(self) -> List[Record]:
        location = str(self.location)
        logger.info("Fetching record document", extra={"source": location})

        try:
            # dtype=False keeps "₹1,20,000" as text and 500 as a number
            df = pd.read_json(location, orient="records", dtype=False, convert_dates=False)
        except FileNotFoundError as e:
            raise RecordSourceError(f"Record document not found at {location}") from e
        except (ValueError, OSError) as e:
            raise RecordSourceError(f"Could not read record document {location}: {e}") from e

        if not isinstance(df, pd.DataFrame):
            raise RecordSourceError(f"Record document {location} is not an array of objects")
        _check_columns(df, location)

        # NaN marks keys absent from some objects; turn them back into None
        df = df.astype(object).where(pd.notna(df), None)
        records = [Record.from_dict(row) for row in df.to_dict(orient="records")]

        logger.info(
            "Record document parsed",
            extra={"source": location, "n_records": len(records), "columns": list(df.columns)},
        )
        return records


_KNOWN_KEYS = frozenset(SOURCE_KEYS) | frozenset(SOURCE_KEYS.values())


def _check_columns(df: pd.DataFrame, location: str) -> None:
    # JSON object keys are always strings; integer labels mean the array held
    # scalars or nested arrays
    if any(not isinstance(col, str) for col in df.columns):
        raise RecordSourceError(f"Record document {location} is not an array of objects")
    if len(df) and not _KNOWN_KEYS.intersection(df.columns):
        raise RecordSourceError(
            f"Record document {location} has no record fields; got columns {list(df.columns)}"
        )


class InMemoryRecordSource(RecordSource):
    """Serves a fixed list of records. Useful for tests and demos."""

    def __init__(self, records: Sequence[Record]):
        self._records = list(records)
        self.fetch_count = 0

    def fetch(self) -> List[Record]:
        self.fetch_count += 1
        return list(self._records)
