"""Append-only collection of GPS records."""

from typing import Iterator, List

from .models import GpsRecord


class RecordCollector:
    """Ordered, append-only store of records found during a scan.

    Records keep the order they were added in, which is file discovery
    order. Once ``close()`` has been called the collector rejects further
    records and ``records`` holds the final sequence.
    """

    def __init__(self) -> None:
        self._records: List[GpsRecord] = []
        self._closed = False

    def add(self, record: GpsRecord) -> None:
        """Append a record.

        Raises:
            RuntimeError: If the collector has been closed
        """
        if self._closed:
            raise RuntimeError("Cannot add records to a closed collector")
        self._records.append(record)

    def close(self) -> List[GpsRecord]:
        """Stop accepting records and return the final list."""
        self._closed = True
        return self.records

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def records(self) -> List[GpsRecord]:
        """Copy of the collected records in discovery order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GpsRecord]:
        return iter(list(self._records))

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<RecordCollector {len(self._records)} records, {state}>"
