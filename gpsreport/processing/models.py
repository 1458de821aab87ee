"""Data models for scan results."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..exceptions import ExtractionError


@dataclass(frozen=True)
class GpsRecord:
    """One image with decoded GPS coordinates.

    Attributes:
        path: Image path as produced by the scanner (e.g. "images/a.jpg")
        latitude: Decimal-degree latitude, shortest round-trip formatting
        longitude: Decimal-degree longitude, shortest round-trip formatting
    """
    path: str
    latitude: str
    longitude: str

    def as_row(self) -> List[str]:
        """Return the record as a CSV row."""
        return [self.path, self.latitude, self.longitude]


@dataclass
class ExtractionResult:
    """Outcome of a single extraction attempt.

    Exactly one of ``record`` and ``error`` is set.
    """
    path: str
    record: Optional[GpsRecord] = None
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None


@dataclass
class ProcessingStats:
    """Statistics for one directory scan.

    Attributes:
        root: Directory that was scanned
        total_files: Number of supported files found
        collected: Number of records collected
        skipped: Number of files skipped because extraction failed
        skipped_by_kind: Skipped files per extraction error kind
        processing_time: Total time taken (seconds)
        records: Collected records in discovery order
    """
    root: str
    total_files: int = 0
    collected: int = 0
    skipped: int = 0
    skipped_by_kind: Dict[str, int] = field(default_factory=dict)
    processing_time: float = 0.0
    records: List[GpsRecord] = field(default_factory=list)

    def add_result(self, result: ExtractionResult) -> None:
        """Count an extraction result."""
        self.total_files += 1
        if result.ok:
            self.collected += 1
        else:
            self.skipped += 1
            kind = result.error_kind
            self.skipped_by_kind[kind] = self.skipped_by_kind.get(kind, 0) + 1
