"""Scan orchestration: enumerate images, extract GPS data, collect records."""

from typing import Iterable, List, Optional
import logging
import time

from ..config import ConfigManager
from ..exceptions import (
    ExtractionError,
    GpsInfoNotFoundError,
    MetadataNotFoundError,
)
from ..utils.exif import extract_gps_coordinates, format_coordinates
from .collector import RecordCollector
from .models import ExtractionResult, GpsRecord, ProcessingStats
from .scanner import scan_images, validate_root

logger = logging.getLogger(__name__)

# Images without location data are the common case, not a problem
_EXPECTED_MISSES = (MetadataNotFoundError, GpsInfoNotFoundError)


def try_extract(path: str) -> ExtractionResult:
    """Attempt to build a GpsRecord for one image file.

    Extraction failures are logged here and returned in the result; they
    never propagate to the caller.

    Args:
        path: Image file path

    Returns:
        ExtractionResult holding either the record or the error
    """
    try:
        coordinates = extract_gps_coordinates(path)
    except ExtractionError as e:
        level = logging.INFO if isinstance(e, _EXPECTED_MISSES) else logging.WARNING
        logger.log(level, str(e))
        return ExtractionResult(path=path, error=e)

    latitude, longitude = format_coordinates(coordinates)
    record = GpsRecord(path=path, latitude=latitude, longitude=longitude)
    logger.debug(f"Collected {path}: {latitude}, {longitude}")
    return ExtractionResult(path=path, record=record)


class GpsReportProcessor:
    """Runs the scan -> extract -> collect pipeline for one directory.

    Each call to ``process_directory`` starts from scratch: files are read
    and decoded once per run and nothing is cached between runs.
    """

    def __init__(self, config: Optional[ConfigManager] = None) -> None:
        """Initialize processor.

        Args:
            config: Configuration manager (defaults are used if not provided)
        """
        self.config = config or ConfigManager.load()

    def process_directory(self, root: Optional[str] = None) -> ProcessingStats:
        """Scan a directory and collect GPS records from its images.

        Args:
            root: Directory to scan (defaults to ``scan.root``)

        Returns:
            ProcessingStats with the records in discovery order

        Raises:
            ScanError: If the root directory cannot be walked at all
        """
        root = root or self.config.get("scan.root")
        validate_root(root)

        logger.info(f"Scanning {root} for images")
        start_time = time.time()

        stats = ProcessingStats(root=root)
        stats.records = self.collect(scan_images(root), stats)
        stats.processing_time = time.time() - start_time

        logger.info(
            f"Scanned {stats.total_files} file(s): {stats.collected} with GPS data, "
            f"{stats.skipped} skipped"
        )
        return stats

    @staticmethod
    def collect(paths: Iterable[str], stats: Optional[ProcessingStats] = None) -> List[GpsRecord]:
        """Filter-map paths through ``try_extract`` into a closed record list.

        Args:
            paths: Image paths in discovery order
            stats: Optional stats object updated with every result

        Returns:
            List of GpsRecord in the order of `paths`
        """
        collector = RecordCollector()
        for path in paths:
            result = try_extract(path)
            if stats is not None:
                stats.add_result(result)
            if result.ok:
                collector.add(result.record)
        return collector.close()
