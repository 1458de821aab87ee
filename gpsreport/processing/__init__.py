"""Processing module for scanning images and collecting GPS records."""

from .collector import RecordCollector
from .models import ExtractionResult, GpsRecord, ProcessingStats
from .processor import GpsReportProcessor, try_extract
from .scanner import SUPPORTED_EXTENSIONS, is_supported_image_ext, scan_images

__all__ = [
    "GpsReportProcessor",
    "RecordCollector",
    "GpsRecord",
    "ExtractionResult",
    "ProcessingStats",
    "try_extract",
    "scan_images",
    "is_supported_image_ext",
    "SUPPORTED_EXTENSIONS",
]
