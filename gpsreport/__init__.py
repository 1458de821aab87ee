"""gpsreport - GPS coordinate reports for directories of images.

Scans a directory tree for JPEG, PNG and GIF files, extracts the GPS
position from their EXIF metadata and writes CSV and HTML reports.
"""

from gpsreport._version import __version__, __version_info__
from gpsreport.config import ConfigManager
from gpsreport.processing import GpsRecord, GpsReportProcessor

__license__ = "MIT"
__all__ = [
    "__version__",
    "__version_info__",
    "ConfigManager",
    "GpsRecord",
    "GpsReportProcessor",
]
