"""Custom exceptions for scanning, extraction and report writing."""


class GpsReportError(Exception):
    """Base exception for gpsreport errors."""
    pass


class ScanError(GpsReportError):
    """Exception raised when the image root directory cannot be walked."""
    pass


class ReportWriteError(GpsReportError):
    """Exception raised when a report file cannot be created or written.

    Attributes:
        path: Report file path
        message: Error message
    """

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        """Return string representation of error."""
        return f"{self.path}: {self.message}"


class ExtractionError(GpsReportError):
    """Exception raised when GPS coordinates cannot be extracted from a file.

    Every subclass marks the step that failed. Extraction errors are always
    recoverable: the file is skipped and processing continues.

    Attributes:
        path: Image file path
        message: Error message
    """

    kind = "extraction"

    def __init__(self, path: str, message: str):
        """Initialize extraction error.

        Args:
            path: Image file path
            message: Error message
        """
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        """Return string representation of error."""
        return f"{self.path}: {self.message}"


class FileReadError(ExtractionError):
    """The image file could not be read."""

    kind = "read"


class MetadataNotFoundError(ExtractionError):
    """No EXIF block was found (or the file is not a recognised image)."""

    kind = "no_metadata"


class MetadataParseError(ExtractionError):
    """The EXIF block is corrupt or truncated."""

    kind = "parse"


class GpsInfoNotFoundError(ExtractionError):
    """The EXIF data has no GPS sub-directory."""

    kind = "no_gps"


class CoordinateDecodeError(ExtractionError):
    """The GPS sub-directory does not hold usable latitude/longitude."""

    kind = "decode"
