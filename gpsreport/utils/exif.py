"""EXIF GPS extraction built on Pillow.

Decoding the EXIF binary format is left entirely to Pillow. This module
walks the steps from file bytes to decimal degrees and turns every failure
into a typed ``ExtractionError`` so callers can skip the file.
"""

import io
import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from PIL import Image
from PIL.ExifTags import GPS, IFD

from ..exceptions import (
    CoordinateDecodeError,
    FileReadError,
    GpsInfoNotFoundError,
    MetadataNotFoundError,
    MetadataParseError,
)

logger = logging.getLogger(__name__)

PathType = Union[str, Path]


@dataclass(frozen=True)
class GpsCoordinates:
    """GPS position decoded from EXIF data.

    Attributes:
        latitude: Latitude in decimal degrees (negative for South)
        longitude: Longitude in decimal degrees (negative for West)
    """
    latitude: float
    longitude: float

    def __str__(self) -> str:
        """Return coordinates as a formatted string."""
        return f"{format_coordinate(self.latitude)}, {format_coordinate(self.longitude)}"


def read_image_bytes(path: PathType) -> bytes:
    """Read the full content of an image file.

    Raises:
        FileReadError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(str(path), f"failed to read image file: {e}") from e


def find_exif_block(data: bytes, path: PathType = "<bytes>") -> bytes:
    """Locate the raw EXIF block embedded in image bytes.

    Args:
        data: Full image file content
        path: Source path, used in error messages

    Returns:
        Raw EXIF bytes (with or without the "Exif\\0\\0" prefix)

    Raises:
        MetadataNotFoundError: If Pillow cannot identify the image or the
            image carries no EXIF block
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            raw = img.info.get("exif")
            if not raw and img.format == "PNG":
                # eXIf chunks stored after the image data are only seen on load
                img.load()
                raw = img.info.get("exif")
    except Exception as e:
        raise MetadataNotFoundError(str(path), f"no exif data: {e}") from e

    if not raw:
        raise MetadataNotFoundError(str(path), "no exif data")

    return raw


def parse_exif(block: bytes, path: PathType = "<bytes>") -> Image.Exif:
    """Parse a raw EXIF block into Pillow's tag index.

    Raises:
        MetadataParseError: If the block is corrupt or truncated
    """
    exif = Image.Exif()
    try:
        exif.load(block)
    except Exception as e:
        raise MetadataParseError(str(path), f"failed to parse exif data: {e}") from e
    return exif


def get_gps_ifd(exif: Image.Exif, path: PathType = "<bytes>") -> Dict[int, Any]:
    """Return the GPS sub-directory of parsed EXIF data.

    Raises:
        GpsInfoNotFoundError: If there is no (readable) GPS IFD
    """
    try:
        gps_ifd = exif.get_ifd(IFD.GPSInfo)
    except Exception as e:
        raise GpsInfoNotFoundError(str(path), f"unreadable GPS IFD: {e}") from e

    if not gps_ifd:
        raise GpsInfoNotFoundError(str(path), "no GPS IFD in exif data")

    return gps_ifd


def _rational_to_float(value: Any) -> float:
    # Older Pillow releases hand back (numerator, denominator) pairs
    if isinstance(value, tuple) and len(value) == 2:
        numerator, denominator = value
        return float(numerator) / float(denominator)
    return float(value)


def _dms_to_decimal(dms: Any, ref: Any, positive: str, negative: str) -> float:
    """Convert a degrees/minutes/seconds triple and reference to decimal.

    Args:
        dms: Sequence of three rationals (degrees, minutes, seconds)
        ref: Hemisphere reference as stored in EXIF (str or bytes)
        positive: Reference letter for positive values ('N' or 'E')
        negative: Reference letter for negative values ('S' or 'W')

    Returns:
        Decimal degrees

    Raises:
        ValueError: On malformed components or unknown reference
    """
    if isinstance(ref, bytes):
        ref = ref.decode("ascii", errors="replace")
    ref = str(ref).strip("\x00 ").upper()
    if ref not in (positive, negative):
        raise ValueError(f"unexpected reference {ref!r}")

    if not isinstance(dms, (tuple, list)) or len(dms) != 3:
        raise ValueError(f"expected degrees/minutes/seconds triple, got {dms!r}")

    degrees, minutes, seconds = (_rational_to_float(part) for part in dms)
    decimal = degrees + minutes / 60.0 + seconds / 3600.0
    if not math.isfinite(decimal):
        raise ValueError(f"non-finite coordinate from {dms!r}")

    if ref == negative:
        decimal = -decimal

    return decimal


def decode_coordinates(gps_ifd: Dict[int, Any], path: PathType = "<bytes>") -> GpsCoordinates:
    """Decode latitude/longitude from a GPS IFD.

    Raises:
        CoordinateDecodeError: If tags are missing or malformed
    """
    required = (
        GPS.GPSLatitude,
        GPS.GPSLatitudeRef,
        GPS.GPSLongitude,
        GPS.GPSLongitudeRef,
    )
    missing = [tag.name for tag in required if tag not in gps_ifd]
    if missing:
        raise CoordinateDecodeError(
            str(path), f"incomplete GPS data (missing {', '.join(missing)})"
        )

    try:
        latitude = _dms_to_decimal(
            gps_ifd[GPS.GPSLatitude], gps_ifd[GPS.GPSLatitudeRef], "N", "S"
        )
        longitude = _dms_to_decimal(
            gps_ifd[GPS.GPSLongitude], gps_ifd[GPS.GPSLongitudeRef], "E", "W"
        )
    except (ValueError, TypeError, ZeroDivisionError) as e:
        raise CoordinateDecodeError(
            str(path), f"failed to get GPS info: {e}"
        ) from e

    return GpsCoordinates(latitude=latitude, longitude=longitude)


def extract_gps_coordinates(path: PathType) -> GpsCoordinates:
    """Extract GPS coordinates from an image file.

    Each call reads and decodes the file from scratch.

    Args:
        path: Path to the image file

    Returns:
        GpsCoordinates in decimal degrees

    Raises:
        ExtractionError: A subclass naming the step that failed

    Examples:
        >>> coords = extract_gps_coordinates("images/a.jpg")
        >>> print(coords)
        51.5074, 0.1278
    """
    data = read_image_bytes(path)
    block = find_exif_block(data, path)
    exif = parse_exif(block, path)
    gps_ifd = get_gps_ifd(exif, path)
    coordinates = decode_coordinates(gps_ifd, path)

    logger.debug(f"Extracted GPS coordinates from {path}: {coordinates}")
    return coordinates


def format_coordinate(value: float) -> str:
    """Format a coordinate as the shortest decimal string that round-trips.

    Never uses exponent notation and drops trailing zeros.

    Examples:
        >>> format_coordinate(51.5074)
        '51.5074'
        >>> format_coordinate(51.0)
        '51'
        >>> format_coordinate(-1e-05)
        '-0.00001'
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_coordinates(coordinates: GpsCoordinates) -> Tuple[str, str]:
    """Return (latitude, longitude) formatted with ``format_coordinate``."""
    return format_coordinate(coordinates.latitude), format_coordinate(coordinates.longitude)
