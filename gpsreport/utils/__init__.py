"""Utility functions for gpsreport."""

from gpsreport.utils.exif import (
    extract_gps_coordinates,
    format_coordinate,
    GpsCoordinates,
)

__all__ = ["extract_gps_coordinates", "format_coordinate", "GpsCoordinates"]
