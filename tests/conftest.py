"""Shared fixtures for gpsreport tests."""

import logging
from pathlib import Path

import pytest
from PIL import Image
from PIL.ExifTags import GPS, IFD


def gps_ifd(lat=(51, 30, 0), lat_ref="N", lon=(0, 15, 0), lon_ref="E"):
    """Build a GPS IFD dict; the defaults decode to exactly 51.5, 0.25."""
    return {
        int(GPS.GPSLatitudeRef): lat_ref,
        int(GPS.GPSLatitude): lat,
        int(GPS.GPSLongitudeRef): lon_ref,
        int(GPS.GPSLongitude): lon,
    }


def make_image(path, gps=None, tags=None, exif_bytes=None):
    """Write a small image, optionally with EXIF tags and a GPS IFD.

    The format follows the file extension.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = "P" if path.suffix == ".gif" else "RGB"
    img = Image.new(mode, (8, 8))

    kwargs = {}
    if exif_bytes is not None:
        kwargs["exif"] = exif_bytes
    elif gps is not None or tags:
        exif = Image.Exif()
        for tag, value in (tags or {}).items():
            exif[tag] = value
        if gps is not None:
            exif[int(IFD.GPSInfo)] = gps
        kwargs["exif"] = exif

    fmt = {".jpg": "JPEG", ".jpeg": "JPEG", ".png": "PNG", ".gif": "GIF"}[path.suffix]
    img.save(path, format=fmt, **kwargs)
    return path


@pytest.fixture
def image_factory():
    return make_image


@pytest.fixture
def gps_data():
    return gps_ifd


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
