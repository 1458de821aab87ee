"""Tests for the scan/extract/collect pipeline."""

import logging
import os

import pytest

from gpsreport.config import ConfigManager
from gpsreport.exceptions import MetadataNotFoundError, ScanError
from gpsreport.processing import GpsRecord, GpsReportProcessor, processor, try_extract
from gpsreport.utils.exif import GpsCoordinates


def test_try_extract_success(tmp_path, image_factory, gps_data):
    path = str(image_factory(tmp_path / "a.jpg", gps=gps_data()))

    result = try_extract(path)

    assert result.ok
    assert result.error is None
    assert result.record == GpsRecord(path=path, latitude="51.5", longitude="0.25")


def test_try_extract_logs_and_returns_error(tmp_path, image_factory, caplog):
    path = str(image_factory(tmp_path / "b.png"))

    with caplog.at_level(logging.INFO):
        result = try_extract(path)

    assert not result.ok
    assert result.record is None
    assert result.error_kind == "no_metadata"
    assert isinstance(result.error, MetadataNotFoundError)
    assert any(r.levelno == logging.INFO and "b.png" in r.getMessage() for r in caplog.records)


def test_try_extract_read_failure_logs_warning(tmp_path, caplog):
    path = str(tmp_path / "gone.jpg")

    with caplog.at_level(logging.INFO):
        result = try_extract(path)

    assert result.error_kind == "read"
    assert any(r.levelno == logging.WARNING and "gone.jpg" in r.getMessage() for r in caplog.records)


def test_process_directory_scenario(workdir, image_factory, gps_data):
    image_factory(workdir / "images" / "a.jpg", gps=gps_data())
    image_factory(workdir / "images" / "b.png")
    (workdir / "images" / "c.txt").write_text("not an image")

    stats = GpsReportProcessor(ConfigManager.load()).process_directory()

    assert stats.root == "images"
    assert stats.total_files == 2
    assert stats.collected == 1
    assert stats.skipped == 1
    assert stats.skipped_by_kind == {"no_metadata": 1}
    assert stats.records == [
        GpsRecord(path=os.path.join("images", "a.jpg"), latitude="51.5", longitude="0.25")
    ]


def test_process_directory_keeps_discovery_order(tmp_path, image_factory, gps_data):
    root = tmp_path / "photos"
    image_factory(root / "b.jpg", gps=gps_data(lat=(2, 0, 0)))
    image_factory(root / "a" / "z.jpeg", gps=gps_data(lat=(1, 0, 0)))
    image_factory(root / "c.png", gps=gps_data(lat=(3, 0, 0)))
    image_factory(root / "b2.gif")

    stats = GpsReportProcessor().process_directory(str(root))

    assert [r.latitude for r in stats.records] == ["1", "2", "3"]
    assert stats.total_files == 4
    assert stats.collected == len(stats.records) == 3


def test_process_directory_missing_root(workdir):
    with pytest.raises(ScanError):
        GpsReportProcessor().process_directory()


def test_process_directory_empty(workdir):
    (workdir / "images").mkdir()

    stats = GpsReportProcessor().process_directory()

    assert stats.total_files == 0
    assert stats.records == []


def test_each_file_is_extracted_once(monkeypatch):
    calls = []

    def fake_extract(path):
        calls.append(path)
        if path.endswith("bad.jpg"):
            raise MetadataNotFoundError(path, "no exif data")
        return GpsCoordinates(latitude=51.5074, longitude=0.1278)

    monkeypatch.setattr(processor, "extract_gps_coordinates", fake_extract)

    records = GpsReportProcessor.collect(["x/a.jpg", "x/bad.jpg", "x/c.jpg"])

    assert calls == ["x/a.jpg", "x/bad.jpg", "x/c.jpg"]
    assert records == [
        GpsRecord("x/a.jpg", "51.5074", "0.1278"),
        GpsRecord("x/c.jpg", "51.5074", "0.1278"),
    ]
