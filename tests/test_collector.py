"""Tests for RecordCollector."""

import pytest

from gpsreport.processing import GpsRecord, RecordCollector


def _record(name):
    return GpsRecord(path=f"images/{name}", latitude="1", longitude="2")


def test_records_keep_insertion_order():
    collector = RecordCollector()
    for name in ["c.jpg", "a.jpg", "b.jpg"]:
        collector.add(_record(name))

    assert [r.path for r in collector] == ["images/c.jpg", "images/a.jpg", "images/b.jpg"]
    assert len(collector) == 3


def test_records_returns_a_copy():
    collector = RecordCollector()
    collector.add(_record("a.jpg"))

    records = collector.records
    records.append(_record("b.jpg"))

    assert len(collector) == 1


def test_close_returns_final_records_and_rejects_more():
    collector = RecordCollector()
    collector.add(_record("a.jpg"))

    assert collector.close() == [_record("a.jpg")]
    assert collector.closed
    with pytest.raises(RuntimeError):
        collector.add(_record("b.jpg"))


def test_empty_collector():
    collector = RecordCollector()
    assert collector.close() == []


def test_records_are_immutable():
    record = _record("a.jpg")
    with pytest.raises(AttributeError):
        record.latitude = "3"
