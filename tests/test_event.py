import datetime
import pytest
from tnt_transit.event import Event


def test_parse_datetime_valid_and_invalid():
    e = Event({"summary": "test", "start": {"dateTime": "2025-02-28T20:00:00"}})
    assert e.start_time.replace(tzinfo=None) == datetime.datetime(2025, 2, 28, 20, 0)
    # naive times are localized to Trinidad (UTC-4, no DST)
    assert e.start_time.utcoffset() == datetime.timedelta(hours=-4)

    # invalid string should produce None
    e2 = Event({"summary": "bad", "start": {"dateTime": "notadate"}})
    assert e2.start_time is None


def test_explicit_offset_is_kept():
    e = Event({"summary": "utc", "start": {"dateTime": "2025-02-28T20:00:00Z"}})
    assert e.start_time.utcoffset() == datetime.timedelta(0)


def test_coordinates():
    e = Event({"summary": "fete", "latitude": "10.6549", "longitude": -61.5019})
    assert e.coordinates == (10.6549, -61.5019)

    missing = Event({"summary": "tba", "latitude": 10.6549})
    assert missing.coordinates is None

    garbage = Event({"summary": "bad", "latitude": "north", "longitude": "west"})
    assert garbage.coordinates is None


def test_to_dict_roundtrip():
    data = {
        "id": "evt-1",
        "summary": "Panorama Finals",
        "location": "Queen's Park Savannah",
        "latitude": 10.6667,
        "longitude": -61.5167,
        "start": {"dateTime": "2025-03-01T19:00:00-04:00", "timeZone": "America/Port_of_Spain"},
    }
    result = Event(data).to_dict()
    assert result["summary"] == data["summary"]
    assert result["location"] == data["location"]
    assert result["latitude"] == pytest.approx(10.6667)
    assert result["id"] == "evt-1"
    assert result["start"]["dateTime"].startswith("2025-03-01T19:00:00")
