from datetime import datetime
from typing import Dict, Any

import pytz

from .config import Config


class Event:
    def __init__(self, event_dict: Dict[str, Any]) -> None:
        # Initialize the event with data from a dictionary
        self.id = event_dict.get('id')
        self.summary = event_dict.get('summary', '')
        self.location = event_dict.get('location')
        self.description = event_dict.get('description', '')
        self.latitude = self._parse_coordinate(event_dict.get('latitude'))
        self.longitude = self._parse_coordinate(event_dict.get('longitude'))
        self.time_zone = Config.TIMEZONE

        # Handle start time
        start = event_dict.get('start', {})
        if isinstance(start, dict):
            self.start_str = start.get('dateTime')
            if 'timeZone' in start:
                self.time_zone = start.get('timeZone')
        else:
            self.start_str = start

        self.start_time = self._parse_datetime(self.start_str)

    @staticmethod
    def _parse_coordinate(value):
        if value is None or value == '':
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    def _parse_datetime(self, datetime_str):
        """Parse an ISO format datetime string, localizing naive values to the event's zone."""
        if not datetime_str:
            return None
        try:
            parsed = datetime.fromisoformat(datetime_str.replace('Z', '+00:00'))
        except (ValueError, AttributeError):
            return None
        if parsed.tzinfo is None:
            try:
                parsed = pytz.timezone(self.time_zone).localize(parsed)
            except pytz.UnknownTimeZoneError:
                parsed = pytz.timezone(Config.TIMEZONE).localize(parsed)
        return parsed

    @property
    def coordinates(self):
        """(lat, lon) of the venue, or None if the record has no usable position."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        event_dict = {
            "summary": self.summary if self.summary else "Untitled Event",
        }

        if self.start_time:
            event_dict["start"] = {
                "dateTime": self.start_time.isoformat(),
                "timeZone": self.time_zone,
            }
        elif self.start_str:
            event_dict["start"] = {
                "dateTime": self.start_str,
                "timeZone": self.time_zone,
            }

        if self.location:
            event_dict["location"] = self.location
        if self.coordinates:
            event_dict["latitude"] = self.latitude
            event_dict["longitude"] = self.longitude
        if self.description:
            event_dict["description"] = self.description
        if self.id:
            event_dict["id"] = self.id

        return event_dict

    def __str__(self):
        return f"Event({self.summary}, {self.start_time}, {self.coordinates})"

    def __repr__(self):
        return self.__str__()
