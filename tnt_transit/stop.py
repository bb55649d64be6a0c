from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Stop:
    name: str
    lat: float
    lon: float
    stop_id: Optional[str] = None

    @property
    def coordinates(self):
        return (self.lat, self.lon)

    def __repr__(self):
        return f"Stop({self.stop_id}, {self.name}, {self.lat}, {self.lon})"
