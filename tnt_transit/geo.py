import logging
import math
from typing import Iterable, List, Sequence, Tuple

from .stop import Stop

EARTH_RADIUS_KM = 6371


def distance_km(lat1, lon1, lat2, lon2):
    """
    Calculate the great-circle distance between two points on Earth.
    Inputs are not range-checked.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)
    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def nearest_stop(point: Tuple[float, float], stops: Sequence[Stop]) -> Tuple[Stop, float]:
    """
    Returns the stop closest to point along with its distance in km.
    On exact ties the first stop in the sequence wins.
    """
    if not stops:
        raise ValueError("nearest_stop requires at least one candidate stop")

    lat, lon = point
    best = None
    best_distance = None
    for stop in stops:
        distance = distance_km(lat, lon, stop.lat, stop.lon)
        if best_distance is None or distance < best_distance:
            best = stop
            best_distance = distance

    logging.debug("Nearest stop to (%s, %s): %s at %.2f km", lat, lon, best.name, best_distance)
    return best, best_distance


def stops_within(point: Tuple[float, float], stops: Iterable[Stop], max_degrees: float) -> List[Stop]:
    """
    Stops whose flat lat/lon offset from point is within max_degrees, nearest first.
    The threshold is in degrees and does not scale with latitude.
    """
    lat, lon = point
    scored = []
    for stop in stops:
        offset = math.hypot(stop.lat - lat, stop.lon - lon)
        if offset <= max_degrees:
            scored.append((offset, stop))
    scored.sort(key=lambda item: item[0])
    return [stop for _, stop in scored]
