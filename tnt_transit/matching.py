"""
Proximity matchers for maxi-taxi bands, buses and taxi stands.

All functions here are pure lookups over the static catalog. A query with no
qualifying route returns None or an empty list; that is a normal result.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .catalog import CATALOG, MaxiRoute, TaxiStand
from .config import Config
from .geo import distance_km, nearest_stop, stops_within
from .islands import UNKNOWN, classify_island

BUS = 'bus'
MAXI = 'maxi'


@dataclass(frozen=True)
class MaxiRouteInfo:
    route: MaxiRoute
    from_stop: str
    to_stop: str
    distance_to_start: float
    distance_from_end: float

    def needs_advisory(self, threshold_km=None):
        """True if either walk to or from the band is longer than the threshold."""
        if threshold_km is None:
            threshold_km = Config.LAST_MILE_ADVISORY_KM
        return self.distance_to_start > threshold_km or self.distance_from_end > threshold_km


def _route_stops(route):
    return route.stops


def find_relevant_routes(origin_lat, origin_lon, dest_lat, dest_lon, routes,
                         stops_of: Callable = _route_stops, max_degrees=None) -> list:
    """
    Filters routes that serve a trip between two points.

    On the same island (or when either end is unknown) a route must have a stop near
    both ends. Across islands each route only has to serve its own leg: a route on the
    origin island with a stop near the origin, or on the destination island with a stop
    near the destination. Catalog order is kept.
    """
    if max_degrees is None:
        max_degrees = Config.STOP_PROXIMITY_DEGREES

    origin_island = classify_island(origin_lat, origin_lon)
    dest_island = classify_island(dest_lat, dest_lon)
    cross_island = (origin_island != dest_island
                    and origin_island != UNKNOWN and dest_island != UNKNOWN)

    relevant = []
    for route in routes:
        stops = stops_of(route)
        if not stops:
            continue
        route_island = classify_island(stops[0].lat, stops[0].lon)

        near_origin = stops_within((origin_lat, origin_lon), stops, max_degrees)
        near_dest = stops_within((dest_lat, dest_lon), stops, max_degrees)

        if cross_island:
            keep = ((route_island == origin_island and near_origin)
                    or (route_island == dest_island and near_dest))
        else:
            keep = bool(near_origin and near_dest)

        if keep:
            relevant.append(route)

    logging.debug("%d of %d routes relevant (cross_island=%s)", len(relevant), len(routes), cross_island)
    return relevant


def match_routes(origin: Tuple[float, float], destination: Tuple[float, float], mode: str,
                 catalog=CATALOG) -> list:
    """Relevant bus routes or maxi bands between two points."""
    if mode == BUS:
        return find_relevant_routes(origin[0], origin[1], destination[0], destination[1],
                                    catalog.bus_routes)
    if mode == MAXI:
        return find_relevant_routes(origin[0], origin[1], destination[0], destination[1],
                                    catalog.maxi_routes, stops_of=catalog.maxi_route_stops)
    raise ValueError(f"Unknown transit mode: {mode!r}")


def match_maxi_route(origin: Tuple[float, float], destination: Tuple[float, float],
                     catalog=CATALOG) -> Optional[MaxiRouteInfo]:
    """
    Finds a single maxi band connecting the stops nearest to each end.

    The first band in catalog order containing both stop names wins. Trips that
    need a change between bands are not detected and return None.
    """
    start, distance_to_start = nearest_stop(origin, catalog.stops)
    end, distance_from_end = nearest_stop(destination, catalog.stops)

    for route in catalog.maxi_routes:
        if start.name in route.stops and end.name in route.stops:
            logging.info("Maxi match: %s band from %s to %s", route.color, start.name, end.name)
            return MaxiRouteInfo(
                route=route,
                from_stop=start.name,
                to_stop=end.name,
                distance_to_start=distance_to_start,
                distance_from_end=distance_from_end,
            )

    logging.info("No single maxi band connects %s and %s", start.name, end.name)
    return None


def nearest_taxi_stands(point: Tuple[float, float], limit=None, catalog=CATALOG) -> List[TaxiStand]:
    """
    Closest taxi stands on the same island as point, nearest first.
    An UNKNOWN island disables the island filter.
    """
    if limit is None:
        limit = Config.TAXI_STAND_LIMIT
    lat, lon = point
    island = classify_island(lat, lon)

    candidates = [
        stand for stand in catalog.taxi_stands
        if island == UNKNOWN or classify_island(stand.lat, stand.lon) == island
    ]
    candidates.sort(key=lambda stand: distance_km(lat, lon, stand.lat, stand.lon))
    return candidates[:max(limit, 0)]

