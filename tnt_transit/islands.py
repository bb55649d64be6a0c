import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .catalog import AIRPORT, FERRY, CATALOG, InterIslandTransit
from .config import Config

TRINIDAD = 'trinidad'
TOBAGO = 'tobago'
UNKNOWN = 'unknown'

# (min_lat, max_lat, min_lon, max_lon), checked in this order
ISLAND_BOUNDS = (
    (TOBAGO, (11.0, 11.5, -60.9, -60.5)),
    (TRINIDAD, (10.0, 10.9, -61.95, -60.9)),
)


@dataclass(frozen=True)
class InterIslandInfo:
    needs_inter_island: bool
    transit_points: Tuple[InterIslandTransit, ...] = ()


def classify_island(lat, lon):
    """
    Coarse bounding-box test. Points off both boxes (open sea, near some coastlines)
    come back as UNKNOWN rather than raising.
    """
    for island, (min_lat, max_lat, min_lon, max_lon) in ISLAND_BOUNDS:
        if min_lat <= lat <= max_lat and min_lon <= lon <= max_lon:
            return island
    return UNKNOWN


def transits_for_island(island, prefer_ferry=False, transits=None):
    """Transit points serving an island, preferred type first."""
    if transits is None:
        transits = CATALOG.inter_island_transits
    preferred = FERRY if prefer_ferry else AIRPORT
    serving = [t for t in transits if t.island == island]
    return sorted(serving, key=lambda t: t.type != preferred)


def inter_island_info(origin, destination, prefer_ferry=None, transits=None) -> Optional[InterIslandInfo]:
    """
    Decides whether a trip crosses between the islands and, if so, picks a departure
    and an arrival point of the same type (airport to airport or ferry to ferry).

    Returns None when either end is UNKNOWN.
    """
    if prefer_ferry is None:
        prefer_ferry = Config.PREFER_FERRY
    if transits is None:
        transits = CATALOG.inter_island_transits

    origin_island = classify_island(*origin)
    dest_island = classify_island(*destination)

    if origin_island == UNKNOWN or dest_island == UNKNOWN:
        logging.debug("Skipping inter-island check: origin=%s destination=%s", origin_island, dest_island)
        return None

    if origin_island == dest_island:
        return InterIslandInfo(needs_inter_island=False)

    arrivals = transits_for_island(dest_island, prefer_ferry, transits)
    for departure in transits_for_island(origin_island, prefer_ferry, transits):
        arrival = next((t for t in arrivals if t.type == departure.type), None)
        if arrival is not None:
            logging.info("Inter-island trip %s -> %s via %s / %s",
                         origin_island, dest_island, departure.name, arrival.name)
            return InterIslandInfo(needs_inter_island=True, transit_points=(departure, arrival))

    logging.warning("No matching inter-island transit pair between %s and %s", origin_island, dest_island)
    return InterIslandInfo(needs_inter_island=True)
