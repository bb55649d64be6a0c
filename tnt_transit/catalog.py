"""
Static transit reference data for Trinidad & Tobago.

Everything here is built once at import time into a read-only TransitCatalog.
Maxi bands list their stops by name only; coordinates live in the shared stop
catalog. Bus routes carry their own stop coordinates.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from .stop import Stop

AIRPORT = 'airport'
FERRY = 'ferry'


class CatalogError(Exception):
    """Raised when the reference data is internally inconsistent."""


@dataclass(frozen=True)
class MaxiRoute:
    route_id: str
    color: str
    color_code: str
    route: str
    stops: Tuple[str, ...]
    fare: str


@dataclass(frozen=True)
class BusRoute:
    route_number: str
    route_name: str
    stops: Tuple[Stop, ...]
    color: str


@dataclass(frozen=True)
class TaxiStand:
    stand_id: str
    name: str
    lat: float
    lon: float
    destinations: Tuple[str, ...]
    estimated_wait: str


@dataclass(frozen=True)
class InterIslandTransit:
    transit_id: str
    type: str  # AIRPORT or FERRY
    name: str
    lat: float
    lon: float
    island: str
    travel_time: str
    fare: str


MAXI_STOPS = (
    Stop('Port of Spain', 10.6549, -61.5019),
    Stop('San Fernando', 10.2799, -61.4651),
    Stop('Arima', 10.6372, -61.2821),
    Stop('Chaguanas', 10.5167, -61.4167),
    Stop('Princes Town', 10.2667, -61.3833),
    Stop('Mayaro', 10.3000, -61.0000),
    Stop('Siparia', 10.1333, -61.5000),
    Stop('La Romaine', 10.2833, -61.5167),
    Stop('Curepe', 10.6500, -61.4167),
    Stop('Sangre Grande', 10.5833, -61.1333),
    Stop('Diego Martin', 10.7167, -61.5500),
    Stop('Petit Valley', 10.6833, -61.5333),
    Stop('Chaguaramas', 10.6833, -61.6333),
    Stop('La Brea', 10.2167, -61.6167),
    Stop('Point Fortin', 10.1833, -61.6833),
    Stop('Erin', 10.1000, -61.6500),
    Stop('Moruga', 10.0667, -61.2833),
    # Tobago
    Stop('Scarborough', 11.1833, -60.7333),
    Stop('Canaan', 11.1500, -60.7833),
    Stop('Bon Accord', 11.1333, -60.8167),
    Stop('Crown Point', 11.1497, -60.8322),
    Stop('Roxborough', 11.2667, -60.6167),
    Stop('Speyside', 11.3000, -60.5333),
    Stop('Charlotteville', 11.3167, -60.5500),
)

# Declaration order is the tie-break order for maxi matching.
MAXI_ROUTES = (
    MaxiRoute('black-band', 'black', '#000000',
              'San Fernando – Princes Town connecting to Mayaro',
              ('San Fernando', 'Princes Town', 'Mayaro'), 'TT$6-10'),
    MaxiRoute('brown-band', 'brown', '#8B4513',
              'San Fernando-La Brea-Point Fortin-Siparia-Erin-Moruga',
              ('San Fernando', 'La Brea', 'Point Fortin', 'Siparia', 'Erin', 'Moruga'), 'TT$10-15'),
    MaxiRoute('green-band', 'green', '#008000',
              'Port of Spain-Curepe-Chaguanas-San Fernando',
              ('Port of Spain', 'Curepe', 'Chaguanas', 'San Fernando'), 'TT$8-12'),
    MaxiRoute('red-band', 'red', '#FF0000',
              'Port of Spain – Arima, connecting to Sangre Grande',
              ('Port of Spain', 'Arima', 'Sangre Grande'), 'TT$6-8'),
    MaxiRoute('yellow-band', 'yellow', '#FFD700',
              'Port of Spain-Diego Martin-Petit Valley-Chaguaramas',
              ('Port of Spain', 'Diego Martin', 'Petit Valley', 'Chaguaramas'), 'TT$5-7'),
    MaxiRoute('tobago-blue-band', 'blue', '#0000FF',
              'Scarborough-Canaan-Bon Accord-Crown Point',
              ('Scarborough', 'Canaan', 'Bon Accord', 'Crown Point'), 'TT$5-7'),
    MaxiRoute('tobago-brown-band', 'brown', '#8B4513',
              'Scarborough-Roxborough-Speyside-Charlotteville',
              ('Scarborough', 'Roxborough', 'Speyside', 'Charlotteville'), 'TT$8-12'),
)

# PTSC (Public Transport Service Corporation)
BUS_ROUTES = (
    BusRoute('12', 'Port of Spain - San Fernando', (
        Stop('City Gate Terminal', 10.6518, -61.5170, 'bus-12-1'),
        Stop('Woodbrook', 10.6667, -61.5167, 'bus-12-2'),
        Stop('Mucurapo', 10.6500, -61.5333, 'bus-12-3'),
        Stop('Chaguanas', 10.5167, -61.4167, 'bus-12-4'),
        Stop('San Fernando', 10.2833, -61.4667, 'bus-12-5'),
    ), '#4169E1'),
    BusRoute('45', 'Port of Spain - Arima', (
        Stop('City Gate Terminal', 10.6518, -61.5170, 'bus-45-1'),
        Stop('Laventille', 10.6500, -61.5000, 'bus-45-2'),
        Stop('Tunapuna', 10.6500, -61.3833, 'bus-45-3'),
        Stop('Arouca', 10.6333, -61.3333, 'bus-45-4'),
        Stop('Arima', 10.6333, -61.2833, 'bus-45-5'),
    ), '#4169E1'),
    BusRoute('67', 'Circular Route - Savannah', (
        Stop('Queens Park Savannah', 10.6667, -61.5167, 'bus-67-1'),
        Stop('St. Anns', 10.6667, -61.5000, 'bus-67-2'),
        Stop('Cascade', 10.6833, -61.5000, 'bus-67-3'),
        Stop('St. James', 10.6500, -61.5333, 'bus-67-4'),
        Stop('Woodbrook', 10.6667, -61.5167, 'bus-67-5'),
    ), '#4169E1'),
    BusRoute('T1', 'Scarborough - Crown Point', (
        Stop('Scarborough Terminal', 11.1833, -60.7333, 'bus-t1-1'),
        Stop('Canaan', 11.1500, -60.7833, 'bus-t1-2'),
        Stop('Crown Point Airport', 11.1497, -60.8322, 'bus-t1-3'),
    ), '#4169E1'),
)

TAXI_STANDS = (
    TaxiStand('taxi-pos-1', 'City Gate Taxi Stand', 10.6518, -61.5170,
              ('San Fernando', 'Arima', 'Chaguanas', 'Diego Martin'), '5-15 min'),
    TaxiStand('taxi-pos-2', 'Independence Square Taxi Stand', 10.6500, -61.5167,
              ('St. James', 'Woodbrook', 'Maraval'), '2-10 min'),
    TaxiStand('taxi-chag-1', 'Chaguanas Main Road Taxi Stand', 10.5167, -61.4167,
              ('Port of Spain', 'San Fernando', 'Couva'), '3-8 min'),
    TaxiStand('taxi-sf-1', 'San Fernando Taxi Stand', 10.2833, -61.4667,
              ('Port of Spain', 'Princes Town', 'Point Fortin'), '5-12 min'),
    TaxiStand('taxi-arima-1', 'Arima Taxi Stand', 10.6333, -61.2833,
              ('Port of Spain', 'Sangre Grande', 'Piarco'), '3-10 min'),
    TaxiStand('taxi-scarborough-1', 'Scarborough Taxi Stand', 11.1833, -60.7333,
              ('Crown Point', 'Plymouth', 'Roxborough'), '5-15 min'),
    TaxiStand('taxi-crown-point-1', 'Crown Point Taxi Stand', 11.1497, -60.8322,
              ('Scarborough', 'Buccoo', 'Store Bay'), '2-8 min'),
)

INTER_ISLAND_TRANSITS = (
    InterIslandTransit('piarco-airport', AIRPORT, 'Piarco International Airport',
                       10.5953, -61.3372, 'trinidad', '20 min flight', 'TT$200-400'),
    InterIslandTransit('pos-ferry', FERRY, 'Port of Spain Ferry Terminal',
                       10.6519, -61.5189, 'trinidad', '2.5 hours ferry', 'TT$50-100'),
    InterIslandTransit('anr-airport', AIRPORT, 'ANR Robinson International Airport',
                       11.1497, -60.8322, 'tobago', '20 min flight', 'TT$200-400'),
    InterIslandTransit('scarborough-ferry', FERRY, 'Scarborough Ferry Terminal',
                       11.1833, -60.7333, 'tobago', '2.5 hours ferry', 'TT$50-100'),
)


class TransitCatalog:
    """
    Read-only registry over the reference tables.
    Validates on construction that every maxi stop name resolves to a catalog stop.
    """

    def __init__(self, stops, maxi_routes, bus_routes, taxi_stands, inter_island_transits):
        self.stops = tuple(stops)
        self.maxi_routes = tuple(maxi_routes)
        self.bus_routes = tuple(bus_routes)
        self.taxi_stands = tuple(taxi_stands)
        self.inter_island_transits = tuple(inter_island_transits)

        by_name = {}
        for stop in self.stops:
            if stop.name in by_name:
                raise CatalogError(f"Duplicate stop name in shared catalog: {stop.name}")
            by_name[stop.name] = stop
        self._stops_by_name = MappingProxyType(by_name)

        for route in self.maxi_routes:
            missing = [name for name in route.stops if name not in by_name]
            if missing:
                raise CatalogError(f"Maxi route '{route.route_id}' references unknown stops: {missing}")
        for route in self.bus_routes:
            if not route.stops:
                raise CatalogError(f"Bus route '{route.route_number}' has no stops")

        logging.debug(
            "Transit catalog loaded: %d stops, %d maxi routes, %d bus routes, %d taxi stands, %d inter-island points",
            len(self.stops), len(self.maxi_routes), len(self.bus_routes),
            len(self.taxi_stands), len(self.inter_island_transits)
        )

    def stop_named(self, name: str) -> Stop:
        try:
            return self._stops_by_name[name]
        except KeyError:
            raise KeyError(f"No stop named '{name}' in catalog") from None

    def maxi_route_stops(self, route: MaxiRoute) -> Tuple[Stop, ...]:
        """Resolves a maxi band's stop names into coordinate-bearing stops."""
        return tuple(self._stops_by_name[name] for name in route.stops)


CATALOG = TransitCatalog(MAXI_STOPS, MAXI_ROUTES, BUS_ROUTES, TAXI_STANDS, INTER_ISLAND_TRANSITS)


def get_catalog() -> TransitCatalog:
    return CATALOG
