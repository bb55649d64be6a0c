import pytest

from tnt_transit.catalog import CATALOG
from tnt_transit.geo import distance_km
from tnt_transit.islands import TOBAGO, TRINIDAD, classify_island
from tnt_transit.matching import (
    BUS, MAXI, MaxiRouteInfo, find_relevant_routes, match_maxi_route, match_routes, nearest_taxi_stands
)

PORT_OF_SPAIN = (10.6549, -61.5019)
SAN_FERNANDO = (10.2799, -61.4651)
CITY_GATE = (10.6518, -61.5170)
ARIMA = (10.6333, -61.2833)
SCARBOROUGH = (11.1833, -60.7333)
MORUGA = (10.0667, -61.2833)
DIEGO_MARTIN = (10.7167, -61.5500)


def test_match_maxi_route_green_band():
    info = match_maxi_route((10.6550, -61.5020), (10.2800, -61.4650))
    assert info is not None
    assert info.route.color == 'green'
    assert info.from_stop == 'Port of Spain'
    assert info.to_stop == 'San Fernando'
    assert info.distance_to_start < 0.1
    assert info.distance_from_end < 0.1


def test_match_maxi_route_no_single_band():
    assert match_maxi_route(MORUGA, DIEGO_MARTIN) is None


def test_match_maxi_route_first_declared_band_wins():
    # Both black and brown bands serve San Fernando; black is declared first
    info = match_maxi_route(SAN_FERNANDO, SAN_FERNANDO)
    assert info.route.route_id == 'black-band'


def test_maxi_route_info_advisory():
    route = CATALOG.maxi_routes[0]
    near = MaxiRouteInfo(route, 'San Fernando', 'Mayaro', 0.4, 0.9)
    far = MaxiRouteInfo(route, 'San Fernando', 'Mayaro', 0.4, 2.5)
    assert not near.needs_advisory(1.0)
    assert far.needs_advisory(1.0)


def test_find_relevant_routes_same_island_needs_both_ends():
    routes = find_relevant_routes(*CITY_GATE, *ARIMA, CATALOG.bus_routes)
    assert [r.route_number for r in routes] == ['45']


def test_find_relevant_routes_cross_island_per_leg():
    assert classify_island(*ARIMA) == TRINIDAD
    assert classify_island(*SCARBOROUGH) == TOBAGO
    routes = find_relevant_routes(*ARIMA, *SCARBOROUGH, CATALOG.bus_routes)
    assert [r.route_number for r in routes] == ['45', 'T1']


def test_find_relevant_routes_nothing_nearby():
    assert find_relevant_routes(0, 0, 1, 1, CATALOG.bus_routes) == []


def test_match_routes_maxi_resolves_stop_names():
    routes = match_routes(PORT_OF_SPAIN, SAN_FERNANDO, MAXI)
    assert [r.route_id for r in routes] == ['green-band']


def test_match_routes_bus():
    routes = match_routes(PORT_OF_SPAIN, SAN_FERNANDO, BUS)
    assert [r.route_number for r in routes] == ['12']


def test_match_routes_unknown_mode():
    with pytest.raises(ValueError):
        match_routes(PORT_OF_SPAIN, SAN_FERNANDO, 'ferry')


def test_nearest_taxi_stands_limit_and_order():
    stands = nearest_taxi_stands(PORT_OF_SPAIN, 3)
    assert len(stands) <= 3
    distances = [distance_km(*PORT_OF_SPAIN, s.lat, s.lon) for s in stands]
    assert distances == sorted(distances)
    assert all(classify_island(s.lat, s.lon) == TRINIDAD for s in stands)


def test_nearest_taxi_stands_same_island_only():
    stands = nearest_taxi_stands(SCARBOROUGH, 3)
    assert [s.stand_id for s in stands] == ['taxi-scarborough-1', 'taxi-crown-point-1']


def test_nearest_taxi_stands_unknown_island_uses_all():
    stands = nearest_taxi_stands((0, 0), 10)
    assert len(stands) == len(CATALOG.taxi_stands)
