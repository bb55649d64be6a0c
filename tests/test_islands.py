from tnt_transit.islands import (
    TOBAGO, TRINIDAD, UNKNOWN, classify_island, inter_island_info, transits_for_island
)

PORT_OF_SPAIN = (10.6549, -61.5019)
SAN_FERNANDO = (10.2799, -61.4651)
SCARBOROUGH = (11.1833, -60.7333)


def test_classify_island():
    assert classify_island(*PORT_OF_SPAIN) == TRINIDAD
    assert classify_island(*SCARBOROUGH) == TOBAGO
    assert classify_island(0, 0) == UNKNOWN


def test_classify_island_boundaries_inclusive():
    assert classify_island(10.0, -61.95) == TRINIDAD
    assert classify_island(11.5, -60.5) == TOBAGO
    # Between the two boxes
    assert classify_island(10.95, -61.0) == UNKNOWN


def test_transits_for_island_preference():
    assert transits_for_island(TRINIDAD)[0].type == 'airport'
    assert transits_for_island(TRINIDAD, prefer_ferry=True)[0].type == 'ferry'


def test_inter_island_same_island():
    info = inter_island_info(PORT_OF_SPAIN, SAN_FERNANDO)
    assert info.needs_inter_island is False
    assert info.transit_points == ()


def test_inter_island_prefers_airport_pair():
    info = inter_island_info(PORT_OF_SPAIN, SCARBOROUGH, prefer_ferry=False)
    assert info.needs_inter_island is True
    departure, arrival = info.transit_points
    assert departure.transit_id == 'piarco-airport'
    assert arrival.transit_id == 'anr-airport'


def test_inter_island_ferry_pair():
    info = inter_island_info(SCARBOROUGH, PORT_OF_SPAIN, prefer_ferry=True)
    departure, arrival = info.transit_points
    assert departure.transit_id == 'scarborough-ferry'
    assert arrival.transit_id == 'pos-ferry'


def test_inter_island_unknown_end_returns_none():
    assert inter_island_info(PORT_OF_SPAIN, (0, 0)) is None
    assert inter_island_info((0, 0), SCARBOROUGH) is None
