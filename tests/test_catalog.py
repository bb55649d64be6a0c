import dataclasses

import pytest

from tnt_transit.catalog import (
    CATALOG, BUS_ROUTES, INTER_ISLAND_TRANSITS, MAXI_STOPS, TAXI_STANDS,
    CatalogError, MaxiRoute, TransitCatalog, get_catalog
)


def test_every_maxi_stop_name_resolves():
    for route in CATALOG.maxi_routes:
        resolved = CATALOG.maxi_route_stops(route)
        assert [s.name for s in resolved] == list(route.stops)


def test_get_catalog_returns_shared_instance():
    assert get_catalog() is CATALOG


def test_stop_named():
    assert CATALOG.stop_named('Port of Spain').lat == 10.6549
    with pytest.raises(KeyError):
        CATALOG.stop_named('Atlantis')


def test_catalog_rejects_unknown_maxi_stop():
    bad = MaxiRoute('bad-band', 'purple', '#800080', 'Nowhere', ('Port of Spain', 'Atlantis'), 'TT$0')
    with pytest.raises(CatalogError):
        TransitCatalog(MAXI_STOPS, [bad], BUS_ROUTES, TAXI_STANDS, INTER_ISLAND_TRANSITS)


def test_reference_data_is_read_only():
    route = CATALOG.maxi_routes[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        route.fare = 'free'
    with pytest.raises(TypeError):
        CATALOG.maxi_routes[0] = route
