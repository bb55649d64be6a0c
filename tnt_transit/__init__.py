"""
tnt-transit

Transit matching for Trinidad & Tobago: given a rider's position and an event venue,
finds maxi-taxi bands, PTSC bus routes, taxi stands and inter-island crossings, and
fetches a road polyline for the map.

Example:
    from tnt_transit.route_planner import TransitPlanner, describe_itinerary
    from tnt_transit.event import Event

    event = Event({"id": "carnival-fete", "summary": "Fete", "latitude": 10.2799, "longitude": -61.4651})
    planner = TransitPlanner()
    itinerary = planner.plan_trip((10.6549, -61.5019), event)
    print(describe_itinerary(itinerary))
    path = planner.road_path((10.6549, -61.5019), event)
"""

from .api_client import RoadRouteError, fetch_road_route, road_route_or_straight_line
from .catalog import CATALOG, CatalogError, get_catalog
from .event import Event
from .geo import distance_km, nearest_stop
from .islands import classify_island, inter_island_info
from .matching import MaxiRouteInfo, match_maxi_route, match_routes, nearest_taxi_stands
from .route_planner import TransitPlanner, describe_itinerary
from .stop import Stop
