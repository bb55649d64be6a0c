import logging
import threading
from .api_client import fetch_road_route, road_route_or_straight_line
from .catalog import AIRPORT, CATALOG
from .config import Config
from .event import Event
from .geo import distance_km
from .islands import inter_island_info
from .matching import BUS, MAXI, match_maxi_route, match_routes, nearest_taxi_stands


class RouteRequestTracker:
    """
    Tracks the latest road-route request per key (usually an event id) so that a
    response arriving after a newer request for the same key can be dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = {}

    def begin(self, key):
        with self._lock:
            ticket = self._latest.get(key, 0) + 1
            self._latest[key] = ticket
            return ticket

    def is_current(self, key, ticket):
        with self._lock:
            return self._latest.get(key) == ticket


class TransitPlanner:
    def __init__(self, catalog=CATALOG, fetch=fetch_road_route):
        """
        Initialize the planner over a transit catalog and a road-route fetcher.
        """
        self.catalog = catalog
        self.fetch = fetch
        self.requests = RouteRequestTracker()

    def is_routable_event(self, event: Event):
        """
        An event can be routed to only if its record carries a venue position.
        """
        if event.coordinates is None:
            logging.debug(f"Skipping event '{event.summary}' - no coordinates")
            return False
        return True

    def plan_trip(self, origin, event: Event):
        """
        Builds the rider-facing itinerary from origin to an event's venue.
        Returns None if the event has no coordinates.
        """
        if not self.is_routable_event(event):
            logging.warning(f"Event '{event.summary}' cannot be routed to")
            return None

        destination = event.coordinates
        logging.info(f"Planning trip from {origin} to '{event.summary}' at {destination}")

        maxi = match_maxi_route(origin, destination, catalog=self.catalog)
        inter_island = inter_island_info(origin, destination, transits=self.catalog.inter_island_transits)

        advisories = []
        threshold = Config.LAST_MILE_ADVISORY_KM
        if maxi is None:
            advisories.append("No direct maxi route found between these locations.")
        elif maxi.needs_advisory(threshold):
            if maxi.distance_to_start > threshold:
                advisories.append(
                    f"The {maxi.from_stop} stop is {maxi.distance_to_start:.1f} km from you; "
                    "consider a taxi to get there."
                )
            if maxi.distance_from_end > threshold:
                advisories.append(
                    f"The event is {maxi.distance_from_end:.1f} km from the {maxi.to_stop} stop; "
                    "consider a taxi for the last leg."
                )
        if inter_island and inter_island.needs_inter_island:
            advisories.append("This trip crosses between Trinidad and Tobago.")

        itinerary = {
            "event_id": event.id,
            "event_summary": event.summary,
            "origin": {"lat": origin[0], "lon": origin[1]},
            "destination": {"lat": destination[0], "lon": destination[1]},
            "direct_km": distance_km(origin[0], origin[1], destination[0], destination[1]),
            "maxi": maxi,
            "maxi_routes": match_routes(origin, destination, MAXI, catalog=self.catalog),
            "bus_routes": match_routes(origin, destination, BUS, catalog=self.catalog),
            "taxi_stands": nearest_taxi_stands(origin, catalog=self.catalog),
            "inter_island": inter_island,
            "advisories": advisories,
        }
        logging.info(
            f"Planned trip to '{event.summary}': maxi={'yes' if maxi else 'no'}, "
            f"{len(itinerary['bus_routes'])} bus routes, {len(itinerary['taxi_stands'])} taxi stands"
        )
        return itinerary

    def road_path(self, origin, event: Event):
        """
        Road polyline to the event, or a straight line if routing fails.
        Returns None if a newer request for the same event started meanwhile.
        """
        if not self.is_routable_event(event):
            return None
        key = event.id if event.id is not None else event.coordinates
        ticket = self.requests.begin(key)
        path = road_route_or_straight_line(origin, event.coordinates, fetch=self.fetch)
        if not self.requests.is_current(key, ticket):
            logging.info(f"Discarding stale road route for '{event.summary}'")
            return None
        return path


def describe_itinerary(itinerary):
    """Plain-text summary of an itinerary for a detail sheet."""
    lines = [f"🚐 GETTING TO {itinerary['event_summary'] or 'THE EVENT'} 🚐", ""]
    lines.append(f"📏 Straight-line distance: {itinerary['direct_km']:.1f} km")

    maxi = itinerary.get("maxi")
    if maxi:
        lines.append(
            f"🟢 Maxi: take the {maxi.route.color} band ({maxi.route.route}) "
            f"from {maxi.from_stop} to {maxi.to_stop}, fare {maxi.route.fare}"
        )
        lines.append(f"   Walk to stop: {maxi.distance_to_start:.1f} km, from stop: {maxi.distance_from_end:.1f} km")

    for route in itinerary.get("bus_routes", []):
        lines.append(f"🚌 Bus {route.route_number}: {route.route_name}")

    stands = itinerary.get("taxi_stands", [])
    if stands:
        lines.append("🚕 Nearby taxi stands:")
        for stand in stands:
            lines.append(f"   {stand.name} (wait {stand.estimated_wait})")

    inter_island = itinerary.get("inter_island")
    if inter_island and inter_island.needs_inter_island and inter_island.transit_points:
        departure, arrival = inter_island.transit_points
        icon = "✈️" if departure.type == AIRPORT else "⛴️"
        lines.append(
            f"{icon} Cross via {departure.name} to {arrival.name} "
            f"({departure.travel_time}, {departure.fare})"
        )

    for advisory in itinerary.get("advisories", []):
        lines.append(f"⚠️ {advisory}")

    return "\n".join(lines)
