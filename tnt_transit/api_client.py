import logging
import requests
from .config import Config


class RoadRouteError(Exception):
    """Raised when a road polyline could not be fetched or parsed."""


def _route_url(origin, destination):
    base_url = (Config.OSRM_URL or "https://router.project-osrm.org").rstrip("/")
    (from_lat, from_lon), (to_lat, to_lon) = origin, destination
    # OSRM takes lon,lat pairs
    return f"{base_url}/route/v1/driving/{from_lon},{from_lat};{to_lon},{to_lat}"


def _parse_geometry(data):
    if not isinstance(data, dict):
        raise RoadRouteError("Unexpected OSRM response format")
    if data.get("code") != "Ok" or not data.get("routes"):
        raise RoadRouteError(f"Route not found (code={data.get('code')}, message={data.get('message')})")
    try:
        coordinates = data["routes"][0]["geometry"]["coordinates"]
        return [(float(lat), float(lon)) for lon, lat in coordinates]
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise RoadRouteError(f"Malformed route geometry: {e}") from e


def fetch_road_route(origin, destination):
    """
    Fetches a driving polyline between two (lat, lon) points from OSRM.

    Transport errors and non-200 responses are retried Config.ROUTE_RETRIES times.
    Raises RoadRouteError on failure; callers choose how to degrade.
    """
    url = _route_url(origin, destination)
    params = {"overview": "full", "geometries": "geojson"}
    attempts = 1 + max(Config.ROUTE_RETRIES, 0)

    last_error = None
    for attempt in range(1, attempts + 1):
        try:
            logging.debug(f"Requesting road route (attempt {attempt}/{attempts}): {url}")
            response = requests.get(url, params=params, timeout=Config.ROUTE_TIMEOUT)
            if response.status_code != 200:
                logging.warning(f"OSRM returned {response.status_code}: {response.text[:200]}")
                last_error = RoadRouteError(f"HTTP {response.status_code} from routing service")
                continue
            try:
                data = response.json()
            except ValueError as e:
                raise RoadRouteError(f"Invalid JSON from routing service: {e}") from e
            path = _parse_geometry(data)
            logging.info(f"Road route fetched with {len(path)} points")
            return path
        except requests.exceptions.Timeout as e:
            logging.warning(f"Timeout fetching road route from {url}")
            last_error = RoadRouteError(f"Timeout after {Config.ROUTE_TIMEOUT}s")
            last_error.__cause__ = e
        except requests.exceptions.RequestException as e:
            logging.warning(f"Request error fetching road route: {str(e)}")
            last_error = RoadRouteError(f"Request error: {str(e)}")
            last_error.__cause__ = e

    logging.error(f"Road route failed after {attempts} attempts: {last_error}")
    raise last_error


def road_route_or_straight_line(origin, destination, fetch=fetch_road_route):
    """
    The one fallback policy for map polylines: use the road route when it can be
    fetched, otherwise a straight two-point line between the ends.
    """
    try:
        return fetch(origin, destination)
    except RoadRouteError as e:
        logging.warning(f"Falling back to straight line between {origin} and {destination}: {e}")
        return [tuple(origin), tuple(destination)]
