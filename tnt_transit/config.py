import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """
    Configuration class for tnt-transit.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Timezone configuration
    TIMEZONE = os.environ.get('TIMEZONE', 'America/Port_of_Spain')

    # Road routing (OSRM)
    OSRM_URL = os.environ.get('OSRM_URL', 'https://router.project-osrm.org')
    ROUTE_TIMEOUT = float(os.environ.get('ROUTE_TIMEOUT', 10))
    ROUTE_RETRIES = int(os.environ.get('ROUTE_RETRIES', 1))

    # Matching thresholds
    STOP_PROXIMITY_DEGREES = float(os.environ.get('STOP_PROXIMITY_DEGREES', 0.05))  # ~5.5km in Trinidad
    LAST_MILE_ADVISORY_KM = float(os.environ.get('LAST_MILE_ADVISORY_KM', 1.0))
    PREFER_FERRY = os.environ.get('PREFER_FERRY', 'False') == 'True'
    TAXI_STAND_LIMIT = int(os.environ.get('TAXI_STAND_LIMIT', 3))
