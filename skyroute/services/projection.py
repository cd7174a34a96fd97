# skyroute/services/projection.py
from typing import Dict

from skyroute.models.rendering import Coordinate

# Size of the stylized world map the coordinates refer to.
MAP_WIDTH = 1200
MAP_HEIGHT = 600

# Hand-placed positions on the map image, not a geographic projection.
CITY_COORDINATES: Dict[str, Coordinate] = {
    "New York": Coordinate(x=280, y=220),
    "London": Coordinate(x=560, y=180),
    "Paris": Coordinate(x=580, y=200),
    "Tokyo": Coordinate(x=1040, y=240),
    "Dubai": Coordinate(x=720, y=280),
    "Singapore": Coordinate(x=900, y=340),
    "Sydney": Coordinate(x=1080, y=450),
    "Los Angeles": Coordinate(x=180, y=240),
}

# Every unmapped city lands here, so several of them may overlap.
FALLBACK_COORDINATE = Coordinate(x=MAP_WIDTH / 2, y=MAP_HEIGHT / 2)


def project(city: str) -> Coordinate:
    """
    Map a city name to its point on the map plane.
    """
    return CITY_COORDINATES.get(city, FALLBACK_COORDINATE)


def is_mapped(city: str) -> bool:
    return city in CITY_COORDINATES
