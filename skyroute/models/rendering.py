# skyroute/models/rendering.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """
    Point on the fixed 1200x600 map plane (origin at the top-left corner).
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class MarkerKind(str, Enum):
    ORIGIN = "origin"
    DESTINATION = "destination"
    TRANSIT = "transit"


class PathSegment(BaseModel):
    """
    Straight line between two consecutive cities of a path.
    """
    from_city: str
    to_city: str
    start: Coordinate
    end: Coordinate


class CityMarker(BaseModel):
    """
    One marker per city in the path.

    For a single-city path the only marker is both origin and destination;
    `kind` then reports ORIGIN.
    """
    city: str
    position: Coordinate
    index: int
    is_origin: bool
    is_destination: bool
    kind: MarkerKind
    color: str
    label: Optional[str] = None


class RouteRendering(BaseModel):
    """
    Everything the map overlay needs to draw a route.

    polyline is a plain list of [x, y] pairs in path order.
    """
    width: int
    height: int
    segments: List[PathSegment]
    markers: List[CityMarker]
    polyline: List[List[float]]
    hops: int
    label: str


class RenderRequest(BaseModel):
    path: List[str] = Field(min_length=1)
