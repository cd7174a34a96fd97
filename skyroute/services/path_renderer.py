# skyroute/services/path_renderer.py
from typing import List, Sequence

from skyroute.core.logger import logger
from skyroute.models.rendering import (
    CityMarker,
    Coordinate,
    MarkerKind,
    PathSegment,
    RouteRendering,
)
from skyroute.services.projection import MAP_HEIGHT, MAP_WIDTH, is_mapped, project

ORIGIN_COLOR = "#10b981"
DESTINATION_COLOR = "#ef4444"
TRANSIT_COLOR = "#3b82f6"


def render_path(path: Sequence[str]) -> RouteRendering:
    """
    Turn an ordered city sequence into map overlay primitives.

    - one segment per consecutive pair, in path order (n - 1 segments)
    - one marker per city (n markers); the first is the origin, the last
      the destination, everything in between is transit
    - unknown cities are drawn at the fallback coordinate

    Output depends on `path` only.
    """
    if not path:
        raise ValueError("Cannot render an empty path.")

    coords: List[Coordinate] = [project(city) for city in path]

    unmapped = [city for city in path if not is_mapped(city)]
    if unmapped:
        logger.debug(f"No map position for {unmapped}; drawn at the fallback coordinate")

    return RouteRendering(
        width=MAP_WIDTH,
        height=MAP_HEIGHT,
        segments=_build_segments(path, coords),
        markers=_build_markers(path, coords),
        polyline=[[c.x, c.y] for c in coords],
        hops=len(path) - 1,
        label=f"{path[0]} → {path[-1]}",
    )


def _build_segments(path: Sequence[str], coords: List[Coordinate]) -> List[PathSegment]:
    return [
        PathSegment(
            from_city=path[i],
            to_city=path[i + 1],
            start=coords[i],
            end=coords[i + 1],
        )
        for i in range(len(path) - 1)
    ]


def _build_markers(path: Sequence[str], coords: List[Coordinate]) -> List[CityMarker]:
    last = len(path) - 1
    markers: List[CityMarker] = []

    for idx, (city, coord) in enumerate(zip(path, coords)):
        is_origin = idx == 0
        is_destination = idx == last

        # Origin wins when a single city is both ends.
        if is_origin:
            kind, color, label = MarkerKind.ORIGIN, ORIGIN_COLOR, "START"
        elif is_destination:
            kind, color, label = MarkerKind.DESTINATION, DESTINATION_COLOR, "END"
        else:
            kind, color, label = MarkerKind.TRANSIT, TRANSIT_COLOR, None

        markers.append(
            CityMarker(
                city=city,
                position=coord,
                index=idx,
                is_origin=is_origin,
                is_destination=is_destination,
                kind=kind,
                color=color,
                label=label,
            )
        )

    return markers
