# skyroute/api/v1/routes_cities.py
from fastapi import APIRouter, Depends

from skyroute.api.dependencies import get_city_directory
from skyroute.services.city_directory import CityDirectory
from skyroute.services.projection import (
    CITY_COORDINATES,
    FALLBACK_COORDINATE,
    MAP_HEIGHT,
    MAP_WIDTH,
)

router = APIRouter(
    prefix="/cities",
    tags=["cities"],
)


@router.get("/", summary="Selectable cities")
async def list_cities(directory: CityDirectory = Depends(get_city_directory)):
    """
    Cities loaded at startup, and whether they came from the optimizer or
    from the built-in fallback list.
    """
    return {"cities": list(directory.cities), "source": directory.source}


@router.get("/projection", summary="Map coordinates of known cities")
async def projection_table():
    return {
        "width": MAP_WIDTH,
        "height": MAP_HEIGHT,
        "fallback": FALLBACK_COORDINATE,
        "coordinates": CITY_COORDINATES,
    }
