# skyroute/services/city_directory.py
from typing import Iterator, List, Tuple

from skyroute.core.errors import OptimizerError
from skyroute.core.logger import logger
from skyroute.services.optimizer_client import OptimizerClient

# Used when the optimization service cannot list its cities.
FALLBACK_CITIES: Tuple[str, ...] = (
    "New York",
    "London",
    "Paris",
    "Tokyo",
    "Dubai",
    "Singapore",
    "Sydney",
    "Los Angeles",
)


class CityDirectory:
    """
    Selectable cities, loaded once per process and read-only afterwards.
    """

    SOURCE_SERVICE = "service"
    SOURCE_FALLBACK = "fallback"

    def __init__(self) -> None:
        self._cities: Tuple[str, ...] = ()
        self._source: str = ""
        self._loaded = False

    def load(self, client: OptimizerClient) -> None:
        """
        Fetch the city list from the service, or fall back to FALLBACK_CITIES.

        The service is trusted: order and duplicates are kept as returned.
        Failures are logged, never raised, and never retried.
        """
        if self._loaded:
            return

        try:
            cities: List[str] = client.get_cities()
        except OptimizerError as exc:
            logger.warning(f"Failed to fetch cities, using fallback list: {exc}")
            self._cities = FALLBACK_CITIES
            self._source = self.SOURCE_FALLBACK
        else:
            self._cities = tuple(cities)
            self._source = self.SOURCE_SERVICE
            logger.info(f"City directory loaded from service: {len(self._cities)} cities")

        self._loaded = True

    @property
    def cities(self) -> Tuple[str, ...]:
        return self._cities

    @property
    def source(self) -> str:
        return self._source

    @property
    def loaded(self) -> bool:
        return self._loaded

    def __contains__(self, city: object) -> bool:
        return city in self._cities

    def __iter__(self) -> Iterator[str]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)
