# skyroute/services/orchestrator.py
import asyncio
from typing import Callable, Dict, List, Optional, Union

from skyroute.core.errors import OptimizerError, OptimizerRejection, OptimizerTransportError
from skyroute.core.logger import logger
from skyroute.models.routing import (
    Algorithm,
    ComparedRouteResult,
    ComparisonResult,
    RouteRequest,
    RouteResult,
)
from skyroute.models.view import GuestUser, Page, SearchState, SearchStatus, ViewState
from skyroute.services.city_directory import CityDirectory
from skyroute.services.optimizer_client import OptimizerClient

# Called with (previous, current) after every view transition.
Subscriber = Callable[[ViewState, ViewState], None]

SELECTION_REQUIRED_MESSAGE = "Please select both origin and destination"
OPTIMIZE_FAILED_MESSAGE = "Failed to optimize route"
CONNECT_FAILED_MESSAGE = (
    "Failed to connect to backend. Make sure the route optimization service is running."
)
COMPARE_FAILED_MESSAGE = (
    "Failed to compare algorithms. Make sure the route optimization service is running."
)

# Illustrative figures for the comparison view; the service does not measure them.
COMPARISON_METRICS: Dict[Algorithm, Dict[str, str]] = {
    Algorithm.DIJKSTRA: {
        "algorithm": "Dijkstra",
        "computationTime": "45ms",
        "nodesExplored": "1,250",
        "efficiency": "High reliability",
    },
    Algorithm.ASTAR: {
        "algorithm": "A* Search",
        "computationTime": "28ms",
        "nodesExplored": "680",
        "efficiency": "Best performance",
    },
}


class RouteOrchestrator:
    """
    Owns the view state and drives single searches and algorithm comparisons.

    State is only replaced through search(), compare(), navigate() and
    logout(). Each of them starts a new generation; a response that comes
    back after a newer generation started is dropped instead of applied.
    """

    def __init__(
        self,
        client: Optional[OptimizerClient] = None,
        directory: Optional[CityDirectory] = None,
    ) -> None:
        self.client = client or OptimizerClient()
        self.directory = directory
        self._view = ViewState()
        self._generation = 0
        self._subscribers: List[Subscriber] = []
        logger.info(f"RouteOrchestrator initialised (optimizer at {self.client.base_url}).")

    # ------------------------------------------------------------------ #
    # Read accessors
    # ------------------------------------------------------------------ #

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def state(self) -> SearchState:
        return self._view.search

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    async def search(
        self,
        origin: str,
        destination: str,
        algorithm: Union[Algorithm, str] = Algorithm.DIJKSTRA,
    ) -> SearchState:
        """
        Request one route and install it as the current result.

        1. Reject empty or unknown selections without touching the network.
        2. Move to searching (drops any previous result or comparison).
        3. Await the service and apply the outcome, unless superseded.
        """
        generation = self._next_generation()

        error = self._validate_selection(origin, destination)
        if error:
            self._set_search(SearchState(status=SearchStatus.FAILED, error=error, generation=generation))
            return self.state

        request = RouteRequest(origin=origin, destination=destination, algorithm=Algorithm(algorithm))
        self._set_search(SearchState(status=SearchStatus.SEARCHING, generation=generation))
        logger.info(f"Searching {origin} -> {destination} with {request.algorithm.value} (generation {generation})")

        try:
            result = await self._optimize(request)
        except OptimizerRejection as exc:
            logger.warning(f"Optimization rejected for {origin} -> {destination}: {exc}")
            outcome = SearchState(
                status=SearchStatus.FAILED,
                error=exc.service_message or OPTIMIZE_FAILED_MESSAGE,
                generation=generation,
            )
        except OptimizerTransportError as exc:
            logger.error(f"Search error: {exc}")
            outcome = SearchState(status=SearchStatus.FAILED, error=CONNECT_FAILED_MESSAGE, generation=generation)
        except Exception:
            logger.exception(f"Unexpected search failure for {origin} -> {destination}")
            outcome = SearchState(status=SearchStatus.FAILED, error=CONNECT_FAILED_MESSAGE, generation=generation)
        else:
            logger.info(
                f"Route found by {result.algorithm}: {len(result.path)} cities, distance={result.distance}"
            )
            outcome = SearchState(status=SearchStatus.SUCCESS, result=result, generation=generation)

        self._apply(generation, outcome)
        return self.state

    async def compare(self, origin: str, destination: str) -> SearchState:
        """
        Run dijkstra and astar concurrently for the same pair and pair the
        decorated results by algorithm.

        Both requests must succeed; otherwise the comparison fails as a whole.
        """
        generation = self._next_generation()

        error = self._validate_selection(origin, destination)
        if error:
            self._set_search(SearchState(status=SearchStatus.FAILED, error=error, generation=generation))
            return self.state

        self._set_search(SearchState(status=SearchStatus.SEARCHING, generation=generation))
        logger.info(f"Comparing algorithms for {origin} -> {destination} (generation {generation})")

        algorithms = (Algorithm.DIJKSTRA, Algorithm.ASTAR)
        settled = await asyncio.gather(
            *(
                self._optimize(RouteRequest(origin=origin, destination=destination, algorithm=algo))
                for algo in algorithms
            ),
            return_exceptions=True,
        )
        outcomes = dict(zip(algorithms, settled))

        failures = [(algo, exc) for algo, exc in outcomes.items() if isinstance(exc, BaseException)]
        if failures:
            for algo, exc in failures:
                if isinstance(exc, OptimizerError):
                    logger.error(f"Comparison error ({algo.value}): {exc}")
                else:
                    logger.opt(exception=exc).error(f"Unexpected comparison failure ({algo.value})")
            outcome = SearchState(status=SearchStatus.FAILED, error=COMPARE_FAILED_MESSAGE, generation=generation)
        else:
            comparison = ComparisonResult(
                dijkstra=self._decorate(outcomes[Algorithm.DIJKSTRA], Algorithm.DIJKSTRA),
                astar=self._decorate(outcomes[Algorithm.ASTAR], Algorithm.ASTAR),
            )
            outcome = SearchState(
                status=SearchStatus.SUCCESS,
                result=comparison.dijkstra,
                comparison=comparison,
                generation=generation,
            )

        self._apply(generation, outcome)
        return self.state

    def navigate(self, page: Union[Page, str]) -> ViewState:
        """
        Switch page. The current result is discarded and any in-flight
        request becomes stale.
        """
        generation = self._next_generation()
        self._set_view(ViewState(page=Page(page), user=self._view.user, search=SearchState(generation=generation)))
        return self._view

    def logout(self) -> ViewState:
        """
        Reset to the guest identity and go back to the home page.
        """
        generation = self._next_generation()
        self._set_view(ViewState(page=Page.HOME, user=GuestUser(), search=SearchState(generation=generation)))
        return self._view

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _validate_selection(self, origin: str, destination: str) -> Optional[str]:
        if not origin or not destination:
            return SELECTION_REQUIRED_MESSAGE

        if self.directory is not None and self.directory.loaded:
            for city in (origin, destination):
                if city not in self.directory:
                    return f"Unknown city: {city}"

        return None

    async def _optimize(self, request: RouteRequest) -> RouteResult:
        # Blocking HTTP call runs in a worker thread; the loop stays free.
        return await asyncio.to_thread(self.client.optimize, request)

    @staticmethod
    def _decorate(result: RouteResult, algorithm: Algorithm) -> ComparedRouteResult:
        data = result.model_dump()
        data.update(COMPARISON_METRICS[algorithm])
        return ComparedRouteResult.model_validate(data)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _apply(self, generation: int, outcome: SearchState) -> bool:
        if generation != self._generation:
            logger.debug(
                f"Discarding stale response (generation {generation}, latest {self._generation})"
            )
            return False

        self._set_search(outcome)
        return True

    def _set_search(self, search: SearchState) -> None:
        self._set_view(self._view.model_copy(update={"search": search}))

    def _set_view(self, view: ViewState) -> None:
        previous = self._view
        self._view = view

        for callback in list(self._subscribers):
            try:
                callback(previous, view)
            except Exception:
                logger.exception(f"View subscriber {callback!r} failed")
