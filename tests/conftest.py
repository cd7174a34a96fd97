# tests/conftest.py
import os
import sys
import threading
from typing import Callable, Dict, List, Optional

import pytest

# Add the project root directory to sys.path so that "import skyroute" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from skyroute.core.errors import OptimizerRejection, OptimizerTransportError  # noqa: E402
from skyroute.models.routing import RouteRequest, RouteResult  # noqa: E402

SERVICE_LABELS = {"dijkstra": "Dijkstra", "astar": "A*"}


def make_result(path: List[str], algorithm: str = "dijkstra", **overrides) -> RouteResult:
    data = {
        "path": path,
        "distance": 10850.0,
        "time": "13.6 hours",
        "cost": "$1085",
        "algorithm": SERVICE_LABELS.get(algorithm, algorithm),
        "success": True,
    }
    data.update(overrides)
    return RouteResult.model_validate(data)


class FakeOptimizerClient:
    """
    In-memory stand-in for OptimizerClient.

    `routes` maps (origin, destination) to a path; `hooks` maps an algorithm
    name to a callable run (in the worker thread) before answering, which
    may block or raise.
    """

    def __init__(
        self,
        cities: Optional[List[str]] = None,
        routes: Optional[Dict[tuple, List[str]]] = None,
    ) -> None:
        self.base_url = "http://optimizer.test/api"
        self.cities = cities
        self.routes = routes or {}
        self.hooks: Dict[str, Callable[[RouteRequest], None]] = {}
        self.calls: List[RouteRequest] = []
        self._lock = threading.Lock()

    def get_cities(self) -> List[str]:
        if self.cities is None:
            raise OptimizerTransportError("GET /cities failed: connection refused")
        return list(self.cities)

    def optimize(self, request: RouteRequest) -> RouteResult:
        with self._lock:
            self.calls.append(request)

        hook = self.hooks.get(request.algorithm.value)
        if hook is not None:
            hook(request)

        key = (request.origin, request.destination)
        if key not in self.routes:
            raise OptimizerRejection(f"No route from {request.origin} to {request.destination}")

        return make_result(self.routes[key], request.algorithm.value)

    def health(self) -> dict:
        return {"status": "healthy", "message": "Enhanced Flight Route Optimizer API is running"}


@pytest.fixture
def fake_client() -> FakeOptimizerClient:
    return FakeOptimizerClient(
        cities=["New York", "London", "Paris", "Tokyo", "Dubai", "Singapore", "Sydney", "Los Angeles", "Mumbai"],
        routes={
            ("New York", "Tokyo"): ["New York", "Los Angeles", "Tokyo"],
            ("London", "Paris"): ["London", "Paris"],
            ("London", "Sydney"): ["London", "Dubai", "Singapore", "Sydney"],
        },
    )
