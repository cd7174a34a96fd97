# skyroute/services/optimizer_client.py
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from skyroute.core.config import settings
from skyroute.core.errors import OptimizerRejection, OptimizerTransportError
from skyroute.core.logger import logger
from skyroute.models.routing import RouteRequest, RouteResult


class OptimizerClient:
    """
    HTTP client for the external route optimization service.

    Sole responsibility:
    - build URLs and JSON bodies for /cities, /optimize and /health
    - turn responses into RouteResult models
    - map every failure onto OptimizerTransportError or OptimizerRejection

    Calls are blocking; the orchestrator runs them in worker threads.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.base_url = (base_url or settings.OPTIMIZER_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.OPTIMIZER_TIMEOUT_S

        if not self.base_url:
            raise ValueError("Optimizer base URL not set. Please set OPTIMIZER_BASE_URL.")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def get_cities(self) -> List[str]:
        """
        GET /cities -> list of city names, in service order.
        """
        data = self._request("GET", "/cities")

        cities = data.get("cities")
        if not isinstance(cities, list) or not all(isinstance(c, str) for c in cities):
            raise OptimizerTransportError("Malformed /cities response: 'cities' must be a list of strings")

        return cities

    def optimize(self, request: RouteRequest) -> RouteResult:
        """
        POST /optimize for one algorithm.

        The service reports refusals as {"success": false, "error": ...},
        sometimes with HTTP 400, so the body is inspected before the status.
        """
        payload = {
            "origin": request.origin,
            "destination": request.destination,
            "algorithm": request.algorithm.value,
        }
        data = self._request("POST", "/optimize", json=payload, allow_rejection=True)

        if data.get("success") is False:
            raise OptimizerRejection(data.get("error"))

        try:
            return RouteResult.model_validate(data)
        except ValidationError as exc:
            raise OptimizerTransportError(f"Malformed /optimize response: {exc}") from exc

    def health(self) -> Dict[str, Any]:
        """
        GET /health on the upstream service.
        """
        return self._request("GET", "/health")

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        allow_rejection: bool = False,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"

        try:
            if method == "GET":
                response = requests.get(url, timeout=self.timeout)
            else:
                response = requests.post(url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            raise OptimizerTransportError(f"{method} {url} failed: {exc}") from exc

        try:
            data = response.json()
        except (ValueError, RecursionError) as exc:
            raise OptimizerTransportError(
                f"{method} {url} returned non-JSON body (HTTP {response.status_code})"
            ) from exc

        if not isinstance(data, dict):
            raise OptimizerTransportError(f"{method} {url} returned {type(data).__name__}, expected an object")

        rejected = allow_rejection and data.get("success") is False
        if response.status_code >= 400 and not rejected:
            raise OptimizerTransportError(f"{method} {url} returned HTTP {response.status_code}")

        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        return data
