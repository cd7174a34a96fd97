# skyroute/api/dependencies.py
"""Shared service instances for the API routers."""
from functools import lru_cache

from skyroute.services.city_directory import CityDirectory
from skyroute.services.optimizer_client import OptimizerClient
from skyroute.services.orchestrator import RouteOrchestrator
from skyroute.services.presentation import PresentationSequencer


@lru_cache(maxsize=1)
def get_optimizer_client() -> OptimizerClient:
    return OptimizerClient()


@lru_cache(maxsize=1)
def get_city_directory() -> CityDirectory:
    return CityDirectory()


@lru_cache(maxsize=1)
def get_sequencer() -> PresentationSequencer:
    return PresentationSequencer()


@lru_cache(maxsize=1)
def get_orchestrator() -> RouteOrchestrator:
    """Single orchestrator for the (single, guest) user, with the sequencer attached."""
    orchestrator = RouteOrchestrator(
        client=get_optimizer_client(),
        directory=get_city_directory(),
    )
    orchestrator.subscribe(get_sequencer())
    return orchestrator
