# skyroute/api/v1/routes_search.py
from fastapi import APIRouter, Depends

from skyroute.api.dependencies import get_orchestrator
from skyroute.models.routing import CompareRequest, RouteRequest
from skyroute.models.view import ViewState
from skyroute.services.orchestrator import RouteOrchestrator

router = APIRouter(
    prefix="/search",
    tags=["search"],
)


@router.post(
    "/",
    response_model=ViewState,
    summary="Find a route with one algorithm",
)
async def search(
    request: RouteRequest,
    orchestrator: RouteOrchestrator = Depends(get_orchestrator),
) -> ViewState:
    """
    Ask the optimizer for a route and return the resulting view.

    Validation and service errors are reported in `search.error`, not as
    HTTP errors.
    """
    await orchestrator.search(request.origin, request.destination, request.algorithm)
    return orchestrator.view


@router.post(
    "/compare",
    response_model=ViewState,
    summary="Run Dijkstra and A* side by side",
)
async def compare(
    request: CompareRequest,
    orchestrator: RouteOrchestrator = Depends(get_orchestrator),
) -> ViewState:
    await orchestrator.compare(request.origin, request.destination)
    return orchestrator.view


@router.get("/state", response_model=ViewState, summary="Current view state")
async def current_state(orchestrator: RouteOrchestrator = Depends(get_orchestrator)) -> ViewState:
    return orchestrator.view
