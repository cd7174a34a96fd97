# skyroute/api/v1/routes_render.py
from fastapi import APIRouter, Depends, HTTPException

from skyroute.api.dependencies import get_orchestrator
from skyroute.models.rendering import RenderRequest, RouteRendering
from skyroute.services.orchestrator import RouteOrchestrator
from skyroute.services.path_renderer import render_path

router = APIRouter(
    prefix="/render",
    tags=["render"],
)


@router.post("/", response_model=RouteRendering, summary="Map primitives for a city path")
async def render(request: RenderRequest) -> RouteRendering:
    return render_path(request.path)


@router.get("/current", response_model=RouteRendering, summary="Map primitives for the current result")
async def render_current(orchestrator: RouteOrchestrator = Depends(get_orchestrator)) -> RouteRendering:
    """
    Render the result currently held by the orchestrator (the Dijkstra side
    after a comparison).
    """
    result = orchestrator.state.result
    if result is None:
        raise HTTPException(status_code=404, detail="No route to render")

    return render_path(result.path)
