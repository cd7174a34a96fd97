# skyroute/api/v1/routes_view.py
from typing import Optional

from fastapi import APIRouter, Depends

from skyroute.api.dependencies import get_orchestrator, get_sequencer
from skyroute.models.view import NavigateRequest, ViewState
from skyroute.services.orchestrator import RouteOrchestrator
from skyroute.services.presentation import PresentationSequencer, Timeline

router = APIRouter(
    prefix="/view",
    tags=["view"],
)


@router.post("/navigate", response_model=ViewState, summary="Switch page")
async def navigate(
    request: NavigateRequest,
    orchestrator: RouteOrchestrator = Depends(get_orchestrator),
) -> ViewState:
    return orchestrator.navigate(request.page)


@router.post("/logout", response_model=ViewState, summary="Back to the guest identity")
async def logout(orchestrator: RouteOrchestrator = Depends(get_orchestrator)) -> ViewState:
    return orchestrator.logout()


@router.get("/timeline", response_model=Optional[Timeline], summary="Animation timeline to play")
async def timeline(sequencer: PresentationSequencer = Depends(get_sequencer)) -> Optional[Timeline]:
    return sequencer.current
