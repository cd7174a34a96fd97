# skyroute/services/presentation.py
from typing import List, Optional, Tuple

from pydantic import BaseModel

from skyroute.core.logger import logger
from skyroute.models.view import Page, SearchStatus, ViewState


class AnimationCue(BaseModel):
    """
    One step of a reveal timeline, played by the page.

    offset is relative to the end of the previous cue (negative overlaps).
    """
    target: str
    duration: float
    offset: float = 0.0
    stagger: float = 0.0
    ease: str = "power2.out"


class Timeline(BaseModel):
    name: str
    cues: List[AnimationCue]


HOME_INTRO = Timeline(
    name="home-intro",
    cues=[
        AnimationCue(target=".hero-title", duration=1.0, ease="power3.out"),
        AnimationCue(target=".hero-subtitle", duration=0.8, offset=-0.5),
        AnimationCue(target=".hero-button", duration=0.6, offset=-0.3, ease="back.out(1.7)"),
        AnimationCue(target=".feature-card", duration=0.8, stagger=0.2, ease="power3.out"),
        AnimationCue(target=".stat-number", duration=2.0, stagger=0.3),
    ],
)

SEARCH_PULSE = Timeline(
    name="search-pulse",
    cues=[AnimationCue(target=".search-button", duration=0.2, ease="power1.inOut")],
)

RESULTS_REVEAL = Timeline(
    name="results-reveal",
    cues=[
        AnimationCue(target=".result-card", duration=0.8, ease="power3.out"),
        AnimationCue(target=".route-path", duration=1.0, offset=-0.3),
        AnimationCue(target=".metric-card", duration=0.6, offset=-0.5, stagger=0.15, ease="back.out(1.5)"),
        AnimationCue(target=".city-marker", duration=0.8, stagger=0.2, ease="elastic.out(1, 0.5)"),
        AnimationCue(target=".flight-path", duration=2.0, ease="power2.inOut"),
    ],
)


class PresentationSequencer:
    """
    Picks the reveal timeline for the page from view transitions.

    Only reads the view; register it with RouteOrchestrator.subscribe().
    """

    def __init__(self) -> None:
        self.current: Optional[Timeline] = None
        self.history: List[Tuple[int, str]] = []

    def __call__(self, previous: ViewState, current: ViewState) -> None:
        timeline = self._select(previous, current)
        if timeline is None:
            return

        self.current = timeline
        self.history.append((current.search.generation, timeline.name))
        logger.debug(f"Presentation timeline -> {timeline.name}")

    @staticmethod
    def _select(previous: ViewState, current: ViewState) -> Optional[Timeline]:
        if current.page != previous.page and current.page == Page.HOME:
            return HOME_INTRO

        status = current.search.status
        if status == previous.search.status and current.search.generation == previous.search.generation:
            return None

        if status == SearchStatus.SEARCHING:
            return SEARCH_PULSE
        if status == SearchStatus.SUCCESS and current.page == Page.OPTIMIZER:
            return RESULTS_REVEAL
        return None
