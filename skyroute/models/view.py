# skyroute/models/view.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from skyroute.models.routing import ComparisonResult, RouteResult


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    FAILED = "failed"


class SearchState(BaseModel):
    """
    Immutable snapshot of the search lifecycle.

    - idle:      nothing requested yet (or discarded by navigation)
    - searching: a request is in flight
    - success:   `result` is set; `comparison` too after a comparison run,
                 in which case `result` is the dijkstra side
    - failed:    `error` holds the user-facing message
    """
    model_config = ConfigDict(frozen=True)

    status: SearchStatus = SearchStatus.IDLE
    result: Optional[RouteResult] = None
    comparison: Optional[ComparisonResult] = None
    error: Optional[str] = None
    generation: int = 0


class Page(str, Enum):
    HOME = "home"
    OPTIMIZER = "optimizer"


class GuestUser(BaseModel):
    """
    Static identity; there is no real authentication.
    """
    model_config = ConfigDict(frozen=True)

    name: str = "Guest"
    email: str = "guest@skyroute.com"


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Page = Page.HOME
    user: GuestUser = GuestUser()
    search: SearchState = SearchState()


class NavigateRequest(BaseModel):
    page: Page
