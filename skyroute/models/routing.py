# skyroute/models/routing.py

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Algorithm(str, Enum):
    """
    Algorithm names understood by the optimization service.
    """
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"


class RouteRequest(BaseModel):
    """
    Request body for the /search endpoint and for POST /optimize upstream.
    """
    origin: str = ""
    destination: str = ""
    algorithm: Algorithm = Algorithm.DIJKSTRA


class CompareRequest(BaseModel):
    """
    Request body for the /search/compare endpoint.
    """
    origin: str = ""
    destination: str = ""


class RouteResult(BaseModel):
    """
    One algorithm's answer from the optimization service.

    Values are kept exactly as the service sent them. The service formats
    `cost` as a string such as "$1234", so both numbers and strings are
    accepted. Unknown keys (nodesExplored, executionTime, ...) are ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    path: List[str] = Field(min_length=1)
    distance: float
    time: str
    cost: Union[float, str]
    algorithm: str
    success: Optional[bool] = None
    error: Optional[str] = None


class ComparedRouteResult(RouteResult):
    """
    RouteResult decorated with the descriptive metrics shown side by side
    in the comparison view. The metrics are illustrative constants.
    """
    computation_time: str = Field(alias="computationTime")
    nodes_explored: str = Field(alias="nodesExplored")
    efficiency: str


class ComparisonResult(BaseModel):
    dijkstra: ComparedRouteResult
    astar: ComparedRouteResult
