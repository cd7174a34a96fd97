# skyroute/core/errors.py
from typing import Optional


class OptimizerError(Exception):
    """Base class for failures talking to the route optimization service."""


class OptimizerTransportError(OptimizerError):
    """
    The service could not be reached, timed out, or answered with something
    that is not a usable JSON document.
    """


class OptimizerRejection(OptimizerError):
    """
    The service answered but refused the request (``success: false``).
    """

    def __init__(self, message: Optional[str] = None) -> None:
        self.service_message = message
        super().__init__(message or "Route optimization rejected by service")
