# skyroute/api/v1/routes_health.py
import asyncio

from fastapi import APIRouter, Depends

from skyroute.api.dependencies import get_optimizer_client
from skyroute.core.config import settings
from skyroute.core.errors import OptimizerError
from skyroute.core.logger import logger
from skyroute.services.optimizer_client import OptimizerClient

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check(client: OptimizerClient = Depends(get_optimizer_client)):
    """
    Health check for this service, plus reachability of the optimizer.

    An unreachable optimizer does not make this service unhealthy; the page
    still works with the fallback city list.
    """
    try:
        upstream = await asyncio.to_thread(client.health)
        optimizer = {"reachable": True, "status": upstream.get("status")}
    except OptimizerError as exc:
        logger.warning(f"Optimizer health check failed: {exc}")
        optimizer = {"reachable": False, "status": None}

    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "optimizer": optimizer,
    }
