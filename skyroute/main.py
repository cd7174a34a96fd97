# skyroute/main.py

import asyncio
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from skyroute.api.dependencies import get_city_directory, get_optimizer_client
from skyroute.api.v1 import (
    routes_cities,
    routes_health,
    routes_render,
    routes_search,
    routes_view,
)
from skyroute.core.config import settings
from skyroute.core.logger import logger

# BASE_DIR = .../skyroute
BASE_DIR = Path(__file__).resolve().parent
# PROJECT_ROOT = parent of skyroute → .../
PROJECT_ROOT = BASE_DIR.parent
# STATIC_DIR = .../static
STATIC_DIR = PROJECT_ROOT / "static"
INDEX_FILE = STATIC_DIR / "index.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # City directory is loaded exactly once, before the first request.
    directory = get_city_directory()
    await asyncio.to_thread(directory.load, get_optimizer_client())
    logger.info(f"{settings.APP_NAME} ready with {len(directory)} cities ({directory.source}).")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Flight route optimizer front-end with a world map served from /map.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_cities.router, prefix="", tags=["cities"])
    app.include_router(routes_search.router, prefix="", tags=["search"])
    app.include_router(routes_view.router, prefix="", tags=["view"])
    app.include_router(routes_render.router, prefix="", tags=["render"])

    # Serve /static/* from the static folder at project root
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/map")
    async def map_page() -> FileResponse:
        """
        Serve the frontend map page from static/index.html
        """
        logger.info(f"Serving /map from {INDEX_FILE}")

        if not INDEX_FILE.exists():
            logger.error(f"index.html not found at {INDEX_FILE}")
            raise HTTPException(status_code=404, detail="index.html not found")

        return FileResponse(INDEX_FILE)

    return app


app = create_app()
