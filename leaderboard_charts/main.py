"""
API entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from leaderboard_charts.core.config import get_settings
from leaderboard_charts.datasource import DataSource

from leaderboard_charts.controllers.charts_controller import router as charts_router
from leaderboard_charts.controllers.leaderboard_controller import router as leaderboard_router
from leaderboard_charts.controllers.health_controller import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by the explicit list (or "*")."""
    if not origin:
        return False
    return "*" in CORS_ORIGINS or origin in CORS_ORIGINS


class CORSMiddleware(BaseHTTPMiddleware):
    """
    CORS middleware that answers OPTIONS preflight before routing.

    The chart page is served from another origin and only reads.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, OPTIONS",
                        "Access-Control-Allow-Headers": "Content-Type, Accept, Origin, X-Requested-With",
                        "Access-Control-Max-Age": "86400",  # Cache preflight for 24 hours
                    }
                )
            return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    DataSource.connect()
    yield
    DataSource.disconnect()

app = FastAPI(
    title="Leaderboard Charts API",
    description="Chart.js configurations for a private Advent of Code leaderboard",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

app.include_router(health_router)
app.include_router(charts_router)
app.include_router(leaderboard_router)


@app.get("/")
async def root():
    # Root endpoint, confirms the API is up
    return {
        "name": "Leaderboard Charts API",
        "version": "1.0.0",
        "docs": "/docs"
    }
