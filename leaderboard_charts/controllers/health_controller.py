"""
Health controller - service check endpoint
"""

from fastapi import APIRouter
from pydantic import BaseModel

from leaderboard_charts.datasource import DataSource


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    datasource: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Confirms the API is up and reports whether a leaderboard source is configured.
    """
    datasource_status = "configured" if DataSource.repository is not None else "not_configured"

    return HealthResponse(
        status="ok",
        datasource=datasource_status
    )
