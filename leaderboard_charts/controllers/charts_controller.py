"""
Charts controller - Chart.js configurations for the leaderboard page

The page hands each config to the canvas with the same id.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from leaderboard_charts.core.dependencies import Repository
from leaderboard_charts.repositories.leaderboard_repository import (
    InvalidLeaderboardError,
    LeaderboardNotFoundError,
)
from leaderboard_charts.services.dashboard_service import ChartNotFoundError, DashboardService


router = APIRouter(prefix="/charts", tags=["charts"])


class ChartsResponse(BaseModel):
    """Every chart config keyed by canvas id."""
    charts: dict[str, dict[str, Any]]


class ChartResponse(BaseModel):
    """A single chart config."""
    canvas_id: str
    config: dict[str, Any]


def _repository_http_error(exc: Exception) -> HTTPException:
    """Missing payload is 503, an unreadable one 502."""
    if isinstance(exc, LeaderboardNotFoundError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc)
        )
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=str(exc)
    )


@router.get("", response_model=ChartsResponse)
async def get_charts(repository: Repository):
    """
    Get the four chart configs (stars, day vs time, points, time per star).
    """
    service = DashboardService(repository)

    try:
        charts = await service.build()
    except (LeaderboardNotFoundError, InvalidLeaderboardError) as e:
        raise _repository_http_error(e)

    return ChartsResponse(charts=charts)


@router.get("/{canvas_id}", response_model=ChartResponse)
async def get_chart(canvas_id: str, repository: Repository):
    """
    Get the config for one canvas.
    """
    service = DashboardService(repository)

    try:
        config = await service.build_chart(canvas_id)
    except ChartNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except (LeaderboardNotFoundError, InvalidLeaderboardError) as e:
        raise _repository_http_error(e)

    return ChartResponse(canvas_id=canvas_id, config=config)
