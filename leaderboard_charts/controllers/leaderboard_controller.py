"""
Leaderboard controller - ranked member list

Same ranking the time-per-star chart uses to pick its top members.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from leaderboard_charts.core.dependencies import Repository
from leaderboard_charts.repositories.leaderboard_repository import (
    InvalidLeaderboardError,
    LeaderboardNotFoundError,
)
from leaderboard_charts.services.dashboard_service import DashboardService


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


class LeaderboardEntryResponse(BaseModel):
    """Leaderboard entry (member and totals)."""
    rank: int
    member_id: str
    name: str
    color: str
    score: int
    stars: int


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntryResponse]


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    repository: Repository,
    limit: Optional[int] = Query(None, ge=1, le=500)
):
    """
    Get the members ordered by score.
    """
    service = DashboardService(repository)

    try:
        ranked = await service.ranked_members(limit)
    except LeaderboardNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except InvalidLeaderboardError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return LeaderboardResponse(
        entries=[
            LeaderboardEntryResponse(
                rank=rank,
                member_id=m.id,
                name=m.display_name,
                color=m.color,
                score=m.score,
                stars=len(m.stars)
            )
            for rank, m in ranked
        ]
    )
