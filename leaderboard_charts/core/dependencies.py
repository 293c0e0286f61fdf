"""
FastAPI dependencies for leaderboard repository injection
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from leaderboard_charts.datasource import DataSource
from leaderboard_charts.repositories.leaderboard_repository import LeaderboardRepository


async def get_leaderboard_repository() -> LeaderboardRepository:
    """
    Dependency that hands the configured repository to the endpoints.

    Answers 503 while no leaderboard source is configured.
    """
    if DataSource.repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Leaderboard source not configured (set LEADERBOARD_PATH)",
        )

    return DataSource.get_repository()


# Type alias so the endpoints read cleaner
Repository = Annotated[LeaderboardRepository, Depends(get_leaderboard_repository)]
