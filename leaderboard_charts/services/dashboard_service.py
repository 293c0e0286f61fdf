"""
DashboardService - fetches the leaderboard once and prepares every chart.
"""

from typing import Any, Optional

from leaderboard_charts.core.config import Settings, get_settings
from leaderboard_charts.models.leaderboard import Member
from leaderboard_charts.repositories.leaderboard_repository import LeaderboardRepository
from leaderboard_charts.services.chart_renderer import ChartRenderer, CollectingChartRenderer
from leaderboard_charts.services.chart_service import CANVAS_IDS, ChartService, top_members


class DashboardServiceError(Exception):
    """Base exception for dashboard service errors."""
    pass


class ChartNotFoundError(DashboardServiceError):
    """Raised when a canvas id does not name one of the charts."""
    pass


class DashboardService:
    def __init__(
        self,
        repository: LeaderboardRepository,
        renderer: Optional[ChartRenderer] = None,
        settings: Optional[Settings] = None
    ):
        self.repository = repository
        self.renderer = renderer or CollectingChartRenderer()
        self.settings = settings or get_settings()

    async def build(self) -> dict[str, dict[str, Any]]:
        """
        Fetch the leaderboard and draw the four charts.

        Returns the configs keyed by canvas id when the renderer collects them,
        otherwise an empty dict (the renderer already drew them).
        """
        leaderboard = await self.repository.get_leaderboard()

        ChartService(self.renderer, self.settings).load_all(leaderboard)

        if isinstance(self.renderer, CollectingChartRenderer):
            return dict(self.renderer.charts)
        return {}

    async def build_chart(self, canvas_id: str) -> dict[str, Any]:
        """Get a single chart config by canvas id."""
        if canvas_id not in CANVAS_IDS:
            raise ChartNotFoundError(f"Chart {canvas_id} not found")

        renderer = CollectingChartRenderer()
        charts = await DashboardService(self.repository, renderer, self.settings).build()
        return charts[canvas_id]

    async def ranked_members(self, limit: Optional[int] = None) -> list[tuple[int, Member]]:
        """Members by descending score with their 1-based rank."""
        leaderboard = await self.repository.get_leaderboard()
        return list(enumerate(top_members(leaderboard.members, limit), start=1))
