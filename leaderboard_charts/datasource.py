"""
Leaderboard data source setup

Holds the repository configured for this process
"""

import logging
from typing import Optional

from leaderboard_charts.core.config import get_settings
from leaderboard_charts.repositories.leaderboard_repository import (
    LeaderboardRepository,
    build_repository_from_settings,
)

logger = logging.getLogger(__name__)


class DataSource:
    """Singleton holding the leaderboard repository"""

    repository: Optional[LeaderboardRepository] = None

    @classmethod
    def connect(cls):
        """Build the repository from settings"""
        if cls.repository is None:
            cls.repository = build_repository_from_settings(get_settings())

            if cls.repository is None:
                logger.warning("⚠️ LEADERBOARD_PATH not set, charts are unavailable")
            else:
                logger.info(f"✅ Leaderboard source ready: {type(cls.repository).__name__}")

    @classmethod
    def disconnect(cls):
        """Drop the repository"""
        if cls.repository is not None:
            cls.repository = None
            logger.info("Leaderboard source released")

    @classmethod
    def get_repository(cls) -> LeaderboardRepository:
        """Return the configured repository"""
        if cls.repository is None:
            raise RuntimeError("Leaderboard source not configured. Set LEADERBOARD_PATH.")
        return cls.repository
