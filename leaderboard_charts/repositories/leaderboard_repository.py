"""
LeaderboardRepository - access to the prepared leaderboard payload.

The payload itself (members, stars and their running totals) is produced by
the data-access layer; repositories only read it and validate it into models.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from leaderboard_charts.core.config import Settings
from leaderboard_charts.models.leaderboard import Leaderboard

logger = logging.getLogger(__name__)


class LeaderboardRepositoryError(Exception):
    """Base exception for leaderboard repository errors."""
    pass


class LeaderboardNotFoundError(LeaderboardRepositoryError):
    """Raised when the leaderboard payload does not exist."""
    pass


class InvalidLeaderboardError(LeaderboardRepositoryError):
    """Raised when the payload cannot be read into a Leaderboard."""
    pass


class LeaderboardRepository:
    """Interface for loading the leaderboard."""

    async def get_leaderboard(self) -> Leaderboard:
        raise NotImplementedError


class JsonFileLeaderboardRepository(LeaderboardRepository):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def get_leaderboard(self) -> Leaderboard:
        """Read and validate the payload file (read runs in a worker thread)."""
        try:
            raw = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except FileNotFoundError:
            raise LeaderboardNotFoundError(f"Leaderboard file {self.path} not found")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidLeaderboardError(f"Could not read {self.path}: {exc}") from exc

        try:
            leaderboard = Leaderboard.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidLeaderboardError(f"Invalid leaderboard payload in {self.path}: {exc}") from exc

        logger.info(f"Loaded leaderboard from {self.path}: {len(leaderboard.members)} members")
        return leaderboard


class InMemoryLeaderboardRepository(LeaderboardRepository):
    """Serves a payload already held in memory (tests, embedding)."""

    def __init__(self, data: Union[Leaderboard, dict[str, Any]]):
        self.data = data

    async def get_leaderboard(self) -> Leaderboard:
        if isinstance(self.data, Leaderboard):
            return self.data
        try:
            return Leaderboard.model_validate(self.data)
        except ValidationError as exc:
            raise InvalidLeaderboardError(f"Invalid leaderboard payload: {exc}") from exc


def build_repository_from_settings(settings: Settings) -> Optional[LeaderboardRepository]:
    if settings.leaderboard_path:
        return JsonFileLeaderboardRepository(settings.leaderboard_path)
    return None
