from .leaderboard_repository import (
    InMemoryLeaderboardRepository,
    InvalidLeaderboardError,
    JsonFileLeaderboardRepository,
    LeaderboardNotFoundError,
    LeaderboardRepository,
    LeaderboardRepositoryError,
    build_repository_from_settings,
)

__all__ = [
    "InMemoryLeaderboardRepository",
    "InvalidLeaderboardError",
    "JsonFileLeaderboardRepository",
    "LeaderboardNotFoundError",
    "LeaderboardRepository",
    "LeaderboardRepositoryError",
    "build_repository_from_settings",
]
