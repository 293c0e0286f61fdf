"""
Unit tests for the leaderboard repositories
"""

import json

import pytest

from leaderboard_charts.models.leaderboard import Leaderboard
from leaderboard_charts.repositories.leaderboard_repository import (
    InMemoryLeaderboardRepository,
    InvalidLeaderboardError,
    JsonFileLeaderboardRepository,
    LeaderboardNotFoundError,
    build_repository_from_settings,
)


class TestJsonFileLeaderboardRepository:
    """Test suite for the JSON file repository."""

    @pytest.mark.asyncio
    async def test_get_leaderboard(self, tmp_path, sample_leaderboard_data):
        path = tmp_path / "leaderboard.json"
        path.write_text(json.dumps(sample_leaderboard_data), encoding="utf-8")

        leaderboard = await JsonFileLeaderboardRepository(path).get_leaderboard()

        assert isinstance(leaderboard, Leaderboard)
        assert [m.id for m in leaderboard.members] == ["1", "2", "3", "4"]
        assert len(leaderboard.all_stars()) == 7

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        repository = JsonFileLeaderboardRepository(tmp_path / "missing.json")

        with pytest.raises(LeaderboardNotFoundError):
            await repository.get_leaderboard()

    @pytest.mark.asyncio
    async def test_malformed_json(self, tmp_path):
        path = tmp_path / "leaderboard.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidLeaderboardError):
            await JsonFileLeaderboardRepository(path).get_leaderboard()

    @pytest.mark.asyncio
    async def test_wrong_shape(self, tmp_path):
        path = tmp_path / "leaderboard.json"
        path.write_text(json.dumps({"members": "everyone"}), encoding="utf-8")

        with pytest.raises(InvalidLeaderboardError):
            await JsonFileLeaderboardRepository(path).get_leaderboard()


class TestInMemoryLeaderboardRepository:
    @pytest.mark.asyncio
    async def test_from_dict(self, sample_leaderboard_data):
        leaderboard = await InMemoryLeaderboardRepository(sample_leaderboard_data).get_leaderboard()

        assert leaderboard.members[1].name == "Bob"

    @pytest.mark.asyncio
    async def test_from_model_returns_same_object(self, sample_leaderboard):
        leaderboard = await InMemoryLeaderboardRepository(sample_leaderboard).get_leaderboard()

        assert leaderboard is sample_leaderboard

    @pytest.mark.asyncio
    async def test_invalid_dict(self):
        with pytest.raises(InvalidLeaderboardError):
            await InMemoryLeaderboardRepository({"members": [{"name": "no id"}]}).get_leaderboard()


class TestBuildRepositoryFromSettings:
    def test_without_path(self, settings):
        assert build_repository_from_settings(settings) is None

    def test_with_path(self, settings):
        configured = settings.model_copy(update={"leaderboard_path": "data/leaderboard.json"})

        repository = build_repository_from_settings(configured)

        assert isinstance(repository, JsonFileLeaderboardRepository)
        assert repository.path.name == "leaderboard.json"
