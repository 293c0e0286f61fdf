"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from leaderboard_charts.main import app
from leaderboard_charts.datasource import DataSource
from leaderboard_charts.repositories.leaderboard_repository import InMemoryLeaderboardRepository


@pytest.fixture
def repository(sample_leaderboard_data):
    return InMemoryLeaderboardRepository(sample_leaderboard_data)


@pytest.fixture
async def client(repository):
    """
    HTTP client for testing API endpoints.

    Points the data source at the in-memory sample leaderboard.
    """
    original_repository = DataSource.repository
    DataSource.repository = repository

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    DataSource.repository = original_repository


@pytest.fixture
async def unconfigured_client():
    """HTTP client with no leaderboard source configured."""
    original_repository = DataSource.repository
    DataSource.repository = None

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    DataSource.repository = original_repository
