"""
Pytest fixtures and configuration for all tests.
"""

import pytest

from leaderboard_charts.core.config import Settings
from leaderboard_charts.models.leaderboard import Leaderboard


def _star(member_id, day, star, moment, minutes, stars_after, points_after):
    return {
        "memberId": member_id,
        "dayNr": day,
        "starNr": star,
        "getStarMoment": moment,
        "timeTaken": minutes,
        "nrOfStarsAfterThisOne": stars_after,
        "nrOfPointsAfterThisOne": points_after,
    }


@pytest.fixture
def settings():
    """Settings independent of the environment."""
    return Settings(
        leaderboard_path=None,
        event_year=2017,
        top_members=3,
        days_in_event=25,
    )


@pytest.fixture
def sample_leaderboard_data():
    """
    Leaderboard payload as emitted by the data-access layer (camelCase keys).

    - Alice: both stars of day 1, first star of day 2
    - Bob: both stars of day 1, only the second star of day 2
    - member 3: anonymous, a single star with zero minutes on day 5
    - Dave: no stars
    Bob and member 3 tie on score.
    """
    return {
        "members": [
            {
                "id": "1",
                "name": "Alice",
                "color": "#ff0000",
                "score": 30,
                "stars": [
                    _star("1", 1, 1, "2017-12-01T05:10:00Z", 10, 1, 4),
                    _star("1", 1, 2, "2017-12-01T05:30:00Z", 30, 2, 8),
                    _star("1", 2, 1, "2017-12-02T05:01:00Z", 1, 3, 12),
                ],
            },
            {
                "id": "2",
                "name": "Bob",
                "color": "#00ff00",
                "score": 45,
                "stars": [
                    _star("2", 1, 1, "2017-12-01T05:05:00Z", 5, 1, 4),
                    _star("2", 1, 2, "2017-12-01T05:25:00Z", 25, 2, 8),
                    _star("2", 2, 2, "2017-12-02T06:00:00Z", 60, 3, 11),
                ],
            },
            {
                "id": 3,
                "name": None,
                "color": "#0000ff",
                "score": 45,
                "stars": [
                    _star(3, 5, 1, "2017-12-05T05:00:00Z", 0, 1, 1),
                ],
            },
            {
                "id": "4",
                "name": "Dave",
                "color": "#123456",
                "score": 2,
                "stars": [],
            },
        ],
    }


@pytest.fixture
def sample_leaderboard(sample_leaderboard_data):
    """Sample payload validated into models."""
    return Leaderboard.model_validate(sample_leaderboard_data)
