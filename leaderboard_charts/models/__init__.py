from .leaderboard import Leaderboard, Member, Star

__all__ = [
    "Leaderboard",
    "Member",
    "Star",
]
