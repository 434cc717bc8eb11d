"""Database model exports."""

from .leaderboard import LeaderboardEntry

__all__ = ["LeaderboardEntry"]
