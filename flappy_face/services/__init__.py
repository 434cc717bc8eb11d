"""Service layer helpers."""

from .assets import AssetStore, validate_image
from .errors import InvalidRequest
from .leaderboard import LeaderboardStore, RankResult, clamp_limit, parse_score
from .names import normalize_character, normalize_username

__all__ = [
    "AssetStore",
    "InvalidRequest",
    "LeaderboardStore",
    "RankResult",
    "clamp_limit",
    "normalize_character",
    "normalize_username",
    "parse_score",
    "validate_image",
]
