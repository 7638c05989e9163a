"""Services wrapping the matching core for AdoptMatch."""

from .match_service import MatchService
from .priority_service import PriorityService

__all__ = [
    "MatchService",
    "PriorityService",
]
