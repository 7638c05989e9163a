"""Utility modules for AdoptMatch."""

from .labels import label_for
from .helpers import calculate_profile_completeness, clamp_score, round_half_up
from .validators import normalize_code

__all__ = [
    "label_for",
    "calculate_profile_completeness",
    "clamp_score",
    "round_half_up",
    "normalize_code",
]
