"""Matching models for AdoptMatch."""

from .compatibility_model import CompatibilityScorer, compute_match_score
from .priority_model import PriorityRanker, PriorityWeights, rank_adopters

__all__ = [
    "CompatibilityScorer",
    "compute_match_score",
    "PriorityRanker",
    "PriorityWeights",
    "rank_adopters",
]
