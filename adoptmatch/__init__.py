"""
AdoptMatch - Adopter and pet compatibility scoring

This package contains the compatibility scorer, the adopter priority ranker,
and the services and HTTP API that feed them from a data store.
"""

__version__ = "1.0.0"

from .models.compatibility_model import CompatibilityScorer, compute_match_score
from .models.priority_model import PriorityRanker

__all__ = ["CompatibilityScorer", "PriorityRanker", "compute_match_score"]
