"""
Compatibility model for adopter and pet matching.
Folds the ordered compatibility dimensions into a 0-100 score with explanations.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from loguru import logger

from ..schemas.adopter_profile import AdopterProfile
from ..schemas.match_result import CriterionStatus, MatchCriterion, MatchResult
from ..schemas.pet_preferences import PetTutorPreferences
from ..utils.helpers import clamp_score
from .dimensions import DIMENSIONS, Dimension


AdopterInput = Union[AdopterProfile, Mapping[str, Any]]
PreferencesInput = Union[PetTutorPreferences, Mapping[str, Any]]


class CompatibilityScorer:
    """
    Deterministic compatibility scorer.

    Every dimension that applies weighs 1 and earns 1.0 on a match, 0.5 when
    it is neutral and 0.0 on a mismatch. The score is the earned share of the
    total, as a 0-100 integer. A pet without any applicable dimension gets a
    ``None`` score.
    """

    def __init__(self, dimensions: Sequence[Dimension] = DIMENSIONS):
        """Initialize the scorer with an ordered list of dimensions."""
        self.dimensions = tuple(dimensions)

    def score(self, adopter: AdopterInput, preferences: PreferencesInput) -> MatchResult:
        """
        Score one adopter against one pet's tutor preferences.

        Args:
            adopter: Adopter profile (or a mapping with its fields)
            preferences: Pet tutor preferences (or a mapping with its fields)

        Returns:
            MatchResult with score, highlights, concerns and all criteria
        """
        adopter = self._as_adopter(adopter)
        preferences = self._as_preferences(preferences)

        criteria: List[MatchCriterion] = []
        earned_weight = 0.0

        for dimension in self.dimensions:
            outcome = dimension.evaluate(adopter, preferences)
            if outcome is None:
                continue
            earned_weight += outcome.credit
            criteria.append(
                MatchCriterion(label=dimension.label, status=outcome.status, message=outcome.message)
            )

        total_weight = len(criteria)
        if total_weight == 0:
            return MatchResult.empty()

        score = clamp_score(earned_weight / total_weight * 100)
        logger.debug(f"Match score {score} ({earned_weight}/{total_weight} criteria weight)")

        return MatchResult(
            score=score,
            highlights=[c.message for c in criteria if c.status == CriterionStatus.MATCH],
            concerns=[c.message for c in criteria if c.status == CriterionStatus.MISMATCH],
            criteria_count=total_weight,
            criteria=criteria,
        )

    def score_many(
        self,
        adopter: AdopterInput,
        pets: Mapping[str, PreferencesInput]
    ) -> Dict[str, Optional[int]]:
        """
        Score one adopter against several pets.

        Args:
            adopter: Adopter profile
            pets: Pet preferences keyed by pet id

        Returns:
            Score (or None) keyed by pet id
        """
        adopter = self._as_adopter(adopter)
        return {pet_id: self.score(adopter, prefs).score for pet_id, prefs in pets.items()}

    @staticmethod
    def _as_adopter(adopter: AdopterInput) -> AdopterProfile:
        if isinstance(adopter, AdopterProfile):
            return adopter
        return AdopterProfile.model_validate(adopter)

    @staticmethod
    def _as_preferences(preferences: PreferencesInput) -> PetTutorPreferences:
        if isinstance(preferences, PetTutorPreferences):
            return preferences
        return PetTutorPreferences.model_validate(preferences)


_default_scorer = CompatibilityScorer()


def compute_match_score(adopter: AdopterInput, preferences: PreferencesInput) -> MatchResult:
    """Score an adopter against a pet with the default dimensions."""
    return _default_scorer.score(adopter, preferences)
