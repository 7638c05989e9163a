"""
Match Service - Compatibility lookups
Loads adopter and pet profiles and scores them with the compatibility model.
"""

from typing import Dict, List, Optional
from loguru import logger

from ..exceptions import AdopterNotFoundError, ForbiddenError, PetNotFoundError
from ..models.compatibility_model import CompatibilityScorer
from ..repository import MatchRepository
from ..schemas.match_result import MatchResult


class MatchService:
    """
    Serves match scores between pets and adopters.
    Only the pet's tutor or the adopter itself may see a pairwise score.
    """

    def __init__(self, repository: MatchRepository, scorer: Optional[CompatibilityScorer] = None):
        """Initialize the match service."""
        self.repository = repository
        self.scorer = scorer or CompatibilityScorer()

    def get_match_score(self, pet_id: str, adopter_id: str, request_user_id: str) -> MatchResult:
        """
        Get the match between a pet and an adopter.

        Args:
            pet_id: Pet identifier
            adopter_id: Adopter identifier
            request_user_id: User asking for the score

        Returns:
            MatchResult for the pair

        Raises:
            PetNotFoundError: Unknown pet
            AdopterNotFoundError: Unknown or deactivated adopter
            ForbiddenError: Requester is neither the tutor nor the adopter
        """
        pet = self.repository.get_pet(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)

        adopter = self.repository.get_adopter(adopter_id)
        if adopter is None or not adopter.is_active:
            raise AdopterNotFoundError(adopter_id)

        if request_user_id not in (pet.owner_id, adopter_id):
            logger.warning(f"User {request_user_id} denied match score for pet {pet_id}")
            raise ForbiddenError("Apenas o tutor do pet ou o adotante podem ver o score de match.")

        result = self.scorer.score(adopter.to_profile(), pet.preferences)
        logger.info(
            f"Match score for pet {pet_id} and adopter {adopter_id}: "
            f"{result.score} ({result.criteria_count} criteria)"
        )
        return result

    def get_match_scores_for_adopter(
        self,
        pet_ids: List[str],
        adopter_id: str
    ) -> Dict[str, Optional[int]]:
        """
        Score one adopter against several pets (e.g. a "similar pets" list).

        Args:
            pet_ids: Pet identifiers
            adopter_id: Adopter identifier

        Returns:
            Score keyed by pet id; None for unknown pets, pets without
            preferences, or when the adopter is unknown
        """
        if not pet_ids:
            return {}

        adopter = self.repository.get_adopter(adopter_id)
        if adopter is None or not adopter.is_active:
            logger.debug(f"Adopter {adopter_id} not found; returning empty scores")
            return {pet_id: None for pet_id in pet_ids}

        pets = {}
        for pet_id in pet_ids:
            pet = self.repository.get_pet(pet_id)
            if pet is not None:
                pets[pet_id] = pet.preferences

        scores = self.scorer.score_many(adopter.to_profile(), pets)
        return {pet_id: scores.get(pet_id) for pet_id in pet_ids}
