"""
Priority Service - Adopter prioritization for tutors
Checks ownership and delegates ranking to the priority model.
"""

from typing import List, Optional
from loguru import logger

from ..exceptions import ForbiddenError, PetNotFoundError
from ..models.priority_model import PriorityRanker
from ..repository import MatchRepository
from ..schemas.priority import PriorityAdopterItem


class PriorityService:
    """Lists the adopters who favorited a pet, best candidates first."""

    def __init__(self, repository: MatchRepository, ranker: Optional[PriorityRanker] = None):
        """Initialize the priority service."""
        self.repository = repository
        self.ranker = ranker or PriorityRanker(repository)

    def get_priority_adopters(self, pet_id: str, request_user_id: str) -> List[PriorityAdopterItem]:
        """
        Rank the adopters interested in a pet, for its tutor.

        Args:
            pet_id: Pet identifier
            request_user_id: User asking; must own the pet

        Returns:
            Adopters sorted by priority score

        Raises:
            PetNotFoundError: Unknown pet
            ForbiddenError: Requester does not own the pet
        """
        pet = self.repository.get_pet(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)
        if pet.owner_id != request_user_id:
            logger.warning(f"User {request_user_id} denied priority list for pet {pet_id}")
            raise ForbiddenError("Apenas o tutor do pet pode ver a lista de prioridade.")

        logger.info(f"Ranking interested adopters for pet {pet_id}")
        return self.ranker.rank(pet_id, request_user_id)
