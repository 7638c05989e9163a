"""
Priority model for ranking the adopters interested in a pet.
Blends compatibility, profile completeness and an existing conversation.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from loguru import logger

from ..config import Settings, get_settings
from ..repository import MatchRepository
from ..schemas.pet_preferences import PetTutorPreferences
from ..schemas.priority import PriorityAdopterItem
from ..schemas.records import AdopterRecord, ConversationRecord, FavoriteRecord
from ..utils.helpers import calculate_profile_completeness, clamp_score
from .compatibility_model import CompatibilityScorer


NORMAL_CONVERSATION = "NORMAL"


@dataclass(frozen=True)
class PriorityWeights:
    """Weights of the priority score components (they sum to 1)."""

    match: float = 0.5
    completeness: float = 0.3
    conversation: float = 0.2

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PriorityWeights":
        settings = settings or get_settings()
        return cls(
            match=settings.priority_match_weight,
            completeness=settings.priority_completeness_weight,
            conversation=settings.priority_conversation_weight,
        )


def calculate_priority_score(
    match_score: Optional[int],
    profile_completeness: int,
    has_conversation: bool,
    weights: PriorityWeights = PriorityWeights()
) -> int:
    """
    Calculate the composite priority score.

    Args:
        match_score: Compatibility 0-100 (None counts as 0)
        profile_completeness: Completeness 0-100
        has_conversation: Whether a conversation already exists
        weights: Component weights

    Returns:
        Priority score 0-100
    """
    value = 100 * (
        weights.match * (match_score or 0) / 100
        + weights.completeness * profile_completeness / 100
        + weights.conversation * (1 if has_conversation else 0)
    )
    return clamp_score(value)


def unique_adopter_ids(favorites: Iterable[FavoriteRecord], tutor_id: str) -> List[str]:
    """Adopter ids in favorite order (oldest first), without duplicates or the tutor."""
    ordered = sorted(favorites, key=lambda f: f.created_at)
    seen = set()
    adopter_ids = []
    for favorite in ordered:
        if favorite.user_id == tutor_id or favorite.user_id in seen:
            continue
        seen.add(favorite.user_id)
        adopter_ids.append(favorite.user_id)
    return adopter_ids


def conversations_by_adopter(
    conversations: Iterable[ConversationRecord],
    pet_id: str,
    tutor_id: str
) -> Dict[str, str]:
    """Map adopter id to the id of its normal conversation with the tutor about the pet."""
    result: Dict[str, str] = {}
    for conversation in conversations:
        if conversation.pet_id != pet_id or conversation.type != NORMAL_CONVERSATION:
            continue
        if not conversation.adopter_id:
            continue
        if conversation.tutor_id is not None and conversation.tutor_id != tutor_id:
            continue
        result.setdefault(conversation.adopter_id, conversation.id)
    return result


def rank_adopters(
    preferences: PetTutorPreferences,
    adopters: Sequence[AdopterRecord],
    conversations: Mapping[str, str],
    scorer: Optional[CompatibilityScorer] = None,
    weights: Optional[PriorityWeights] = None
) -> List[PriorityAdopterItem]:
    """
    Rank already-loaded adopters for a pet.

    Args:
        preferences: The pet's tutor preferences
        adopters: Interested adopters, in tie-break order
        conversations: Conversation id keyed by adopter id
        scorer: Compatibility scorer (default dimensions when omitted)
        weights: Priority weights (from settings when omitted)

    Returns:
        Items sorted by priority score, best first; ties keep input order
    """
    scorer = scorer or CompatibilityScorer()
    weights = weights or PriorityWeights.from_settings()

    items = []
    for adopter in adopters:
        match_score = None
        try:
            match_score = scorer.score(adopter.to_profile(), preferences).score
        except Exception as e:
            logger.warning(f"Could not score adopter {adopter.id}; ranking without match score: {e}")

        completeness = calculate_profile_completeness(adopter)
        conversation_id = conversations.get(adopter.id)
        has_conversation = conversation_id is not None

        items.append(
            PriorityAdopterItem(
                adopter_id=adopter.id,
                name=adopter.name,
                avatar_url=adopter.avatar_url,
                match_score=match_score,
                profile_completeness=completeness,
                has_conversation=has_conversation,
                conversation_id=conversation_id,
                priority_score=calculate_priority_score(
                    match_score, completeness, has_conversation, weights
                ),
            )
        )

    # Stable sort: equal scores keep favorite order
    items.sort(key=lambda item: item.priority_score, reverse=True)
    return items


class PriorityRanker:
    """
    Ranks the adopters who favorited a pet for its tutor.
    Loads data through a repository; the caller has already checked that the
    requesting user owns the pet.
    """

    def __init__(
        self,
        repository: MatchRepository,
        scorer: Optional[CompatibilityScorer] = None,
        weights: Optional[PriorityWeights] = None
    ):
        """Initialize the ranker."""
        self.repository = repository
        self.scorer = scorer or CompatibilityScorer()
        self.weights = weights

    def rank(self, animal_id: str, requesting_tutor_id: str) -> List[PriorityAdopterItem]:
        """
        Rank the adopters interested in a pet.

        Args:
            animal_id: Pet identifier
            requesting_tutor_id: The tutor asking (excluded from the ranking)

        Returns:
            List of PriorityAdopterItem sorted by priority score, best first
        """
        pet = self.repository.get_pet(animal_id)
        if pet is None:
            logger.warning(f"Pet {animal_id} not found; nothing to rank")
            return []

        adopter_ids = unique_adopter_ids(self.repository.list_favorites(animal_id), requesting_tutor_id)
        if not adopter_ids:
            return []

        loaded = {a.id: a for a in self.repository.get_adopters(adopter_ids) if a.is_active}
        adopters = [loaded[adopter_id] for adopter_id in adopter_ids if adopter_id in loaded]

        conversations = conversations_by_adopter(
            self.repository.list_conversations(animal_id, adopter_ids),
            animal_id,
            requesting_tutor_id,
        )

        items = rank_adopters(
            pet.preferences,
            adopters,
            conversations,
            scorer=self.scorer,
            weights=self.weights,
        )
        logger.info(f"Ranked {len(items)} adopters for pet {animal_id}")
        return items
