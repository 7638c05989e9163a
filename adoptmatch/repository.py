"""
Data access for the matching services.

``MatchRepository`` describes what the services need from storage. The
in-memory implementation backs the tests and the demo API; production
deployments plug in their own data layer.
"""

from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from .schemas.records import AdopterRecord, ConversationRecord, FavoriteRecord, PetRecord


@runtime_checkable
class MatchRepository(Protocol):
    """Read access to pets, adopters, favorites and conversations."""

    def get_pet(self, pet_id: str) -> Optional[PetRecord]:
        ...

    def get_adopter(self, adopter_id: str) -> Optional[AdopterRecord]:
        ...

    def get_adopters(self, adopter_ids: Iterable[str]) -> List[AdopterRecord]:
        ...

    def list_favorites(self, pet_id: str) -> List[FavoriteRecord]:
        ...

    def list_conversations(self, pet_id: str, adopter_ids: Iterable[str]) -> List[ConversationRecord]:
        ...


class InMemoryMatchRepository:
    """Dictionary-backed repository."""

    def __init__(self):
        """Initialize empty storage."""
        self.pets: Dict[str, PetRecord] = {}
        self.adopters: Dict[str, AdopterRecord] = {}
        self.favorites: List[FavoriteRecord] = []
        self.conversations: List[ConversationRecord] = []

    def add_pet(self, pet: PetRecord) -> PetRecord:
        self.pets[pet.id] = pet
        return pet

    def add_adopter(self, adopter: AdopterRecord) -> AdopterRecord:
        self.adopters[adopter.id] = adopter
        return adopter

    def add_favorite(self, favorite: FavoriteRecord) -> FavoriteRecord:
        self.favorites.append(favorite)
        return favorite

    def add_conversation(self, conversation: ConversationRecord) -> ConversationRecord:
        self.conversations.append(conversation)
        return conversation

    def get_pet(self, pet_id: str) -> Optional[PetRecord]:
        return self.pets.get(pet_id)

    def get_adopter(self, adopter_id: str) -> Optional[AdopterRecord]:
        return self.adopters.get(adopter_id)

    def get_adopters(self, adopter_ids: Iterable[str]) -> List[AdopterRecord]:
        return [self.adopters[i] for i in adopter_ids if i in self.adopters]

    def list_favorites(self, pet_id: str) -> List[FavoriteRecord]:
        return [f for f in self.favorites if f.pet_id == pet_id]

    def list_conversations(self, pet_id: str, adopter_ids: Iterable[str]) -> List[ConversationRecord]:
        wanted = set(adopter_ids)
        return [c for c in self.conversations if c.pet_id == pet_id and c.adopter_id in wanted]
