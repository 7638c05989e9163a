"""
Shared fixtures: a small in-memory data set for services and API tests.
"""

import os
import sys
from datetime import datetime, timedelta

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adoptmatch.repository import InMemoryMatchRepository
from adoptmatch.schemas.pet_preferences import PetTutorPreferences
from adoptmatch.schemas.records import AdopterRecord, ConversationRecord, FavoriteRecord, PetRecord


FULL_PROFILE = {
    "city": "Curitiba",
    "bio": "Gosto de bichos",
    "housing_type": "APARTAMENTO",
    "has_yard": False,
    "has_other_pets": False,
    "has_children": False,
    "time_at_home": "LITTLE",
    "pets_allowed_at_home": "YES",
    "dog_experience": "NEVER",
    "cat_experience": "NEVER",
    "household_agrees_to_adoption": "YES",
    "why_adopt": "Companhia",
    "activity_level": "LOW",
    "preferred_pet_age": "ANY",
    "commits_to_vet_care": "YES",
    "walk_frequency": "RARELY",
    "monthly_budget_for_pet": "LOW",
}


@pytest.fixture
def full_profile():
    """Every checklist field answered."""
    return dict(FULL_PROFILE)


@pytest.fixture
def repository():
    """Pet 'pet_1' owned by 'tutor_1' with three interested adopters."""
    repo = InMemoryMatchRepository()
    base = datetime(2024, 1, 1, 12, 0, 0)

    repo.add_pet(PetRecord(
        id="pet_1",
        owner_id="tutor_1",
        name="Rex",
        preferences=PetTutorPreferences(
            preferred_tutor_housing_type="CASA",
            preferred_tutor_has_yard=True,
        ),
    ))
    repo.add_pet(PetRecord(id="pet_2", owner_id="tutor_1", name="Mia"))

    repo.add_adopter(AdopterRecord(id="tutor_1", name="Tutora"))
    # match 100, completeness 4/17 -> 24, priority 57
    repo.add_adopter(AdopterRecord(
        id="ana", name="Ana", avatar_url="https://img.example/ana.png",
        city="Curitiba", bio="Oi", housing_type="CASA", has_yard=True,
    ))
    # match 50, completeness 0, conversation -> priority 45
    repo.add_adopter(AdopterRecord(id="bruno", name="Bruno"))
    # match 0, completeness 100 -> priority 30
    repo.add_adopter(AdopterRecord(id="carla", name="Carla", **FULL_PROFILE))
    repo.add_adopter(AdopterRecord(
        id="davi", name="Davi", housing_type="CASA", has_yard=True,
        deactivated_at=base,
    ))

    for offset, user_id in enumerate(["carla", "bruno", "ana", "bruno", "tutor_1", "davi"]):
        repo.add_favorite(FavoriteRecord(
            user_id=user_id, pet_id="pet_1", created_at=base + timedelta(minutes=offset)
        ))

    repo.add_conversation(ConversationRecord(
        id="conv_bruno", pet_id="pet_1", adopter_id="bruno", tutor_id="tutor_1"
    ))
    repo.add_conversation(ConversationRecord(
        id="conv_support", pet_id="pet_1", adopter_id="carla", tutor_id="tutor_1", type="SUPPORT"
    ))
    return repo
