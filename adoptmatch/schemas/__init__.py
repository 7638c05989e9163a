"""Data schemas and models for AdoptMatch."""

from .adopter_profile import (
    AdopterProfile,
    ActivityLevel,
    Experience,
    HouseholdAgreement,
    HousingType,
    MonthlyBudget,
    PetsAllowed,
    PreferredPetAge,
    SexPreference,
    SizePreference,
    SpeciesPreference,
    TimeAtHome,
    VetCareCommitment,
    WalkFrequency,
)
from .pet_preferences import PetTutorPreferences, PetSex, PetSize, PetSpecies, TutorChoice
from .match_result import CriterionStatus, MatchCriterion, MatchResult
from .priority import PriorityAdopterItem
from .records import AdopterRecord, PetRecord, FavoriteRecord, ConversationRecord

__all__ = [
    "AdopterProfile",
    "ActivityLevel",
    "Experience",
    "HouseholdAgreement",
    "HousingType",
    "MonthlyBudget",
    "PetsAllowed",
    "PreferredPetAge",
    "SexPreference",
    "SizePreference",
    "SpeciesPreference",
    "TimeAtHome",
    "VetCareCommitment",
    "WalkFrequency",
    "PetTutorPreferences",
    "PetSex",
    "PetSize",
    "PetSpecies",
    "TutorChoice",
    "CriterionStatus",
    "MatchCriterion",
    "MatchResult",
    "PriorityAdopterItem",
    "AdopterRecord",
    "PetRecord",
    "FavoriteRecord",
    "ConversationRecord",
]
