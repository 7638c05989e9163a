"""
Adopter profile data models.

Codes are kept as plain strings on the profile: an unknown code is never
rejected, it simply fails to match. The enums below list the known codes.
"""

from enum import Enum
from typing import Optional
from pydantic import Field, field_validator

from .base import CamelModel, blank_to_none


class HousingType(str, Enum):
    """Types of homes."""
    CASA = "CASA"
    APARTAMENTO = "APARTAMENTO"


class TimeAtHome(str, Enum):
    """How long the adopter stays at home."""
    MOST_DAY = "MOST_DAY"
    HALF_DAY = "HALF_DAY"
    LITTLE = "LITTLE"


class PetsAllowed(str, Enum):
    """Whether pets are allowed where the adopter lives."""
    YES = "YES"
    NO = "NO"
    UNSURE = "UNSURE"


class Experience(str, Enum):
    """Pet ownership experience, ordered from least to most."""
    NEVER = "NEVER"
    HAD_BEFORE = "HAD_BEFORE"
    HAVE_NOW = "HAVE_NOW"


class HouseholdAgreement(str, Enum):
    """Whether everyone at home agrees with the adoption."""
    YES = "YES"
    DISCUSSING = "DISCUSSING"


class ActivityLevel(str, Enum):
    """Activity level of the adopter, or energy level of the pet."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class PreferredPetAge(str, Enum):
    """Pet age brackets an adopter may prefer."""
    PUPPY = "PUPPY"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    ANY = "ANY"


class VetCareCommitment(str, Enum):
    """Commitment to ongoing veterinary care."""
    YES = "YES"
    NO = "NO"


class WalkFrequency(str, Enum):
    """How often the adopter can walk the pet."""
    DAILY = "DAILY"
    FEW_TIMES_WEEK = "FEW_TIMES_WEEK"
    RARELY = "RARELY"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class MonthlyBudget(str, Enum):
    """Monthly budget for pet expenses."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SpeciesPreference(str, Enum):
    """Species the adopter is looking for."""
    DOG = "DOG"
    CAT = "CAT"
    BOTH = "BOTH"


class SexPreference(str, Enum):
    """Pet sex the adopter is looking for."""
    MALE = "male"
    FEMALE = "female"
    BOTH = "BOTH"


class SizePreference(str, Enum):
    """Pet size the adopter is looking for."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    BOTH = "BOTH"


class AdopterProfile(CamelModel):
    """Screening answers of a prospective adopter. Every field is optional."""

    # Home
    housing_type: Optional[str] = Field(default=None, description="CASA or APARTAMENTO")
    has_yard: Optional[bool] = Field(default=None)
    has_other_pets: Optional[bool] = Field(default=None)
    has_children: Optional[bool] = Field(default=None)
    time_at_home: Optional[str] = Field(default=None, description="MOST_DAY, HALF_DAY or LITTLE")
    pets_allowed_at_home: Optional[str] = Field(default=None, description="YES, NO or UNSURE")

    # Experience and household
    dog_experience: Optional[str] = Field(default=None, description="NEVER, HAD_BEFORE or HAVE_NOW")
    cat_experience: Optional[str] = Field(default=None, description="NEVER, HAD_BEFORE or HAVE_NOW")
    household_agrees_to_adoption: Optional[str] = Field(default=None, description="YES or DISCUSSING")

    # Search preferences
    species_pref: Optional[str] = Field(default=None, description="DOG, CAT or BOTH")
    size_pref: Optional[str] = Field(default=None, description="small, medium, large, xlarge or BOTH")
    sex_pref: Optional[str] = Field(default=None, description="male, female or BOTH")

    # Lifestyle and commitment
    activity_level: Optional[str] = Field(default=None, description="LOW, MEDIUM or HIGH")
    preferred_pet_age: Optional[str] = Field(default=None, description="PUPPY, ADULT, SENIOR or ANY")
    commits_to_vet_care: Optional[str] = Field(default=None, description="YES or NO")
    walk_frequency: Optional[str] = Field(
        default=None,
        description="DAILY, FEW_TIMES_WEEK, RARELY or NOT_APPLICABLE"
    )
    monthly_budget_for_pet: Optional[str] = Field(default=None, description="LOW, MEDIUM or HIGH")

    @field_validator(
        "housing_type",
        "has_yard",
        "has_other_pets",
        "has_children",
        "time_at_home",
        "pets_allowed_at_home",
        "dog_experience",
        "cat_experience",
        "household_agrees_to_adoption",
        "species_pref",
        "size_pref",
        "sex_pref",
        "activity_level",
        "preferred_pet_age",
        "commits_to_vet_care",
        "walk_frequency",
        "monthly_budget_for_pet",
        mode="before",
    )
    @classmethod
    def normalize_blank(cls, v):
        """Treat blank coded answers as not informed; identity fields keep their text."""
        return blank_to_none(v)
