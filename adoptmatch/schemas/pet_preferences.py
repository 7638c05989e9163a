"""
Tutor preferences for a pet listing, plus the pet attributes used in matching.
"""

from enum import Enum
from typing import Optional
from pydantic import Field, field_validator

from .base import CamelModel, blank_to_none


class TutorChoice(str, Enum):
    """Tri-state preference for yard, other pets and children."""
    SIM = "SIM"
    NAO = "NAO"
    INDIFERENTE = "INDIFERENTE"


INDIFERENTE = TutorChoice.INDIFERENTE.value


class PetSpecies(str, Enum):
    """Species of a listed pet."""
    DOG = "DOG"
    CAT = "CAT"


class PetSex(str, Enum):
    """Sex of a listed pet."""
    MALE = "male"
    FEMALE = "female"


class PetSize(str, Enum):
    """Size of a listed pet."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class PetTutorPreferences(CamelModel):
    """
    What kind of adopter the tutor wants, plus intrinsic pet attributes.

    A missing preference means the tutor has no opinion on that dimension,
    and the dimension is left out of the score.
    """

    # Tutor preferences
    preferred_tutor_housing_type: Optional[str] = Field(
        default=None,
        description="CASA, APARTAMENTO or INDIFERENTE"
    )
    preferred_tutor_has_yard: Optional[str] = Field(default=None, description="SIM, NAO or INDIFERENTE")
    preferred_tutor_has_other_pets: Optional[str] = Field(default=None, description="SIM, NAO or INDIFERENTE")
    preferred_tutor_has_children: Optional[str] = Field(default=None, description="SIM, NAO or INDIFERENTE")
    preferred_tutor_time_at_home: Optional[str] = Field(
        default=None,
        description="MOST_DAY, HALF_DAY, LITTLE or INDIFERENTE"
    )
    preferred_tutor_pets_allowed_at_home: Optional[str] = Field(default=None, description="YES or NO")
    preferred_tutor_dog_experience: Optional[str] = Field(default=None, description="Minimum dog experience")
    preferred_tutor_cat_experience: Optional[str] = Field(default=None, description="Minimum cat experience")
    preferred_tutor_household_agrees: Optional[str] = Field(default=None, description="YES or DISCUSSING")
    preferred_tutor_walk_frequency: Optional[str] = Field(
        default=None,
        description="DAILY, FEW_TIMES_WEEK, RARELY or INDIFERENTE"
    )
    has_ongoing_costs: Optional[bool] = Field(default=None, description="Medication, special food, etc.")

    # Pet attributes
    species: Optional[str] = Field(default=None, description="DOG or CAT")
    sex: Optional[str] = Field(default=None, description="male or female")
    size: Optional[str] = Field(default=None, description="small, medium, large or xlarge")
    age: Optional[float] = Field(default=None, ge=0, description="Age in years")
    energy_level: Optional[str] = Field(default=None, description="LOW, MEDIUM or HIGH")
    has_special_needs: Optional[bool] = Field(default=None)
    health_notes: Optional[str] = Field(default=None)

    @field_validator("*", mode="before")
    @classmethod
    def normalize_blank(cls, v):
        """Treat blank values as not informed."""
        return blank_to_none(v)

    @field_validator(
        "preferred_tutor_has_yard",
        "preferred_tutor_has_other_pets",
        "preferred_tutor_has_children",
        mode="before",
    )
    @classmethod
    def bool_to_tutor_choice(cls, v):
        """Accept plain booleans for the tri-state preferences."""
        if v is True:
            return TutorChoice.SIM.value
        if v is False:
            return TutorChoice.NAO.value
        return v
