"""
Helper utilities for AdoptMatch.
"""

import math
from typing import Any, Optional, Tuple

from ..schemas.records import AdopterRecord


# Screening checklist used for profile completeness
PROFILE_FIELDS: Tuple[str, ...] = (
    "city",
    "bio",
    "housing_type",
    "has_yard",
    "has_other_pets",
    "has_children",
    "time_at_home",
    "pets_allowed_at_home",
    "dog_experience",
    "cat_experience",
    "household_agrees_to_adoption",
    "why_adopt",
    "activity_level",
    "preferred_pet_age",
    "commits_to_vet_care",
    "walk_frequency",
    "monthly_budget_for_pet",
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round a score and clamp it to [low, high]."""
    return max(low, min(high, round_half_up(value)))


def is_filled(value: Any) -> bool:
    """A field is filled when not None and, for strings, not blank."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def calculate_profile_completeness(adopter: AdopterRecord) -> int:
    """
    Calculate how much of the screening checklist an adopter filled in.

    Args:
        adopter: Adopter record

    Returns:
        Percentage of filled checklist fields (0-100)
    """
    filled = sum(1 for field in PROFILE_FIELDS if is_filled(getattr(adopter, field, None)))
    return clamp_score(filled / len(PROFILE_FIELDS) * 100)


def age_bracket(age_years: float) -> str:
    """
    Bucket a pet age in years into the preferred-age brackets.

    Args:
        age_years: Age in years

    Returns:
        PUPPY (< 2), ADULT (2 to 7 inclusive) or SENIOR (> 7)
    """
    if age_years < 2:
        return "PUPPY"
    if age_years <= 7:
        return "ADULT"
    return "SENIOR"


def format_age(age_years: Optional[float]) -> str:
    """Format an age for messages, without a trailing .0 on whole years."""
    if age_years is None:
        return ""
    if float(age_years).is_integer():
        return str(int(age_years))
    return f"{age_years:g}"
