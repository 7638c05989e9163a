"""
Records supplied by the data layer to the matching services.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import Field, field_validator

from .base import CamelModel
from .adopter_profile import AdopterProfile
from .pet_preferences import PetTutorPreferences


class AdopterRecord(AdopterProfile):
    """A stored user with the screening answers used for matching and completeness."""

    id: str = Field(..., description="User id")
    name: str = Field(default="", description="Display name")
    avatar_url: Optional[str] = Field(default=None)

    # Screening fields that count for completeness but not for matching
    city: Optional[str] = Field(default=None)
    bio: Optional[str] = Field(default=None)
    why_adopt: Optional[str] = Field(default=None, description="Why the user wants to adopt")

    deactivated_at: Optional[datetime] = Field(default=None)

    @property
    def is_active(self) -> bool:
        """Deactivated users are invisible to matching."""
        return self.deactivated_at is None

    def to_profile(self) -> AdopterProfile:
        """Strip identity fields, keeping the matching profile."""
        return AdopterProfile.model_validate(
            self.model_dump(include=set(AdopterProfile.model_fields))
        )


class PetRecord(CamelModel):
    """A stored pet listing."""

    id: str = Field(..., description="Pet id")
    owner_id: str = Field(..., description="Tutor (owner) user id")
    name: str = Field(default="")
    preferences: PetTutorPreferences = Field(default_factory=PetTutorPreferences)


class FavoriteRecord(CamelModel):
    """A user favorited a pet."""

    user_id: str
    pet_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC so favorites always compare."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ConversationRecord(CamelModel):
    """A chat thread between an adopter and a tutor about a pet."""

    id: str
    pet_id: str
    adopter_id: Optional[str] = Field(default=None)
    tutor_id: Optional[str] = Field(default=None)
    type: str = Field(default="NORMAL", description="NORMAL or a system conversation type")
