"""
Priority ranking output models.
"""

from typing import Optional
from pydantic import Field

from .base import CamelModel


class PriorityAdopterItem(CamelModel):
    """One interested adopter, scored for the tutor's contact priority."""

    adopter_id: str = Field(..., description="Adopter user id")
    name: str = Field(..., description="Display name")
    avatar_url: Optional[str] = Field(default=None)

    match_score: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="Compatibility 0-100 (None when the pet has no preferences or scoring failed)"
    )
    profile_completeness: int = Field(..., ge=0, le=100, description="Percent of screening fields filled")
    has_conversation: bool = Field(default=False, description="A conversation about this pet already exists")
    conversation_id: Optional[str] = Field(default=None, description="Conversation to open, when one exists")
    priority_score: int = Field(..., ge=0, le=100, description="Composite score used for ordering")
