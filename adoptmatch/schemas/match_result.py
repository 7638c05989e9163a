"""
Compatibility result data models.
"""

from enum import Enum
from typing import Optional, List
from pydantic import ConfigDict, Field, model_validator

from .base import CamelModel


class CriterionStatus(str, Enum):
    """Outcome of one evaluated dimension."""
    MATCH = "match"
    MISMATCH = "mismatch"
    NEUTRAL = "neutral"


class MatchCriterion(CamelModel):
    """One evaluated dimension with its explanation."""

    label: str = Field(..., description="Short criterion name, e.g. 'Moradia'")
    status: CriterionStatus = Field(..., description="match, mismatch or neutral")
    message: str = Field(..., description="Human-readable explanation")


class MatchResult(CamelModel):
    """Compatibility between one adopter and one pet."""

    score: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="0-100, or None when the pet has no applicable preference"
    )
    highlights: List[str] = Field(default_factory=list, description="Messages of matching criteria")
    concerns: List[str] = Field(default_factory=list, description="Messages of conflicting criteria")
    criteria_count: int = Field(default=0, ge=0, description="Number of criteria that applied")
    criteria: List[MatchCriterion] = Field(
        default_factory=list,
        description="All applied criteria in evaluation order"
    )

    @model_validator(mode="after")
    def check_criteria_count(self) -> "MatchResult":
        """criteria_count always mirrors the criteria list."""
        if self.criteria_count != len(self.criteria):
            raise ValueError("criteria_count must equal the number of criteria")
        if (self.score is None) != (self.criteria_count == 0):
            raise ValueError("score is None exactly when no criteria applied")
        return self

    @classmethod
    def empty(cls) -> "MatchResult":
        """Result for a pet without any applicable preference."""
        return cls(score=None, highlights=[], concerns=[], criteria_count=0, criteria=[])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "score": 75,
                "highlights": ["Moradia compatível (Casa)"],
                "concerns": [],
                "criteriaCount": 2,
                "criteria": [
                    {"label": "Moradia", "status": "match", "message": "Moradia compatível (Casa)"},
                    {"label": "Quintal", "status": "neutral", "message": "Não informado no perfil."}
                ]
            }
        }
    )
