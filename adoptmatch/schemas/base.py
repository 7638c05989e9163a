"""
Shared pydantic configuration for AdoptMatch schemas.
"""

from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def blank_to_none(value: Any) -> Any:
    """Normalize enum members to their code and blank strings to None."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase keys for the presentation layer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
