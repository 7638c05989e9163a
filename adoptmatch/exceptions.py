"""
Errors raised by the service layer around the matching core.

The scorer and ranker never raise for missing data; these are lookup and
authorization failures detected by the callers that load data for them.
"""


class AdoptMatchError(Exception):
    """Base class for AdoptMatch errors."""


class PetNotFoundError(AdoptMatchError):
    """The requested pet does not exist."""

    def __init__(self, pet_id: str):
        self.pet_id = pet_id
        super().__init__(f"Pet não encontrado: {pet_id}")


class AdopterNotFoundError(AdoptMatchError):
    """The requested adopter does not exist or is deactivated."""

    def __init__(self, adopter_id: str):
        self.adopter_id = adopter_id
        super().__init__(f"Adotante não encontrado: {adopter_id}")


class ForbiddenError(AdoptMatchError):
    """The requesting user may not see the requested data."""
