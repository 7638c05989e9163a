"""
HTTP API for AdoptMatch.
Exposes match scores and the tutor's adopter priority list as JSON.
"""

import sys
from typing import List, Optional
from fastapi import FastAPI, HTTPException, Query, Request
from loguru import logger

from .config import settings
from .exceptions import AdopterNotFoundError, ForbiddenError, PetNotFoundError
from .repository import InMemoryMatchRepository, MatchRepository
from .schemas.match_result import MatchResult
from .schemas.priority import PriorityAdopterItem
from .services.match_service import MatchService
from .services.priority_service import PriorityService

# Configure logging
logger.remove()  # Remove default handler
logger.add(sys.stderr, level=settings.log_level)


def current_user_id(request: Request) -> str:
    """
    Read the authenticated user id set by the auth gateway.

    Raises:
        HTTPException: 401 when the header is missing
    """
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Usuário não autenticado")
    return user_id


def create_app(repository: Optional[MatchRepository] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        repository: Data source (an empty in-memory store when omitted)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=settings.api_title,
        description="Compatibility scores and adopter prioritization for pet adoption",
        version=settings.api_version
    )
    repository = repository or InMemoryMatchRepository()
    match_service = MatchService(repository)
    priority_service = PriorityService(repository)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        logger.debug("Health check called")
        return {"status": "healthy", "service": "adoptmatch"}

    @app.get("/pets/{pet_id}/match-score", response_model=MatchResult)
    def get_match_score(
        pet_id: str,
        request: Request,
        adopter_id: str = Query(..., alias="adopterId", min_length=1)
    ) -> MatchResult:
        """Match between a pet and an adopter (tutor or the adopter itself)."""
        user_id = current_user_id(request)
        try:
            return match_service.get_match_score(pet_id, adopter_id.strip(), user_id)
        except (PetNotFoundError, AdopterNotFoundError) as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))

    @app.get("/priority-engine/pet/{pet_id}/adopters", response_model=List[PriorityAdopterItem])
    def get_priority_adopters(pet_id: str, request: Request) -> List[PriorityAdopterItem]:
        """Adopters who favorited the pet, ordered by priority (tutor only)."""
        user_id = current_user_id(request)
        try:
            return priority_service.get_priority_adopters(pet_id, user_id)
        except PetNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))

    logger.info("FastAPI app initialized successfully")
    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)


# Run with: uvicorn adoptmatch.api:app --reload --port 8080
if __name__ == "__main__":
    main()
