"""
FastAPI router for the confession JSON API.

All routes delegate to ConfessionService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from confessional.application.confessions.confession_service import (
    ConfessionService,
)
from confessional.interfaces.confessions.schemas import (
    ConfessionRequest,
    ConfessionSchema,
    ErrorResponse,
    NewConfessionResponse,
)
from confessional.interfaces.dependencies import (
    get_confession_service,
    require_json_accept,
    require_json_body,
)

CONFESSION_LOCATION = "/confession"

_STORAGE_FAILURE = {
    500: {"description": "Storage failure", "content": {"text/plain": {}}}
}

router = APIRouter(prefix="/api", tags=["confessions"])


@router.post(
    "/confession",
    status_code=status.HTTP_201_CREATED,
    response_model=NewConfessionResponse,
    responses={422: {"model": ErrorResponse}, **_STORAGE_FAILURE},
    dependencies=[Depends(require_json_body)],
    summary="Submit a confession",
)
def post_confession(
    request: ConfessionRequest,
    response: Response,
    service: ConfessionService = Depends(get_confession_service),
) -> NewConfessionResponse:
    """Store a confession and return it with its assigned id."""
    confession = service.create(request.content)
    response.headers["Location"] = CONFESSION_LOCATION
    return NewConfessionResponse(
        confession=ConfessionSchema(id=confession.id, content=confession.content)
    )


@router.get(
    "/confession",
    response_model=Optional[ConfessionSchema],
    responses=_STORAGE_FAILURE,
    dependencies=[Depends(require_json_accept)],
    summary="Get a random confession",
    description="Returns a random stored confession, or null if there are none.",
)
def get_confession(
    service: ConfessionService = Depends(get_confession_service),
) -> Optional[ConfessionSchema]:
    """Return a random confession."""
    confession = service.get_random()
    if confession is None:
        return None
    return ConfessionSchema(id=confession.id, content=confession.content)
