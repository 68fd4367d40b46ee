"""
Dependency injection for the request handlers.

Collaborators (engine, renderer, asset store) are built once in
create_app() and kept on app.state. These providers wire them into
services per request. Tests replace them through
app.dependency_overrides.
"""

from fastapi import HTTPException, Request, status

from confessional.application.confessions.confession_service import (
    ConfessionService,
)
from confessional.infrastructure.confessions.confession_repository import (
    ConfessionRepositoryAdapter,
)
from confessional.infrastructure.web.homepage_renderer import HomepageRenderer
from confessional.infrastructure.web.static_assets import StaticAssetStore

JSON_MEDIA_TYPE = "application/json"
_JSON_ACCEPT_RANGES = {JSON_MEDIA_TYPE, "application/*", "*/*"}


def get_confession_service(request: Request) -> ConfessionService:
    """Build ConfessionService on the application's pooled engine."""
    return ConfessionService(
        repository=ConfessionRepositoryAdapter(engine=request.app.state.engine),
    )


def get_homepage_renderer(request: Request) -> HomepageRenderer:
    return request.app.state.renderer


def get_asset_store(request: Request) -> StaticAssetStore:
    return request.app.state.assets


def require_json_body(request: Request) -> None:
    """Reject request bodies that are not declared as JSON with 415."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Expected {JSON_MEDIA_TYPE} request body",
        )


def require_json_accept(request: Request) -> None:
    """Reject requests whose Accept header rules out JSON with 406.

    A missing Accept header accepts anything.
    """
    accept = request.headers.get("accept")
    if not accept:
        return
    ranges = {part.split(";", 1)[0].strip().lower() for part in accept.split(",")}
    if ranges.isdisjoint(_JSON_ACCEPT_RANGES):
        raise HTTPException(
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            detail=f"This endpoint only produces {JSON_MEDIA_TYPE}",
        )
