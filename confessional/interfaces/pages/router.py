"""
FastAPI router for the server-rendered site.

Serves the homepage and static assets. Must be included after every
other router: the asset route matches any GET path.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse

from confessional.application.confessions.confession_service import (
    ConfessionService,
)
from confessional.infrastructure.web.homepage_renderer import HomepageRenderer
from confessional.infrastructure.web.static_assets import StaticAssetStore
from confessional.interfaces.dependencies import (
    get_asset_store,
    get_confession_service,
    get_homepage_renderer,
)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, summary="Homepage")
def homepage(
    service: ConfessionService = Depends(get_confession_service),
    renderer: HomepageRenderer = Depends(get_homepage_renderer),
) -> HTMLResponse:
    """Render a random confession and the total count."""
    confession = service.get_random()
    total = service.total_count()
    html = renderer.render(
        confession=confession.content if confession is not None else None,
        total_confessions=total,
    )
    return HTMLResponse(content=html)


@router.get("/{path:path}", include_in_schema=False)
def static_asset(
    path: str,
    assets: StaticAssetStore = Depends(get_asset_store),
) -> FileResponse:
    """Serve a file from the static asset root."""
    return FileResponse(assets.locate(path))
