"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from hn_preview.api.models import ProfileResponse
from hn_preview.app_logging import configure_logging
from hn_preview.containers import PreviewContainer
from hn_preview.domain.views import ContentView, ErrorView
from hn_preview.services.rendering import render_view
from hn_preview.services.theme import popover_stylesheet, resolve_theme


def create_app(container: PreviewContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close preview resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profiles/{username}")
    async def profile(username: str, request: Request) -> ProfileResponse:
        """Return a profile, served from the cache when fresh."""
        state_container: PreviewContainer = request.app.state.container
        record = await state_container.profile_service.resolve(username)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="profile unavailable",
            )
        return ProfileResponse.from_record(record)

    @app.get("/profiles/{username}/card", response_class=HTMLResponse)
    async def profile_card(username: str, request: Request) -> HTMLResponse:
        """Return the rendered popover content for a profile."""
        state_container: PreviewContainer = request.app.state.container
        record = await state_container.profile_service.resolve(username)
        if record is None:
            return HTMLResponse(
                render_view(ErrorView(username)),
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return HTMLResponse(render_view(ContentView(record)))

    @app.get("/popover.css", response_class=PlainTextResponse)
    async def stylesheet(request: Request, theme: str | None = None) -> PlainTextResponse:
        """Return the popover stylesheet for a theme."""
        state_container: PreviewContainer = request.app.state.container
        tokens = resolve_theme(theme) if theme else state_container.theme
        return PlainTextResponse(
            popover_stylesheet(tokens, width=state_container.settings.popover_width),
            media_type="text/css",
        )

    return app
