"""
FastAPI application factory.

Run:
- CLI: sitebuilder --port=3000 (see sitebuilder/app/cli.py)
- uvicorn: uvicorn --factory sitebuilder.app.main:create_app
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from sitebuilder import __version__
from sitebuilder.app.routes import sites, upload
from sitebuilder.core.config import Settings, load_settings
from sitebuilder.core.generator import SiteGenerator
from sitebuilder.core.storage import ensure_dirs
from sitebuilder.domain.constants import BUILDER_URL_PREFIX, SITES_URL_PREFIX
from sitebuilder.domain.errors import ErrorCodes, SiteBuilderError, http_status_for
from sitebuilder.render.site import SiteRenderer

logger = logging.getLogger(__name__)


# =============================================================================
# Error Handlers
# =============================================================================


async def handle_builder_error(request: Request, exc: SiteBuilderError) -> JSONResponse:
    """SiteBuilderError → {"error": message} with the mapped status."""
    status = http_status_for(exc.code)
    level = logging.INFO if status < 500 else logging.ERROR
    logger.log(level, "%s %s -> %d %s", request.method, request.url.path, status, exc.to_dict())
    return JSONResponse(status_code=status, content={"error": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies (e.g. invalid JSON) → 400."""
    logger.info("Invalid request %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": "Invalid data"})


def body_size_limit(
    max_body_bytes: int,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Middleware: reject requests whose declared body exceeds the ceiling."""

    async def middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > max_body_bytes:
            logger.warning(
                "Request body too large: %s bytes (limit %d)", content_length, max_body_bytes
            )
            return JSONResponse(
                status_code=http_status_for(ErrorCodes.PAYLOAD_TOO_LARGE),
                content={"error": "Request body too large"},
            )
        return await call_next(request)

    return middleware


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: runtime settings (default: default.yaml + environment)

    Returns:
        FastAPI app
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # Startup
        ensure_dirs(settings.sites_dir, settings.uploads_dir)

        yield

        # Shutdown (nothing to release)

    app = FastAPI(
        title="sitebuilder",
        description="Block editor → standalone static site",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.generator = SiteGenerator(
        settings.sites_dir,
        settings.uploads_dir,
        renderer=SiteRenderer(lang=settings.lang),
    )

    app.add_exception_handler(SiteBuilderError, handle_builder_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.middleware("http")(body_size_limit(settings.max_body_bytes))

    # API
    app.include_router(upload.api_router, prefix="/api", tags=["Upload API"])
    app.include_router(sites.api_router, prefix="/api", tags=["Sites API"])

    @app.get("/")
    async def root() -> RedirectResponse:
        """Editor entry point."""
        return RedirectResponse(url=f"{BUILDER_URL_PREFIX}/")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check."""
        return {"status": "ok"}

    # Static: editor + generated sites (directories are created in lifespan)
    app.mount(
        BUILDER_URL_PREFIX,
        StaticFiles(directory=settings.public_dir, html=True),
        name="builder",
    )
    app.mount(
        SITES_URL_PREFIX,
        StaticFiles(directory=settings.sites_dir, check_dir=False),
        name="sites",
    )

    return app
