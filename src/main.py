"""groupieTracker FastAPI application entry point.

Builds the upstream provider and the artist store, loads the snapshot once
during the lifespan startup phase, and mounts the HTML pages, JSON routes
and static assets.  A failed startup load is fatal: the exception escapes
the lifespan hook and the server never starts accepting requests.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
)
from src.api.pages import router as pages_router
from src.api.routes import router as api_router
from src.config.loader import load_config
from src.config.settings import Settings
from src.interfaces.directory_provider import IDirectoryProvider
from src.providers.directory.groupie_api_provider import GroupieAPIProvider
from src.services.artist_store import ArtistStore
from src.utils.errors import ConfigurationError, GroupieTrackerError
from src.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_CONFIG_PATH = _PROJECT_ROOT / "config" / "config.yaml"

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()
config = load_config(str(_CONFIG_PATH), settings=settings)

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


def _resolve_dir(path: str) -> Path:
    """Resolve a configured directory relative to the project root."""
    candidate = Path(path)
    return candidate if candidate.is_absolute() else _PROJECT_ROOT / candidate


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Load the directory snapshot before serving; close the HTTP client after."""
    app_settings: Settings = application.state.settings
    provider: IDirectoryProvider | None = application.state.provider
    http_client: httpx.AsyncClient | None = None

    if provider is None:
        http_client = httpx.AsyncClient(timeout=app_settings.upstream_timeout)
        provider = GroupieAPIProvider(
            http_client,
            base_url=app_settings.upstream_base_url,
            endpoints=config.get("upstream", {}).get("endpoints"),
        )

    try:
        store = ArtistStore(provider)
        try:
            snapshot = await store.load()
        except GroupieTrackerError as exc:
            _logger.critical(
                "startup_load_failed",
                provider=provider.get_provider_name(),
                resource=exc.resource,
                error=exc.message,
            )
            raise

        application.state.store = store
        application.state.provider_name = provider.get_provider_name()

        _logger.info(
            "app_startup",
            version=application.version,
            environment=app_settings.app_env,
            provider=provider.get_provider_name(),
            **snapshot.counts(),
        )

        yield
    finally:
        if http_client is not None:
            await http_client.aclose()
            _logger.info("app_shutdown", message="HTTP client closed")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(
    app_settings: Settings | None = None,
    provider: IDirectoryProvider | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Parameters
    ----------
    app_settings:
        Settings to use; the module-level ``settings`` when omitted.
    provider:
        Directory provider for the startup load.  When omitted the lifespan
        hook builds a :class:`GroupieAPIProvider` around its own
        ``httpx.AsyncClient``.
    """
    s = app_settings or settings
    app_meta = config.get("app", {})

    application = FastAPI(
        title="groupieTracker",
        version=str(app_meta.get("version", "0.1.0")),
        description=(
            "Mirror of the Groupie Trackers artist directory: artist cards, "
            "artist pages, and JSON filter / concert endpoints."
        ),
        lifespan=_lifespan,
    )

    templates_dir = _resolve_dir(s.templates_dir)
    if not templates_dir.is_dir():
        raise ConfigurationError(
            f"templates directory not found: {templates_dir}", resource="templates_dir"
        )

    application.state.settings = s
    application.state.provider = provider
    application.state.templates = Jinja2Templates(directory=str(templates_dir))

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(application)

    # -- Routes --
    application.include_router(api_router)
    application.include_router(pages_router)

    static_dir = _resolve_dir(s.static_dir)
    if static_dir.exists():
        application.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
