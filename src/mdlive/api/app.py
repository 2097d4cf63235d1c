"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from mdlive import __version__
from mdlive.api.routes import pages, reload
from mdlive.config import ServerConfig
from mdlive.reload import ChangeSignal, FileWatcher, ReloadPoller, supervise_watcher

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str  # "healthy", or "degraded" once the watcher has died
    version: str
    watcher_alive: bool
    target: str


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    config: ServerConfig = app.state.config
    watcher: FileWatcher = app.state.watcher

    # Startup
    logger.info(f"Starting mdlive for {config.markdown_file}...")
    watcher.start()
    supervisor = asyncio.create_task(
        supervise_watcher(watcher, config.supervise_interval)
    )

    yield

    # Shutdown
    logger.info("Shutting down mdlive...")
    supervisor.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await supervisor
    await asyncio.to_thread(watcher.stop)


def create_app(config: ServerConfig, watcher: FileWatcher | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Server configuration.
        watcher: Watcher to use. Its signal feeds the reload endpoint. If
            omitted, a new watcher on ``config.markdown_file`` is created;
            it is started by the lifespan handler if not already running.
    """
    if watcher is None:
        watcher = FileWatcher(config.markdown_file, ChangeSignal())

    app = FastAPI(
        title="mdlive",
        description="Markdown preview server with live reload",
        version=__version__,
        lifespan=lifespan,
        # Every unrouted GET path renders the page, so no generated docs
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.config = config
    app.state.watcher = watcher
    app.state.poller = ReloadPoller(watcher.signal, config.poll_window)

    @app.get("/health")
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        alive = watcher.is_alive()
        return HealthResponse(
            status="healthy" if alive else "degraded",
            version=__version__,
            watcher_alive=alive,
            target=str(config.markdown_file),
        )

    app.include_router(reload.router, tags=["reload"])
    app.mount("/static", StaticFiles(directory=config.static_dir), name="static")

    # Catch-all page route goes last
    app.include_router(pages.router, tags=["pages"])

    return app
