"""FastAPI application factory."""

import asyncio
import webbrowser
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI

from webgit import __version__
from webgit.api.errors import register_exception_handlers
from webgit.api.routers import branches, changes, commits, config, remotes, session, status
from webgit.config import LOOPBACK_HOST, Settings, get_settings
from webgit.config.logging import configure_logging
from webgit.git.gateway import GitRepositoryGateway, RepositoryGateway
from webgit.security.session import SessionGuard

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    url = f"http://{LOOPBACK_HOST}:{settings.port}"
    logger.info("WebGit server running", url=url, repository=settings.repo_path)

    if settings.open_browser:
        # Give uvicorn a moment to bind before the browser connects.
        asyncio.get_running_loop().call_later(1.0, webbrowser.open, url)

    yield

    logger.info("WebGit server stopped")


def create_app(
    settings: Settings | None = None,
    gateway: RepositoryGateway | None = None,
    session_guard: SessionGuard | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The session guard is created here, so each app (and each server
    process) gets its own token.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="WebGit",
        description="Local web gateway for a git repository",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.gateway = gateway or GitRepositoryGateway.for_path(
        settings.repo_path,
        git_binary=settings.git_binary,
        timeout=settings.git_timeout,
        default_remote=settings.default_remote,
    )
    app.state.session_guard = session_guard or SessionGuard()

    # No CORS middleware: cross-origin pages must not read API responses.
    register_exception_handlers(app)

    # Include routers
    app.include_router(session.router, prefix="/api", tags=["Session"])
    app.include_router(status.router, prefix="/api", tags=["Status"])
    app.include_router(branches.router, prefix="/api", tags=["Branches"])
    app.include_router(commits.router, prefix="/api", tags=["Commits"])
    app.include_router(changes.router, prefix="/api", tags=["Changes"])
    app.include_router(remotes.router, prefix="/api", tags=["Remotes"])
    app.include_router(config.router, prefix="/api", tags=["Config"])

    return app


def run(settings: Settings | None = None) -> None:
    """Run the application with uvicorn on the loopback interface."""
    import uvicorn

    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )
    uvicorn.run(
        create_app(settings),
        host=LOOPBACK_HOST,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
