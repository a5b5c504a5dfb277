"""Document Viewer — FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .models.documents import HealthResponse
from .routers import documents, pages
from .routers.deps import get_library, get_watcher
from .services.library import DocumentLibrary
from .services.watcher import DocsWatcher

STATIC_DIR = Path(__file__).parent / "static"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s — %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    library = DocumentLibrary(settings.docs_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        library.ensure_root()
        logger.info(f"Document viewer running at {settings.base_url}")
        logger.info(f"Add markdown files to: {library.root}")

        if settings.watch_enabled:
            app.state.watcher = DocsWatcher(library.root)
            app.state.watcher.start()

        yield

        watcher = app.state.watcher
        if watcher is not None:
            await watcher.stop()
            app.state.watcher = None

    app = FastAPI(
        title="Document Viewer",
        description="Browse a directory of markdown documents as HTML",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.library = library
    app.state.watcher = None

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Routes (before the /static mount so /static/highlight.css resolves)
    app.include_router(pages.router)
    app.include_router(documents.router)

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request) -> HealthResponse:
        library = get_library(request)
        watcher = get_watcher(request)
        return HealthResponse(
            docs_dir=str(library.root),
            documents=len(library.files()),
            watching=watcher is not None and watcher.running,
        )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


_settings = Settings.from_env()
configure_logging(_settings.log_level)
app = create_app(_settings)
