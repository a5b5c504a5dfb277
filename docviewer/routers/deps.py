"""Request-scoped access to the objects created by create_app()."""
from __future__ import annotations

from typing import Optional

from fastapi import Request

from ..services.library import DocumentLibrary
from ..services.watcher import DocsWatcher


def get_library(request: Request) -> DocumentLibrary:
    return request.app.state.library


def get_watcher(request: Request) -> Optional[DocsWatcher]:
    return getattr(request.app.state, "watcher", None)
