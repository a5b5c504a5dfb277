"""HTML pages — GET / (document index) and GET /doc/{filename} (one document)."""
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from ..services import renderer
from ..services.errors import DocumentAccessDenied, DocumentNotFound, DocumentReadError
from ..services.library import (
    ALL,
    ROOT,
    Document,
    DocumentLibrary,
    document_url,
    organize_by_directory,
)
from .deps import get_library

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
logger = logging.getLogger(__name__)


def tab_label(directory: str) -> str:
    if directory == ALL:
        return "📚 All"
    if directory == ROOT:
        return "📁 Root"
    return f"📂 {directory}"


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, library: DocumentLibrary = Depends(get_library)) -> Response:
    try:
        files = library.files()
        groups = organize_by_directory(files)
        tabs = [
            {"directory": name, "label": tab_label(name), "count": len(group)}
            for name, group in groups.items()
        ]
        documents = [
            {
                "path": doc.path,
                "name": doc.name,
                "directory": doc.directory,
                "url": document_url(doc.path),
                "in_subdirectory": doc.in_subdirectory,
            }
            for doc in (Document(path=p) for p in files)
        ]
        return templates.TemplateResponse(
            request,
            "index.html",
            {"tabs": tabs, "documents": documents},
        )
    except Exception as e:
        logger.error(f"Failed to build document index: {e}")
        return PlainTextResponse("Error reading documents", status_code=500)


@router.get("/doc/{filename:path}", response_class=HTMLResponse)
async def view_document(
    filename: str,
    request: Request,
    library: DocumentLibrary = Depends(get_library),
) -> Response:
    try:
        content = library.read(filename)
    except DocumentAccessDenied:
        return PlainTextResponse("Access denied", status_code=403)
    except DocumentNotFound:
        return PlainTextResponse("Document not found", status_code=404)
    except DocumentReadError as e:
        logger.warning(f"Could not read {filename!r}: {e}")
        return PlainTextResponse("Error reading document", status_code=500)

    return templates.TemplateResponse(
        request,
        "document.html",
        {"filename": filename, "content": renderer.render_markdown(content)},
    )


@router.get("/static/highlight.css")
async def highlight_stylesheet() -> Response:
    return Response(content=renderer.highlight_css(), media_type="text/css")
