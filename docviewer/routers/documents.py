"""JSON API — GET /api/documents and GET /api/documents/{filename}."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..models.documents import DocumentListResponse, DocumentSchema, RenderedDocument
from ..services import renderer
from ..services.errors import DocumentAccessDenied, DocumentNotFound, DocumentReadError
from ..services.library import (
    ALL,
    Document,
    DocumentLibrary,
    document_url,
    filter_documents,
    organize_by_directory,
)
from .deps import get_library

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get("/documents", response_model=DocumentListResponse)
async def list_documents(
    directory: str = Query(default=ALL),
    q: str = Query(default=""),
    library: DocumentLibrary = Depends(get_library),
) -> DocumentListResponse:
    """
    List documents, filtered the same way the index page filters them:
    by tab (`directory`) and by case-insensitive substring of the path (`q`).
    """
    files = library.files()
    groups = organize_by_directory(files)
    matches = [Document(path=p) for p in filter_documents(files, directory, q)]

    return DocumentListResponse(
        documents=[
            DocumentSchema(
                path=doc.path,
                name=doc.name,
                directory=doc.directory,
                url=document_url(doc.path),
            )
            for doc in matches
        ],
        groups={name: len(group) for name, group in groups.items()},
        total=len(files),
    )


@router.get("/documents/{filename:path}", response_model=RenderedDocument)
async def get_document(
    filename: str,
    library: DocumentLibrary = Depends(get_library),
) -> RenderedDocument:
    try:
        content = library.read(filename)
    except DocumentAccessDenied:
        raise HTTPException(status_code=403, detail="Access denied")
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Document not found")
    except DocumentReadError as e:
        logger.warning(f"Could not read {filename!r}: {e}")
        raise HTTPException(status_code=500, detail="Error reading document")

    return RenderedDocument(path=filename, html=renderer.render_markdown(content))
