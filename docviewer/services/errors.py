"""Errors raised while locating or reading a document."""
from __future__ import annotations


class DocumentError(Exception):
    def __init__(self, filename: str, message: str = "") -> None:
        self.filename = filename
        super().__init__(message or filename)


class DocumentAccessDenied(DocumentError):
    """The requested name points outside the documents directory."""


class DocumentNotFound(DocumentError):
    pass


class DocumentReadError(DocumentError):
    """Anything else that stops a document from being read."""
