"""
Document Library — discovers markdown files under the docs root and
groups them the way the index page presents them.

Paths handed around are always relative to the root and use "/" as the
separator, e.g. "guides/nextjs.md".
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from .errors import DocumentAccessDenied, DocumentNotFound, DocumentReadError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
ALL = "All"
ROOT = "Root"


@dataclass
class Document:
    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def directory(self) -> str:
        return top_level_directory(self.path)

    @property
    def in_subdirectory(self) -> bool:
        return "/" in self.path


def top_level_directory(path: str) -> str:
    """First path component, or ROOT for files directly under the docs root."""
    if "/" not in path:
        return ROOT
    return path.split("/", 1)[0]


# --------------------------------------------------------------------------- #
# Discovery                                                                    #
# --------------------------------------------------------------------------- #

def list_markdown_files(root: Path | str) -> list[str]:
    """
    Walk `root` and return every *.md file as a sorted relative path.

    A missing or unreadable root is an empty collection, not an error.
    Symlinked directories are not followed.
    """
    files = _scan(Path(root), prefix="")
    return sorted(files)


def _scan(directory: Path, prefix: str) -> list[str]:
    try:
        entries = list(os.scandir(directory))
    except OSError as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return []

    found: list[str] = []
    for entry in entries:
        rel = f"{prefix}{entry.name}"
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            found.extend(_scan(Path(entry.path), prefix=f"{rel}/"))
        elif entry.name.endswith(MARKDOWN_SUFFIX):
            found.append(rel)
    return found


def organize_by_directory(files: list[str]) -> dict[str, list[str]]:
    """
    Group files into tabs: "All", then "Root" (top-level files), then one
    entry per top-level subdirectory in order of first appearance.
    Empty groups are dropped, except "All".
    """
    organized: dict[str, list[str]] = {ALL: list(files), ROOT: []}
    for path in files:
        directory = top_level_directory(path)
        if directory == ALL:
            # "All" already lists every file
            continue
        organized.setdefault(directory, []).append(path)

    return {
        name: group
        for name, group in organized.items()
        if group or name == ALL
    }


def filter_documents(
    files: list[str],
    directory: str = ALL,
    query: str = "",
) -> list[str]:
    """Apply the index page's tab + search filter to a list of paths."""
    term = query.strip().lower()
    result: list[str] = []
    for path in files:
        if directory != ALL and top_level_directory(path) != directory:
            continue
        if term and term not in path.lower():
            continue
        result.append(path)
    return result


# --------------------------------------------------------------------------- #
# Library                                                                      #
# --------------------------------------------------------------------------- #

class DocumentLibrary:
    """One docs root: listing, path resolution and reading."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).absolute()

    def ensure_root(self) -> bool:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating docs directory {self.root}: {e}")
            return False
        return True

    def files(self) -> list[str]:
        return list_markdown_files(self.root)

    def documents(self) -> list[Document]:
        return [Document(path=p) for p in self.files()]

    def groups(self) -> dict[str, list[str]]:
        return organize_by_directory(self.files())

    def resolve(self, filename: str) -> Path:
        """
        Join `filename` onto the root and normalise it lexically.
        Raises DocumentAccessDenied if the result escapes the root.
        """
        root = os.path.normpath(str(self.root))
        target = os.path.normpath(os.path.join(root, filename))
        try:
            inside = os.path.commonpath([root, target]) == root
        except ValueError:
            # different drives, or mixed absolute/relative on Windows
            inside = False
        if not inside:
            logger.warning(f"Rejected path outside docs root: {filename!r}")
            raise DocumentAccessDenied(filename, "Access denied")
        return Path(target)

    def read(self, filename: str) -> str:
        path = self.resolve(filename)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise DocumentNotFound(filename, "Document not found") from e
        except (OSError, ValueError) as e:
            raise DocumentReadError(filename, f"Error reading document: {e}") from e
        return data.decode("utf-8", errors="replace")


def document_url(path: str) -> str:
    return "/doc/" + quote(path)
