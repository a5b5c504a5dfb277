"""
Markdown Renderer — markdown text → HTML fragment.

Uses Python-Markdown with GitHub-flavoured conveniences (fenced code,
tables, hard line breaks) and Pygments for code highlighting. Fenced
blocks are highlighted in their labeled language; unlabeled or unknown
languages are guessed.
"""
from __future__ import annotations

from functools import lru_cache

import markdown
from pygments.formatters import HtmlFormatter

HIGHLIGHT_CLASS = "highlight"
HIGHLIGHT_STYLE = "default"

EXTENSIONS = [
    "fenced_code",
    "tables",
    "nl2br",
    "sane_lists",
    "toc",
    "codehilite",
]

EXTENSION_CONFIGS = {
    "codehilite": {
        "css_class": HIGHLIGHT_CLASS,
        "guess_lang": True,
        "use_pygments": True,
    },
}


def render_markdown(text: str) -> str:
    # A new converter per call: extensions such as toc keep per-document state.
    md = markdown.Markdown(extensions=EXTENSIONS, extension_configs=EXTENSION_CONFIGS)
    return md.convert(text)


@lru_cache(maxsize=1)
def highlight_css() -> str:
    """Stylesheet for the token classes emitted by render_markdown."""
    formatter = HtmlFormatter(style=HIGHLIGHT_STYLE)
    return formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")
