"""Command-line entry point: `docviewer serve` and `docviewer new`."""

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn

from .config import Settings

EXAMPLE_FILENAME = "example.md"
EXAMPLE_CONTENT = """# Example

This is an example markdown file.
"""

app = typer.Typer(
    name="docviewer",
    help="Serve a directory of markdown documents as HTML.",
    add_completion=False,
    no_args_is_help=True,
)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Listen address (default: $HOST)")] = None,
    port: Annotated[Optional[int], typer.Option(help="Listen port (default: $PORT)")] = None,
    docs_dir: Annotated[
        Optional[Path],
        typer.Option("--docs-dir", "-d", help="Markdown directory (default: $DOCS_DIR)"),
    ] = None,
    reload: Annotated[bool, typer.Option(help="Restart the server on code changes")] = False,
) -> None:
    """Start the document viewer."""
    # The app builds its Settings from the environment, so overrides go there.
    if host is not None:
        os.environ["HOST"] = host
    if port is not None:
        os.environ["PORT"] = str(port)
    if docs_dir is not None:
        os.environ["DOCS_DIR"] = str(docs_dir.expanduser().absolute())

    settings = Settings.from_env()
    uvicorn.run(
        "docviewer.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def new(
    filename: Annotated[str, typer.Argument(help="File to create")] = EXAMPLE_FILENAME,
    directory: Annotated[
        Path, typer.Option("--dir", help="Directory to write into")
    ] = Path("."),
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
) -> None:
    """Write an example markdown document."""
    target = directory / filename
    if target.exists() and not force:
        typer.echo(f"Error: {target} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(EXAMPLE_CONTENT, encoding="utf-8")
    typer.echo(f"Success: {filename} has been created.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
