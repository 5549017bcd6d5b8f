from __future__ import annotations

import sys
from typing import Optional

import typer
from pydantic import ValidationError

from cjk_spacing import JoinError, join_cjk_spacing
from cjk_spacing_common.logging import configure_logging, get_logger
from cjk_spacing_common.schemas import parse_preprocessor_input

from . import __version__
from .preprocessor import FixCjkSpacing
from .settings import settings

log = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    help="A mdbook preprocessor that removes line breaks between CJK lines.",
)


def _read_stdin() -> bytes:
    return sys.stdin.buffer.read()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdbook-fix-cjk-spacing {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def preprocess(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """Without a subcommand, run the mdBook preprocessor protocol.

    Reads `[context, book]` JSON from stdin and writes the processed book
    JSON to stdout.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        book_ctx, book = parse_preprocessor_input(_read_stdin())
    except ValidationError as e:
        log.error("invalid_preprocessor_input", extra={"error": str(e)})
        raise typer.Exit(code=1)

    preprocessor = FixCjkSpacing()
    preprocessor.check_version(book_ctx)
    book = preprocessor.run(book_ctx, book)
    typer.echo(book.to_json())


@app.command()
def supports(renderer: str = typer.Argument(..., help="Renderer name, e.g. html")):
    """Check whether a renderer is supported by this preprocessor (exit 0 = yes, 1 = no)."""
    supported = FixCjkSpacing().supports_renderer(renderer)
    raise typer.Exit(code=0 if supported else 1)


@app.command()
def raw():
    """Process raw markdown, e.g. `cat mark.md | mdbook-fix-cjk-spacing raw`."""
    try:
        markdown = _read_stdin().decode("utf-8")
    except UnicodeDecodeError as e:
        log.error("stdin_not_utf8", extra={"error": str(e)})
        raise typer.Exit(code=1)

    try:
        processed = join_cjk_spacing(markdown)
    except JoinError as e:
        log.error("join_failed", extra={"error": str(e)})
        raise typer.Exit(code=1)

    typer.echo(processed, nl=False)


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    app()
