"""CLI entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from crptclient.core.config import get_settings
from crptclient.core.exceptions import CrptError
from crptclient.models.base import TimeUnit
from crptclient.models.document import Document

app = typer.Typer(
    name="crpt",
    help="Rate-limited client for the Chestny ZNAK document API",
    no_args_is_help=True,
)
console = Console()


@app.command()
def version() -> None:
    """Show version."""
    from crptclient import __version__

    console.print(f"crptclient {__version__}")


@app.command()
def create(
    document_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Document JSON file"),
    signature: str = typer.Option(..., "--signature", "-s", help="Document signature"),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer token (default: CRPT_TOKEN)"),
    url: Optional[str] = typer.Option(None, "--url", help="Endpoint (default: CRPT_API_URL)"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Requests per time unit"),
    time_unit: Optional[TimeUnit] = typer.Option(None, "--time-unit", help="Window length"),
) -> None:
    """Submit one document and print its id."""
    from crptclient.api import CrptApi

    overrides = {
        key: value
        for key, value in {
            "token": token,
            "api_url": url,
            "request_limit": limit,
            "time_unit": time_unit,
        }.items()
        if value is not None
    }
    try:
        settings = get_settings(**overrides)
        document = Document.model_validate(json.loads(document_file.read_text(encoding="utf-8")))
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Invalid input:[/red] {e}")
        raise typer.Exit(code=2) from e

    logging.basicConfig(level=settings.log_level)

    with CrptApi.from_settings(settings) as api:
        try:
            document_id = api.create_document(document, signature)
        except CrptError as e:
            console.print(f"[red]{type(e).__name__}:[/red] {e}")
            raise typer.Exit(code=1) from e

    console.print(f"[green]Document created[/green] {document_id}")


if __name__ == "__main__":
    app()
