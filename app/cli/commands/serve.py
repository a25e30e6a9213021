"""Serve command for running the HTTP API."""

import typer

from app.config import settings


def serve(
    host: str = typer.Option(settings.host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the dictionary API with uvicorn."""
    from app.main import run

    run(host=host, port=port, reload=reload)
