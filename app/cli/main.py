"""Main CLI application entry point."""

import typer

from app.cli.commands import lookup, serve
from app.logging_config import setup_logging

app = typer.Typer(
    name="dictscrape",
    help="Look up English words on Oxford Learner's Dictionaries",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Initialize application on startup."""
    setup_logging()


app.command(name="lookup", help="Look up a word and print its dictionary record")(lookup.lookup)
app.command(name="serve", help="Run the HTTP API server")(serve.serve)


if __name__ == "__main__":
    app()
