"""Lookup command for printing a dictionary record."""

import json

import typer
from rich.panel import Panel
from rich.table import Table

from app.cli.utils.async_runner import run_async, with_dictionary_service
from app.cli.utils.console import console, error_console
from app.cli.utils.progress import create_simple_progress
from app.services.dictionary import (
    DictionaryRecord,
    DictionaryService,
    FetchError,
    InvalidEntryError,
    WordNotFoundError,
    normalize_entry,
)


def lookup(
    word: str = typer.Argument(..., help="Word to look up"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON record"),
) -> None:
    """Look up a word and print its dictionary record."""
    try:
        entry = normalize_entry(word)
    except InvalidEntryError:
        error_console.print("[error]Invalid entry parameter[/]")
        raise typer.Exit(2) from None

    record = run_async(_lookup(entry))

    if as_json:
        console.print_json(json.dumps(record.to_dict()))
    else:
        render_record(record)


async def _lookup(entry: str) -> DictionaryRecord:
    """Async implementation of lookup command."""

    async def fetch(service: DictionaryService) -> DictionaryRecord:
        with create_simple_progress() as progress:
            progress.add_task(f"Looking up '{entry}'...", total=None)
            return await service.lookup(entry)

    try:
        return await with_dictionary_service(fetch)
    except WordNotFoundError:
        error_console.print(f"[error]Word not found:[/] [word]{entry}[/]")
        raise typer.Exit(1) from None
    except FetchError as e:
        error_console.print(f"[error]Could not reach the dictionary: {e.reason}[/]")
        raise typer.Exit(1) from None


def render_record(record: DictionaryRecord) -> None:
    """Print a record as panels and tables."""
    header = f"[word]{record.word}[/]"
    if record.parts_of_speech:
        header += "  " + ", ".join(f"[pos]{pos}[/]" for pos in record.parts_of_speech)

    console.print()
    console.print(Panel(header, border_style="blue"))

    if record.pronunciations:
        table = Table(title="Pronunciation", show_header=True, box=None, padding=(0, 2))
        table.add_column("POS", style="pos")
        table.add_column("Region")
        table.add_column("IPA", style="pron")
        table.add_column("Audio", style="dim")
        for p in record.pronunciations:
            table.add_row(p.part_of_speech, p.region, p.transcription, p.audio_url or "-")
        console.print(table)

    for definition in record.definitions:
        lines = [definition.text]
        lines.extend(f"[dim]• {example.text}[/]" for example in definition.examples)
        console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{definition.id + 1}[/] [pos]{definition.part_of_speech}[/]",
                title_align="left",
                border_style="dim",
            )
        )

    if record.verb_forms:
        verbs = Table(title="Verb forms", show_header=False, box=None, padding=(0, 2))
        verbs.add_column("Form", style="bold")
        verbs.add_column("Text")
        for verb in record.verb_forms:
            verbs.add_row(verb.type, verb.text)
        console.print(verbs)

    console.print()
