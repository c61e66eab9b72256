"""CLI application for Scratchpad using Rich and Typer."""

import logging
import time
import uuid
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from scratchpad.core.notebook import Notebook
from scratchpad.core.types import DEFAULT_FOLDER_ID, Folder, Note
from scratchpad.vault.errors import NoteNotFoundError, StorageError

app = typer.Typer(
    name="scratchpad",
    help="Scratchpad CLI - notes stored as plain Markdown files",
    no_args_is_help=True,
)

console = Console()

VaultOption = typer.Option(
    None,
    "--vault",
    "-v",
    help="Path to vault directory (default: ~/.scratchpad or $SCRATCHPAD_DATA_DIR)",
)


def _open_notebook(vault: Optional[str]) -> Notebook:
    notebook = Notebook(Path(vault) if vault else None)
    notebook.ensure_structure()
    return notebook


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _format_timestamp(value: int) -> str:
    if not value:
        return "-"
    # Timestamps may be seconds or milliseconds
    seconds = value / 1000 if value > 10_000_000_000 else value
    try:
        return time.strftime("%Y-%m-%d %H:%M", time.localtime(seconds))
    except (OverflowError, OSError, ValueError):
        return str(value)


def _folder_names(folders: list[Folder]) -> dict[str, str]:
    return {folder.id: folder.name for folder in folders}


def _notes_table(title: str, notes: list[Note], folder_names: dict[str, str]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Folder")
    table.add_column("Updated")

    for note in sorted(notes, key=lambda n: n.updated_at, reverse=True):
        table.add_row(
            note.id,
            note.title or "[dim]untitled[/dim]",
            folder_names.get(note.folder, note.folder),
            _format_timestamp(note.updated_at),
        )
    return table


@app.command("notes")
def list_notes(
    folder: Optional[str] = typer.Option(
        None, "--folder", "-f", help="Only show notes in this folder id"
    ),
    vault: Optional[str] = VaultOption,
):
    """List all notes."""
    notebook = _open_notebook(vault)
    notes = notebook.load_notes()
    if folder is not None:
        notes = [n for n in notes if n.folder == folder]

    if not notes:
        console.print("[dim]No notes yet.[/dim]")
        return

    try:
        names = _folder_names(notebook.load_folders())
    except StorageError as e:
        console.print(f"[yellow]Warning: {e}[/yellow]")
        names = {}
    console.print(_notes_table("Notes", notes, names))


@app.command()
def show(
    note_id: str = typer.Argument(..., help="Note id"),
    vault: Optional[str] = VaultOption,
):
    """Show a note rendered as Markdown."""
    notebook = _open_notebook(vault)
    try:
        note = notebook.get_note(note_id)
    except StorageError as e:
        _fail(str(e))

    console.print(
        Panel(
            Markdown(note.content),
            title=note.title or note.id,
            subtitle=f"updated {_format_timestamp(note.updated_at)}",
            border_style="green",
        )
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for in titles and content"),
    vault: Optional[str] = VaultOption,
):
    """Search notes by title or content."""
    notebook = _open_notebook(vault)
    results = notebook.search_notes(query)
    if not results:
        console.print(f"[dim]No notes match {query!r}.[/dim]")
        return
    console.print(_notes_table(f"Results for {query!r}", results, {}))


@app.command()
def new(
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Option("", "--content", "-c", help="Note body"),
    folder: str = typer.Option(DEFAULT_FOLDER_ID, "--folder", "-f", help="Folder id"),
    parent: Optional[str] = typer.Option(None, "--parent", "-p", help="Parent note id"),
    vault: Optional[str] = VaultOption,
):
    """Create a new note."""
    notebook = _open_notebook(vault)
    now = int(time.time() * 1000)
    note = Note(
        id=str(uuid.uuid4()),
        title=title,
        content=content,
        folder=folder,
        parent_id=parent,
        created_at=now,
        updated_at=now,
    )
    try:
        notebook.save_note(note)
    except StorageError as e:
        _fail(str(e))
    console.print(f"[green]Created note {note.id}[/green]")


@app.command()
def delete(
    note_id: str = typer.Argument(..., help="Note id"),
    vault: Optional[str] = VaultOption,
):
    """Delete a note."""
    notebook = _open_notebook(vault)
    try:
        notebook.delete_note(note_id)
    except NoteNotFoundError:
        _fail(f"Note not found: {note_id}")
    except StorageError as e:
        _fail(str(e))
    console.print(f"[green]Deleted note {note_id}[/green]")


@app.command()
def folders(vault: Optional[str] = VaultOption):
    """List folders."""
    notebook = _open_notebook(vault)
    try:
        folder_list = notebook.load_folders()
    except StorageError as e:
        _fail(str(e))

    table = Table(title="Folders", show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Parent")

    for folder in folder_list:
        table.add_row(folder.id, folder.name, folder.parent_id or "")
    console.print(table)


@app.command()
def doctor(vault: Optional[str] = VaultOption):
    """Report note files that were skipped or loaded with defaults."""
    notebook = _open_notebook(vault)
    report = notebook.scan_notes()

    table = Table(title="Vault Check", show_header=True)
    table.add_column("File")
    table.add_column("Status")

    for path in report.skipped:
        table.add_row(path.name, "[red]SKIPPED[/red]")
    for path in report.degraded:
        table.add_row(path.name, "[yellow]DEFAULTS[/yellow]")

    console.print(
        f"{len(report.notes)} notes loaded, "
        f"{len(report.skipped)} skipped, {len(report.degraded)} with defaults"
    )
    if report.skipped or report.degraded:
        console.print(table)
    raise typer.Exit(1 if report.skipped else 0)


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
):
    """Scratchpad CLI - notes stored as plain Markdown files."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()
