"""
Console rendering of the dictionary state.

The presenter is a plain listener: it subscribes to the store and the
coordinator and prints whatever they emit.
"""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wordbook.core.lookup import meanings_from_json
from wordbook.core.models import BusyState, LoadStatus, ViewState, WordEntry


def summarize_definition(definition: str, width: int = 60) -> str:
    """First definition line, for list views. Falls back to the raw text."""
    text = definition
    try:
        meanings = json.loads(definition)
        first = meanings[0]
        text = f"({first['partOfSpeech']}) {first['definitions'][0]['definition']}"
    except (ValueError, TypeError, LookupError):
        pass
    text = " ".join(text.split())
    return text if len(text) <= width else text[: width - 3] + "..."


class ConsolePresenter:
    def __init__(self, console: Console | None = None, show_definitions: bool = False):
        self.console = console or Console()
        self.show_definitions = show_definitions
        self.quiet = False

    def render_state(self, state: ViewState):
        if self.quiet:
            return
        if state.status is LoadStatus.LOADING:
            self.console.print("[dim]Loading words...[/dim]")
        elif state.status is LoadStatus.ERROR:
            self.console.print(f"[red]✗ Error loading words: {state.error}[/red]")
            if state.entries:
                self.console.print("[dim]Showing the last loaded list.[/dim]")
                self.console.print(self.table(state))
        else:
            self.console.print(self.table(state))

    def render_busy(self, busy: BusyState):
        if self.quiet:
            return
        if busy.adding:
            self.console.print("[dim]Adding...[/dim]")
        for entry_id in sorted(busy.deleting):
            self.console.print(f"[dim]Deleting {entry_id}...[/dim]")

    def table(self, state: ViewState):
        if not state.entries:
            return "No words found. Add some with `wordbook add <word>`."

        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", justify="right")
        table.add_column("Word", style="cyan")
        if self.show_definitions:
            table.add_column("Definition")
        for entry in state.entries:
            row = [str(entry.id), entry.word]
            if self.show_definitions:
                row.append(summarize_definition(entry.definition))
            table.add_row(*row)
        return table

    def success(self, message: str):
        self.console.print(f"[green]✓ {message}[/green]")

    def failure(self, message: str):
        self.console.print(f"[red]✗ {message}[/red]")

    def show_entry(self, entry: WordEntry):
        """Print everything stored for one entry."""
        self.console.print(f"[bold cyan]{escape(entry.word)}[/bold cyan] [dim](ID {entry.id})[/dim]")

        try:
            meanings = meanings_from_json(entry.definition)
        except ValueError:
            meanings = []
        if not any(m.definitions for m in meanings):
            # Not lookup JSON: a definition supplied by hand.
            self.console.print(escape(entry.definition) if entry.definition.strip() else "[dim]No definition.[/dim]")
            return

        for meaning in meanings:
            if not meaning.definitions:
                continue
            self.console.print()
            self.console.print(f"[italic]{escape(meaning.part_of_speech or 'unknown')}[/italic]")
            for i, d in enumerate(meaning.definitions, 1):
                self.console.print(f"  {i}. {escape(d.definition)}")
                if d.example:
                    self.console.print(f"     [dim]\"{escape(d.example)}\"[/dim]")
