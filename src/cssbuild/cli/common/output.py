"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass

import questionary
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from cssbuild.cli.common.tui_style import QUESTIONARY_STYLE_TEXT

_THEME = Theme(
    {
        "ok": "bold green",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
        "selector": "bold magenta",
    }
)

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages, selectors and prompts."""

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be cssbuild consistent."""
        return f"[cssbuild] {message}"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {escape(msg)}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def selector(self, text: str, *, plain: bool = False) -> None:
        """
        Print a rendered selector.

        In plain mode the bare text is echoed so it can be piped into other
        tools. Otherwise it is highlighted without Rich markup parsing, since
        attribute selectors contain square brackets.
        """
        if plain:
            typer.echo(text)
            return
        console.print(text, style="selector", markup=False, highlight=False)

    def fragments_table(self, rows: list[tuple[str, str]], title: str = "Fragments") -> None:
        """
        Render the fragments of a compound selector.

        Expects (stage label, rendered fragment) tuples in canonical order.
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Stage", style="meta", no_wrap=True)
        t.add_column("Fragment", style="ok")

        for stage, fragment in rows:
            t.add_row(stage, fragment)

        console.print(t)

    def ask_text(self, message: str, *, instruction: str | None = None) -> str | None:
        """
        Prompt for a single line of text.

        Returns:
            The stripped answer, None if left empty or cancelled.
        """
        answer = questionary.text(
            self._q(message),
            style=QUESTIONARY_STYLE_TEXT,
            qmark="✦",
            instruction=instruction,
        ).ask()
        if answer is None:
            return None
        return answer.strip() or None

    def ask_many(self, message: str) -> list[str]:
        """Prompt repeatedly for values until an empty answer is given."""
        values: list[str] = []
        while True:
            answer = self.ask_text(message, instruction="(empty to finish)")
            if answer is None:
                return values
            values.append(answer)


out = Out()
