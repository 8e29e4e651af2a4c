from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from realm.application.dtos import LocationScreen, StatusView


_BORDER_LOCATION = "yellow"
_BORDER_STATUS = "cyan"


def _ornate_title(title: str) -> str:
    core = str(title or "").strip() or "Somewhere"
    return f"[bold yellow]{escape(core)}[/bold yellow]"


class RichTerminal:
    """Line-based terminal on top of a rich ``Console``."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def clear(self) -> None:
        self.console.clear()

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        self.console.print(escape(str(text)), style=style)

    def read_line(self, prompt: str = "") -> str:
        return self.console.input(f"[bold white]{escape(prompt)}[/bold white]")

    def pause(self, message: str = "Press ENTER to continue...") -> None:
        self.console.input(f"[dim]{escape(message)}[/dim]")

    def show_location(self, screen: LocationScreen) -> None:
        body = Table.grid(padding=(0, 1))
        body.add_column(style="white")
        if screen.description:
            body.add_row(escape(screen.description))
        if screen.people:
            body.add_row("")
            body.add_row("[bold cyan]People here:[/bold cyan]")
            for name in screen.people:
                body.add_row(f"[cyan]  {escape(name)}[/cyan]")
        if screen.actions:
            body.add_row("")
            body.add_row("[bold white]Available actions:[/bold white]")
            for index, label in enumerate(screen.actions, start=1):
                body.add_row(f"  {index}. {escape(label)}")
        if screen.exits:
            body.add_row("")
            body.add_row("[bold yellow]Exits:[/bold yellow]")
            for hotkey, name in screen.exits:
                body.add_row(f"[yellow]  ({escape(hotkey)}) {escape(name)}[/yellow]")
        body.add_row("")
        commands = "(S) Status  (?) Redraw  (Q) Leave" if screen.can_leave else "(S) Status  (?) Redraw"
        body.add_row(f"[dim]{commands}[/dim]")

        self.console.print(
            Panel.fit(
                body,
                title=_ornate_title(screen.title),
                subtitle=f"[dim]{escape(screen.status_line)}[/dim]" if screen.status_line else None,
                subtitle_align="left",
                border_style=_BORDER_LOCATION,
            )
        )
        for notice in screen.notices:
            self.console.print(f"[bold magenta]{escape(notice)}[/bold magenta]")

    def show_status(self, status: StatusView) -> None:
        table = Table.grid(padding=(0, 1))
        table.add_column(style="bold yellow", justify="right")
        table.add_column(style="white")
        table.add_row("Name", escape(status.name))
        table.add_row("Level", str(status.level))
        table.add_row("HP", f"{status.hp_current}/{status.hp_max}")
        table.add_row("Experience", str(status.experience))
        table.add_row("Gold", str(status.gold))
        table.add_row("Bank", str(status.bank_gold))
        table.add_row("Location", escape(status.location_name))
        table.add_row("Turn", str(status.turn))
        table.add_row("Day", str(status.day))
        self.console.clear()
        self.console.print(
            Panel.fit(table, title=_ornate_title("Player Status"), border_style=_BORDER_STATUS)
        )
