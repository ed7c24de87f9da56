from __future__ import annotations
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from .config import Settings


class Reporter:
    def __init__(self, console: Console) -> None:
        self.console = console

    def settings(self, settings: Settings, title: str = "Client settings") -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        for key, value in settings.projection().items():
            table.add_row(key, "✅ true" if value else "❌ false")
        self.console.print(Panel.fit(table, title=Text(title, style="bold blue")))

    def error(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))
