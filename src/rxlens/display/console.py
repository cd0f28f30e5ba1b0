"""Rich console collaborators for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status
from rich.syntax import Syntax

from ..config import ERROR_MESSAGE
from ..conversation import ChatEntry, EntryRole, TriggerState
from .base import BusyIndicator, DisplaySink


class ConsoleDisplay(DisplaySink):
    """Prints each chat entry as it is appended."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def append_entry(self, entry: ChatEntry) -> None:
        if entry.role == EntryRole.USER:
            asset = entry.asset
            detail = f"{asset.name} ({asset.mime_type}, {asset.size} bytes)" if asset else ""
            self.console.print(f"[bold blue]{entry.content}[/bold blue] {escape(detail)}", highlight=False)
            return

        if entry.is_error:
            self.console.print(f"[red]{ERROR_MESSAGE}[/red]")
            return

        self.console.print(Panel(
            Syntax(entry.content, "html", word_wrap=True),
            title="Assistant",
            border_style="green",
        ))


class ConsoleStatusIndicator(BusyIndicator):
    """Shows a spinner while a request is in flight."""

    def __init__(self, console: Console, message: str = "Analyzing prescription...") -> None:
        self._status = Status(message, console=console)
        self._running = False

    def update(self, triggers: TriggerState) -> None:
        if triggers.loading and not self._running:
            self._status.start()
            self._running = True
        elif not triggers.loading and self._running:
            self._status.stop()
            self._running = False
