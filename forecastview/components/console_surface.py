"""Print the forecast to a terminal without the interactive app."""

from datetime import datetime

from rich.console import Console
from rich.text import Text

from ..models.style import Style


class ConsoleSurface:
    """Display surface that writes to a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.messages: list[str] = []

    def set_loading(self, loading: bool) -> None:
        pass

    def show_message(self, message: str) -> None:
        self.messages.append(message)
        self.console.print(Text(message, style="red"))

    def show_forecast(self, content: Text, style: Style, fetched_at: datetime | None = None) -> None:
        self.console.print(content, end="")
