"""Line input from the terminal."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from schema_scaffold.core.console import console as default_console


class ConsoleLineReader:
    """Reads prompted lines through a rich console.

    Returns None once the input stream is exhausted.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def read_line(self, prompt: str, style: str | None = None) -> str | None:
        try:
            return self.console.input(Text(prompt, style=style or ""))
        except EOFError:
            return None
