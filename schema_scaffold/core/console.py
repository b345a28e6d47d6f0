"""Shared rich console used for prompts and user-facing messages."""

from rich.console import Console

console = Console(highlight=False)
