from typing import Protocol


class ILineReader(Protocol):
    def read_line(self, prompt: str, style: str | None = None) -> str | None: ...
