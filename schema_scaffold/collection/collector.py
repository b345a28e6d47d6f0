"""Interactive collection of databases, tables and columns."""

from __future__ import annotations

from typing import Callable, TypeVar

from rich.console import Console

from schema_scaffold.collection.column_parser import column_name, parse_column_line
from schema_scaffold.collection.interfaces import ILineReader
from schema_scaffold.collection.reader import ConsoleLineReader
from schema_scaffold.core.config import config
from schema_scaffold.core.console import console as default_console
from schema_scaffold.core.exceptions import (
    DuplicateNameError,
    InvalidNameError,
    SchemaCollectionError,
)
from schema_scaffold.core.schemas import Column, Database, Table
from schema_scaffold.logger import logger

T = TypeVar("T")

COLUMN_PROMPT_STYLES = ("cyan", "magenta")


class SchemaCollector:
    """Collects a schema hierarchy from line-oriented prompts.

    Each level (databases, tables, columns) runs the same prompt loop until
    the sentinel is entered. Names already accepted at a level are rejected
    and the prompt repeats. End of input ends every open level; whatever was
    accepted up to that point is kept.
    """

    def __init__(
        self,
        reader: ILineReader | None = None,
        console: Console | None = None,
        sentinel: str = config.sentinel,
    ) -> None:
        """Initialize the collector.

        Args:
            reader: Source of input lines, defaults to the terminal
            console: Console for prompts and error messages
            sentinel: Token that ends the current collection level
        """
        self.console = console or default_console
        self.reader = reader or ConsoleLineReader(self.console)
        self.sentinel = sentinel
        self.exhausted = False

    def collect_databases(self) -> list[Database]:
        """Prompt for databases until the sentinel is entered."""
        return self._collect_unique(
            prompt=lambda _: (
                f"\nEnter database ('{self.sentinel}' to finish): ",
                "cyan",
            ),
            key=lambda line: self._require_name(line, "database"),
            build=self._build_database,
            duplicate=lambda name: DuplicateNameError("database", name),
        )

    def collect_tables(self, database_name: str) -> list[Table]:
        """Prompt for the tables of one database until the sentinel is entered."""
        return self._collect_unique(
            prompt=lambda _: (
                f"Enter table for '{database_name}' "
                f"('{self.sentinel}' to finish database): ",
                "green",
            ),
            key=lambda line: self._require_name(line, "table"),
            build=self._build_table,
            duplicate=lambda name: DuplicateNameError("table", name, "this database"),
        )

    def collect_columns(self, table_name: str) -> list[Column]:
        """Prompt for the columns of one table until the sentinel is entered."""
        logger.debug("Collecting columns for table '%s'", table_name)
        return self._collect_unique(
            prompt=lambda attempt: (
                "(Column: Name, Type, len|null, null|not, "
                "(PRIMARY|UNIQUE|FOREIGN|empty), autoIncrement(true|false|blank)) "
                f"| ('{self.sentinel}'):\n",
                COLUMN_PROMPT_STYLES[attempt % len(COLUMN_PROMPT_STYLES)],
            ),
            key=column_name,
            build=parse_column_line,
            duplicate=lambda name: DuplicateNameError("column", name, "this table"),
        )

    def _build_database(self, name: str) -> Database:
        self.console.print()
        database = Database(name=name, tables=self.collect_tables(name))
        logger.info(
            "Collected database '%s' with %d table(s)", name, len(database.tables)
        )
        return database

    def _build_table(self, name: str) -> Table:
        table = Table(name=name, columns=self.collect_columns(name))
        logger.info("Collected table '%s' with %d column(s)", name, len(table.columns))
        return table

    @staticmethod
    def _require_name(line: str, kind: str) -> str:
        if not line:
            raise InvalidNameError(kind)
        return line

    def _collect_unique(
        self,
        prompt: Callable[[int], tuple[str, str]],
        key: Callable[[str], str],
        build: Callable[[str], T],
        duplicate: Callable[[str], DuplicateNameError],
    ) -> list[T]:
        """Run one prompt loop over uniquely named items.

        Args:
            prompt: Returns prompt text and style for the n-th prompt
            key: Extracts the item name from a line
            build: Builds the item from a line, may collect nested levels
            duplicate: Creates the error for an already used name

        Returns:
            Accepted items in input order
        """
        items: list[T] = []
        seen: set[str] = set()
        attempt = 0

        while True:
            text, style = prompt(attempt)
            attempt += 1
            line = self._next_line(text, style)
            if line is None:
                return items

            try:
                name = key(line)
                if name in seen:
                    raise duplicate(name)
                item = build(line)
            except SchemaCollectionError as e:
                logger.debug("Rejected input %r: %s", line, e)
                self.console.print(str(e), style="red", markup=False)
                continue

            items.append(item)
            seen.add(name)

    def _next_line(self, prompt: str, style: str) -> str | None:
        """Read the next trimmed line, or None when the level should end."""
        if self.exhausted:
            return None

        line = self.reader.read_line(prompt, style)
        if line is None:
            logger.info("Input exhausted, finishing collection")
            self.exhausted = True
            return None

        line = line.strip()
        if line == self.sentinel:
            return None
        return line
