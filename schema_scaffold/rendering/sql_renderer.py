"""Rendering of SQL DDL statements from the collected schema."""

from __future__ import annotations

from schema_scaffold.core.schemas import Column, Database, KeyRole, Table
from schema_scaffold.logger import logger


class SqlRenderer:
    """Renders CREATE DATABASE / USE / CREATE TABLE statements."""

    def render(self, databases: list[Database]) -> str:
        """Render DDL for all databases in input order."""
        return "".join(self.render_database(database) for database in databases)

    def render_database(self, database: Database) -> str:
        parts = [
            f"CREATE DATABASE IF NOT EXISTS {database.name};\n",
            f"USE {database.name};\n\n",
        ]
        parts.extend(self.render_table(table) for table in database.tables)
        return "".join(parts)

    def render_table(self, table: Table) -> str:
        """Render one CREATE TABLE statement.

        A table without columns renders an empty column list, which most
        SQL engines reject; a warning is logged for it.
        """
        if not table.columns:
            logger.warning("Table '%s' has no columns", table.name)

        clauses = ",\n".join(f"\t{self.render_column(c)}" for c in table.columns)
        body = f"{clauses}\n" if clauses else ""
        return f"CREATE TABLE {table.name} (\n{body});\n\n"

    def render_column(self, column: Column) -> str:
        """Render a column clause, e.g. ``name VARCHAR(50) NOT NULL``."""
        length = f"({column.length})" if column.length else ""
        null_clause = " NULL" if column.is_nullable else " NOT NULL"
        return (
            f"{column.name} {column.declared_type.upper()}"
            f"{length}{null_clause}{self.render_key(column)}"
        )

    @staticmethod
    def render_key(column: Column) -> str:
        if column.key is KeyRole.PRIMARY:
            return " PRIMARY KEY AUTO_INCREMENT" if column.auto_increment else " PRIMARY KEY"
        if column.key is KeyRole.UNIQUE:
            return " UNIQUE"
        if column.key is KeyRole.FOREIGN:
            return " FOREIGN KEY"
        return ""
