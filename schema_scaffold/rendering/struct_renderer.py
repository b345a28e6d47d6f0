"""Rendering of Go struct declarations from the collected schema."""

from __future__ import annotations

import re

from schema_scaffold.core.config import config
from schema_scaffold.core.schemas import Column, Database, Table, TargetType
from schema_scaffold.logger import logger

GO_TYPES: dict[TargetType, str] = {
    TargetType.INTEGER: "int",
    TargetType.STRING: "string",
    TargetType.TIMESTAMP: "time.Time",
    TargetType.BOOLEAN: "bool",
    TargetType.FLOAT: "float64",
    TargetType.GENERIC: "interface{}",
}

_WORD = re.compile(r"\w+")


def title_case(name: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest.

    Underscores and digits are part of a word, so ``user_id`` becomes
    ``User_id`` while ``order-line`` becomes ``Order-Line``.
    """
    return _WORD.sub(lambda m: m.group(0).capitalize(), name)


class StructRenderer:
    """Renders one Go struct per table, all in a single source file."""

    def __init__(self, package_name: str = config.struct_package) -> None:
        self.package_name = package_name

    def render(self, databases: list[Database]) -> str:
        """Render the struct file for every table of every database.

        Args:
            databases: Collected databases in input order

        Returns:
            Complete Go source text
        """
        parts = [self.render_header()]
        type_names: dict[str, str] = {}

        for database in databases:
            for table in database.tables:
                type_name = title_case(table.name)
                if type_name in type_names:
                    logger.warning(
                        "Struct name '%s' for table '%s.%s' clashes with table '%s'",
                        type_name,
                        database.name,
                        table.name,
                        type_names[type_name],
                    )
                type_names[type_name] = f"{database.name}.{table.name}"
                parts.append(self.render_table(table))

        return "".join(parts)

    def render_header(self) -> str:
        return f'package {self.package_name}\n\nimport (\n\t"time"\n)\n\n'

    def render_table(self, table: Table) -> str:
        """Render a single struct declaration, empty-bodied for no columns."""
        lines = [f"type {title_case(table.name)} struct {{\n"]
        field_names: set[str] = set()

        for column in table.columns:
            field_name = title_case(column.name)
            if field_name in field_names:
                logger.warning(
                    "Field name '%s' is repeated in struct for table '%s'",
                    field_name,
                    table.name,
                )
            field_names.add(field_name)
            lines.append(self.render_field(column))

        lines.append("}\n\n")
        return "".join(lines)

    def render_field(self, column: Column) -> str:
        go_type = GO_TYPES[column.target_type]
        return f'\t{title_case(column.name)}\t{go_type} `json:"{column.json_tag}"`\n'
