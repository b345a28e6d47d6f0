"""Parsing of single-line column specifications.

A column line looks like::

    name, TYPE, length|null, null|not [, PRIMARY|UNIQUE|FOREIGN [, autoIncrement]]

Tokens are separated by any run of whitespace and/or commas.
"""

from __future__ import annotations

import re

from schema_scaffold.core.exceptions import ColumnParseError
from schema_scaffold.core.schemas import Column, KeyRole

MIN_TOKENS = 4
NO_LENGTH = "null"

_SEPARATORS = re.compile(r"[\s,]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def split_tokens(line: str) -> list[str]:
    """Split a line on whitespace and comma runs, dropping empty tokens."""
    return [token for token in _SEPARATORS.split(line) if token]


def parse_bool(value: str) -> bool:
    """Parse a boolean flag.

    Raises:
        ValueError: If the value is not a recognized boolean spelling
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def column_name(line: str) -> str:
    """Return the column name of a line after checking the required fields.

    Raises:
        ColumnParseError: If fewer than four tokens are present
    """
    tokens = split_tokens(line)
    if len(tokens) < MIN_TOKENS:
        raise ColumnParseError(
            "Invalid input: Insufficient parameters. At least column name, type, "
            "length, and null constraint are required."
        )
    return tokens[0]


def parse_column_line(line: str) -> Column:
    """Parse a column specification line into a Column.

    Args:
        line: Raw column line

    Returns:
        The parsed Column

    Raises:
        ColumnParseError: If required fields are missing or the
            auto-increment flag is not a boolean
    """
    name = column_name(line)
    tokens = split_tokens(line)

    length = tokens[2]
    key = KeyRole.from_token(tokens[4] if len(tokens) > 4 else None)

    try:
        auto_increment = parse_bool(tokens[5]) if len(tokens) > 5 else False
    except ValueError as e:
        raise ColumnParseError(
            "Invalid autoIncrement value. Use 'true', 'false', or leave blank."
        ) from e

    return Column(
        name=name,
        declared_type=tokens[1],
        length=None if length == NO_LENGTH else length,
        nullability=tokens[3],
        key=key,
        auto_increment=auto_increment,
    )
