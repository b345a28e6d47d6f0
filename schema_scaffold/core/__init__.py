"""Core data models and shared types."""

from schema_scaffold.core.config import config
from schema_scaffold.core.exceptions import (
    ColumnParseError,
    ConfigurationError,
    DuplicateNameError,
    InvalidNameError,
    ScaffoldError,
    SchemaCollectionError,
)
from schema_scaffold.core.schemas import Column, Database, KeyRole, Table, TargetType

__all__ = [
    "Column",
    "Table",
    "Database",
    "KeyRole",
    "TargetType",
    "ScaffoldError",
    "SchemaCollectionError",
    "ColumnParseError",
    "DuplicateNameError",
    "InvalidNameError",
    "ConfigurationError",
    "config",
]
