"""Pydantic models for the collected database schema."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from schema_scaffold.logger import logger


class TargetType(str, Enum):
    """Coarse type category used for generated struct fields.

    The vocabulary is closed; ``GENERIC`` is the deliberate fallback for any
    declared type outside it.
    """

    INTEGER = "integer"
    STRING = "string"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    FLOAT = "float"
    GENERIC = "generic"

    @classmethod
    def from_declared(cls, declared_type: str) -> TargetType:
        """Map a declared SQL type token to its target type.

        Matching is case-sensitive and exact.

        Args:
            declared_type: Raw type token as entered by the user

        Returns:
            The matching TargetType, or GENERIC for unrecognized tokens
        """
        if declared_type in ("INT", "INTEGER", "SMALLINT", "BIGINT"):
            return cls.INTEGER
        if declared_type in ("VARCHAR", "TEXT", "CHAR", "LONGTEXT"):
            return cls.STRING
        if declared_type in ("DATE", "DATETIME", "TIMESTAMP", "TIME"):
            return cls.TIMESTAMP
        if declared_type in ("BOOLEAN", "BOOL"):
            return cls.BOOLEAN
        if declared_type in ("FLOAT", "DOUBLE", "REAL"):
            return cls.FLOAT
        return cls.GENERIC


class KeyRole(str, Enum):
    """Constraint classification of a column."""

    PRIMARY = "PRIMARY"
    UNIQUE = "UNIQUE"
    FOREIGN = "FOREIGN"
    NONE = ""

    @classmethod
    def from_token(cls, token: str | None) -> KeyRole:
        """Parse an optional key role token (case-sensitive).

        Unrecognized tokens are treated as no key role.
        """
        if not token:
            return cls.NONE
        try:
            return cls(token)
        except ValueError:
            logger.warning("Unrecognized key role '%s', ignoring it", token)
            return cls.NONE


class Column(BaseModel):
    """A single typed column of a table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Column name")
    declared_type: str = Field(
        ..., min_length=1, description="Type token as entered, used for SQL output"
    )
    length: str | None = Field(None, description="Length qualifier, None for no length")
    nullability: str = Field(..., description="Raw nullability token ('null' or 'not')")
    key: KeyRole = Field(KeyRole.NONE, description="Key role of the column")
    auto_increment: bool = Field(
        False, description="Auto-increment flag, only rendered for primary keys"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def target_type(self) -> TargetType:
        """Target type derived from the declared type."""
        return TargetType.from_declared(self.declared_type)

    @property
    def json_tag(self) -> str:
        """Serialization tag for the generated struct field."""
        return self.name

    @property
    def is_nullable(self) -> bool:
        """Whether the column was declared with the exact token 'null'."""
        return self.nullability == "null"


class Table(BaseModel):
    """A table and its ordered columns."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Table name")
    columns: list[Column] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_columns(self) -> Table:
        """Column names must be unique within the table."""
        names = [column.name for column in self.columns]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate column names in table '{self.name}'")
        return self


class Database(BaseModel):
    """A database and its ordered tables."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Database name")
    tables: list[Table] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_tables(self) -> Database:
        """Table names must be unique within the database."""
        names = [table.name for table in self.tables]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate table names in database '{self.name}'")
        return self

    def __str__(self) -> str:
        """Return the database name."""
        return self.name
