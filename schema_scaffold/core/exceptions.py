"""Custom exception classes for the schema scaffold generator."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for schema scaffold errors.

    All custom exceptions in the schema scaffold generator inherit from this class.
    """

    pass


class ConfigurationError(ScaffoldError):
    """Error in application configuration.

    Raised when a configuration value supplied through the environment
    or a .env file is invalid.

    Args:
        variable_name: The name of the configuration variable that caused the error
        reason: Optional description of what is wrong with the value
    """

    def __init__(self, variable_name: str, reason: str | None = None) -> None:
        self.variable_name = variable_name
        self.reason = reason
        message = f"Invalid configuration variable '{variable_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SchemaCollectionError(ScaffoldError):
    """Recoverable error raised while collecting the schema interactively.

    The collector reports these to the user and re-prompts; they never
    escape the collection phase.
    """

    pass


class ColumnParseError(SchemaCollectionError):
    """Error when a column specification line cannot be parsed."""

    pass


class InvalidNameError(SchemaCollectionError):
    """Error when a database or table name is empty.

    Args:
        kind: Entity kind ("database" or "table")
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind.capitalize()} name cannot be empty.")


class DuplicateNameError(SchemaCollectionError):
    """Error when a name is already taken at the current level.

    Args:
        kind: Entity kind ("database", "table" or "column")
        name: The rejected name
        scope: Where the name must be unique, appended to the message
    """

    def __init__(self, kind: str, name: str, scope: str = "") -> None:
        self.kind = kind
        self.name = name
        suffix = f" in {scope}" if scope else ""
        super().__init__(
            f"{kind.capitalize()} with this name already exists{suffix}. "
            "Choose a different name."
        )
