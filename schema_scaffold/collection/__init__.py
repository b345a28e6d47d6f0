"""Interactive schema collection components."""

from schema_scaffold.collection.collector import SchemaCollector
from schema_scaffold.collection.reader import ConsoleLineReader

__all__ = ["SchemaCollector", "ConsoleLineReader"]
