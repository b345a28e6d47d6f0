"""Code generation from the collected schema."""

from schema_scaffold.rendering.sql_renderer import SqlRenderer
from schema_scaffold.rendering.struct_renderer import StructRenderer, title_case

__all__ = ["SqlRenderer", "StructRenderer", "title_case"]
