"""
Schema Scaffold

An interactive tool that collects database, table and column definitions
and generates Go struct declarations and SQL CREATE statements for them.
"""

from schema_scaffold.cli.generator import ScaffoldGenerator

__all__ = ["ScaffoldGenerator"]
