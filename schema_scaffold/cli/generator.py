"""Main class that orchestrates schema collection and file generation."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

from schema_scaffold.collection.collector import SchemaCollector
from schema_scaffold.collection.interfaces import ILineReader
from schema_scaffold.core.config import config
from schema_scaffold.core.console import console as default_console
from schema_scaffold.core.schemas import Database
from schema_scaffold.io.output_manager import OutputManager
from schema_scaffold.logger import logger, setup_logger
from schema_scaffold.rendering.sql_renderer import SqlRenderer
from schema_scaffold.rendering.struct_renderer import StructRenderer


class ScaffoldGenerator:
    """Main class that orchestrates the scaffold generation process.

    Collects databases, tables and columns interactively, then renders Go
    structs and SQL DDL and writes them to the output directory.
    """

    def __init__(
        self,
        output_path: Path = config.output_dir,
        reader: ILineReader | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the scaffold generator.

        Args:
            output_path: Directory for generated files
            reader: Source of input lines, defaults to the terminal
            console: Console for prompts and progress output
        """
        self.output_path = output_path
        self.console = console or default_console
        self.collector = SchemaCollector(reader=reader, console=self.console)
        self.output_manager = OutputManager(output_path)
        self.struct_renderer = StructRenderer()
        self.sql_renderer = SqlRenderer()

    def run(self) -> None:
        """Run the complete collection and generation process.

        Raises:
            SystemExit: If any critical error occurs during generation
        """
        try:
            setup_logger()
            logger.info("Starting interactive schema collection")
            generated_files = self.run_for_testing()
            logger.info(
                "Generation completed successfully! Generated %d file(s).",
                len(generated_files),
            )
        except PermissionError as e:
            self.console.print(str(e), style="red", markup=False)
            logger.error("Output error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_file_system)
        except KeyboardInterrupt:
            self.console.print("\nAborted.", style="red")
            logger.warning("Interrupted by user, no files written")
            sys.exit(config.exit_codes.error_interrupted)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(config.exit_codes.error_unexpected)

    def run_for_testing(self) -> list[Path]:
        """Run collection and generation without exiting the process.

        Unlike run(), this method raises exceptions instead of calling sys.exit(),
        making it suitable for unit tests.

        Returns:
            List of paths where files were written

        Raises:
            PermissionError: If the output directory or a file cannot be written
        """
        databases = self.collector.collect_databases()
        logger.info("Collected %d database(s)", len(databases))
        return self.generate_files(databases)

    def generate_files(self, databases: list[Database]) -> list[Path]:
        """Render and write the struct and SQL files.

        The struct file is written first; if writing the SQL file fails the
        struct file is left in place.

        Args:
            databases: Collected databases

        Returns:
            Paths of the struct file and the SQL file
        """
        self.console.print("\nGenerating files...", style="green")
        self.output_manager.create_output_structure()

        struct_path = self.output_manager.write_artifact(
            config.file_names.struct_file, self.struct_renderer.render(databases)
        )
        logger.info("Structs written to: %s", struct_path)

        sql_path = self.output_manager.write_artifact(
            config.file_names.sql_file, self.sql_renderer.render(databases)
        )
        logger.info("SQL written to: %s", sql_path)

        self._print_trace(databases)

        self.console.print()
        self.console.print(
            f"Go structs generated in {struct_path}", style="bold green", markup=False
        )
        self.console.print(
            f"SQL table definitions generated in {sql_path}",
            style="bold green",
            markup=False,
        )
        return [struct_path, sql_path]

    def _print_trace(self, databases: list[Database]) -> None:
        for database in databases:
            self.console.print(f"-----{database.name}-----", style="yellow", markup=False)
            for table in database.tables:
                self.console.print(f"{table.name},", style="green", markup=False)


def main() -> None:
    """Console script entry point."""
    ScaffoldGenerator().run()
