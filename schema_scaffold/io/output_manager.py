"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path

from schema_scaffold.core.config import config


class OutputManager:
    """Manages file system operations for output generation.

    This class handles creating the output directory and writing
    generated artifacts into it.
    """

    def __init__(self, output_dir: Path = config.output_dir) -> None:
        """Initialize the output manager.

        Args:
            output_dir: Directory for generated files
        """
        self.output_dir = output_dir

    def create_output_structure(self) -> None:
        """Create the output directory if it does not exist yet.

        Raises:
            PermissionError: If unable to create directories
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise PermissionError(
                f"Failed to create output directory {self.output_dir}: {e}"
            ) from e

    def write_artifact(self, file_name: str, content: str) -> Path:
        """Write generated text to a file, overwriting any previous version.

        Args:
            file_name: Name of the file inside the output directory
            content: Text to write

        Returns:
            Path where the file was written

        Raises:
            PermissionError: If unable to write file
        """
        output_path = self.get_output_path(file_name)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)

            return output_path

        except Exception as e:
            raise PermissionError(f"Failed to write {output_path}: {e}") from e

    def get_output_path(self, file_name: str) -> Path:
        """Get the output path for a generated file.

        Args:
            file_name: Name of the generated file

        Returns:
            Path inside the output directory
        """
        return self.output_dir / file_name
