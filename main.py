"""
Schema Scaffold

Entry point for the interactive scaffold generator.
"""

from schema_scaffold import ScaffoldGenerator


def main() -> None:
    """
    Entry point for the scaffold generator script.

    Creates ScaffoldGenerator instance and runs collection and generation.
    """
    generator = ScaffoldGenerator()
    generator.run()


if __name__ == "__main__":
    main()
