"""Main entry point for the date-utilities CLI."""

from date_utilities.cli import create_cli

cli = create_cli()


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
