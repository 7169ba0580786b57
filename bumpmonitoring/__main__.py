"""
Main entry point for the bumpmonitoring CLI.
"""

from bumpmonitoring.cli import cli


def main() -> None:
    """Main function for the bumpmonitoring CLI."""
    cli()


if __name__ == "__main__":
    main()
