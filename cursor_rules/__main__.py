"""
Main entry point for the apply-rules CLI.
"""

from cursor_rules.cli import cli


def main() -> None:
    """Main function for the apply-rules CLI."""
    cli()


if __name__ == "__main__":
    main()
