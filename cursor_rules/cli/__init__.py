"""
CLI module for cursor_rules.
"""

from cursor_rules.cli.main import app

def cli():
    """Entry point for the CLI."""
    app()

__all__ = ['app', 'cli']
