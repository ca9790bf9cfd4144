from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from typing import Any
from rich.logging import RichHandler
import logging
import os


LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# Singleton Console instance
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console()
    return get_console._console


def print_panel(content: str, title: str | None = None, style: str = "bold blue", border_style: str | None = None):
    """Print a styled panel with optional title using Rich library.

    Args:
        content (str): The text content to display in the panel.
        title (str | None, optional): Title of the panel. Defaults to None.
        style (str, optional): Rich styling for the panel's content. Defaults to "bold blue".
        border_style (str | None, optional): Styling for the panel's border. Defaults to None.
    """
    console = get_console()
    style = style or "bold blue"
    border_style = border_style or style

    panel = Panel(content, title=title, style=style, border_style=border_style)
    console.print(panel)


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
    """
    console = get_console()
    table = Table(title=title)
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    console.print(table)


def resolve_log_level(level_name: str | None) -> int:
    """Map a level name to a logging constant, falling back to INFO."""
    return LOG_LEVEL_MAP.get((level_name or "INFO").upper(), logging.INFO)


class RichConsoleLogger(logging.Logger):
    def __init__(self, name: str):
        super().__init__(name)
        self.rich_handler = None
        self.file_handler = None

        # Configure handler with rich tracebacks
        self.rich_handler = RichHandler(rich_tracebacks=True, show_path=False)
        self.addHandler(self.rich_handler)
        self.configure_from_env()

    def configure_from_env(self) -> None:
        """Apply CURSOR_RULES_LOG_LEVEL, CURSOR_RULES_DEBUG and CURSOR_RULES_LOG_FILE.

        Called again once a ``.env`` file has been loaded. The log file is
        only opened when the first record is written to it.
        """
        self.set_log_level(resolve_log_level(os.getenv("CURSOR_RULES_LOG_LEVEL", "INFO")))

        debug_mode = os.getenv("CURSOR_RULES_DEBUG", "").lower() in ["true", "1", "yes"]
        log_file = os.path.abspath(os.getenv("CURSOR_RULES_LOG_FILE", "cursor_rules.log"))
        if self.file_handler is not None:
            if debug_mode and self.file_handler.baseFilename == log_file:
                return
            self.removeHandler(self.file_handler)
            self.file_handler.close()
            self.file_handler = None

        if debug_mode:
            file_handler = logging.FileHandler(log_file, delay=True)
            file_handler.setLevel(self.log_level)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            self.addHandler(file_handler)
            self.file_handler = file_handler

    def set_log_level(self, log_level: int) -> None:
        """Change the level of the logger and its handlers."""
        self.log_level = log_level
        self.log_level_str = logging.getLevelName(log_level)
        self.setLevel(log_level)
        for handler in (self.rich_handler, self.file_handler):
            if handler is not None:
                handler.setLevel(log_level)


# Singleton logger instance
_console_logger = None

def get_console_logger() -> RichConsoleLogger:
    """Get a singleton instance of RichConsoleLogger with log level from environment variables.

    Environment variables:
        CURSOR_RULES_LOG_LEVEL: Set the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        CURSOR_RULES_DEBUG: Enable debug mode with file logging (true, 1, yes)
        CURSOR_RULES_LOG_FILE: Specify the log file path (default: cursor_rules.log)

    Returns:
        RichConsoleLogger: Configured logger instance
    """
    global _console_logger
    if _console_logger is None:
        _console_logger = RichConsoleLogger(__name__)
    return _console_logger
