"""
Utility modules for cursor_rules.
"""

from cursor_rules.utils.paths import DeployPaths
from cursor_rules.utils.rich_console import get_console, get_console_logger

__all__ = ["DeployPaths", "get_console", "get_console_logger"]
