"""Constants and configuration for deployment paths."""

from pathlib import Path
from typing import Final

# Directory names, relative to the source or target root
DIRECTORIES: Final[dict[str, Path]] = {
    "rules": Path(".cursor") / "rules",
    "docs": Path("docs"),
    "ai_docs": Path(".ai") / "docs",
}

# File names
README_FILE: Final[str] = "README.md"
GITIGNORE_FILE: Final[str] = ".gitignore"

# Rule files
DEFAULT_RULE_PATTERN: Final[str] = "*.mdc"

# .gitignore marker block
GITIGNORE_HEADER: Final[str] = "# Private individual user cursor rules"
PRIVATE_RULES_MARKER: Final[str] = ".cursor/rules/_*.mdc"
DEFAULT_IGNORE_ENTRIES: Final[tuple[str, ...]] = (PRIVATE_RULES_MARKER,)

# Seed content for newly created projects
README_TEMPLATE: Final[str] = """# Cursor Rules Project

This project has been configured with Cursor rules for enhanced AI assistance.
"""
