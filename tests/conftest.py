"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures for testing rule deployment.
"""

from pathlib import Path

import pytest

from cursor_rules.config import ENV_VARIABLES

LOG_VARIABLES = ("CURSOR_RULES_LOG_LEVEL", "CURSOR_RULES_DEBUG", "CURSOR_RULES_LOG_FILE")

RULE_FILES = {
    "architecture.mdc": "---\ndescription: Architecture rules\n---\nKeep modules small.\n",
    "testing.mdc": "---\ndescription: Testing rules\n---\nWrite tests first.\n",
}

DOC_FILES = {
    "tech-stack.md": "# Tech Stack\n",
    "blueprints/api.md": "# API Blueprint\n",
    "blueprints/cli/commands.md": "# CLI Commands\n",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CURSOR_RULES_* variables from the developer's shell out of the tests.

    Every name is registered with monkeypatch, so values a test loads from
    a ``.env`` file are removed again at teardown.
    """
    for name in (*ENV_VARIABLES, *LOG_VARIABLES):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """
    Create a source tree with rule files and a nested docs directory.

    Returns:
        Path: The source root, holding ``.cursor/rules`` and ``docs``
    """
    root = tmp_path / "source"
    rules_dir = root / ".cursor" / "rules"
    rules_dir.mkdir(parents=True)
    for name, content in RULE_FILES.items():
        (rules_dir / name).write_text(content)
    # Not a rule file; must never be deployed
    (rules_dir / "notes.txt").write_text("scratch")

    for relative, content in DOC_FILES.items():
        doc = root / "docs" / relative
        doc.parent.mkdir(parents=True, exist_ok=True)
        doc.write_text(content)
    return root


@pytest.fixture
def rules_only_source(tmp_path: Path) -> Path:
    """Create a source tree without a docs directory."""
    root = tmp_path / "rules-only"
    rules_dir = root / ".cursor" / "rules"
    rules_dir.mkdir(parents=True)
    for name, content in RULE_FILES.items():
        (rules_dir / name).write_text(content)
    return root


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """A target project path that does not exist yet."""
    return tmp_path / "projects" / "demo"


@pytest.fixture
def rule_files() -> dict[str, str]:
    """Rule file names and contents present in ``source_root``."""
    return dict(RULE_FILES)


@pytest.fixture
def doc_files() -> dict[str, str]:
    """Docs paths, relative to ``docs/``, and contents present in ``source_root``."""
    return dict(DOC_FILES)
