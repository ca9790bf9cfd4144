"""
Rule Deployment
===============

This module copies the shared Cursor rule files and documentation into a
target project. A deployment is a fixed sequence of steps, each of which is
idempotent on its own, so an interrupted run is completed by running it
again:

1. ensure the target directory exists (seeding a README when new)
2. ensure ``.cursor/rules`` exists in the target
3. copy rule files, keeping any the target already has
4. mirror ``docs/``, overwriting the target's copies
5. ensure the private-rules entries are in the target ``.gitignore``

Filesystem errors are not caught here.
"""

from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field

from cursor_rules.config import CursorRulesError, DeployConfig
from cursor_rules.utils.file import append_missing_lines, copy_if_missing, copy_tree, ensure_dir, ensure_file_exists
from cursor_rules.utils.logging import timeit
from cursor_rules.utils.path_constants import (
    DEFAULT_IGNORE_ENTRIES,
    DEFAULT_RULE_PATTERN,
    DIRECTORIES,
    GITIGNORE_FILE,
    GITIGNORE_HEADER,
    README_FILE,
    README_TEMPLATE,
)
from cursor_rules.utils.paths import DeployPaths


class SourceNotFoundError(CursorRulesError, FileNotFoundError):
    """Raised when the source rules directory does not exist."""

    pass


class RuleCopyResult(BaseModel):
    """Outcome of copying the rule file set."""

    copied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


class DeployReport(BaseModel):
    """Everything a deployment changed in the target project."""

    target_dir: Path
    target_created: bool = False
    readme_written: bool = False
    rules_dir: Path | None = None
    rules: RuleCopyResult = Field(default_factory=RuleCopyResult)
    docs_dir: Path | None = None
    docs_copied: list[Path] = Field(default_factory=list)
    ai_docs_created: bool = False
    gitignore_entries_added: list[str] = Field(default_factory=list)

    @property
    def docs_deployed(self) -> bool:
        return self.docs_dir is not None

    @property
    def gitignore_updated(self) -> bool:
        return bool(self.gitignore_entries_added)


def ensure_target_dir(target: Path) -> bool:
    """
    Create the target directory if it is missing.

    A newly created target is seeded with a default README. An existing
    target is left untouched, README included.

    Returns:
        bool: True if the directory was created
    """
    if target.is_dir():
        return False
    ensure_dir(target)
    ensure_file_exists(target / README_FILE, README_TEMPLATE)
    logger.info(f"Created project directory {target}")
    return True


def ensure_rules_dir(target: Path) -> Path:
    """Ensure ``<target>/.cursor/rules`` exists and return it."""
    rules_dir = target / DIRECTORIES["rules"]
    ensure_dir(rules_dir)
    return rules_dir


def find_rule_files(source_rules: Path, pattern: str = DEFAULT_RULE_PATTERN) -> list[Path]:
    """List the rule files in ``source_rules`` matching ``pattern``, sorted by name."""
    return sorted(path for path in source_rules.glob(pattern) if path.is_file())


def copy_rule_files(source_rules: Path, target_rules: Path, pattern: str = DEFAULT_RULE_PATTERN) -> RuleCopyResult:
    """
    Copy rule files without overwriting any that already exist.

    Args:
        source_rules: Directory holding the rule files
        target_rules: Directory to copy them into
        pattern: Glob selecting the rule files

    Returns:
        RuleCopyResult: Names of copied and skipped files
    """
    result = RuleCopyResult()
    rule_files = find_rule_files(source_rules, pattern)
    if not rule_files:
        logger.warning(f"No rule files matching {pattern!r} in {source_rules}")

    for rule_file in rule_files:
        if copy_if_missing(rule_file, target_rules / rule_file.name):
            result.copied.append(rule_file.name)
        else:
            result.skipped.append(rule_file.name)
    return result


def mirror_docs(source_docs: Path, target_docs: Path) -> list[Path]:
    """
    Recursively copy ``source_docs`` into ``target_docs``, overwriting.

    Returns:
        list[Path]: Copied files relative to ``source_docs``; empty when
        there is no source docs directory
    """
    if not source_docs.is_dir():
        logger.debug(f"No docs directory at {source_docs}")
        return []
    if source_docs.resolve() == target_docs.resolve():
        logger.debug(f"Docs source and target are the same directory: {source_docs}")
        return []
    ensure_dir(target_docs)
    return copy_tree(source_docs, target_docs)


def ensure_ai_docs_dir(target: Path) -> bool:
    """Ensure ``<target>/.ai/docs`` exists. Returns True if it was created."""
    return ensure_dir(target / DIRECTORIES["ai_docs"])


def ensure_gitignore(target: Path, entries: list[str] | tuple[str, ...] = DEFAULT_IGNORE_ENTRIES) -> list[str]:
    """
    Ensure the target ``.gitignore`` contains every entry.

    Returns:
        list[str]: Entries that were added, empty if all were present
    """
    return append_missing_lines(target / GITIGNORE_FILE, list(entries), header=GITIGNORE_HEADER)


class Deployer:
    """Deploys the rule set described by a DeployConfig into target projects."""

    def __init__(self, config: DeployConfig | None = None, progress: Callable[[str], None] | None = None):
        """Initialize the deployer.

        Args:
            config: Deployment settings; defaults are used when omitted
            progress: Called with a human-readable message as each step starts
        """
        self.config = config or DeployConfig()
        self.progress = progress

    def _notify(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)

    def paths_for(self, target: str | Path) -> DeployPaths:
        return DeployPaths.resolve(target, self.config.source_dir)

    def check_source(self, paths: DeployPaths) -> None:
        """Raise SourceNotFoundError unless the source rules directory exists."""
        if not paths.rules_source.is_dir():
            raise SourceNotFoundError(f"Rules directory not found: {paths.rules_source}")

    @timeit
    def deploy(self, target: str | Path) -> DeployReport:
        """
        Run every deployment step against ``target`` in order.

        Args:
            target: Project directory to deploy into; created if missing

        Returns:
            DeployReport: What was created, copied, skipped and appended

        Raises:
            SourceNotFoundError: If the source rules directory is missing;
                raised before the target is touched
            OSError: If any filesystem operation fails; completed steps are
                kept
        """
        paths = self.paths_for(target)
        self.check_source(paths)
        report = DeployReport(target_dir=paths.target_dir)

        if not paths.target_dir.is_dir():
            self._notify(f"📁 Creating new project directory: {paths.target_dir}")
        report.target_created = ensure_target_dir(paths.target_dir)
        report.readme_written = report.target_created and paths.readme_file.is_file()

        report.rules_dir = ensure_rules_dir(paths.target_dir)
        self._notify("📦 Copying cursor rules files...")
        report.rules = copy_rule_files(paths.rules_source, paths.rules_target, self.config.rule_pattern)
        logger.info(f"Rule files: {len(report.rules.copied)} copied, {len(report.rules.skipped)} kept")

        if paths.docs_source.is_dir():
            self._notify("📚 Copying documentation...")
            report.docs_copied = mirror_docs(paths.docs_source, paths.docs_target)
            report.docs_dir = paths.docs_target

        if self.config.ai_docs:
            report.ai_docs_created = ensure_ai_docs_dir(paths.target_dir)

        report.gitignore_entries_added = ensure_gitignore(paths.target_dir, self.config.ignore_entries)
        return report
