"""
Core deployment steps for cursor_rules.
"""

from cursor_rules.core.deployer import (
    Deployer,
    DeployReport,
    RuleCopyResult,
    SourceNotFoundError,
    copy_rule_files,
    ensure_ai_docs_dir,
    ensure_gitignore,
    ensure_rules_dir,
    ensure_target_dir,
    mirror_docs,
)

__all__ = [
    "Deployer",
    "DeployReport",
    "RuleCopyResult",
    "SourceNotFoundError",
    "copy_rule_files",
    "ensure_ai_docs_dir",
    "ensure_gitignore",
    "ensure_rules_dir",
    "ensure_target_dir",
    "mirror_docs",
]
