"""
cursor_rules - Cursor rule and documentation deployment
"""

__version__ = "0.1.0"

from cursor_rules.config import ConfigError, CursorRulesError, DeployConfig, load_config
from cursor_rules.core.deployer import Deployer, DeployReport, SourceNotFoundError

__all__ = [
    "ConfigError",
    "CursorRulesError",
    "DeployConfig",
    "DeployReport",
    "Deployer",
    "SourceNotFoundError",
    "load_config",
]
