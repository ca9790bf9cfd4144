"""Deployment configuration management."""

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from cursor_rules.utils.path_constants import DEFAULT_IGNORE_ENTRIES, DEFAULT_RULE_PATTERN

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")

# Environment variable -> DeployConfig field
ENV_VARIABLES: dict[str, str] = {
    "CURSOR_RULES_SOURCE": "source_dir",
    "CURSOR_RULES_PATTERN": "rule_pattern",
    "CURSOR_RULES_IGNORE": "ignore_entries",
    "CURSOR_RULES_AI_DOCS": "ai_docs",
}


class CursorRulesError(Exception):
    """Base exception for cursor_rules errors."""

    pass


class ConfigError(CursorRulesError):
    """Raised when the deployment configuration is invalid."""

    pass


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value such as 'true', '0' or 'off'."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r}")


def parse_list(value: str) -> list[str]:
    """Split a comma separated environment value, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


class DeployConfig(BaseModel):
    """Settings for a single deployment run."""

    source_dir: Path = Field(default_factory=lambda: Path.cwd(), description="Directory holding .cursor/rules and docs")
    rule_pattern: str = Field(DEFAULT_RULE_PATTERN, description="Glob selecting rule files")
    ignore_entries: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_ENTRIES),
        description="Lines that must be present in the target .gitignore",
    )
    ai_docs: bool = Field(True, description="Create the .ai/docs directory in the target")

    @field_validator("rule_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("rule pattern cannot be empty")
        if "/" in value or "\\" in value:
            raise ValueError("rule pattern must match file names, not paths")
        return value

    @field_validator("ignore_entries")
    @classmethod
    def _check_entries(cls, value: list[str]) -> list[str]:
        entries = [entry.strip() for entry in value if entry.strip()]
        if not entries:
            raise ValueError("at least one .gitignore entry is required")
        return list(dict.fromkeys(entries))


def read_env_overrides() -> dict[str, Any]:
    """Collect DeployConfig values from CURSOR_RULES_* environment variables."""
    values: dict[str, Any] = {}
    for env_name, field_name in ENV_VARIABLES.items():
        raw = os.getenv(env_name)
        if raw is None or raw == "":
            continue
        if field_name == "ai_docs":
            values[field_name] = parse_bool(raw)
        elif field_name == "ignore_entries":
            values[field_name] = parse_list(raw)
        else:
            values[field_name] = raw
        logger.debug(f"{env_name} sets {field_name}")
    return values


def load_env_file() -> bool:
    """Load a ``.env`` file from the working directory or its parents, if any."""
    return load_dotenv(find_dotenv(usecwd=True))


def load_config(**overrides: Any) -> DeployConfig:
    """
    Build the deployment configuration.

    Values are layered: defaults, then ``CURSOR_RULES_*`` environment
    variables (a ``.env`` file in the working directory is loaded first),
    then any non-None keyword overrides, typically CLI options.

    Raises:
        ConfigError: If a value fails validation
    """
    load_env_file()
    values = read_env_overrides()
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return DeployConfig(**values)
    except ValidationError as error:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
        )
        raise ConfigError(f"Invalid configuration: {messages}") from error
