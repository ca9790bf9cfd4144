from pathlib import Path

import pytest

from cursor_rules.config import (
    ConfigError,
    CursorRulesError,
    DeployConfig,
    load_config,
    parse_bool,
    parse_list,
)
from cursor_rules.utils.path_constants import DEFAULT_RULE_PATTERN, PRIVATE_RULES_MARKER


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory with no .env file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults(workdir):
    config = load_config()
    assert config.source_dir == workdir
    assert config.rule_pattern == DEFAULT_RULE_PATTERN
    assert config.ignore_entries == [PRIVATE_RULES_MARKER]
    assert config.ai_docs is True


def test_environment_variables(workdir, monkeypatch):
    monkeypatch.setenv("CURSOR_RULES_SOURCE", str(workdir / "shared"))
    monkeypatch.setenv("CURSOR_RULES_PATTERN", "*.md")
    monkeypatch.setenv("CURSOR_RULES_IGNORE", ".cursor/rules/_*.mdc, .ai/private/")
    monkeypatch.setenv("CURSOR_RULES_AI_DOCS", "no")

    config = load_config()

    assert config.source_dir == workdir / "shared"
    assert config.rule_pattern == "*.md"
    assert config.ignore_entries == [PRIVATE_RULES_MARKER, ".ai/private/"]
    assert config.ai_docs is False


def test_overrides_win_over_environment(workdir, monkeypatch):
    monkeypatch.setenv("CURSOR_RULES_PATTERN", "*.md")
    monkeypatch.setenv("CURSOR_RULES_AI_DOCS", "false")

    config = load_config(rule_pattern="*.mdc", ai_docs=True, source_dir=None)

    assert config.rule_pattern == "*.mdc"
    assert config.ai_docs is True
    assert config.source_dir == workdir


def test_dotenv_file_is_loaded(workdir, monkeypatch):
    (workdir / ".env").write_text("CURSOR_RULES_PATTERN=*.rules\n")
    # Registers the variable with monkeypatch so the value load_dotenv sets is removed afterwards
    monkeypatch.setenv("CURSOR_RULES_PATTERN", "")
    monkeypatch.delenv("CURSOR_RULES_PATTERN")

    config = load_config()

    assert config.rule_pattern == "*.rules"


def test_invalid_boolean_raises_config_error(workdir, monkeypatch):
    monkeypatch.setenv("CURSOR_RULES_AI_DOCS", "maybe")
    with pytest.raises(ConfigError):
        load_config()


@pytest.mark.parametrize("pattern", ["   ", "rules/*.mdc"])
def test_invalid_pattern(workdir, pattern):
    with pytest.raises(ConfigError, match="rule_pattern"):
        load_config(rule_pattern=pattern)


def test_empty_ignore_entries_rejected():
    with pytest.raises(ValueError):
        DeployConfig(ignore_entries=["", "  "])


def test_ignore_entries_deduplicated():
    config = DeployConfig(ignore_entries=["a", "b", "a"])
    assert config.ignore_entries == ["a", "b"]


def test_config_error_hierarchy():
    assert issubclass(ConfigError, CursorRulesError)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), ("YES", True), ("off", False), ("0", False), (" False ", False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_list_drops_blanks():
    assert parse_list("a, ,b,,c ") == ["a", "b", "c"]


def test_source_dir_accepts_strings():
    assert DeployConfig(source_dir="some/dir").source_dir == Path("some/dir")
