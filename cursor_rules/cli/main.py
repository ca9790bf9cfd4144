"""
Main CLI entry point for cursor_rules.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer

# Local imports
from cursor_rules import __version__
from cursor_rules.config import CursorRulesError, load_config, load_env_file
from cursor_rules.core.deployer import Deployer, DeployReport
from cursor_rules.utils.logging import configure_logging
from cursor_rules.utils.rich_console import get_console, get_console_logger, print_panel, print_table


console = get_console()
logger = get_console_logger()

USAGE = "Usage: apply-rules <target-project-directory>"


app = typer.Typer(
    help="Deploy the shared Cursor rule files and documentation into a project.\n\n"
    "Rule files already present in the target are never overwritten; docs are mirrored.",
    add_completion=False,
)


def version_callback(value: bool):
    if value:
        typer.echo(f"apply-rules version: {__version__}")
        raise typer.Exit()


def say(message: str) -> None:
    """Print a plain progress line; paths are never treated as rich markup."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def print_summary(report: DeployReport) -> None:
    """Print the closing progress lines and a summary table for a deployment."""
    say("✨ Deployment Complete!")
    say(f"📁 Core rules: {report.rules_dir}/")
    if report.docs_deployed:
        say(f"📚 Documentation: {report.docs_dir}/")
    if report.gitignore_updated:
        say("🔒 Updated .gitignore")
    else:
        say("🔒 .gitignore already up to date")

    rows = [
        ["Target", report.target_dir],
        ["Project created", "yes" if report.target_created else "no"],
        ["Rules copied", ", ".join(report.rules.copied) or "(none)"],
        ["Rules kept", ", ".join(report.rules.skipped) or "(none)"],
        ["Docs files", len(report.docs_copied) if report.docs_deployed else "(no docs)"],
        [".gitignore entries added", ", ".join(report.gitignore_entries_added) or "(none)"],
    ]
    print_table(["Step", "Result"], rows, title="Deployment Summary")


@app.command()
def apply_rules(
    target: Optional[Path] = typer.Argument(None, help="Target project directory, created if missing", show_default=False),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="Directory holding .cursor/rules and docs [env: CURSOR_RULES_SOURCE]"
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", "-p", help="Glob selecting rule files [env: CURSOR_RULES_PATTERN]"
    ),
    ai_docs: Optional[bool] = typer.Option(
        None, "--ai-docs/--no-ai-docs", help="Create .ai/docs in the target [env: CURSOR_RULES_AI_DOCS]"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """Copy rule files and docs into TARGET and update its .gitignore."""
    if target is None:
        typer.echo("Error: Please provide the target project directory", err=True)
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    load_env_file()
    configure_logging(verbose)
    logger.configure_from_env()
    if verbose:
        logger.set_log_level(logging.DEBUG)

    try:
        config = load_config(source_dir=source, rule_pattern=pattern, ai_docs=ai_docs)
        logger.debug(f"Deploying from {config.source_dir} to {target}")
        report = Deployer(config, progress=say).deploy(target)
    except CursorRulesError as error:
        print_panel(str(error), title="Deployment Failed", style="bold red", border_style="red")
        raise typer.Exit(1)
    except OSError as error:
        logger.error(f"Filesystem error during deployment: {error}")
        print_table(["Error"], [[str(error)]], title="Deployment Failed")
        raise typer.Exit(1)

    print_summary(report)


if __name__ == "__main__":
    app()
