"""CLI entry point using Typer."""

from pathlib import Path

import typer

from issuelabel.config import (
    CONFIG_PATH,
    get_github_token,
    load_config,
    require_anthropic_key,
    setup_langsmith,
)
from issuelabel.errors import ConfigError, StageError
from issuelabel.integrations.claude import ClaudeLabelModel
from issuelabel.integrations.github import GitHubIssueTracker
from issuelabel.nodes.confirm import format_labels
from issuelabel.observability import set_verbose
from issuelabel.runner import run_triage, suggest_labels

app = typer.Typer(
    name="issuelabel",
    help="AI-assisted labeling of unlabeled GitHub issues",
)


def _startup(config_path: Path):
    """Load config and credentials; any problem ends the process."""
    try:
        config = load_config(config_path)
        token = get_github_token()
        require_anthropic_key()
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    setup_langsmith()
    return config, GitHubIssueTracker.from_token(token), ClaudeLabelModel(config.model)


@app.command()
def run(
    config_path: Path = typer.Option(
        Path(CONFIG_PATH), "--config", "-c", help="Path to the YAML config file"
    ),
    confirm: bool = typer.Option(
        True, "--confirm/--no-confirm", help="Ask before applying labels to each issue"
    ),
    continue_on_error: bool = typer.Option(
        False, "--continue-on-error", help="Keep going when an issue fails instead of stopping"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every pipeline step"),
) -> None:
    """Suggest and apply labels for every unlabeled issue."""
    set_verbose(verbose)
    config, tracker, model = _startup(config_path)

    typer.echo(f"Triaging unlabeled issues in {config.repository.full_name}...")

    try:
        summary = run_triage(
            config,
            tracker=tracker,
            model=model,
            require_confirmation=confirm,
            on_error="continue" if continue_on_error else "abort",
        )
    except StageError as e:
        typer.echo(f"\n{e}", err=True)
        typer.echo("Processing stopped here.", err=True)
        raise typer.Exit(1)

    typer.echo(f"\nDone: {summary.describe()}")
    if summary.failed:
        raise typer.Exit(1)


@app.command()
def suggest(
    issue: int = typer.Argument(..., help="Issue number"),
    config_path: Path = typer.Option(
        Path(CONFIG_PATH), "--config", "-c", help="Path to the YAML config file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every pipeline step"),
) -> None:
    """Show the labels the model suggests for one issue (nothing is applied)."""
    set_verbose(verbose)
    config, tracker, model = _startup(config_path)
    repository = config.repository

    try:
        found = tracker.get_issue(repository.owner, repository.name, issue)
    except Exception as e:
        typer.echo(f"Error during get_issue for issue #{issue}: {e}", err=True)
        raise typer.Exit(1)

    if found.has_pull_request:
        typer.echo(f"#{issue} is a pull request, not an issue.", err=True)
        raise typer.Exit(1)

    try:
        labels = suggest_labels(found, config, model=model)
    except StageError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo(f"#{found.number}: {found.title}")
    if labels:
        typer.echo(f"Suggested labels: {format_labels(labels)}")
    else:
        typer.echo("No labels suggested.")


STARTER_CONFIG = """\
# issuelabel configuration
repository:
  owner: {owner}
  name: {name}

# model: claude-haiku-4-5
# unknown_labels: keep   # keep | drop labels the model invents

labels:
  bug:
    condition: reports a crash, error, or other incorrect behavior
  enhancement:
    condition: asks for a new feature or an improvement to existing behavior
  documentation:
    condition: is about missing, unclear, or wrong documentation
"""


@app.command()
def init(
    repo: str = typer.Argument(..., help="Repository in owner/repo format"),
    path: Path = typer.Option(Path(CONFIG_PATH), "--path", "-p", help="Where to write the config"),
) -> None:
    """Write a starter config file with a few example label rules."""
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        typer.echo("Error: repository must be in owner/repo format.", err=True)
        raise typer.Exit(1)

    if path.exists():
        overwrite = typer.confirm(f"{path} already exists. Overwrite?", default=False)
        if not overwrite:
            typer.echo("Leaving existing config untouched.")
            return

    path.write_text(STARTER_CONFIG.format(owner=owner, name=name))
    typer.echo(f"Created: {path}")
    typer.echo("\nNext steps:")
    typer.echo("1. Edit the label rules to match your repository.")
    typer.echo("2. Export GITHUB_TOKEN and ANTHROPIC_API_KEY.")
    typer.echo(f"3. Run: issuelabel run --config {path}")


if __name__ == "__main__":
    app()
