"""Sequential triage run over all unlabeled issues of a repository."""

from dataclasses import dataclass, field
from typing import Callable, Literal, Optional, Sequence

import typer

from issuelabel.config import LabelerConfig
from issuelabel.errors import StageError
from issuelabel.graph.state import TriageContext
from issuelabel.graph.workflow import label_graph, suggest_graph
from issuelabel.integrations.base import IssueSource, LabelSink, LanguageModel
from issuelabel.nodes.confirm import format_labels
from issuelabel.nodes.schemas import Issue

ErrorPolicy = Literal["abort", "continue"]


@dataclass
class TriageSummary:
    """Issue numbers per outcome for one run."""

    applied: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    no_labels: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)

    def describe(self) -> str:
        return (
            f"{len(self.applied)} labeled, {len(self.skipped)} skipped, "
            f"{len(self.no_labels)} without labels, {len(self.failed)} failed"
        )


def _echo_issue(issue: Issue, echo: Callable[[str], None]) -> None:
    echo("\n" + typer.style(f"#{issue.number}: {issue.title}", bold=True))
    body = "\n".join(f"  {line}" for line in (issue.body or "").splitlines())
    echo(typer.style(body, dim=True))


def _record(
    summary: TriageSummary,
    issue: Issue,
    result: dict,
    echo: Callable[[str], None],
) -> None:
    outcome = result.get("outcome")
    if outcome == "applied":
        summary.applied.append(issue.number)
        echo(f"Applied labels to issue #{issue.number}: {format_labels(result['labels'])}")
    elif outcome == "skipped":
        summary.skipped.append(issue.number)
        echo(f"Skipped issue #{issue.number}")
    else:
        summary.no_labels.append(issue.number)
        echo(f"No labels for issue #{issue.number}")


def run_triage(
    config: LabelerConfig,
    *,
    tracker: IssueSource,
    label_sink: Optional[LabelSink] = None,
    model: LanguageModel,
    confirm: Optional[Callable[[Sequence[str]], bool]] = None,
    require_confirmation: bool = True,
    on_error: ErrorPolicy = "abort",
    echo: Callable[[str], None] = typer.echo,
) -> TriageSummary:
    """Label every unlabeled issue of the configured repository, one at a time.

    Args:
        config: Loaded configuration.
        tracker: Source of unlabeled issues.
        label_sink: Where labels are applied. Defaults to ``tracker``.
        model: Language model answering the label prompt.
        confirm: Confirmation gate. Defaults to the interactive y/N prompt.
        require_confirmation: Ask before applying labels.
        on_error: "abort" re-raises the first StageError so later issues are
            never processed; "continue" reports it and moves on.
        echo: Output function for the per-issue report.

    Returns:
        TriageSummary of the run.

    Raises:
        StageError: Listing issues failed, or a stage failed under "abort".
    """
    repository = config.repository
    try:
        issues = tracker.list_unlabeled_issues(repository.owner, repository.name)
    except Exception as e:
        raise StageError("list_issues", None, str(e) or type(e).__name__) from e

    echo(f"Found {typer.style(str(len(issues)), bold=True)} unlabeled issues")

    context = TriageContext(
        config=config,
        model=model,
        label_sink=label_sink if label_sink is not None else tracker,  # type: ignore[arg-type]
        confirm=confirm,
    )
    run_config = context.as_run_config()
    summary = TriageSummary()

    for issue in issues:
        if issue.has_pull_request:
            continue

        _echo_issue(issue, echo)
        try:
            result = label_graph.invoke(
                {"issue": issue, "require_confirmation": require_confirmation},
                config=run_config,
            )
        except StageError as e:
            if on_error == "abort":
                raise
            summary.failed.append(issue.number)
            echo(f"Failed issue #{issue.number} during {e.stage}: {e.message}")
            continue

        _record(summary, issue, result, echo)

    return summary


def suggest_labels(issue: Issue, config: LabelerConfig, *, model: LanguageModel) -> list[str]:
    """Labels the model would apply to ``issue``, without applying them."""
    context = TriageContext(config=config, model=model)
    result = suggest_graph.invoke({"issue": issue}, config=context.as_run_config())
    return result["labels"]
