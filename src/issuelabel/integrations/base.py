"""Interfaces of the external collaborators."""

from typing import Protocol, Sequence

from issuelabel.nodes.schemas import Issue


class IssueSource(Protocol):
    """Supplies the issues to triage."""

    def list_unlabeled_issues(self, owner: str, name: str) -> list[Issue]:
        """Open issues without labels, pull requests excluded."""
        ...

    def get_issue(self, owner: str, name: str, number: int) -> Issue: ...


class LabelSink(Protocol):
    """Applies labels. Re-applying an existing label must be harmless."""

    def add_labels(
        self, owner: str, name: str, issue_number: int, labels: Sequence[str]
    ) -> None: ...


class LanguageModel(Protocol):
    """Single request/response text completion."""

    def complete(self, prompt: str) -> str: ...
