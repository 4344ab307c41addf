"""Pytest configuration and fixtures."""

from types import MappingProxyType

import pytest

from issuelabel.config import LabelerConfig, LabelRule, RepositoryRef
from issuelabel.nodes.schemas import Issue


class FakeTracker:
    """In-memory issue source and label sink."""

    def __init__(self, issues=None, fail_add_for=None, fail_list=False):
        self.issues = list(issues or [])
        self.fail_add_for = set(fail_add_for or [])
        self.fail_list = fail_list
        self.added = []

    def list_unlabeled_issues(self, owner, name):
        if self.fail_list:
            raise ConnectionError("GitHub unavailable")
        return list(self.issues)

    def get_issue(self, owner, name, number):
        return next(issue for issue in self.issues if issue.number == number)

    def add_labels(self, owner, name, issue_number, labels):
        if issue_number in self.fail_add_for:
            raise RuntimeError(f"Failed to label #{issue_number}")
        self.added.append((owner, name, issue_number, list(labels)))


class FakeModel:
    """Language model returning canned answers, recording prompts."""

    def __init__(self, responses="none", fail_on_call=None):
        self.responses = responses
        self.fail_on_call = fail_on_call
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail_on_call is not None and len(self.prompts) == self.fail_on_call:
            raise TimeoutError("model timed out")
        if isinstance(self.responses, str):
            return self.responses
        return self.responses[len(self.prompts) - 1]


class ScriptedGate:
    """Confirmation gate answering from a list of booleans."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def __call__(self, labels):
        self.asked.append(list(labels))
        return self.answers.pop(0)


@pytest.fixture
def labeler_config():
    """The acme/widgets config with a single bug rule."""
    return LabelerConfig(
        repository=RepositoryRef(owner="acme", name="widgets"),
        labels=MappingProxyType(
            {"bug": LabelRule(condition="reports a crash or incorrect behavior")}
        ),
    )


@pytest.fixture
def crash_issue():
    return Issue(number=42, title="Crashes on startup", body="App exits immediately")


@pytest.fixture
def make_issue():
    """Factory for issues with sensible defaults."""

    def _make(number, title=None, body="", has_pull_request=False):
        return Issue(
            number=number,
            title=title if title is not None else f"Issue {number}",
            body=body,
            has_pull_request=has_pull_request,
        )

    return _make
