"""GitHub API integration."""

from typing import Sequence

from github import Auth, Github

from issuelabel.nodes.schemas import Issue


def get_github_client(token: str) -> Github:
    """Get authenticated GitHub client."""
    return Github(auth=Auth.Token(token))


def _to_issue(issue) -> Issue:
    return Issue(
        number=issue.number,
        title=issue.title or "",
        body=issue.body,
        has_pull_request=issue.pull_request is not None,
    )


class GitHubIssueTracker:
    """Issue source and label sink backed by PyGithub."""

    def __init__(self, client: Github):
        self._gh = client

    @classmethod
    def from_token(cls, token: str) -> "GitHubIssueTracker":
        return cls(get_github_client(token))

    def list_unlabeled_issues(self, owner: str, name: str) -> list[Issue]:
        """Fetch every open issue that carries no labels.

        Pull requests (which GitHub also returns from the issues endpoint) are
        skipped. All pages are read before returning.
        """
        repository = self._gh.get_repo(f"{owner}/{name}")

        issues = []
        for issue in repository.get_issues(state="open"):
            if issue.pull_request:
                continue  # Skip PRs
            if issue.labels:
                continue
            issues.append(_to_issue(issue))

        return issues

    def get_issue(self, owner: str, name: str, number: int) -> Issue:
        """Fetch a single issue."""
        repository = self._gh.get_repo(f"{owner}/{name}")
        return _to_issue(repository.get_issue(number))

    def add_labels(
        self, owner: str, name: str, issue_number: int, labels: Sequence[str]
    ) -> None:
        """Add labels to an issue in one call."""
        if not labels:
            return

        repository = self._gh.get_repo(f"{owner}/{name}")
        issue = repository.get_issue(issue_number)
        issue.add_to_labels(*labels)
