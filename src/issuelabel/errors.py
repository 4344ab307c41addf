"""Exceptions surfaced by the triage run."""

from typing import Optional


class ConfigError(ValueError):
    """Configuration or credential problem detected before any issue is processed."""


class StageError(Exception):
    """A pipeline stage failed; processing of the run stops here.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, stage: str, issue_number: Optional[int] = None, message: str = ""):
        self.stage = stage
        self.issue_number = issue_number
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f" for issue #{self.issue_number}" if self.issue_number is not None else ""
        return f"Error during {self.stage}{where}: {self.message}"
