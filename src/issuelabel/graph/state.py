"""TriageState schema and run context for the LangGraph workflow."""

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence, TypedDict

from langchain_core.runnables import RunnableConfig

from issuelabel.config import LabelerConfig
from issuelabel.integrations.base import LabelSink, LanguageModel
from issuelabel.nodes.schemas import Issue


class TriageState(TypedDict, total=False):
    """State schema for labeling a single issue."""

    # === Input ===
    issue: Issue
    require_confirmation: bool

    # === Pipeline ===
    prompt: str
    model_response: str
    labels: list[str]
    confirmed: bool

    # === Result ===
    outcome: Literal["applied", "skipped", "no_labels"]


@dataclass(frozen=True)
class TriageContext:
    """Collaborators shared by every node for the duration of a run."""

    config: LabelerConfig
    model: LanguageModel
    label_sink: Optional[LabelSink] = None
    confirm: Optional[Callable[[Sequence[str]], bool]] = None

    def as_run_config(self) -> RunnableConfig:
        return {"configurable": {"triage_context": self}}


def get_context(config: RunnableConfig) -> TriageContext:
    """Pull the TriageContext out of a node's run config."""
    try:
        return config["configurable"]["triage_context"]
    except KeyError as e:
        raise RuntimeError("triage_context missing from run config") from e
