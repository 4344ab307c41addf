"""Prompt construction node."""

from pathlib import Path

from langchain_core.runnables import RunnableConfig

from issuelabel.config import LabelerConfig
from issuelabel.graph.state import TriageState, get_context
from issuelabel.nodes.schemas import Issue
from issuelabel.observability import traced_node

# Load prompt from file
PROMPT_PATH = Path(__file__).parent.parent / "prompts" / "label.md"
LABEL_PROMPT = PROMPT_PATH.read_text()


def format_label_rules(config: LabelerConfig) -> str:
    """One line per configured rule, in mapping order."""
    return "\n".join(
        f"- Apply '{name}' if the issue {rule.condition}"
        for name, rule in config.labels.items()
    )


def build_prompt(issue: Issue, config: LabelerConfig) -> str:
    """Render the labeling prompt for an issue.

    Pure: the same issue and config always produce the same text.
    """
    return LABEL_PROMPT.format(
        issue_title=issue.title,
        issue_body=issue.body or "",
        label_rules=format_label_rules(config),
    )


@traced_node("build_prompt")
def build_prompt_node(state: TriageState, config: RunnableConfig) -> dict:
    context = get_context(config)
    return {"prompt": build_prompt(state["issue"], context.config)}
