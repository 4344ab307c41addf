"""Parsing of the model's free-text answer into a label set."""

from langchain_core.runnables import RunnableConfig

from issuelabel.config import LabelerConfig
from issuelabel.graph.state import TriageState, get_context
from issuelabel.observability import log_node_event, traced_node

# The model's way of saying "no label applies"
NO_LABELS_SENTINEL = "none"


def parse_labels(response: str) -> list[str]:
    """Split a comma-separated model answer into label names.

    Whitespace is trimmed, empty pieces and the ``none`` sentinel are dropped.
    Order and duplicates are preserved. Never raises: garbage in, fewer
    labels out.
    """
    labels = []
    for piece in response.split(","):
        label = piece.strip()
        if not label or label == NO_LABELS_SENTINEL:
            continue
        labels.append(label)
    return labels


def find_unknown_labels(labels: list[str], config: LabelerConfig) -> list[str]:
    """Labels that are not keys of the configured rule set."""
    return [label for label in labels if label not in config.labels]


def drop_unknown_labels(labels: list[str], config: LabelerConfig) -> list[str]:
    """Keep only labels that have a configured rule."""
    return [label for label in labels if label in config.labels]


@traced_node("parse_response")
def parse_response_node(state: TriageState, config: RunnableConfig) -> dict:
    context = get_context(config)
    labels = parse_labels(state["model_response"])

    unknown = find_unknown_labels(labels, context.config)
    if unknown:
        if context.config.unknown_labels == "drop":
            log_node_event("parse_response", "Dropping unknown labels", "warning", labels=unknown)
            labels = drop_unknown_labels(labels, context.config)
        else:
            log_node_event("parse_response", "Model suggested unknown labels", "warning", labels=unknown)

    return {"labels": labels}
