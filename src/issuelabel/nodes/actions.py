"""Terminal nodes: apply labels, or record why nothing was applied."""

from langchain_core.runnables import RunnableConfig

from issuelabel.graph.state import TriageState, get_context
from issuelabel.observability import traced_node


@traced_node("apply_labels", run_type="tool")
def apply_labels_node(state: TriageState, config: RunnableConfig) -> dict:
    """Add the parsed labels to the issue on the tracker. Failures propagate."""
    context = get_context(config)
    if context.label_sink is None:
        raise RuntimeError("No label sink configured")

    repository = context.config.repository
    context.label_sink.add_labels(
        repository.owner,
        repository.name,
        state["issue"].number,
        list(state["labels"]),
    )
    return {"outcome": "applied"}


def skip_node(state: TriageState) -> dict:
    """Operator declined the suggested labels."""
    return {"outcome": "skipped"}


def no_labels_node(state: TriageState) -> dict:
    """Model found no applicable rule."""
    return {"outcome": "no_labels"}
