"""Model query node."""

from langchain_core.runnables import RunnableConfig

from issuelabel.graph.state import TriageState, get_context
from issuelabel.observability import traced_node


@traced_node("query_model", run_type="llm")
def query_model_node(state: TriageState, config: RunnableConfig) -> dict:
    """Send the prompt to the language model. Failures propagate."""
    context = get_context(config)
    return {"model_response": context.model.complete(state["prompt"])}
