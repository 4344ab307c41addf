"""LangGraph workflow definition."""

from langgraph.graph import END, StateGraph

from issuelabel.graph.routing import route_after_confirm, route_after_parse
from issuelabel.graph.state import TriageState
from issuelabel.nodes.actions import apply_labels_node, no_labels_node, skip_node
from issuelabel.nodes.confirm import confirm_node
from issuelabel.nodes.parse import parse_response_node
from issuelabel.nodes.prompt import build_prompt_node
from issuelabel.nodes.query import query_model_node


def _build_suggest_graph() -> StateGraph:
    """Build suggestion-only graph: build_prompt → query_model → parse_response."""
    workflow = StateGraph(TriageState)

    workflow.add_node("build_prompt", build_prompt_node)
    workflow.add_node("query_model", query_model_node)
    workflow.add_node("parse_response", parse_response_node)

    workflow.set_entry_point("build_prompt")
    workflow.add_edge("build_prompt", "query_model")
    workflow.add_edge("query_model", "parse_response")
    workflow.add_edge("parse_response", END)

    return workflow


def _build_label_graph() -> StateGraph:
    """Build the full per-issue graph, ending in apply_labels, skip or no_labels."""
    workflow = StateGraph(TriageState)

    workflow.add_node("build_prompt", build_prompt_node)
    workflow.add_node("query_model", query_model_node)
    workflow.add_node("parse_response", parse_response_node)
    workflow.add_node("confirm", confirm_node)
    workflow.add_node("apply_labels", apply_labels_node)
    workflow.add_node("skip", skip_node)
    workflow.add_node("no_labels", no_labels_node)

    workflow.set_entry_point("build_prompt")
    workflow.add_edge("build_prompt", "query_model")
    workflow.add_edge("query_model", "parse_response")

    workflow.add_conditional_edges(
        "parse_response",
        route_after_parse,
        {
            "no_labels": "no_labels",
            "confirm": "confirm",
            "apply_labels": "apply_labels",
        },
    )

    workflow.add_conditional_edges(
        "confirm",
        route_after_confirm,
        {
            "apply_labels": "apply_labels",
            "skip": "skip",
        },
    )

    # Terminal edges
    workflow.add_edge("apply_labels", END)
    workflow.add_edge("skip", END)
    workflow.add_edge("no_labels", END)

    return workflow


suggest_graph = _build_suggest_graph().compile()
label_graph = _build_label_graph().compile()
