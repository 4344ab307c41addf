"""Conditional routing functions for LangGraph workflow."""

from issuelabel.graph.state import TriageState


def route_after_parse(state: TriageState) -> str:
    """Route after parsing: nothing to apply, ask the operator, or apply."""
    if not state.get("labels"):
        return "no_labels"
    if state.get("require_confirmation", True):
        return "confirm"
    return "apply_labels"


def route_after_confirm(state: TriageState) -> str:
    """Route after the confirmation gate."""
    if state.get("confirmed"):
        return "apply_labels"
    else:
        return "skip"
