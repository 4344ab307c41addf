"""Interactive confirmation before labels are applied."""

import sys
from typing import Callable, Optional, Sequence

import typer
from langchain_core.runnables import RunnableConfig

from issuelabel.graph.state import TriageState, get_context
from issuelabel.observability import traced_node


def format_labels(labels: Sequence[str]) -> str:
    return "[" + ", ".join(labels) + "]"


def read_answer() -> str:
    """Read one character from the operator.

    A terminal answers with a single keypress; piped or redirected stdin is
    read one character at a time. Returns "" at end of input.
    """
    if sys.stdin is not None and sys.stdin.isatty():
        try:
            return typer.getchar()
        except EOFError:
            return ""
    return typer.get_text_stream("stdin").read(1)


def confirm_labels(
    labels: Sequence[str],
    *,
    getchar: Optional[Callable[[], str]] = None,
) -> bool:
    """Ask the operator whether to apply ``labels``.

    Reads exactly one character and blocks until it arrives. Only ``y`` or
    ``Y`` accepts; anything else, including end of input, declines.
    """
    typer.echo(f"Apply {typer.style(format_labels(labels), italic=True)}? [y/N] ", nl=False)
    try:
        answer = (getchar or read_answer)()
    except EOFError:
        answer = ""
    typer.echo()
    return answer in ("y", "Y")


@traced_node("confirm", log_output=False)
def confirm_node(state: TriageState, config: RunnableConfig) -> dict:
    context = get_context(config)
    gate = context.confirm or confirm_labels
    return {"confirmed": gate(state["labels"])}
