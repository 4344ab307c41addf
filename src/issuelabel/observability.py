"""Observability utilities for workflow nodes.

Provides logging, timing, and tracing for LangGraph nodes.
"""

import functools
import sys
import time
from typing import Any, Callable, Optional, TypeVar

from langsmith import traceable

from issuelabel.errors import StageError

F = TypeVar("F", bound=Callable[..., Any])

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Toggle routine start/finish lines (warnings and errors always print)."""
    global _verbose
    _verbose = enabled


def _log(message: str, level: str = "info", node: str = "node") -> None:
    """Log message to stderr, keeping stdout for the triage report."""
    if level in ("info", "start", "success") and not _verbose:
        return
    prefix = {
        "info": "ℹ️",
        "success": "✅",
        "error": "❌",
        "warning": "⚠️",
        "start": "🚀",
    }.get(level, "")
    print(f"{prefix} [{node}] {message}", file=sys.stderr, flush=True)


def _issue_number(state: dict) -> Optional[int]:
    issue = state.get("issue")
    return getattr(issue, "number", None)


def traced_node(
    name: str,
    *,
    run_type: str = "chain",
    log_output: bool = True,
) -> Callable[[F], F]:
    """Decorator to add tracing and logging to a LangGraph node.

    Combines LangSmith tracing with timing and logging. Any exception raised by
    the node is re-raised as a StageError naming the node and the issue.

    Args:
        name: Name for the trace and the stage (e.g., "query_model").
        run_type: LangSmith run type ("chain", "llm", "tool").
        log_output: Whether to log output keys.

    Example:
        @traced_node("parse_response")
        def parse_response_node(state: TriageState, config: RunnableConfig) -> dict:
            ...
    """

    def decorator(func: F) -> F:
        traced_func = traceable(name=name, run_type=run_type)(func)

        @functools.wraps(func)
        def wrapper(state: dict, *args: Any, **kwargs: Any) -> dict:
            issue_number = _issue_number(state)
            _log(f"Starting for issue #{issue_number}...", "start", name)

            start_time = time.perf_counter()

            try:
                result = traced_func(state, *args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _log(f"Failed after {elapsed:.2f}s: {e}", "error", name)
                raise StageError(name, issue_number, str(e) or type(e).__name__) from e

            elapsed = time.perf_counter() - start_time
            elapsed_str = f"{elapsed:.2f}s" if elapsed >= 1 else f"{elapsed * 1000:.0f}ms"

            if log_output and isinstance(result, dict):
                _log(f"Completed in {elapsed_str}, output: {list(result.keys())}", "success", name)
            else:
                _log(f"Completed in {elapsed_str}", "success", name)

            return result

        return wrapper  # type: ignore

    return decorator


def log_node_event(node: str, event: str, level: str = "info", **data: Any) -> None:
    """Log a custom event from within a node.

    Example:
        log_node_event("parse_response", "unknown label suggested", label="wontfix")
    """
    if data:
        data_str = ", ".join(f"{k}={v}" for k, v in data.items())
        _log(f"{event} ({data_str})", level, node)
    else:
        _log(event, level, node)
