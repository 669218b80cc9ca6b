"""
Error formatter - turn mismatches and trace events into readable text.
"""

import json
from typing import Any, List, Optional

from jsonschema_equivalent.optimizer.trace import TraceEvent
from jsonschema_equivalent.validation.validator import Mismatch


def _verdict(valid: bool) -> str:
    return "valid" if valid else "invalid"


def format_value(value: Any, max_length: int = 60) -> str:
    """Compact JSON rendering, truncated to ``max_length`` characters."""
    try:
        text = json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text


def format_mismatch(mismatch: Mismatch, index: Optional[int] = None) -> str:
    """
    Format a single mismatch.

    Args:
        mismatch: The mismatch to describe
        index: Optional position in a list, used as a prefix

    Returns:
        str: Multi-line description
    """
    prefix = f"  {index}. " if index is not None else "  "
    indent = " " * len(prefix)
    lines = [
        f"{prefix}Instance: {format_value(mismatch.instance)}",
        f"{indent}Original: {_verdict(mismatch.original_valid)}, "
        f"optimized: {_verdict(mismatch.optimized_valid)}",
    ]
    for error in mismatch.errors:
        lines.append(f"{indent}- {error}")
    return "\n".join(lines)


def describe_event(event: TraceEvent) -> str:
    """One line per applied rule: ``rule-id at #/path: before -> after``."""
    return (
        f"{event.rule_id} at {event.pointer}: "
        f"{format_value(event.before, 40)} -> {format_value(event.after, 40)}"
    )


def describe_events(events: List[TraceEvent]) -> str:
    if not events:
        return "No rules applied"
    return "\n".join(describe_event(event) for event in events)
