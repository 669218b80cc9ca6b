"""
Trace sinks - observe which rule fired where.

The driver emits one ``TraceEvent`` per applied rule. A sink is passed to
``optimize`` explicitly; the default ``NullTraceSink`` drops everything, so
tracing costs nothing unless asked for. Sinks only observe: an exception
raised by a sink is logged by the driver and never changes the result.

Usage:
    ```python
    from jsonschema_equivalent import optimize
    from jsonschema_equivalent.optimizer.trace import CollectingTraceSink

    sink = CollectingTraceSink()
    optimize({"type": "string", "minimum": 1}, sink=sink)

    for event in sink.events:
        print(event.rule_id, event.pointer)
    # extraneous-keywords #
    ```
"""

import copy
import logging
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from jsonschema_equivalent.schema.model import SchemaPath, format_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEvent:
    """
    One rule application.

    Attributes:
        rule_id: Identifier of the rule that fired
        path: Location of the rewritten node from the document root
        before: The node before the rewrite
        after: The node after the rewrite
    """

    rule_id: str
    path: SchemaPath
    before: Any
    after: Any

    @property
    def pointer(self) -> str:
        """The path as a JSON pointer fragment."""
        return format_path(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "path": self.pointer,
            "before": self.before,
            "after": self.after,
        }


class TraceSink(ABC):
    """Receiver of trace events."""

    @abstractmethod
    def emit(self, event: TraceEvent) -> None:
        """Handle one event."""


class NullTraceSink(TraceSink):
    def emit(self, event: TraceEvent) -> None:
        pass


class CollectingTraceSink(TraceSink):
    """
    Keep every event in memory.

    Snapshots are deep-copied on arrival so later changes to the optimized
    document do not alter recorded events.
    """

    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def emit(self, event: TraceEvent) -> None:
        self.events.append(
            TraceEvent(
                rule_id=event.rule_id,
                path=event.path,
                before=copy.deepcopy(event.before),
                after=copy.deepcopy(event.after),
            )
        )

    def counts(self) -> Dict[str, int]:
        return summarize_events(self.events)

    def clear(self) -> None:
        self.events.clear()


class LoggingTraceSink(TraceSink):
    """Write each event to a logger."""

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.target = target or logger
        self.level = level

    def emit(self, event: TraceEvent) -> None:
        self.target.log(self.level, f"{event.rule_id} at {event.pointer}")


def summarize_events(events: Iterable[TraceEvent]) -> Dict[str, int]:
    """
    Count events per rule id.

    Returns:
        Dict mapping rule ids to the number of times they fired, most
        frequent first
    """
    return dict(Counter(event.rule_id for event in events).most_common())
