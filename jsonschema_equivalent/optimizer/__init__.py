"""
Optimizer module - the fixpoint driver and its trace sinks.

Components:
    - driver: FixpointDriver, applies the rule library node by node
    - trace: TraceEvent and the sinks receiving them
"""

from jsonschema_equivalent.optimizer.driver import DriverResult, FixpointDriver
from jsonschema_equivalent.optimizer.trace import (
    CollectingTraceSink,
    LoggingTraceSink,
    NullTraceSink,
    TraceEvent,
    TraceSink,
    summarize_events,
)

__all__ = [
    "DriverResult",
    "FixpointDriver",
    "CollectingTraceSink",
    "LoggingTraceSink",
    "NullTraceSink",
    "TraceEvent",
    "TraceSink",
    "summarize_events",
]
