"""
High-level Python API.

``optimize`` is the entry point: it takes any JSON value (or a Pydantic model
class), deep-copies it, and returns a semantically equivalent schema that is
never larger in keywords. ``optimize_with_report`` does the same and also
returns what happened along the way.

Usage:
    ```python
    from jsonschema_equivalent import optimize, optimize_with_report

    optimize({"type": "string", "minimum": 1})
    # {"type": "string"}

    report = optimize_with_report({"type": "array", "minItems": 2, "maxItems": 1})
    report.schema        # False
    report.rule_counts   # {"range-contradiction": 1}
    ```
"""

import copy
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jsonschema_equivalent.config import OptimizerConfig
from jsonschema_equivalent.optimizer import (
    CollectingTraceSink,
    FixpointDriver,
    TraceEvent,
    TraceSink,
    summarize_events,
)
from jsonschema_equivalent.rules import get_rules
from jsonschema_equivalent.schema.model import SchemaValue, json_equal
from jsonschema_equivalent.schema.pydantic_adapter import is_pydantic_model, pydantic_to_schema

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    """
    Result of an optimization run.

    Attributes:
        schema: The optimized schema
        events: Every rule application, in order
        iterations: Number of rule applications
        exhausted: Whether the iteration budget ran out
        elapsed_ms: Wall-clock time of the run in milliseconds
        changed: Whether the schema differs from the input
    """

    schema: Any
    events: List[TraceEvent] = field(default_factory=list)
    iterations: int = 0
    exhausted: bool = False
    elapsed_ms: float = 0.0
    changed: bool = False

    @property
    def rule_counts(self) -> Dict[str, int]:
        return summarize_events(self.events)


def optimize(
    schema: Any,
    config: Optional[OptimizerConfig] = None,
    sink: Optional[TraceSink] = None,
) -> SchemaValue:
    """
    Rewrite a JSON Schema into an equivalent, smaller one.

    Args:
        schema: Any JSON value, or a Pydantic model class. ``true``,
            ``false`` and values that are not schemas come back unchanged
        config: Optimizer options (defaults when omitted)
        sink: Optional receiver of one TraceEvent per applied rule

    Returns:
        The optimized schema: ``True``, ``False`` or a new dict. The input is
        never mutated.

    Example:
        ```python
        optimize({"allOf": [{"type": "integer"}, {"type": "number"}]})
        # {"type": "integer"}

        optimize({"additionalProperties": {}})
        # True
        ```
    """
    return _run(schema, config, sink).schema


def optimize_with_report(schema: Any, config: Optional[OptimizerConfig] = None) -> OptimizationResult:
    """
    Optimize a schema and collect the trace.

    Args:
        schema: Any JSON value, or a Pydantic model class
        config: Optimizer options

    Returns:
        OptimizationResult: Optimized schema, trace events and counters
    """
    sink = CollectingTraceSink()
    result = _run(schema, config, sink)
    result.events = list(sink.events)
    return result


def _run(schema: Any, config: Optional[OptimizerConfig], sink: Optional[TraceSink]) -> OptimizationResult:
    config = config or OptimizerConfig()
    if is_pydantic_model(schema):
        schema = pydantic_to_schema(schema)

    start_time = time.time()
    original = copy.deepcopy(schema)
    driver = FixpointDriver(get_rules(config.disabled_rules), config, sink)
    outcome = driver.run(original)
    elapsed_ms = (time.time() - start_time) * 1000

    changed = not json_equal(outcome.schema, schema)
    logger.info(
        f"Optimized schema in {elapsed_ms:.1f} ms: "
        f"{outcome.iterations} rule applications, changed={changed}"
    )

    return OptimizationResult(
        schema=outcome.schema,
        iterations=outcome.iterations,
        exhausted=outcome.exhausted,
        elapsed_ms=elapsed_ms,
        changed=changed,
    )
