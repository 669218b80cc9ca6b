"""
jsonschema-equivalent: rewrite JSON Schemas into smaller equivalent ones

Given a JSON Schema (draft 4, 6 or 7), the optimizer returns a schema that
accepts exactly the same instances but carries no contradictory, vacuous or
redundant constraints. Subschemas that can never validate collapse to
``false``; subschemas that always validate collapse to ``true``.

Key Features:
    - Type algebra over the primitive JSON types
    - A library of small, independently testable rewrite rules
    - A fixpoint driver with a bounded iteration budget
    - Optional trace of every rule application
    - Equivalence checking against the ``jsonschema`` validators

Quick Start:
    ```python
    from jsonschema_equivalent import optimize

    optimize({"type": "string", "minimum": 1})
    # {"type": "string"}

    optimize({"type": "array", "minItems": 2, "maxItems": 1})
    # False
    ```

Architecture:
    1. Schema model: keyword catalogue, type algebra, type resolution
    2. Rules: pure rewrites of a single schema node
    3. Driver: applies rules bottom-up until nothing changes
    4. Validation: checks equivalence on concrete instances
"""

__version__ = "0.1.0"

from jsonschema_equivalent.api import OptimizationResult, optimize, optimize_with_report  # noqa: F401
from jsonschema_equivalent.config import OptimizerConfig  # noqa: F401
from jsonschema_equivalent.optimizer import (  # noqa: F401
    CollectingTraceSink,
    LoggingTraceSink,
    NullTraceSink,
    TraceEvent,
    TraceSink,
)
from jsonschema_equivalent.schema.types import IntegerPolicy, PrimitiveType, TypeSet  # noqa: F401

__all__ = [
    "optimize",
    "optimize_with_report",
    "OptimizationResult",
    "OptimizerConfig",
    "IntegerPolicy",
    "PrimitiveType",
    "TypeSet",
    "TraceEvent",
    "TraceSink",
    "NullTraceSink",
    "CollectingTraceSink",
    "LoggingTraceSink",
]
