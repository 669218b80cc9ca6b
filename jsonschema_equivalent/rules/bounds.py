"""
Contradictory bounds.

When a lower bound exceeds the matching upper bound, no instance of that
family (numbers, strings, arrays or objects) can validate. The family's types
are removed from the node; instances of other types were never affected by
the bounds and keep validating as before.

Example:
    ```python
    {"type": "array", "minItems": 2, "maxItems": 1}      ->  false
    {"type": ["array", "null"], "minItems": 2, "maxItems": 1}
                                                          ->  {"type": "null"}
    ```
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from jsonschema_equivalent.rules.base import Rule, RuleContext, declared_types, with_declared_types
from jsonschema_equivalent.schema.model import SchemaValue, is_number, without
from jsonschema_equivalent.schema.types import TypeSet

logger = logging.getLogger(__name__)

_NUMERIC = TypeSet.of("number")

# (lower keyword, upper keyword, family, contradiction test on (lower, upper))
_BOUND_PAIRS: List[Tuple[str, str, TypeSet, Callable[[float, float], bool]]] = [
    ("minimum", "maximum", _NUMERIC, lambda low, high: low > high),
    ("exclusiveMinimum", "exclusiveMaximum", _NUMERIC, lambda low, high: low >= high),
    ("minimum", "exclusiveMaximum", _NUMERIC, lambda low, high: low >= high),
    ("exclusiveMinimum", "maximum", _NUMERIC, lambda low, high: low >= high),
    ("minLength", "maxLength", TypeSet.of("string"), lambda low, high: low > high),
    ("minItems", "maxItems", TypeSet.of("array"), lambda low, high: low > high),
    ("minProperties", "maxProperties", TypeSet.of("object"), lambda low, high: low > high),
]


class RangeContradictionRule(Rule):
    """
    Remove a type family whose bounds cannot be met together.

    Draft 4 boolean ``exclusiveMinimum``/``exclusiveMaximum`` modifiers are
    not numbers and never take part in a comparison. ``required`` names more
    distinct properties than ``maxProperties`` allows is treated as an
    object contradiction too.
    """

    rule_id = "range-contradiction"
    description = "Drop types whose lower bound exceeds the upper bound"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        for family, keywords in self._contradictions(schema):
            if not family.intersects(context.types):
                continue

            remaining = context.types - family
            if remaining.is_empty:
                return False

            updated = with_declared_types(without(schema, *keywords), declared_types(schema) - family)
            if updated is None:
                # malformed type keyword, nothing safe to write
                continue
            logger.debug(f"Contradictory {' / '.join(keywords)} removes {family!r}")
            return updated
        return None

    def _contradictions(self, schema: Dict[str, Any]):
        for lower, upper, family, contradicts in _BOUND_PAIRS:
            low = schema.get(lower)
            high = schema.get(upper)
            if is_number(low) and is_number(high) and contradicts(low, high):
                yield family, (lower, upper)

        required = schema.get("required")
        max_properties = schema.get("maxProperties")
        if isinstance(required, list) and is_number(max_properties):
            names = {name for name in required if isinstance(name, str)}
            if len(names) > max_properties:
                yield TypeSet.of("object"), ("required", "maxProperties")
