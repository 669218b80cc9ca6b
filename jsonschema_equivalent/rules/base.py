"""
Rule protocol shared by every rewrite rule.

A rule looks at one schema object and either declines (returns None) or
returns a replacement node that accepts exactly the same instances in the
context the driver describes through ``RuleContext``. Rules never mutate the
schema they receive and never raise on malformed keyword values; a value a
rule does not understand is left alone.

Writing a rule:
    ```python
    class DropTitleRule(Rule):
        rule_id = "drop-title"
        description = "Remove title annotations"

        def apply(self, schema, context):
            if "title" not in schema:
                return None
            return without(schema, "title")
    ```
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jsonschema_equivalent.schema.model import SchemaValue
from jsonschema_equivalent.schema.resolver import classify_value, declared_types
from jsonschema_equivalent.schema.types import IntegerPolicy, TypeSet


@dataclass(frozen=True)
class RuleContext:
    """
    What the driver knows about the node a rule is looking at.

    Attributes:
        types: Effective TypeSet of the node, inherited restriction included
        inherited: Restriction imposed by the enclosing node, if any
        policy: Classification of integral numeric literals
    """

    types: TypeSet
    inherited: Optional[TypeSet] = None
    policy: IntegerPolicy = IntegerPolicy.INTEGRAL

    def classify(self, value: Any) -> TypeSet:
        return classify_value(value, self.policy)


class Rule(ABC):
    """
    Base class for rewrite rules.

    Attributes:
        rule_id: Stable identifier used in traces and configuration
        description: One-line summary shown by ``jsonschema-equivalent rules``
    """

    rule_id: str = ""
    description: str = ""

    @abstractmethod
    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        """
        Try to rewrite a schema object.

        Args:
            schema: The node, never mutated
            context: Effective types and options for the node

        Returns:
            None when the rule does not apply, otherwise the replacement node
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"


def with_declared_types(schema: Dict[str, Any], types: TypeSet) -> Optional[SchemaValue]:
    """
    Rewrite the ``type`` keyword of ``schema`` to ``types``.

    Args:
        schema: Schema object
        types: New declared types

    Returns:
        ``False`` for an empty set, None when the keyword already describes
        ``types`` or is malformed, otherwise an updated copy (the keyword is
        dropped when every type is allowed)
    """
    if types.is_empty:
        return False

    current = TypeSet.from_type_keyword(schema["type"]) if "type" in schema else TypeSet.all()
    if current is None:
        return None

    rendered = types.to_type_keyword()
    rendered_set = TypeSet.from_type_keyword(rendered) if rendered is not None else TypeSet.all()
    if current == rendered_set:
        return None

    updated = dict(schema)
    if rendered is None:
        updated.pop("type", None)
    else:
        updated["type"] = rendered
    return updated


def append_all_of(schema: Dict[str, Any], members: List[Any]) -> Optional[Dict[str, Any]]:
    """
    Return a copy of ``schema`` with ``members`` appended to its ``allOf``.

    Returns None when the existing ``allOf`` is malformed.
    """
    existing = schema.get("allOf", [])
    if not isinstance(existing, list):
        return None
    updated = dict(schema)
    updated["allOf"] = list(existing) + list(members)
    return updated


__all__ = [
    "Rule",
    "RuleContext",
    "append_all_of",
    "declared_types",
    "with_declared_types",
]
