"""
``const`` and ``enum`` against the declared ``type``.
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext, with_declared_types
from jsonschema_equivalent.schema.model import SchemaValue, json_contains, without
from jsonschema_equivalent.schema.types import TypeSet, union_all


class ConstEnumRule(Rule):
    """
    Reconcile literal keywords with ``type``.

    - ``const`` outside ``enum``, or of a type ``type`` excludes: ``false``
    - ``const`` inside ``enum``: the ``enum`` is redundant
    - ``enum`` members of excluded types are dropped; none left: ``false``
    - ``type`` is narrowed to the types of the remaining literals

    Without a ``type`` keyword only the ``const``/``enum`` check applies;
    a ``type`` is never added where there was none.
    """

    rule_id = "const-enum"
    description = "Prune enum members and narrow type using const/enum literals"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        has_const = "const" in schema
        enum = schema.get("enum")
        if not has_const and not isinstance(enum, list):
            return None

        if has_const and isinstance(enum, list):
            if not json_contains(enum, schema["const"]):
                return False
            return without(schema, "enum")

        declared = TypeSet.from_type_keyword(schema["type"]) if "type" in schema else None
        if declared is None:
            return None

        if has_const:
            literal = context.classify(schema["const"]) & declared
            if literal.is_empty:
                return False
            return with_declared_types(schema, literal)

        if not enum:
            return None

        kept = [member for member in enum if context.classify(member).intersects(declared)]
        if not kept:
            return False

        updated = schema
        if len(kept) != len(enum):
            updated = dict(schema)
            updated["enum"] = kept

        literal = union_all(context.classify(member) for member in kept) & declared
        narrowed = with_declared_types(updated, literal)
        if narrowed is not None:
            return narrowed
        return updated if updated is not schema else None
