"""
``if``/``then``/``else`` and ``not``.
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext, append_all_of
from jsonschema_equivalent.schema.model import SchemaValue, is_true_schema, without


class IfThenElseRule(Rule):
    """
    Resolve conditionals whose outcome is known.

    - ``if`` accepts everything: ``then`` always applies, moved into ``allOf``
    - ``if`` is ``false``: ``else`` always applies, moved into ``allOf``
    - ``if`` without ``then`` and ``else``: it has no effect
    """

    rule_id = "if-then-else"
    description = "Fold if/then/else with a constant condition into allOf"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if "if" not in schema:
            return None
        condition = schema["if"]
        if not isinstance(condition, (bool, dict)):
            return None

        if is_true_schema(condition):
            branch = "then"
        elif condition is False:
            branch = "else"
        elif "then" not in schema and "else" not in schema:
            return without(schema, "if")
        else:
            return None

        updated = without(schema, "if", "then", "else")
        if branch not in schema:
            return updated
        return append_all_of(updated, [schema[branch]])


class NotRule(Rule):
    rule_id = "not"
    description = "Replace a schema containing not: true with false"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if "not" in schema and is_true_schema(schema["not"]):
            return False
        return None
