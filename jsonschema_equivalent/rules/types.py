"""
Rules driven directly by the node's TypeSet.
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext
from jsonschema_equivalent.schema.model import SchemaValue, without
from jsonschema_equivalent.schema.resolver import type_allows_keyword
from jsonschema_equivalent.schema.types import TypeSet


class UnsatisfiableTypesRule(Rule):
    """A node that accepts no instance type is ``false``."""

    rule_id = "unsatisfiable-types"
    description = "Replace nodes whose type set is empty with false"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if context.types.is_empty:
            return False
        return None


class ExtraneousKeywordsRule(Rule):
    """
    Drop keywords that only constrain types the node cannot accept.

    ``{"type": "string", "minimum": 1}``: ``minimum`` only looks at numbers,
    and no number gets past ``type``, so it goes.
    """

    rule_id = "extraneous-keywords"
    description = "Remove keywords whose domain does not meet the node's types"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if context.types.is_empty:
            return None
        kept = {
            keyword: value
            for keyword, value in schema.items()
            if type_allows_keyword(keyword, context.types)
        }
        if len(kept) == len(schema):
            return None
        return kept


class TypeKeywordRule(Rule):
    """Write ``type`` in canonical form."""

    rule_id = "type-keyword"
    description = "Canonicalize the type keyword (dedupe, drop integer beside number, omit when all types)"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if "type" not in schema:
            return None
        value = schema["type"]
        parsed = TypeSet.from_type_keyword(value)
        if parsed is None or parsed.is_empty:
            return None

        canonical = parsed.to_type_keyword()
        if canonical is None:
            return without(schema, "type")
        if canonical == value:
            return None

        updated = dict(schema)
        updated["type"] = canonical
        return updated
