"""
``propertyNames`` rules.

Property names are always strings, so a ``propertyNames`` schema only ever
sees strings:

    - ``{"propertyNames": {"minLength": 1}}`` is written
      ``{"propertyNames": {"minLength": 1, "type": "string"}}`` so the
      sub-schema's non-string keywords become extraneous
    - ``{"propertyNames": {"type": "string"}}`` restricts nothing
    - a ``propertyNames`` rejecting every string leaves only the empty
      object: ``maxProperties: 0``, or no object at all when the schema
      also requires a property
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext, declared_types, with_declared_types
from jsonschema_equivalent.schema.model import SchemaValue, is_number, without
from jsonschema_equivalent.schema.resolver import resolve_types
from jsonschema_equivalent.schema.types import PrimitiveType, TypeSet

_STRING = TypeSet.of(PrimitiveType.STRING)
_OBJECT = TypeSet.of(PrimitiveType.OBJECT)


class PropertyNamesRule(Rule):
    rule_id = "property-names"
    description = "Restrict propertyNames to strings, drop it when trivial, or turn it into maxProperties"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        names = schema.get("propertyNames")
        if not isinstance(names, (bool, dict)):
            return None
        if isinstance(names, dict) and "$ref" in names:
            return None

        name_types = resolve_types(names, policy=context.policy)
        if not name_types.intersects(_STRING):
            return self._no_valid_names(schema, context)

        if not isinstance(names, dict):
            return None

        if set(names) == {"type"} and TypeSet.from_type_keyword(names["type"]) == _STRING:
            return without(schema, "propertyNames")

        if name_types != _STRING and "type" in names and TypeSet.from_type_keyword(names["type"]) is None:
            # malformed type, leave it to the validator
            return None
        if name_types != _STRING:
            updated = dict(schema)
            updated["propertyNames"] = dict(names, type=PrimitiveType.STRING.value)
            return updated
        return None

    def _no_valid_names(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if self._requires_property(schema):
            remaining = context.types - _OBJECT
            if remaining.is_empty:
                return False
            return with_declared_types(schema, declared_types(schema) - _OBJECT)

        updated = without(schema, "propertyNames")
        current = schema.get("maxProperties")
        if not (is_number(current) and current <= 0):
            updated["maxProperties"] = 0
        return updated

    @staticmethod
    def _requires_property(schema: Dict[str, Any]) -> bool:
        min_properties = schema.get("minProperties")
        if is_number(min_properties) and min_properties > 0:
            return True
        required = schema.get("required")
        return isinstance(required, list) and len(required) > 0
