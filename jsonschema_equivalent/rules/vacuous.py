"""
Rules removing keywords that never reject anything.

Examples of vacuous keywords:
    - ``"minLength": 0``, ``"uniqueItems": false``, ``"required": []``
    - ``"additionalProperties": true`` or ``{}``
    - ``"then"`` without an ``"if"`` (validators ignore it)
    - ``"additionalItems"`` next to a single-schema ``"items"``
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext
from jsonschema_equivalent.schema.model import SchemaValue, is_number, is_schema, is_true_schema, without


class OrphanKeywordsRule(Rule):
    """Drop keywords whose meaning depends on a sibling that is absent."""

    rule_id = "orphan-keywords"
    description = "Remove then/else without if, and additionalItems without an items array"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        orphans = []
        if "if" not in schema:
            orphans.extend(keyword for keyword in ("then", "else") if keyword in schema)
        if "additionalItems" in schema:
            items = schema.get("items", True)
            if is_schema(items):
                orphans.append("additionalItems")

        if not orphans:
            return None
        return without(schema, *orphans)


class VacuousBoundsRule(Rule):
    """Lower bounds of zero and ``uniqueItems: false`` accept everything."""

    rule_id = "vacuous-bounds"
    description = "Remove minItems/minLength/minProperties of 0 and uniqueItems false"

    _LOWER_BOUNDS = ("minItems", "minLength", "minProperties")

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        vacuous = [
            keyword
            for keyword in self._LOWER_BOUNDS
            if keyword in schema and is_number(schema[keyword]) and schema[keyword] <= 0
        ]
        if schema.get("uniqueItems", None) is False:
            vacuous.append("uniqueItems")

        if not vacuous:
            return None
        return without(schema, *vacuous)


class EmptyRequiredRule(Rule):
    rule_id = "empty-required"
    description = "Remove an empty required list"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if schema.get("required", None) == []:
            return without(schema, "required")
        return None


class TrivialSubschemasRule(Rule):
    """
    Drop sub-schemas that accept every instance they are applied to.

    Also prunes ``properties``/``patternProperties`` entries that accept
    anything when no ``additionalProperties`` keyword gives them a role,
    and ``dependencies`` entries that impose nothing.
    """

    rule_id = "trivial-subschemas"
    description = "Remove true/{} sub-schemas, empty keyword maps and not: false"

    _TRUE_DROPPABLE = (
        "additionalItems",
        "additionalProperties",
        "items",
        "propertyNames",
        "then",
        "else",
    )
    _EMPTY_DROPPABLE = ("properties", "patternProperties", "dependencies")

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        updated = dict(schema)

        for keyword in self._TRUE_DROPPABLE:
            if keyword in updated and is_true_schema(updated[keyword]):
                del updated[keyword]

        if updated.get("not", None) is False:
            del updated["not"]

        if "additionalProperties" not in updated:
            for keyword in ("properties", "patternProperties"):
                value = updated.get(keyword)
                if isinstance(value, dict) and any(is_true_schema(v) for v in value.values()):
                    updated[keyword] = {
                        name: member for name, member in value.items() if not is_true_schema(member)
                    }

        dependencies = updated.get("dependencies")
        if isinstance(dependencies, dict):
            kept = {
                name: value
                for name, value in dependencies.items()
                if not (is_true_schema(value) or value == [])
            }
            if len(kept) != len(dependencies):
                updated["dependencies"] = kept

        for keyword in self._EMPTY_DROPPABLE:
            if updated.get(keyword, None) == {}:
                del updated[keyword]

        # only removals happen above, so equality means nothing was removed
        if updated == schema:
            return None
        return updated


class EmptySchemaRule(Rule):
    """``{}`` is written as ``true``."""

    rule_id = "empty-schema"
    description = "Replace a schema with no keywords by true"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        if not schema:
            return True
        return None
