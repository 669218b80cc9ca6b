"""
Array rules for the tuple form of ``items``.

With ``items`` as a list of N schemas, ``additionalItems`` only applies from
position N on, and positions at or beyond ``maxItems`` never exist in a
valid array.
"""

from typing import Any, Dict, Optional

from jsonschema_equivalent.rules.base import Rule, RuleContext
from jsonschema_equivalent.schema.model import SchemaValue, is_number, without


class AdditionalItemsRule(Rule):
    """
    Simplify ``additionalItems`` next to a tuple ``items``.

    - ``maxItems <= N``: there is never an additional item, drop the keyword
    - ``additionalItems: false``: same as capping the length at N, written as
      ``maxItems`` (the smaller of N and an existing cap)
    """

    rule_id = "additional-items"
    description = "Drop additionalItems covered by maxItems, or turn additionalItems false into maxItems"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        items = schema.get("items")
        if not isinstance(items, list) or "additionalItems" not in schema:
            return None

        max_items = schema.get("maxItems")
        if max_items is not None and not is_number(max_items):
            return None

        if max_items is not None and max_items <= len(items):
            return without(schema, "additionalItems")

        if schema["additionalItems"] is False:
            updated = without(schema, "additionalItems")
            updated["maxItems"] = len(items)
            return updated
        return None


class ItemsTruncationRule(Rule):
    """Drop tuple ``items`` entries at positions ``maxItems`` rules out."""

    rule_id = "items-truncation"
    description = "Truncate an items array longer than maxItems"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        items = schema.get("items")
        max_items = schema.get("maxItems")
        if not isinstance(items, list) or not is_number(max_items) or max_items < 0:
            return None
        if len(items) <= max_items:
            return None

        keep = int(max_items)
        if keep == 0:
            return without(schema, "items")
        updated = dict(schema)
        updated["items"] = items[:keep]
        return updated
