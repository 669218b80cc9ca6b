"""
Flatten ``allOf`` members into their parent.

``{"type": "object", "allOf": [{"required": ["a"]}, {"required": ["b"]}]}``
is the same as ``{"type": "object", "required": ["a", "b"]}``. A member is
folded when every one of its keywords can be combined with the parent's:

    ==================================  ===================================
    keyword                             combination
    ==================================  ===================================
    absent from the parent              copied
    equal in both                       kept
    type                                intersection (empty: false)
    enum                                intersection (empty: false)
    const                               different values: false
    required                            union
    allOf                               concatenation
    maximum, maxLength, ... (upper)     smallest
    minimum, minLength, ... (lower)     largest
    uniqueItems                         true wins
    propertyNames, single-schema items  {"allOf": [parent, member]}
    properties, patternProperties       per name, {"allOf": [...]} on clash
    dependencies                        per name, union / {"allOf": [...]}
    anything else                       not combinable, member stays
    ==================================  ===================================

Some keywords only mean something together with siblings (``properties`` and
``additionalProperties``, tuple ``items`` and ``additionalItems``, ``if`` and
its branches, Draft 4 boolean ``exclusiveMaximum`` and ``maximum``). Such a
group is only combined when one side does not use it at all, or in the few
cases where the combination is known to be exact.

A member carrying ``$ref``, an unknown keyword or a scope keyword is never
folded, and a parent carrying an unknown keyword is left alone.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from jsonschema_equivalent.rules.base import Rule, RuleContext
from jsonschema_equivalent.schema.keywords import SCOPE_KEYWORDS, is_known_keyword
from jsonschema_equivalent.schema.model import (
    SchemaValue,
    is_number,
    is_schema,
    json_contains,
    json_equal,
    without,
)
from jsonschema_equivalent.schema.types import TypeSet

logger = logging.getLogger(__name__)


class _Outcome:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


CONFLICT = _Outcome("CONFLICT")
UNSATISFIABLE = _Outcome("UNSATISFIABLE")

_UPPER_BOUNDS = ("maximum", "exclusiveMaximum", "maxLength", "maxItems", "maxProperties")
_LOWER_BOUNDS = ("minimum", "exclusiveMinimum", "minLength", "minItems", "minProperties")

_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("properties", "patternProperties", "additionalProperties"),
    ("items", "additionalItems"),
    ("if", "then", "else"),
)
_DRAFT4_BOUND_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("maximum", "exclusiveMaximum"),
    ("minimum", "exclusiveMinimum"),
)


def _merge_type(existing: Any, incoming: Any) -> Any:
    left = TypeSet.from_type_keyword(existing)
    right = TypeSet.from_type_keyword(incoming)
    if left is None or right is None:
        return CONFLICT
    common = left & right
    if common.is_empty:
        return UNSATISFIABLE
    rendered = common.to_type_keyword()
    return existing if rendered is None else rendered


def _merge_enum(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, list) or not isinstance(incoming, list):
        return CONFLICT
    common = [value for value in existing if json_contains(incoming, value)]
    return common if common else UNSATISFIABLE


def _merge_const(existing: Any, incoming: Any) -> Any:
    # only reached for values that differ
    return UNSATISFIABLE


def _merge_required(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, list) or not isinstance(incoming, list):
        return CONFLICT
    return list(existing) + [name for name in incoming if name not in existing]


def _merge_concat(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, list) or not isinstance(incoming, list):
        return CONFLICT
    return list(existing) + list(incoming)


def _merge_smallest(existing: Any, incoming: Any) -> Any:
    if not is_number(existing) or not is_number(incoming):
        return CONFLICT
    return min(existing, incoming)


def _merge_largest(existing: Any, incoming: Any) -> Any:
    if not is_number(existing) or not is_number(incoming):
        return CONFLICT
    return max(existing, incoming)


def _merge_unique_items(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, bool) or not isinstance(incoming, bool):
        return CONFLICT
    return existing or incoming


def _merge_subschemas(existing: Any, incoming: Any) -> Any:
    if not is_schema(existing) or not is_schema(incoming):
        return CONFLICT
    return {"allOf": [existing, incoming]}


def _merge_schema_maps(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, dict) or not isinstance(incoming, dict):
        return CONFLICT
    merged = dict(existing)
    for name, schema in incoming.items():
        if name not in merged or json_equal(merged[name], schema):
            merged[name] = merged.get(name, schema)
            continue
        combined = _merge_subschemas(merged[name], schema)
        if combined is CONFLICT:
            return CONFLICT
        merged[name] = combined
    return merged


def _merge_dependencies(existing: Any, incoming: Any) -> Any:
    if not isinstance(existing, dict) or not isinstance(incoming, dict):
        return CONFLICT
    merged = dict(existing)
    for name, dependency in incoming.items():
        if name not in merged or json_equal(merged[name], dependency):
            merged[name] = merged.get(name, dependency)
        elif isinstance(merged[name], list) and isinstance(dependency, list):
            merged[name] = _merge_required(merged[name], dependency)
        else:
            combined = _merge_subschemas(merged[name], dependency)
            if combined is CONFLICT:
                return CONFLICT
            merged[name] = combined
    return merged


_MERGERS: Dict[str, Callable[[Any, Any], Any]] = {
    "type": _merge_type,
    "enum": _merge_enum,
    "const": _merge_const,
    "required": _merge_required,
    "allOf": _merge_concat,
    "uniqueItems": _merge_unique_items,
    "propertyNames": _merge_subschemas,
    "items": _merge_subschemas,
    "properties": _merge_schema_maps,
    "patternProperties": _merge_schema_maps,
    "dependencies": _merge_dependencies,
}
_MERGERS.update({keyword: _merge_smallest for keyword in _UPPER_BOUNDS})
_MERGERS.update({keyword: _merge_largest for keyword in _LOWER_BOUNDS})


def _tied_groups(parent: Dict[str, Any], member: Dict[str, Any]) -> List[Tuple[str, ...]]:
    groups = list(_GROUPS)
    for group in _DRAFT4_BOUND_GROUPS:
        if any(isinstance(side.get(group[1]), bool) for side in (parent, member)):
            groups.append(group)
    return groups


def _group_combinable(group: Tuple[str, ...], parent: Dict[str, Any], member: Dict[str, Any]) -> bool:
    """Whether a sibling group used by both sides can still be combined exactly."""
    if group[0] == "properties":
        return "additionalProperties" not in parent and "additionalProperties" not in member
    if group[0] == "items":
        return (
            "additionalItems" not in parent
            and "additionalItems" not in member
            and is_schema(parent.get("items"))
            and is_schema(member.get("items"))
        )
    return False


def merge_schemas(parent: Dict[str, Any], member: Dict[str, Any]) -> Any:
    """
    Combine the keywords of an ``allOf`` member into its parent.

    Args:
        parent: Parent schema object, without its ``allOf``
        member: Member schema object

    Returns:
        The combined schema object, ``False`` when the combination is
        unsatisfiable, or ``CONFLICT`` when the member cannot be folded
    """
    if "$ref" in member or not isinstance(member.get("allOf", []), list):
        return CONFLICT
    for keyword in member:
        if keyword in SCOPE_KEYWORDS or not is_known_keyword(keyword):
            return CONFLICT

    for group in _tied_groups(parent, member):
        in_parent = any(keyword in parent for keyword in group)
        in_member = any(keyword in member for keyword in group)
        if in_parent and in_member and not _group_combinable(group, parent, member):
            return CONFLICT

    merged = dict(parent)
    for keyword, value in member.items():
        if keyword not in merged or json_equal(merged[keyword], value):
            merged[keyword] = merged.get(keyword, value)
            continue

        merger = _MERGERS.get(keyword)
        if merger is None:
            return CONFLICT
        combined = merger(merged[keyword], value)
        if combined is CONFLICT:
            return CONFLICT
        if combined is UNSATISFIABLE:
            return False
        merged[keyword] = combined
    return merged


class AllOfFlattenRule(Rule):
    """Fold ``allOf`` members into the parent where the keywords combine exactly."""

    rule_id = "all-of-flatten"
    description = "Merge allOf members into the parent schema"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("allOf")
        if not isinstance(members, list) or not members:
            return None
        if any(not is_known_keyword(keyword) for keyword in schema):
            return None

        parent = without(schema, "allOf")
        remaining = []
        folded = 0
        for member in members:
            if not isinstance(member, dict):
                remaining.append(member)
                continue
            merged = merge_schemas(parent, member)
            if merged is CONFLICT:
                remaining.append(member)
                continue
            if merged is False:
                logger.debug("allOf member contradicts its parent")
                return False
            parent = merged
            folded += 1

        if not folded:
            return None

        # members may have brought their own allOf along
        nested = parent.pop("allOf", [])
        if remaining or nested:
            parent["allOf"] = remaining + nested
        return parent
