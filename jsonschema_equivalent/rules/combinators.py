"""
Combinator rules for ``anyOf``, ``oneOf`` and the literal members of ``allOf``.

Flattening ``allOf`` into its parent lives in ``all_of.py``.
"""

from typing import Any, Dict, List, Optional

from jsonschema_equivalent.rules.base import (
    Rule,
    RuleContext,
    append_all_of,
    declared_types,
    with_declared_types,
)
from jsonschema_equivalent.schema.model import SchemaValue, is_true_schema, without
from jsonschema_equivalent.schema.resolver import resolve_types


def _can_match(member: Any, context: RuleContext) -> bool:
    """Whether an alternative can accept an instance the parent lets through."""
    if member is False:
        return False
    if not isinstance(member, dict):
        return True
    return resolve_types(member, policy=context.policy).intersects(context.types)


class AnyOfRule(Rule):
    """
    Prune ``anyOf`` alternatives.

    An alternative that is ``false``, or that only accepts types the parent
    rejects, can never be the one that matches. A ``true`` alternative makes
    the whole keyword vacuous. A single remaining alternative is moved to
    ``allOf``; none remaining means nothing validates.
    """

    rule_id = "any-of"
    description = "Remove impossible anyOf alternatives, drop anyOf with a true member"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("anyOf")
        if not isinstance(members, list) or not members:
            return None

        if any(is_true_schema(member) for member in members):
            return without(schema, "anyOf")

        kept = [member for member in members if _can_match(member, context)]
        return _rewrite_alternatives(schema, "anyOf", members, kept)


class OneOfRule(Rule):
    """
    Prune ``oneOf`` alternatives.

    Impossible alternatives never count towards "exactly one", so they can go
    just like in ``anyOf``. Two ``true`` alternatives both match every
    instance, so nothing validates.
    """

    rule_id = "one-of"
    description = "Remove impossible oneOf alternatives"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("oneOf")
        if not isinstance(members, list) or not members:
            return None

        if sum(1 for member in members if is_true_schema(member)) > 1:
            return False

        kept = [member for member in members if _can_match(member, context)]
        return _rewrite_alternatives(schema, "oneOf", members, kept)


def _rewrite_alternatives(
    schema: Dict[str, Any],
    keyword: str,
    members: List[Any],
    kept: List[Any],
) -> Optional[SchemaValue]:
    if not kept:
        return False
    if len(kept) == 1:
        moved = append_all_of(without(schema, keyword), kept)
        if moved is not None:
            return moved
    if len(kept) == len(members):
        return None
    updated = dict(schema)
    updated[keyword] = kept
    return updated


class AllOfLiteralsRule(Rule):
    rule_id = "all-of-literals"
    description = "Remove true members of allOf and an empty allOf"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("allOf")
        if not isinstance(members, list):
            return None

        kept = [member for member in members if not is_true_schema(member)]
        if not kept:
            return without(schema, "allOf")
        if len(kept) == len(members):
            return None
        updated = dict(schema)
        updated["allOf"] = kept
        return updated


class AllOfFalseRule(Rule):
    rule_id = "all-of-false"
    description = "Replace a schema with a false allOf member by false"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("allOf")
        if isinstance(members, list) and any(member is False for member in members):
            return False
        return None


class AllOfTypesRule(Rule):
    """
    Narrow the parent ``type`` to what every ``allOf`` member declares.

    Runs after flattening, so it only sees members that could not be folded
    into the parent. Only ``type`` keywords are combined; literal types stay
    with their ``const``/``enum``. A parent without ``type`` is left alone:
    writing one would only add a keyword.
    """

    rule_id = "all-of-types"
    description = "Narrow the parent type to the intersection of the allOf member types"

    def apply(self, schema: Dict[str, Any], context: RuleContext) -> Optional[SchemaValue]:
        members = schema.get("allOf")
        if not isinstance(members, list) or not members or "type" not in schema:
            return None

        common = declared_types(schema)
        for member in members:
            if isinstance(member, dict) and "$ref" not in member:
                common = common & declared_types(member)
        if common == declared_types(schema):
            return None
        if common.is_empty:
            return False
        return with_declared_types(schema, common)


__all__ = [
    "AnyOfRule",
    "OneOfRule",
    "AllOfLiteralsRule",
    "AllOfFalseRule",
    "AllOfTypesRule",
]
