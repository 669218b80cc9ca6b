"""
Type resolution - compute the set of instance types a schema node accepts.

``resolve_types`` is deliberately syntactic: it looks at ``type``,
``const``, ``enum`` and ``allOf`` only. The result is an over-approximation
that is exact for the keywords it reads, which is what the rewrite rules
need: a keyword whose domain lies outside the resolved set can never change
the validation outcome.

Usage:
    ```python
    from jsonschema_equivalent.schema.resolver import resolve_types, type_allows_keyword

    schema = {"type": ["string", "number"], "enum": ["a", "b"]}
    types = resolve_types(schema)           # {string}
    type_allows_keyword("minimum", types)   # False
    ```
"""

from typing import Any, Optional

from jsonschema_equivalent.schema.keywords import KEYWORD_DOMAINS, Keyword
from jsonschema_equivalent.schema.types import IntegerPolicy, PrimitiveType, TypeSet, union_all


_INTEGER = TypeSet(frozenset([PrimitiveType.INTEGER]))
_FRACTIONAL = TypeSet(frozenset([PrimitiveType.NUMBER]))
_ANY_NUMBER = _INTEGER | _FRACTIONAL


def classify_value(value: Any, policy: IntegerPolicy = IntegerPolicy.INTEGRAL) -> TypeSet:
    """
    Return the primitive type of a JSON literal.

    Args:
        value: A JSON value taken from ``const`` or ``enum``
        policy: How numbers without a fractional part are classified

    Returns:
        TypeSet: A single type for well-formed JSON; every type for values
        that are not JSON (they are left for the validator to judge)
    """
    if value is None:
        return TypeSet.of(PrimitiveType.NULL)
    if isinstance(value, bool):
        return TypeSet.of(PrimitiveType.BOOLEAN)
    if isinstance(value, (int, float)):
        if policy is IntegerPolicy.CONSERVATIVE:
            return _ANY_NUMBER
        if isinstance(value, float) and not value.is_integer():
            return _FRACTIONAL
        # enum and const match by numeric value, so under LITERAL an integral
        # literal also matches the float instance of the same value
        return _INTEGER if policy is IntegerPolicy.INTEGRAL else _ANY_NUMBER
    if isinstance(value, str):
        return TypeSet.of(PrimitiveType.STRING)
    if isinstance(value, list):
        return TypeSet.of(PrimitiveType.ARRAY)
    if isinstance(value, dict):
        return TypeSet.of(PrimitiveType.OBJECT)
    return TypeSet.all()


def declared_types(schema: Any) -> TypeSet:
    """
    Types allowed by the ``type`` keyword alone.

    A missing or malformed ``type`` keyword allows every type.
    """
    if not isinstance(schema, dict) or "type" not in schema:
        return TypeSet.all()
    parsed = TypeSet.from_type_keyword(schema["type"])
    return parsed if parsed is not None else TypeSet.all()


def literal_types(schema: Any, policy: IntegerPolicy = IntegerPolicy.INTEGRAL) -> TypeSet:
    """Types allowed by ``const`` and a list-valued ``enum``."""
    result = TypeSet.all()
    if not isinstance(schema, dict):
        return result
    if "const" in schema:
        result = result & classify_value(schema["const"], policy)
    enum = schema.get("enum")
    if isinstance(enum, list):
        result = result & union_all(classify_value(member, policy) for member in enum)
    return result


def resolve_types(
    schema: Any,
    inherited: Optional[TypeSet] = None,
    policy: IntegerPolicy = IntegerPolicy.INTEGRAL,
) -> TypeSet:
    """
    Compute the effective TypeSet of a schema node.

    The result is the intersection of:
        - the ``type`` keyword (all types when absent or malformed)
        - the types of the ``const`` literal and of the ``enum`` members
        - the effective TypeSets of the ``allOf`` members
        - ``inherited``, the restriction imposed by an enclosing node

    Never fails: ``true`` and non-schema values resolve to every type,
    ``false`` to the empty set. A node carrying ``$ref`` resolves to every
    type because Draft 4-7 validators ignore the keywords beside a reference.

    Args:
        schema: Schema node
        inherited: Optional TypeSet from the enclosing context
        policy: Classification of integral numeric literals

    Returns:
        TypeSet: Types of instances the node can accept

    Example:
        ```python
        resolve_types({"allOf": [{"type": "integer"}, {"type": "number"}]})
        # TypeSet(integer)
        resolve_types({"enum": [1, "a"]}, inherited=TypeSet.of("string"))
        # TypeSet(string)
        ```
    """
    if schema is False:
        result = TypeSet.empty()
    elif not isinstance(schema, dict) or "$ref" in schema:
        result = TypeSet.all()
    else:
        result = declared_types(schema) & literal_types(schema, policy)
        members = schema.get("allOf")
        if isinstance(members, list):
            for member in members:
                result = result & resolve_types(member, policy=policy)

    if inherited is not None:
        result = result & inherited
    return result


def keyword_domain(keyword: str) -> Optional[TypeSet]:
    """Domain of a keyword, or None when it applies to every type (unknown keywords included)."""
    known = Keyword.from_name(keyword)
    if known is None:
        return None
    return KEYWORD_DOMAINS[known]


def type_allows_keyword(keyword: str, types: TypeSet) -> bool:
    """
    Whether ``keyword`` can influence validation of instances of ``types``.

    Args:
        keyword: Keyword name
        types: Effective TypeSet of the node holding the keyword

    Returns:
        bool: False only for known keywords whose domain does not meet ``types``
    """
    domain = keyword_domain(keyword)
    if domain is None:
        return True
    return domain.intersects(types)
