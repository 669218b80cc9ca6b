"""
Schema model - accessors over plain JSON schema values.

A schema node is either a boolean (``True`` accepts everything, ``False``
accepts nothing) or a dict of keywords. An empty dict behaves like ``True``.
Any other JSON value found where a schema is expected is opaque: it is never
rewritten and never descended into.

Nodes are treated as immutable. Every rewrite builds new dicts and lists and
leaves the old ones untouched, so a snapshot of a node stays valid after the
tree around it has moved on.

Paths:
    A path is a tuple of keys and indices from the document root, e.g.
    ``("properties", "name", "allOf", 0)``. ``format_path`` renders it as a
    JSON pointer (``#/properties/name/allOf/0``).
"""

from typing import Any, Dict, Iterator, List, Tuple, Union

from jsonschema_equivalent.schema.keywords import (
    SINGLE_SUBSCHEMA_KEYWORDS,
    SUBSCHEMA_LIST_KEYWORDS,
    SUBSCHEMA_MAP_KEYWORDS,
)

SchemaValue = Union[bool, Dict[str, Any]]
PathElement = Union[str, int]
SchemaPath = Tuple[PathElement, ...]


def is_schema(value: Any) -> bool:
    """True for values that can be interpreted as a schema node."""
    return isinstance(value, (bool, dict))


def is_true_schema(value: Any) -> bool:
    """True for ``true`` and ``{}``, the schemas that accept every instance."""
    return value is True or (isinstance(value, dict) and not value)


def is_false_schema(value: Any) -> bool:
    return value is False


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans are not numbers even though ``bool`` subclasses ``int``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_equal(left: Any, right: Any) -> bool:
    """
    Compare two JSON values the way JSON Schema does.

    Numbers compare by value (``1`` equals ``1.0``), booleans never equal
    numbers, arrays compare element-wise and objects compare by key set and
    values.

    Args:
        left: First JSON value
        right: Second JSON value

    Returns:
        bool: Whether the values are equal as JSON

    Example:
        ```python
        json_equal(1, 1.0)      # True
        json_equal(1, True)     # False
        json_equal([0], [False])  # False
        ```
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) or is_number(right):
        return is_number(left) and is_number(right) and left == right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    if isinstance(left, list) or isinstance(right, list):
        if not (isinstance(left, list) and isinstance(right, list)):
            return False
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict) or isinstance(right, dict):
        if not (isinstance(left, dict) and isinstance(right, dict)):
            return False
        return left.keys() == right.keys() and all(
            json_equal(value, right[key]) for key, value in left.items()
        )
    return left is None and right is None


def json_contains(values: List[Any], value: Any) -> bool:
    return any(json_equal(candidate, value) for candidate in values)


def without(schema: Dict[str, Any], *keywords: str) -> Dict[str, Any]:
    """Return a copy of ``schema`` without the given keywords."""
    return {key: value for key, value in schema.items() if key not in keywords}


def iter_subschemas(schema: Any) -> Iterator[Tuple[SchemaPath, Any]]:
    """
    Yield every direct sub-schema of a node together with its relative path.

    Only positions that hold schemas are visited: single sub-schema keywords,
    members of ``allOf``/``anyOf``/``oneOf``, ``items`` in both forms, and the
    values of ``properties``/``patternProperties``/``dependencies`` (list
    values of ``dependencies`` are property names and are skipped).
    ``definitions`` is not visited.

    Args:
        schema: A schema node

    Yields:
        Tuples of (relative path, sub-schema)

    Example:
        ```python
        schema = {"items": [{"type": "string"}], "not": True}
        list(iter_subschemas(schema))
        # [(("items", 0), {"type": "string"}), (("not",), True)]
        ```
    """
    if not isinstance(schema, dict):
        return

    for keyword, value in schema.items():
        if keyword == "items":
            if isinstance(value, list):
                for index, member in enumerate(value):
                    yield (keyword, index), member
            elif is_schema(value):
                yield (keyword,), value
        elif keyword in SINGLE_SUBSCHEMA_KEYWORDS:
            if is_schema(value):
                yield (keyword,), value
        elif keyword in SUBSCHEMA_LIST_KEYWORDS:
            if isinstance(value, list):
                for index, member in enumerate(value):
                    yield (keyword, index), member
        elif keyword in SUBSCHEMA_MAP_KEYWORDS:
            if isinstance(value, dict):
                for name, member in value.items():
                    if is_schema(member):
                        yield (keyword, name), member


def replace_subschema(
    schema: Dict[str, Any],
    relative_path: SchemaPath,
    value: Any,
) -> Dict[str, Any]:
    """
    Return a copy of ``schema`` with the sub-schema at ``relative_path`` replaced.

    Only the containers along the path are copied; everything else is shared
    with the original.

    Args:
        schema: Parent schema object
        relative_path: Path as produced by ``iter_subschemas``
        value: New sub-schema

    Returns:
        Dict: Updated copy of the parent
    """
    updated = dict(schema)
    keyword = relative_path[0]
    if len(relative_path) == 1:
        updated[keyword] = value
        return updated

    key = relative_path[1]
    container = schema[keyword]
    if isinstance(container, list):
        container = list(container)
    else:
        container = dict(container)
    container[key] = value
    updated[keyword] = container
    return updated


def count_nodes(schema: Any) -> int:
    """Number of schema nodes in the tree, the root included."""
    total = 0
    stack = [schema]
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(child for _, child in iter_subschemas(node))
    return total


def count_keywords(schema: Any) -> int:
    """Number of keywords across every schema object in the tree."""
    total = 0
    stack = [schema]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            total += len(node)
        stack.extend(child for _, child in iter_subschemas(node))
    return total


def format_path(path: SchemaPath) -> str:
    """
    Render a path as a JSON pointer fragment.

    Example:
        ```python
        format_path(("properties", "a/b", "allOf", 0))
        # "#/properties/a~1b/allOf/0"
        ```
    """
    parts = [str(part).replace("~", "~0").replace("/", "~1") for part in path]
    return "#/" + "/".join(parts) if parts else "#"
