"""
Schema model, type algebra and loading.

Components:
    - types: PrimitiveType, TypeSet and IntegerPolicy
    - keywords: the closed keyword catalogue and its domain table
    - model: accessors over plain JSON schema values
    - resolver: resolve_types and type_allows_keyword
    - parser: loading schemas from text, files and Pydantic models
    - pydantic_adapter: Pydantic model classes to JSON Schema

Example:
    ```python
    from jsonschema_equivalent.schema import TypeSet, resolve_types

    resolve_types({"type": ["integer", "string"], "enum": [1, 2]})
    # TypeSet(integer)
    ```
"""

from jsonschema_equivalent.schema.keywords import KEYWORD_DOMAINS, Keyword
from jsonschema_equivalent.schema.model import (
    SchemaValue,
    is_false_schema,
    is_true_schema,
    iter_subschemas,
    json_equal,
)
from jsonschema_equivalent.schema.parser import (
    SchemaStats,
    check_schema,
    load_schema,
    load_schema_file,
    schema_stats,
)
from jsonschema_equivalent.schema.pydantic_adapter import is_pydantic_model, pydantic_to_schema
from jsonschema_equivalent.schema.resolver import classify_value, resolve_types, type_allows_keyword
from jsonschema_equivalent.schema.types import IntegerPolicy, PrimitiveType, TypeSet

__all__ = [
    "KEYWORD_DOMAINS",
    "Keyword",
    "SchemaValue",
    "is_false_schema",
    "is_true_schema",
    "iter_subschemas",
    "json_equal",
    "SchemaStats",
    "check_schema",
    "load_schema",
    "load_schema_file",
    "schema_stats",
    "is_pydantic_model",
    "pydantic_to_schema",
    "classify_value",
    "resolve_types",
    "type_allows_keyword",
    "IntegerPolicy",
    "PrimitiveType",
    "TypeSet",
]
