"""
Closed catalogue of the JSON Schema keywords the optimizer understands.

Keywords from Draft 4, Draft 6 and Draft 7 are listed here. Anything else in a
schema object is an *unknown* keyword: it is preserved verbatim and assumed to
possibly restrict any instance.

Each known keyword has a *domain*: the instance types it can constrain. A
keyword whose domain does not meet the set of types a node accepts has no
effect and can be removed. ``KEYWORD_DOMAINS`` maps every member of
``Keyword`` to its domain (None meaning "every type"); the mapping is checked
for exhaustiveness by the test suite.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from jsonschema_equivalent.schema.types import TypeSet


class Keyword(str, Enum):
    """Known schema keywords."""

    # Core and identification
    SCHEMA = "$schema"
    ID = "$id"
    ID_DRAFT4 = "id"
    REF = "$ref"
    COMMENT = "$comment"
    DEFINITIONS = "definitions"
    DEFS = "$defs"

    # Annotations
    TITLE = "title"
    DESCRIPTION = "description"
    DEFAULT = "default"
    EXAMPLES = "examples"
    READ_ONLY = "readOnly"
    WRITE_ONLY = "writeOnly"

    # Any instance type
    TYPE = "type"
    ENUM = "enum"
    CONST = "const"
    FORMAT = "format"

    # Numbers
    MULTIPLE_OF = "multipleOf"
    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"

    # Strings
    MAX_LENGTH = "maxLength"
    MIN_LENGTH = "minLength"
    PATTERN = "pattern"
    CONTENT_ENCODING = "contentEncoding"
    CONTENT_MEDIA_TYPE = "contentMediaType"

    # Arrays
    ITEMS = "items"
    ADDITIONAL_ITEMS = "additionalItems"
    MAX_ITEMS = "maxItems"
    MIN_ITEMS = "minItems"
    UNIQUE_ITEMS = "uniqueItems"
    CONTAINS = "contains"

    # Objects
    MAX_PROPERTIES = "maxProperties"
    MIN_PROPERTIES = "minProperties"
    REQUIRED = "required"
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    DEPENDENCIES = "dependencies"
    PROPERTY_NAMES = "propertyNames"

    # Combinators and conditionals
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"
    IF = "if"
    THEN = "then"
    ELSE = "else"

    @classmethod
    def from_name(cls, name: str) -> Optional["Keyword"]:
        try:
            return cls(name)
        except ValueError:
            return None


_NUMERIC = TypeSet.of("number")
_STRING = TypeSet.of("string")
_ARRAY = TypeSet.of("array")
_OBJECT = TypeSet.of("object")


KEYWORD_DOMAINS: Dict[Keyword, Optional[TypeSet]] = {
    Keyword.SCHEMA: None,
    Keyword.ID: None,
    Keyword.ID_DRAFT4: None,
    Keyword.REF: None,
    Keyword.COMMENT: None,
    Keyword.DEFINITIONS: None,
    Keyword.DEFS: None,
    Keyword.TITLE: None,
    Keyword.DESCRIPTION: None,
    Keyword.DEFAULT: None,
    Keyword.EXAMPLES: None,
    Keyword.READ_ONLY: None,
    Keyword.WRITE_ONLY: None,
    Keyword.TYPE: None,
    Keyword.ENUM: None,
    Keyword.CONST: None,
    # custom format checkers may look at any type
    Keyword.FORMAT: None,
    Keyword.MULTIPLE_OF: _NUMERIC,
    Keyword.MAXIMUM: _NUMERIC,
    Keyword.MINIMUM: _NUMERIC,
    Keyword.EXCLUSIVE_MAXIMUM: _NUMERIC,
    Keyword.EXCLUSIVE_MINIMUM: _NUMERIC,
    Keyword.MAX_LENGTH: _STRING,
    Keyword.MIN_LENGTH: _STRING,
    Keyword.PATTERN: _STRING,
    Keyword.CONTENT_ENCODING: _STRING,
    Keyword.CONTENT_MEDIA_TYPE: _STRING,
    Keyword.ITEMS: _ARRAY,
    Keyword.ADDITIONAL_ITEMS: _ARRAY,
    Keyword.MAX_ITEMS: _ARRAY,
    Keyword.MIN_ITEMS: _ARRAY,
    Keyword.UNIQUE_ITEMS: _ARRAY,
    Keyword.CONTAINS: _ARRAY,
    Keyword.MAX_PROPERTIES: _OBJECT,
    Keyword.MIN_PROPERTIES: _OBJECT,
    Keyword.REQUIRED: _OBJECT,
    Keyword.PROPERTIES: _OBJECT,
    Keyword.PATTERN_PROPERTIES: _OBJECT,
    Keyword.ADDITIONAL_PROPERTIES: _OBJECT,
    Keyword.DEPENDENCIES: _OBJECT,
    Keyword.PROPERTY_NAMES: _OBJECT,
    Keyword.ALL_OF: None,
    Keyword.ANY_OF: None,
    Keyword.ONE_OF: None,
    Keyword.NOT: None,
    Keyword.IF: None,
    Keyword.THEN: None,
    Keyword.ELSE: None,
}


ANNOTATION_KEYWORDS: FrozenSet[str] = frozenset(
    keyword.value
    for keyword in (
        Keyword.TITLE,
        Keyword.DESCRIPTION,
        Keyword.DEFAULT,
        Keyword.EXAMPLES,
        Keyword.READ_ONLY,
        Keyword.WRITE_ONLY,
        Keyword.COMMENT,
    )
)

# Keywords that change how references inside the node resolve.
SCOPE_KEYWORDS: FrozenSet[str] = frozenset(
    keyword.value
    for keyword in (
        Keyword.SCHEMA,
        Keyword.ID,
        Keyword.ID_DRAFT4,
        Keyword.REF,
        Keyword.DEFINITIONS,
        Keyword.DEFS,
    )
)

# Keywords holding one sub-schema.
SINGLE_SUBSCHEMA_KEYWORDS = (
    Keyword.ADDITIONAL_ITEMS.value,
    Keyword.ADDITIONAL_PROPERTIES.value,
    Keyword.CONTAINS.value,
    Keyword.PROPERTY_NAMES.value,
    Keyword.NOT.value,
    Keyword.IF.value,
    Keyword.THEN.value,
    Keyword.ELSE.value,
)

# Keywords holding a list of sub-schemas. ``items`` may hold one or a list.
SUBSCHEMA_LIST_KEYWORDS = (
    Keyword.ALL_OF.value,
    Keyword.ANY_OF.value,
    Keyword.ONE_OF.value,
)

# Keywords holding a mapping whose values are sub-schemas.
SUBSCHEMA_MAP_KEYWORDS = (
    Keyword.PROPERTIES.value,
    Keyword.PATTERN_PROPERTIES.value,
    Keyword.DEPENDENCIES.value,
)

# Sub-schemas validated against the same instance as their parent.
IN_PLACE_KEYWORDS: FrozenSet[str] = frozenset(
    keyword.value
    for keyword in (
        Keyword.ALL_OF,
        Keyword.ANY_OF,
        Keyword.ONE_OF,
        Keyword.NOT,
        Keyword.IF,
        Keyword.THEN,
        Keyword.ELSE,
    )
)


def is_known_keyword(name: str) -> bool:
    return Keyword.from_name(name) is not None
