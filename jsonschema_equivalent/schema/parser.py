"""
Schema loading - turn the accepted inputs into an owned JSON value.

The optimizer itself accepts any JSON value. This module is for the layers
around it (command line, tests, callers holding text or Pydantic models):

    - ``load_schema``: dict, bool, JSON text or Pydantic model class
    - ``load_schema_file``: a JSON file on disk
    - ``check_schema``: validate against the draft's meta-schema
    - ``schema_stats``: node and keyword counts for reporting

Usage:
    ```python
    from jsonschema_equivalent.schema.parser import load_schema, schema_stats

    schema = load_schema('{"type": "string", "minimum": 1}')
    schema_stats(schema)
    # SchemaStats(nodes=1, keywords=2)
    ```
"""

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from jsonschema.exceptions import SchemaError

from jsonschema_equivalent.schema.model import count_keywords, count_nodes
from jsonschema_equivalent.schema.pydantic_adapter import is_pydantic_model, pydantic_to_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaStats:
    """
    Size of a schema document.

    Attributes:
        nodes: Schema nodes, the root included
        keywords: Keywords across all schema objects
    """

    nodes: int
    keywords: int


def load_schema(source: Union[str, bytes, bool, dict, type]) -> Any:
    """
    Load a schema from any supported source.

    Args:
        source: A schema dict or boolean, JSON text, or a Pydantic model class

    Returns:
        A deep copy of the schema, owned by the caller

    Raises:
        ValueError: If text is not valid JSON or the source type is unsupported

    Example:
        ```python
        load_schema({"type": "string"})
        load_schema('{"type": "string"}')
        load_schema(True)
        ```
    """
    if is_pydantic_model(source):
        return pydantic_to_schema(source)

    if isinstance(source, (str, bytes)):
        try:
            return json.loads(source)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON schema text: {e}")

    if isinstance(source, (bool, dict)):
        return copy.deepcopy(source)

    raise ValueError(f"Unsupported schema source: {type(source).__name__}")


def load_schema_file(schema_path: Path) -> Any:
    """
    Load and parse a JSON schema file.

    Args:
        schema_path: Path to schema JSON file

    Returns:
        Parsed schema

    Raises:
        ValueError: If file doesn't exist or isn't valid JSON
    """
    schema_path = Path(schema_path)
    if not schema_path.exists():
        raise ValueError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in schema file: {e}")


def check_schema(schema: Any, draft: str = "draft7") -> None:
    """
    Validate a schema against its draft's meta-schema.

    The optimizer does not require valid schemas (malformed keywords are
    passed through), but the command line warns about them.

    Args:
        schema: Schema to check
        draft: Only ``draft7`` is supported

    Raises:
        ValueError: If the schema violates the meta-schema
    """
    from jsonschema_equivalent.validation.validator import get_validator_class

    validator_class = get_validator_class(draft)
    try:
        validator_class.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Schema is not a valid {draft} schema: {e.message}")


def schema_stats(schema: Any) -> SchemaStats:
    return SchemaStats(nodes=count_nodes(schema), keywords=count_keywords(schema))
