"""
Pydantic adapter - use Pydantic models as schema sources.

Pydantic v2 generates Draft 2020-12 flavoured JSON Schema with ``$defs`` and
``$ref`` for nested models. The optimizer leaves reference nodes alone, so
nested models are only optimized where Pydantic inlines them.

Example:
    ```python
    from pydantic import BaseModel, Field
    from jsonschema_equivalent import optimize

    class User(BaseModel):
        name: str = Field(min_length=0)
        age: int

    optimize(User)
    # {"properties": {"name": {"title": "Name", "type": "string"}, ...}, ...}
    ```
"""

from typing import Any, Dict

from pydantic import BaseModel


def is_pydantic_model(value: Any) -> bool:
    """True for Pydantic model classes (not instances)."""
    return isinstance(value, type) and issubclass(value, BaseModel)


def pydantic_to_schema(model: Any) -> Dict[str, Any]:
    """
    Convert a Pydantic model class to a JSON Schema dict.

    Args:
        model: Pydantic BaseModel subclass

    Returns:
        Dict: The model's JSON Schema

    Raises:
        ValueError: If ``model`` is not a Pydantic model class
    """
    if not is_pydantic_model(model):
        raise ValueError(f"Expected a Pydantic model class, got: {model!r}")
    return model.model_json_schema()
