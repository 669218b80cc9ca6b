"""
Instance validation and equivalence checking.

The optimizer promises that the rewritten schema accepts exactly the same
instances as the original. This module checks that promise on concrete
instances using the ``jsonschema`` validator classes.

Usage:
    ```python
    from jsonschema_equivalent import optimize
    from jsonschema_equivalent.validation import check_equivalence

    original = {"type": "string", "minimum": 1}
    result = check_equivalence(original, optimize(original), ["a", 1, None])
    assert result.is_equivalent
    ```
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

# Checks run on Draft 7 only: earlier validators reject boolean schemas,
# which the optimizer emits, and ignore const or if/then/else.
DRAFT_VALIDATORS = {
    "draft7": Draft7Validator,
}


@dataclass
class Mismatch:
    """
    An instance the two schemas disagree on.

    Attributes:
        instance: The instance that was checked
        original_valid: Verdict of the original schema
        optimized_valid: Verdict of the optimized schema
        errors: Error messages from whichever schema rejected the instance
    """
    instance: Any
    original_valid: bool
    optimized_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class EquivalenceResult:
    """
    Result of comparing two schemas over a set of instances.

    Attributes:
        is_equivalent: True when every instance got the same verdict
        checked: Number of instances checked
        mismatches: Instances the schemas disagree on
    """
    is_equivalent: bool
    checked: int
    mismatches: List[Mismatch] = field(default_factory=list)


def get_validator_class(draft: str = "draft7") -> Any:
    """
    Look up the ``jsonschema`` validator class for a draft name.

    Raises:
        ValueError: If the draft is not draft7
    """
    try:
        return DRAFT_VALIDATORS[draft]
    except KeyError:
        raise ValueError(
            f"Unsupported draft: {draft!r}. Expected one of: {', '.join(DRAFT_VALIDATORS)}"
        )


def collect_errors(schema: Any, instance: Any, draft: str = "draft7") -> List[str]:
    """Every validation error message for ``instance``, empty when it is valid."""
    validator = get_validator_class(draft)(schema)
    return [error.message for error in validator.iter_errors(instance)]


def validate_instance(schema: Any, instance: Any, draft: str = "draft7") -> bool:
    """
    Check one instance against a schema.

    Args:
        schema: JSON Schema (dict or boolean)
        instance: Any JSON value
        draft: Only ``draft7`` is supported

    Returns:
        bool: True if the instance is valid
    """
    return get_validator_class(draft)(schema).is_valid(instance)


def check_equivalence(
    original: Any,
    optimized: Any,
    instances: Iterable[Any],
    draft: str = "draft7",
) -> EquivalenceResult:
    """
    Compare the verdicts of two schemas over the given instances.

    Args:
        original: The schema before optimization
        optimized: The schema after optimization
        instances: Instances to check
        draft: Draft whose validator semantics to use

    Returns:
        EquivalenceResult: With one Mismatch per disagreeing instance

    Example:
        ```python
        result = check_equivalence({"minimum": 1}, True, [0, 1])
        result.is_equivalent          # False
        result.mismatches[0].instance # 0
        ```
    """
    validator_class = get_validator_class(draft)
    original_validator = validator_class(original)
    optimized_validator = validator_class(optimized)

    checked = 0
    mismatches = []
    for instance in instances:
        checked += 1
        original_valid = original_validator.is_valid(instance)
        optimized_valid = optimized_validator.is_valid(instance)
        if original_valid == optimized_valid:
            continue

        rejecting = optimized_validator if original_valid else original_validator
        errors = [error.message for error in rejecting.iter_errors(instance)]
        mismatches.append(
            Mismatch(
                instance=instance,
                original_valid=original_valid,
                optimized_valid=optimized_valid,
                errors=errors,
            )
        )

    if mismatches:
        logger.warning(f"Schemas disagree on {len(mismatches)} of {checked} instance(s)")

    return EquivalenceResult(
        is_equivalent=not mismatches,
        checked=checked,
        mismatches=mismatches,
    )


def format_mismatches(mismatches: List[Mismatch]) -> str:
    """
    Format mismatches as a human-readable string.

    Example:
        ```python
        print(format_mismatches(result.mismatches))
        # Schemas disagree on 1 instance(s):
        #
        #   1. Instance: 0
        #      Original: valid, optimized: invalid
        #      - 0 is less than the minimum of 1
        ```
    """
    if not mismatches:
        return "No mismatches"

    from jsonschema_equivalent.validation.error_formatter import format_mismatch

    lines = [f"Schemas disagree on {len(mismatches)} instance(s):"]
    for i, mismatch in enumerate(mismatches, 1):
        lines.append("")
        lines.append(format_mismatch(mismatch, index=i))
    return "\n".join(lines)
