"""
Validation layer module.

Checks that an optimized schema still accepts exactly what the original
accepted, using the ``jsonschema`` library's Draft 7 validator.

Components:
    - validator: validate_instance and check_equivalence
    - error_formatter: human-readable mismatches and trace events
    - diff_generator: unified diff between two schemas

Example:
    ```python
    from jsonschema_equivalent.validation import check_equivalence, format_mismatches

    result = check_equivalence(original, optimized, instances)
    if not result.is_equivalent:
        print(format_mismatches(result.mismatches))
    ```
"""

from jsonschema_equivalent.validation.validator import (
    DRAFT_VALIDATORS,
    EquivalenceResult,
    Mismatch,
    check_equivalence,
    collect_errors,
    format_mismatches,
    get_validator_class,
    validate_instance,
)
from jsonschema_equivalent.validation.error_formatter import (
    describe_event,
    describe_events,
    format_mismatch,
)
from jsonschema_equivalent.validation.diff_generator import generate_diff

__all__ = [
    "DRAFT_VALIDATORS",
    "EquivalenceResult",
    "Mismatch",
    "check_equivalence",
    "collect_errors",
    "format_mismatches",
    "get_validator_class",
    "validate_instance",
    "describe_event",
    "describe_events",
    "format_mismatch",
    "generate_diff",
]
