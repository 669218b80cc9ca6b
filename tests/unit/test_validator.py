"""
Unit tests for validation, equivalence checks and their formatting.
"""

import pytest
from jsonschema import Draft7Validator
from jsonschema_equivalent import optimize
from jsonschema_equivalent.optimizer.trace import TraceEvent
from jsonschema_equivalent.validation import (
    Mismatch,
    check_equivalence,
    format_mismatches,
    generate_diff,
    get_validator_class,
    validate_instance,
)
from jsonschema_equivalent.validation.error_formatter import (
    describe_event,
    describe_events,
    format_mismatch,
    format_value,
)
from jsonschema_equivalent.validation.validator import collect_errors


class TestValidateInstance:
    """Test single-instance validation."""

    def test_valid_and_invalid(self):
        """Test validating valid and invalid instances."""
        schema = {"type": "string", "minLength": 2}

        assert validate_instance(schema, "ab")
        assert not validate_instance(schema, "a")
        assert not validate_instance(schema, 5)

    def test_boolean_schemas(self):
        """Test validating against boolean schemas."""
        assert validate_instance(True, {"any": "thing"})
        assert not validate_instance(False, None)

    def test_integral_float_is_integer(self):
        """Test that 1.0 is an integer for Draft 7."""
        assert validate_instance({"type": "integer"}, 1.0)

    def test_collect_errors(self):
        """Test collecting validation errors."""
        assert collect_errors({"minimum": 1}, 5) == []
        assert len(collect_errors({"minimum": 1, "multipleOf": 2}, 0.5)) == 2

    def test_draft7_only(self):
        """Test that only Draft 7 has a validator class."""
        assert get_validator_class() is Draft7Validator

        for draft in ("draft3", "draft4", "draft6"):
            with pytest.raises(ValueError, match=f"Unsupported draft: '{draft}'"):
                get_validator_class(draft)


class TestCheckEquivalence:
    """Test comparing two schemas over instances."""

    def test_equivalent(self):
        """Test comparing equivalent schemas."""
        result = check_equivalence({"type": "string", "minimum": 1}, {"type": "string"}, ["a", 1, None])

        assert result.is_equivalent
        assert result.checked == 3
        assert result.mismatches == []

    def test_mismatch(self):
        """Test comparing schemas that disagree."""
        result = check_equivalence({"minimum": 1}, True, [0, 1])

        assert not result.is_equivalent
        assert result.checked == 2
        assert len(result.mismatches) == 1

        mismatch = result.mismatches[0]
        assert mismatch.instance == 0
        assert not mismatch.original_valid
        assert mismatch.optimized_valid
        assert "minimum" in mismatch.errors[0]

    def test_errors_come_from_the_rejecting_side(self):
        """Test that mismatch errors come from the rejecting schema."""
        result = check_equivalence(True, {"type": "string"}, [3])
        assert "is not of type 'string'" in result.mismatches[0].errors[0]

    def test_generator_of_instances(self):
        """Test checking a generator of instances."""
        result = check_equivalence(True, True, (value for value in range(4)))
        assert result.checked == 4

    def test_schema_optimized_to_true(self):
        """Test checking a schema that optimizes to true."""
        original = {"additionalProperties": {}}
        optimized = optimize(original)

        assert optimized is True
        assert check_equivalence(original, optimized, [1, {}, None]).is_equivalent

    def test_earlier_drafts_are_rejected(self):
        """Test that Draft 4 checks are rejected."""
        with pytest.raises(ValueError, match="Unsupported draft"):
            check_equivalence({"additionalProperties": {}}, True, [1, {}], draft="draft4")


class TestFormatting:
    """Test text rendering of mismatches, events and diffs."""

    def test_format_value_truncates(self):
        """Test that long values are truncated."""
        assert format_value({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'
        assert format_value("x" * 100, max_length=10) == '"xxxxxx...'

    def test_format_value_not_json(self):
        """Test formatting a value that is not JSON."""
        assert format_value({1, 2}) == "{1, 2}"

    def test_format_mismatch(self):
        """Test formatting a single mismatch."""
        mismatch = Mismatch(instance=0, original_valid=False, optimized_valid=True, errors=["too small"])

        assert format_mismatch(mismatch, index=1) == (
            "  1. Instance: 0\n"
            "     Original: invalid, optimized: valid\n"
            "     - too small"
        )

    def test_format_mismatches(self):
        """Test formatting a list of mismatches."""
        mismatch = Mismatch(instance="a", original_valid=True, optimized_valid=False)
        text = format_mismatches([mismatch])

        assert text.startswith("Schemas disagree on 1 instance(s):")
        assert 'Instance: "a"' in text

    def test_format_no_mismatches(self):
        """Test formatting an empty list of mismatches."""
        assert format_mismatches([]) == "No mismatches"

    def test_describe_events(self):
        """Test describing trace events."""
        event = TraceEvent(rule_id="not", path=("items",), before={"not": True}, after=False)

        assert describe_event(event) == 'not at #/items: {"not": true} -> false'
        assert describe_events([event, event]).count("\n") == 1
        assert describe_events([]) == "No rules applied"


class TestGenerateDiff:
    def test_identical(self):
        """Test the diff of identical schemas."""
        assert generate_diff({"type": "string"}, {"type": "string"}) == ""

    def test_removed_keyword(self):
        """Test the diff of a removed keyword."""
        diff = generate_diff({"type": "string", "minimum": 1}, {"type": "string"})

        assert "--- original" in diff
        assert "+++ optimized" in diff
        assert '-  "minimum": 1,' in diff

    def test_boolean_result(self):
        """Test the diff against a boolean schema."""
        diff = generate_diff({"not": True}, False)

        assert "+false" in diff
