"""
Unit tests for folding allOf members into their parent.
"""

from jsonschema_equivalent.rules import RuleContext
from jsonschema_equivalent.rules.all_of import CONFLICT, AllOfFlattenRule, merge_schemas
from jsonschema_equivalent.schema.resolver import resolve_types


def flatten(schema):
    return AllOfFlattenRule().apply(schema, RuleContext(types=resolve_types(schema)))


class TestMergeSchemas:
    """Test keyword-by-keyword combination."""

    def test_disjoint_keywords_are_copied(self):
        """Test that keywords present on one side only are copied into the merge."""
        assert merge_schemas({"type": "string"}, {"minLength": 1}) == {"type": "string", "minLength": 1}

    def test_equal_values_are_kept(self):
        """Test that a keyword with the same value on both sides is kept once."""
        assert merge_schemas({"format": "date"}, {"format": "date"}) == {"format": "date"}

    def test_type_intersection(self):
        """Test merging two type keywords into their intersection."""
        assert merge_schemas({"type": ["integer", "string"]}, {"type": "number"}) == {"type": "integer"}

    def test_disjoint_types(self):
        """Test merging type keywords with no common type."""
        assert merge_schemas({"type": "string"}, {"type": "null"}) is False

    def test_malformed_type(self):
        """Test that a malformed type keyword blocks the merge."""
        assert merge_schemas({"type": "string"}, {"type": "text"}) is CONFLICT

    def test_enum_intersection(self):
        """Test merging two enums into their common members."""
        assert merge_schemas({"enum": [1, 2, 3]}, {"enum": [3.0, 2, 5]}) == {"enum": [2, 3]}
        assert merge_schemas({"enum": [1]}, {"enum": [2]}) is False

    def test_different_consts(self):
        """Test merging two different const values."""
        assert merge_schemas({"const": 1}, {"const": "1"}) is False
        assert merge_schemas({"const": 1}, {"const": 1.0}) == {"const": 1}

    def test_required_union(self):
        """Test merging required lists into their union."""
        merged = merge_schemas({"required": ["a", "b"]}, {"required": ["b", "c"]})
        assert merged == {"required": ["a", "b", "c"]}

    def test_bounds(self):
        """Test merging bounds into the tighter value."""
        parent = {"maximum": 10, "minLength": 1, "maxItems": 3}
        member = {"maximum": 5, "minLength": 4, "maxItems": 7}

        assert merge_schemas(parent, member) == {"maximum": 5, "minLength": 4, "maxItems": 3}

    def test_unique_items(self):
        """Test merging uniqueItems flags."""
        assert merge_schemas({"uniqueItems": False}, {"uniqueItems": True}) == {"uniqueItems": True}

    def test_non_numeric_bound(self):
        """Test that a non-numeric bound blocks the merge."""
        assert merge_schemas({"maximum": 1}, {"maximum": "2"}) is CONFLICT

    def test_uncombinable_keyword(self):
        """Test that two different patterns cannot be written as one."""
        assert merge_schemas({"pattern": "^a"}, {"pattern": "b$"}) is CONFLICT
        assert merge_schemas({"multipleOf": 2}, {"multipleOf": 3}) is CONFLICT

    def test_single_items_schemas(self):
        """Test merging two single items schemas."""
        merged = merge_schemas({"items": {"type": "string"}}, {"items": {"minLength": 1}})
        assert merged == {"items": {"allOf": [{"type": "string"}, {"minLength": 1}]}}

    def test_properties_per_name(self):
        """Test merging properties name by name."""
        parent = {"properties": {"a": {"type": "string"}, "b": True}}
        member = {"properties": {"a": {"minLength": 1}, "c": {"type": "null"}}}

        assert merge_schemas(parent, member) == {
            "properties": {
                "a": {"allOf": [{"type": "string"}, {"minLength": 1}]},
                "b": True,
                "c": {"type": "null"},
            }
        }

    def test_dependencies(self):
        """Test merging dependencies per property."""
        parent = {"dependencies": {"a": ["b"], "c": {"required": ["d"]}}}
        member = {"dependencies": {"a": ["e"], "c": {"minProperties": 2}}}

        assert merge_schemas(parent, member) == {
            "dependencies": {
                "a": ["b", "e"],
                "c": {"allOf": [{"required": ["d"]}, {"minProperties": 2}]},
            }
        }

    def test_nested_all_of_is_concatenated(self):
        """Test that nested allOf lists are concatenated."""
        merged = merge_schemas({"allOf": [{"pattern": "a"}]}, {"allOf": [{"pattern": "b"}]})
        assert merged == {"allOf": [{"pattern": "a"}, {"pattern": "b"}]}

    def test_ref_member(self):
        """Test that a member carrying $ref is never merged."""
        assert merge_schemas({"type": "object"}, {"$ref": "#/definitions/a"}) is CONFLICT

    def test_unknown_or_scope_keyword(self):
        """Test that unknown and scope keywords block the merge."""
        assert merge_schemas({}, {"x-custom": 1}) is CONFLICT
        assert merge_schemas({}, {"$id": "http://example.com/a"}) is CONFLICT

    def test_malformed_nested_all_of(self):
        """Test that a malformed nested allOf blocks the merge."""
        assert merge_schemas({}, {"allOf": {"type": "string"}}) is CONFLICT

    def test_does_not_mutate(self):
        """Test that merging leaves both inputs unchanged."""
        parent = {"required": ["a"]}
        member = {"required": ["b"]}

        merge_schemas(parent, member)

        assert parent == {"required": ["a"]}
        assert member == {"required": ["b"]}


class TestSiblingGroups:
    """Test keywords that only mean something with their siblings."""

    def test_additional_properties_on_one_side_only(self):
        """Test folding a member when only one side has additionalProperties."""
        assert merge_schemas({"additionalProperties": False}, {"minProperties": 1}) == {
            "additionalProperties": False,
            "minProperties": 1,
        }

    def test_additional_properties_against_properties(self):
        """Test that member properties never fold under the parent's additionalProperties."""
        parent = {"properties": {"a": True}, "additionalProperties": False}
        member = {"properties": {"b": True}}

        assert merge_schemas(parent, member) is CONFLICT

    def test_properties_on_both_sides(self):
        """Test folding properties present on both sides."""
        parent = {"properties": {"a": {"type": "string"}}}
        member = {"properties": {"b": {"type": "string"}}}

        assert merge_schemas(parent, member) == {
            "properties": {"a": {"type": "string"}, "b": {"type": "string"}}
        }

    def test_tuple_items(self):
        """Test that tuple items and additionalItems stay together."""
        assert merge_schemas({"items": [True]}, {"items": [False]}) is CONFLICT
        assert merge_schemas({"items": {}}, {"additionalItems": False}) is CONFLICT

    def test_conditionals(self):
        """Test that if, then and else are never split."""
        assert merge_schemas({"if": {"type": "string"}, "then": False}, {"else": False}) is CONFLICT

    def test_draft4_boolean_exclusive_bounds(self):
        """Test that Draft 4 boolean exclusive bounds stay with their bound."""
        parent = {"maximum": 5, "exclusiveMaximum": True}

        assert merge_schemas(parent, {"maximum": 3}) is CONFLICT
        assert merge_schemas(parent, {"minimum": 1}) == {"maximum": 5, "exclusiveMaximum": True, "minimum": 1}

    def test_numeric_exclusive_bounds(self):
        """Test merging numeric exclusive bounds."""
        assert merge_schemas({"exclusiveMaximum": 5}, {"maximum": 3}) == {"exclusiveMaximum": 5, "maximum": 3}


class TestAllOfFlattenRule:
    """Test the rule built on merge_schemas."""

    def test_folds_every_member(self):
        """Test folding every allOf member into the parent."""
        schema = {"type": "object", "allOf": [{"required": ["a"]}, {"required": ["b"]}]}
        assert flatten(schema) == {"type": "object", "required": ["a", "b"]}

    def test_keeps_members_that_do_not_fold(self):
        """Test that members which cannot fold stay in allOf."""
        schema = {"pattern": "^a", "allOf": [{"pattern": "b$"}, {"minLength": 2}]}
        assert flatten(schema) == {"pattern": "^a", "minLength": 2, "allOf": [{"pattern": "b$"}]}

    def test_nested_all_of_survives(self):
        """Test that a nested allOf is kept after folding."""
        schema = {"allOf": [{"minLength": 2, "allOf": [{"$ref": "#/a"}]}]}
        assert flatten(schema) == {"minLength": 2, "allOf": [{"$ref": "#/a"}]}

    def test_contradiction(self):
        """Test folding contradicting members into false."""
        assert flatten({"const": 1, "allOf": [{"const": 2}]}) is False

    def test_nothing_folds(self):
        """Test that the rule does nothing when no member folds."""
        assert flatten({"allOf": [{"$ref": "#/a"}, True]}) is None
        assert flatten({"allOf": []}) is None

    def test_parent_with_unknown_keyword(self):
        """Test that an unknown parent keyword blocks folding."""
        assert flatten({"x-custom": 1, "allOf": [{"minLength": 1}]}) is None

    def test_does_not_mutate(self):
        """Test that flattening leaves the input unchanged."""
        schema = {"allOf": [{"required": ["a"]}, {"required": ["b"]}]}
        flatten(schema)
        assert schema == {"allOf": [{"required": ["a"]}, {"required": ["b"]}]}
