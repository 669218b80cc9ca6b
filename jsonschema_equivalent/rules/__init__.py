"""
Rule library - the local rewrites the optimizer applies.

Each rule is independent and offered every schema object by the driver in
the order of ``DEFAULT_RULES``. The order only affects how fast a fixpoint is
reached and is fixed so traces are reproducible.

Components:
    - base: Rule protocol and shared helpers
    - types: type-set driven rules (unsatisfiable nodes, extraneous keywords)
    - vacuous: keywords that never reject anything
    - bounds: contradictory lower/upper bounds
    - literals: const/enum against type
    - arrays: tuple items and additionalItems
    - objects: propertyNames
    - conditionals: if/then/else and not
    - combinators: anyOf, oneOf, literal allOf members
    - all_of: folding allOf members into the parent

Example:
    ```python
    from jsonschema_equivalent.rules import get_rules

    rules = get_rules(disabled={"items-truncation"})
    [rule.rule_id for rule in rules][:3]
    # ["unsatisfiable-types", "extraneous-keywords", "type-keyword"]
    ```
"""

from typing import Dict, Iterable, List, Optional

from jsonschema_equivalent.rules.all_of import AllOfFlattenRule, merge_schemas
from jsonschema_equivalent.rules.arrays import AdditionalItemsRule, ItemsTruncationRule
from jsonschema_equivalent.rules.base import Rule, RuleContext
from jsonschema_equivalent.rules.bounds import RangeContradictionRule
from jsonschema_equivalent.rules.combinators import (
    AllOfFalseRule,
    AllOfLiteralsRule,
    AllOfTypesRule,
    AnyOfRule,
    OneOfRule,
)
from jsonschema_equivalent.rules.conditionals import IfThenElseRule, NotRule
from jsonschema_equivalent.rules.literals import ConstEnumRule
from jsonschema_equivalent.rules.objects import PropertyNamesRule
from jsonschema_equivalent.rules.types import (
    ExtraneousKeywordsRule,
    TypeKeywordRule,
    UnsatisfiableTypesRule,
)
from jsonschema_equivalent.rules.vacuous import (
    EmptyRequiredRule,
    EmptySchemaRule,
    OrphanKeywordsRule,
    TrivialSubschemasRule,
    VacuousBoundsRule,
)

DEFAULT_RULES: List[Rule] = [
    UnsatisfiableTypesRule(),
    ExtraneousKeywordsRule(),
    TypeKeywordRule(),
    OrphanKeywordsRule(),
    VacuousBoundsRule(),
    EmptyRequiredRule(),
    TrivialSubschemasRule(),
    RangeContradictionRule(),
    ConstEnumRule(),
    AdditionalItemsRule(),
    ItemsTruncationRule(),
    PropertyNamesRule(),
    IfThenElseRule(),
    NotRule(),
    AnyOfRule(),
    OneOfRule(),
    AllOfLiteralsRule(),
    AllOfFalseRule(),
    AllOfFlattenRule(),
    AllOfTypesRule(),
    EmptySchemaRule(),
]

RULES_BY_ID: Dict[str, Rule] = {rule.rule_id: rule for rule in DEFAULT_RULES}


def get_rules(disabled: Optional[Iterable[str]] = None) -> List[Rule]:
    """
    Return the rule catalog in driver order.

    Args:
        disabled: Rule ids to leave out

    Returns:
        List of rules

    Raises:
        ValueError: If a disabled id does not name a rule
    """
    disabled = set(disabled or ())
    unknown = sorted(disabled - set(RULES_BY_ID))
    if unknown:
        raise ValueError(f"Unknown rule ids: {', '.join(unknown)}")
    return [rule for rule in DEFAULT_RULES if rule.rule_id not in disabled]


__all__ = [
    "DEFAULT_RULES",
    "RULES_BY_ID",
    "Rule",
    "RuleContext",
    "get_rules",
    "merge_schemas",
]
