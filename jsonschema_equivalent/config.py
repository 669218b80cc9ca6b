"""
Optimizer configuration.

All knobs live in one frozen dataclass so a configuration can be shared
between calls and threads. The command line builds one from ``--config``
files and options; library callers pass one to ``optimize``.

Example:
    ```python
    from jsonschema_equivalent import OptimizerConfig, optimize
    from jsonschema_equivalent.schema.types import IntegerPolicy

    config = OptimizerConfig(
        integer_policy=IntegerPolicy.LITERAL,
        disabled_rules=frozenset({"items-truncation"}),
    )
    optimize({"type": "number", "enum": [1, 2]}, config=config)
    # unchanged: under Draft 4 the instance 1.0 is a number but not an integer
    ```
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, FrozenSet

from jsonschema_equivalent.schema.types import IntegerPolicy


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Options controlling an optimization run.

    Attributes:
        integer_policy: Classification of integral numeric literals in
            ``const``/``enum`` (see IntegerPolicy)
        iterations_per_node: Rule applications allowed per schema node before
            the run is stopped; hitting it indicates a non-terminating rule
        disabled_rules: Rule ids to skip
    """

    integer_policy: IntegerPolicy = IntegerPolicy.INTEGRAL
    iterations_per_node: int = 64
    disabled_rules: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.integer_policy, IntegerPolicy):
            object.__setattr__(self, "integer_policy", _parse_policy(self.integer_policy))
        if isinstance(self.iterations_per_node, bool) or not isinstance(self.iterations_per_node, int):
            raise ValueError(f"iterations_per_node must be an integer, got: {self.iterations_per_node!r}")
        if self.iterations_per_node < 1:
            raise ValueError(f"iterations_per_node must be at least 1, got: {self.iterations_per_node}")
        if not isinstance(self.disabled_rules, frozenset):
            object.__setattr__(self, "disabled_rules", frozenset(self.disabled_rules))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OptimizerConfig":
        """
        Build a configuration from a JSON mapping.

        Args:
            data: Mapping with any of ``integer_policy``, ``iterations_per_node``
                and ``disabled_rules``

        Returns:
            OptimizerConfig: Configuration with defaults for missing keys

        Raises:
            ValueError: If the mapping has unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a JSON object, got: {type(data).__name__}")

        known = {"integer_policy", "iterations_per_node", "disabled_rules"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = {}
        if "integer_policy" in data:
            kwargs["integer_policy"] = _parse_policy(data["integer_policy"])
        if "iterations_per_node" in data:
            kwargs["iterations_per_node"] = data["iterations_per_node"]
        if "disabled_rules" in data:
            rules = data["disabled_rules"]
            if not isinstance(rules, list) or not all(isinstance(r, str) for r in rules):
                raise ValueError("disabled_rules must be a list of rule ids")
            kwargs["disabled_rules"] = frozenset(rules)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["integer_policy"] = self.integer_policy.value
        data["disabled_rules"] = sorted(self.disabled_rules)
        return data

    def with_changes(self, **changes: Any) -> "OptimizerConfig":
        """Return a copy with some fields replaced."""
        return replace(self, **changes)


def _parse_policy(value: Any) -> IntegerPolicy:
    try:
        return IntegerPolicy(value)
    except ValueError:
        choices = ", ".join(policy.value for policy in IntegerPolicy)
        raise ValueError(f"Invalid integer policy: {value!r} (expected one of: {choices})")
