"""
Fixpoint driver - apply the rule library until nothing changes.

Each schema node goes through three states:

    Unvisited -> Stabilizing -> Stable

Stabilizing offers the node to every rule in catalog order. When a rule
rewrites the node the type set is resolved again and the pass restarts from
the first rule. A pass with no rewrite moves on to the children. When a
child changed, the node's own pass runs again (a simpler child can unlock a
parent rule, e.g. an ``allOf`` member that became ``true``); if that pass
changes the node, the children are visited again under the new node.

Context passed to children:
    - ``allOf``/``anyOf``/``oneOf``/``not``/``if``/``then``/``else`` see the
      same instance as their parent, so they inherit the parent's TypeSet:
      whatever they do with other instances, the parent rejects those anyway
    - ``propertyNames`` only ever sees strings
    - every other child starts unrestricted

Termination:
    Every run has an iteration budget of ``iterations_per_node`` rule
    applications per schema node. Running out means a rule keeps rewriting
    without converging; the driver logs the defect at ERROR level and
    returns the last (still equivalent) document.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from jsonschema_equivalent.config import OptimizerConfig
from jsonschema_equivalent.optimizer.trace import NullTraceSink, TraceEvent, TraceSink
from jsonschema_equivalent.rules import Rule, RuleContext
from jsonschema_equivalent.schema.keywords import IN_PLACE_KEYWORDS
from jsonschema_equivalent.schema.model import (
    SchemaPath,
    count_nodes,
    format_path,
    iter_subschemas,
    replace_subschema,
)
from jsonschema_equivalent.schema.resolver import resolve_types
from jsonschema_equivalent.schema.types import PrimitiveType, TypeSet

logger = logging.getLogger(__name__)

_PROPERTY_NAME_TYPES = TypeSet.of(PrimitiveType.STRING)


@dataclass
class DriverResult:
    """
    Outcome of a driver run.

    Attributes:
        schema: The optimized document
        iterations: Number of rule applications
        budget: Iteration budget of the run
        exhausted: Whether the budget ran out before a fixpoint was reached
    """

    schema: Any
    iterations: int
    budget: int
    exhausted: bool


class FixpointDriver:
    """
    Applies rules to a document until it reaches a fixpoint.

    A driver holds per-run counters and is meant for one document at a time;
    create one per call (``optimize`` does).

    Attributes:
        rules: Rules in application order
        config: Optimizer options
        sink: Receiver of trace events
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        config: Optional[OptimizerConfig] = None,
        sink: Optional[TraceSink] = None,
    ):
        self.rules = list(rules)
        self.config = config or OptimizerConfig()
        self.sink = sink or NullTraceSink()
        self._iterations = 0
        self._budget = 0
        self._exhausted = False

    def run(self, schema: Any) -> DriverResult:
        """
        Optimize a document.

        Args:
            schema: Document owned by the caller of the driver; it is not
                mutated, rewritten parts are new objects

        Returns:
            DriverResult: Optimized document and run counters
        """
        self._iterations = 0
        self._budget = self.config.iterations_per_node * count_nodes(schema)
        self._exhausted = False

        optimized, _ = self._optimize(schema, (), None)

        return DriverResult(
            schema=optimized,
            iterations=self._iterations,
            budget=self._budget,
            exhausted=self._exhausted,
        )

    def _optimize(self, node: Any, path: SchemaPath, inherited: Optional[TypeSet]) -> Tuple[Any, bool]:
        """Bring one subtree to a fixpoint. Returns the new subtree and whether it changed."""
        if not isinstance(node, dict) or "$ref" in node:
            return node, False

        node, changed = self._stabilize(node, path, inherited)
        while isinstance(node, dict) and not self._exhausted:
            node, children_changed = self._optimize_children(node, path, inherited)
            if not children_changed:
                break
            changed = True
            node, parent_changed = self._stabilize(node, path, inherited)
            if not parent_changed:
                break
        return node, changed

    def _stabilize(self, node: Any, path: SchemaPath, inherited: Optional[TypeSet]) -> Tuple[Any, bool]:
        """Run rule passes on a single node until a pass makes no change."""
        changed = False
        policy = self.config.integer_policy

        while isinstance(node, dict) and "$ref" not in node and not self._exhausted:
            context = RuleContext(
                types=resolve_types(node, inherited, policy),
                inherited=inherited,
                policy=policy,
            )
            for rule in self.rules:
                replacement = rule.apply(node, context)
                if replacement is None:
                    continue
                self._record(rule, path, node, replacement)
                node = replacement
                changed = True
                break
            else:
                break
            self._spend(path)

        return node, changed

    def _optimize_children(
        self,
        node: Any,
        path: SchemaPath,
        inherited: Optional[TypeSet],
    ) -> Tuple[Any, bool]:
        types = resolve_types(node, inherited, self.config.integer_policy)
        updated = node
        changed = False

        for relative_path, child in list(iter_subschemas(node)):
            keyword = relative_path[0]
            if keyword in IN_PLACE_KEYWORDS:
                child_inherited: Optional[TypeSet] = types
            elif keyword == "propertyNames":
                child_inherited = _PROPERTY_NAME_TYPES
            else:
                child_inherited = None

            new_child, child_changed = self._optimize(child, path + relative_path, child_inherited)
            if child_changed:
                updated = replace_subschema(updated, relative_path, new_child)
                changed = True
            if self._exhausted:
                break

        return updated, changed

    def _record(self, rule: Rule, path: SchemaPath, before: Any, after: Any) -> None:
        logger.debug(f"Applied {rule.rule_id} at {format_path(path)}")
        try:
            self.sink.emit(TraceEvent(rule_id=rule.rule_id, path=path, before=before, after=after))
        except Exception as e:
            logger.warning(f"Trace sink failed on {rule.rule_id} at {format_path(path)}: {e}")

    def _spend(self, path: SchemaPath) -> None:
        self._iterations += 1
        if self._iterations >= self._budget:
            self._exhausted = True
            logger.error(
                f"Iteration budget of {self._budget} exhausted at {format_path(path)}; "
                f"returning the schema as rewritten so far"
            )
