"""
CLI command implementations.

This module contains the business logic for each CLI command:
- optimize: Optimize a schema file
- check: Check equivalence of the original and optimized schema on instances
- rules: List the rule catalog
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from jsonschema_equivalent.api import optimize_with_report
from jsonschema_equivalent.config import OptimizerConfig
from jsonschema_equivalent.rules import DEFAULT_RULES
from jsonschema_equivalent.schema.parser import check_schema, load_schema_file, schema_stats
from jsonschema_equivalent.validation.diff_generator import generate_diff
from jsonschema_equivalent.validation.validator import check_equivalence

from .display import (
    console,
    print_diff,
    print_error,
    print_header,
    print_info,
    print_mismatches,
    print_optimization_stats,
    print_rule_table,
    print_schema,
    print_success,
    print_trace,
    print_warning,
)

logger = logging.getLogger(__name__)


def load_config_file(config_path: Path) -> OptimizerConfig:
    """
    Load optimizer options from a JSON file.

    Raises:
        ValueError: If the file is missing, not JSON, or has invalid options
    """
    if not config_path.exists():
        raise ValueError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    return OptimizerConfig.from_dict(data)


def load_instances_file(instances_path: Path) -> List[Any]:
    """
    Load test instances: a JSON array, one instance per element.

    Raises:
        ValueError: If the file is missing, not JSON, or not an array
    """
    if not instances_path.exists():
        raise ValueError(f"Instances file not found: {instances_path}")

    try:
        with open(instances_path, encoding="utf-8") as f:
            instances = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in instances file: {e}")

    if not isinstance(instances, list):
        raise ValueError("Instances file must contain a JSON array")
    return instances


def build_config(
    config_path: Optional[Path],
    integer_policy: Optional[str],
    disabled_rules: Optional[List[str]],
) -> OptimizerConfig:
    """Config file first, then command line options on top."""
    config = load_config_file(config_path) if config_path else OptimizerConfig()

    if integer_policy:
        config = config.with_changes(integer_policy=integer_policy)
    if disabled_rules:
        config = config.with_changes(disabled_rules=config.disabled_rules | frozenset(disabled_rules))
    return config


def optimize_command(
    schema_path: Path,
    output_path: Optional[Path],
    config: OptimizerConfig,
    show_schema: bool,
    show_trace: bool,
    show_diff: bool,
    compact: bool,
) -> None:
    """
    Execute the optimize command.

    Args:
        schema_path: Path to JSON schema file
        output_path: Optional path to save the optimized schema
        config: Optimizer options
        show_schema: Whether to display the input schema
        show_trace: Whether to display every rule application
        show_diff: Whether to display a diff of input and output
        compact: Print single-line JSON
    """
    print_header("Schema Optimization")

    try:
        schema = load_schema_file(schema_path)
        print_success(f"Loaded schema from: {schema_path}")
    except Exception as e:
        print_error(f"Failed to load schema: {e}")
        raise SystemExit(1)

    try:
        check_schema(schema)
    except ValueError as e:
        print_warning(str(e))

    if show_schema:
        print_schema(schema, "Input Schema", compact=compact)

    logger.debug(f"Optimizer config: {config.to_dict()}")
    result = optimize_with_report(schema, config)
    if result.exhausted:
        print_warning("Iteration budget exhausted; the result may not be fully optimized")

    print_schema(result.schema, "Optimized Schema", compact=compact)

    if show_diff:
        print_diff(generate_diff(schema, result.schema))

    if show_trace:
        print_trace(result.events)

    print_optimization_stats(
        before=schema_stats(schema),
        after=schema_stats(result.schema),
        rule_counts=result.rule_counts,
        iterations=result.iterations,
        elapsed_ms=result.elapsed_ms,
        exhausted=result.exhausted,
    )

    if output_path:
        indent = None if compact else 2
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(result.schema, f, indent=indent)
            f.write("\n")
        print_success(f"Saved optimized schema to: {output_path}")


def check_command(
    schema_path: Path,
    instances_path: Path,
    config: OptimizerConfig,
) -> None:
    """
    Execute the check command.

    Optimizes the schema and validates every instance against both versions.
    Exits with status 1 when any instance gets different verdicts.

    Args:
        schema_path: Path to JSON schema file
        instances_path: Path to a JSON array of instances
        config: Optimizer options
    """
    print_header("Equivalence Check")

    try:
        schema = load_schema_file(schema_path)
        instances = load_instances_file(instances_path)
    except Exception as e:
        print_error(f"Failed to load input: {e}")
        raise SystemExit(1)

    print_info(f"Schema: [bold]{schema_path}[/bold]")
    print_info(f"Instances: [bold]{len(instances)}[/bold]")
    print_info("Validator: [bold]Draft 7[/bold]")

    optimized = optimize_with_report(schema, config).schema
    result = check_equivalence(schema, optimized, instances)

    if result.is_equivalent:
        print_success(f"Equivalent on all {result.checked} instance(s)")
        return

    print_error(f"Schemas disagree on {len(result.mismatches)} of {result.checked} instance(s)")
    print_mismatches(result.mismatches)
    raise SystemExit(1)


def rules_command(config: OptimizerConfig) -> None:
    """List the rule catalog in driver order."""
    print_rule_table(DEFAULT_RULES, disabled=sorted(config.disabled_rules))
    console.print(f"[dim]{len(DEFAULT_RULES)} rules[/dim]")
