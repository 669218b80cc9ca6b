"""
Rich terminal display utilities for the CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted schemas
- Error and status messages
- Statistics and rule tables
"""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from jsonschema_equivalent.optimizer.trace import TraceEvent
from jsonschema_equivalent.schema.parser import SchemaStats
from jsonschema_equivalent.validation.error_formatter import format_value
from jsonschema_equivalent.validation.validator import Mismatch


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None, compact: bool = False) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
        compact: Single-line JSON instead of indented
    """
    if isinstance(data, str):
        json_str = data
    elif compact:
        json_str = json.dumps(data, separators=(",", ":"))
    else:
        json_str = json.dumps(data, indent=2)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_schema(schema: Any, title: str = "Schema", compact: bool = False) -> None:
    """Print a schema with syntax highlighting."""
    print_json(schema, title, compact=compact)


def print_diff(diff: str) -> None:
    if not diff:
        print_info("Schema unchanged")
        return
    console.print(Syntax(diff, "diff", theme="monokai", line_numbers=False))


def print_optimization_stats(
    before: SchemaStats,
    after: SchemaStats,
    rule_counts: Dict[str, int],
    iterations: int,
    elapsed_ms: float,
    exhausted: bool = False,
) -> None:
    """
    Print optimization statistics in a table.

    Args:
        before: Size of the input schema
        after: Size of the optimized schema
        rule_counts: Applications per rule id
        iterations: Total rule applications
        elapsed_ms: Optimization time in milliseconds
        exhausted: Whether the iteration budget ran out
    """
    table = Table(title="Optimization Statistics", show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="cyan", width=20)
    table.add_column("Before", justify="right", width=10)
    table.add_column("After", justify="right", width=10)

    table.add_row("Schema nodes", str(before.nodes), str(after.nodes))
    table.add_row("Keywords", str(before.keywords), str(after.keywords))
    table.add_row("Rule applications", "", str(iterations))
    table.add_row("Time", "", f"{elapsed_ms:.1f} ms")
    if exhausted:
        table.add_row("Budget", "", Text("exhausted", style="red bold"))

    console.print()
    console.print(table)

    if rule_counts:
        rules_table = Table(title="Rules Applied", show_header=True, header_style="bold green")
        rules_table.add_column("Rule", style="cyan", width=25)
        rules_table.add_column("Count", justify="right", width=8)
        for rule_id, count in rule_counts.items():
            rules_table.add_row(rule_id, str(count))
        console.print(rules_table)
    console.print()


def print_trace(events: List[TraceEvent]) -> None:
    """Print every rule application in order."""
    table = Table(title="Trace", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Rule", style="cyan", width=22)
    table.add_column("Path", style="yellow", width=24)
    table.add_column("Before", width=30)
    table.add_column("After", width=30)

    for i, event in enumerate(events, 1):
        table.add_row(
            str(i),
            event.rule_id,
            event.pointer,
            format_value(event.before, 30),
            format_value(event.after, 30),
        )

    console.print()
    console.print(table)
    console.print()


def print_rule_table(rules: List[Any], disabled: Optional[List[str]] = None) -> None:
    """
    Print the rule catalog.

    Args:
        rules: Rule objects in driver order
        disabled: Rule ids shown as disabled
    """
    disabled = set(disabled or ())
    table = Table(title="Rule Catalog", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Rule", style="cyan", width=22)
    table.add_column("Description", style="white")

    for i, rule in enumerate(rules, 1):
        rule_id = rule.rule_id
        if rule_id in disabled:
            rule_id = f"[dim]{rule_id} (disabled)[/dim]"
        table.add_row(str(i), rule_id, rule.description)

    console.print()
    console.print(table)
    console.print()


def print_mismatches(mismatches: List[Mismatch]) -> None:
    """
    Print instances the original and optimized schemas disagree on.

    Args:
        mismatches: Mismatches from check_equivalence
    """
    if not mismatches:
        return

    console.print()
    console.print("[bold red]Mismatches:[/bold red]")
    for mismatch in mismatches:
        original = "valid" if mismatch.original_valid else "invalid"
        optimized = "valid" if mismatch.optimized_valid else "invalid"
        console.print(
            f"  [red]•[/red] {format_value(mismatch.instance)} "
            f"[dim](original: {original}, optimized: {optimized})[/dim]"
        )
        for error in mismatch.errors:
            console.print(f"      {error}")
    console.print()
