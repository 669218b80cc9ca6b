"""
Main CLI entry point using Typer.

This module defines the command-line interface for jsonschema-equivalent. It
provides three commands: optimize, check, and rules.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from jsonschema_equivalent.utils import setup_logging

from .commands import build_config, check_command, optimize_command, rules_command
from .display import print_error


app = typer.Typer(
    name="jsonschema-equivalent",
    help="jsonschema-equivalent - Rewrite JSON Schemas into smaller equivalent ones",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("optimize")
def optimize(
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the optimized schema")
    ] = None,
    integer_policy: Annotated[
        Optional[str],
        typer.Option("--integer-policy", help="Integer classification: integral, literal or conservative")
    ] = None,
    disable_rule: Annotated[
        Optional[List[str]],
        typer.Option("--disable-rule", "-x", help="Rule id to skip (can be used multiple times)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to JSON optimizer config", exists=True, file_okay=True, dir_okay=False)
    ] = None,
    trace: Annotated[
        bool,
        typer.Option("--trace", help="Show every rule application")
    ] = False,
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the input schema")
    ] = False,
    diff: Annotated[
        bool,
        typer.Option("--diff", help="Show a unified diff of input and output")
    ] = False,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Print and save single-line JSON")
    ] = False,
) -> None:
    """
    Optimize a JSON schema.

    Example:
        jsonschema-equivalent optimize \\
            --schema schema.json \\
            --output schema.min.json \\
            --trace
    """
    try:
        optimize_command(
            schema_path=schema,
            output_path=output,
            config=build_config(config, integer_policy, disable_rule),
            show_schema=show_schema,
            show_trace=trace,
            show_diff=diff,
            compact=compact
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("check")
def check(
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    instances: Annotated[
        Path,
        typer.Option("--instances", "-i", help="Path to a JSON array of instances", exists=True, file_okay=True, dir_okay=False)
    ],
    integer_policy: Annotated[
        Optional[str],
        typer.Option("--integer-policy", help="Integer classification: integral, literal or conservative")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to JSON optimizer config", exists=True, file_okay=True, dir_okay=False)
    ] = None,
) -> None:
    """
    Check that the optimized schema accepts exactly the same instances.

    Example:
        jsonschema-equivalent check \\
            --schema schema.json \\
            --instances instances.json \\
            --integer-policy conservative
    """
    try:
        check_command(
            schema_path=schema,
            instances_path=instances,
            config=build_config(config, integer_policy, None),
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("rules")
def rules(
    disable_rule: Annotated[
        Optional[List[str]],
        typer.Option("--disable-rule", "-x", help="Mark a rule id as disabled")
    ] = None,
) -> None:
    """
    List the rewrite rules in the order the optimizer applies them.
    """
    try:
        rules_command(build_config(None, None, disable_rule))
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log rule applications and run summaries")
    ] = False,
) -> None:
    """
    jsonschema-equivalent - Rewrite JSON Schemas into smaller equivalent ones.

    The optimized schema accepts exactly the instances the input accepts.
    """
    if version:
        from jsonschema_equivalent import __version__
        typer.echo(f"jsonschema-equivalent version {__version__}")
        raise typer.Exit()

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
