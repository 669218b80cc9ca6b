"""
Command-line interface module.

This module provides a rich terminal interface for jsonschema-equivalent using
Typer and Rich.

Commands:
    - optimize: Optimize a schema file, optionally with trace and diff
    - check: Verify the optimized schema on a set of instances
    - rules: List the rule catalog

Example Usage:
    ```bash
    jsonschema-equivalent optimize --schema schema.json --output out.json

    jsonschema-equivalent optimize --schema schema.json \\
        --integer-policy literal --disable-rule items-truncation --trace

    jsonschema-equivalent check --schema schema.json --instances instances.json
    ```
"""

from .main import app

__all__ = ["app"]
