"""
Diff generator - show what optimization changed.

Renders both schemas as pretty, key-sorted JSON and produces a unified diff,
so the output is stable regardless of key order in the input file.
"""

import difflib
import json
from typing import Any


def to_pretty_json(schema: Any) -> str:
    return json.dumps(schema, indent=2, sort_keys=True)


def generate_diff(original: Any, optimized: Any, context_lines: int = 3) -> str:
    """
    Generate a unified diff between two schemas.

    Args:
        original: Schema before optimization
        optimized: Schema after optimization
        context_lines: Lines of context around each change

    Returns:
        str: The diff, or an empty string when the schemas are identical
    """
    before = to_pretty_json(original).splitlines()
    after = to_pretty_json(optimized).splitlines()
    diff = difflib.unified_diff(
        before,
        after,
        fromfile="original",
        tofile="optimized",
        n=context_lines,
        lineterm="",
    )
    return "\n".join(diff)
