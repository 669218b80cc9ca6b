"""
Utility functions and helpers.

Components:
    - logging: setup_logging, a RichHandler based logging configuration

Example:
    ```python
    from jsonschema_equivalent.utils import setup_logging

    setup_logging(level="DEBUG")
    ```
"""

from jsonschema_equivalent.utils.logging import setup_logging

__all__ = ["setup_logging"]
