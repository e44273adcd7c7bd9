"""Utility modules for Hebras.

Provides:
- describe: deterministic rendering of construction parameters
- logger: get_logger for logging
"""

from hebras.utils.describe import describe, describe_call
from hebras.utils.logger import get_logger

__all__ = [
    "describe",
    "describe_call",
    "get_logger",
]
