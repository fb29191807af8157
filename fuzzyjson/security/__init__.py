"""
fuzzyjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    FuzzyJSONError,
    JSONDecodeError,
    NoValueFoundError,
    ParseError,
    Position,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    "FuzzyJSONError",
    "JSONDecodeError",
    "LimitValidator",
    "NoValueFoundError",
    "ParseError",
    "Position",
    "SecurityError",
]
