"""
Configuration and limits for fuzzyjson.

This module defines the security limits and configuration options used by the
scanner and grammar.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

# Interpreter frames used per container level (dict: value, dict, list, entry)
FRAMES_PER_LEVEL = 4
# Frames kept free for callers of the parser
FRAME_HEADROOM = 200


def default_nesting_depth() -> int:
    """Deepest container nesting the interpreter's recursion limit allows."""
    return max(1, (sys.getrecursionlimit() - FRAME_HEADROOM) // FRAMES_PER_LEVEL)


@dataclass
class ParseLimits:
    """Security limits for fuzzy parsing to prevent resource exhaustion."""

    # The scanner is quadratic in the input length
    max_input_size: int = 1024 * 1024
    # Deeper containers fail to match instead of exhausting the stack
    max_nesting_depth: int = field(default_factory=default_nesting_depth)

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ParseConfig:
    """Complete configuration for a fuzzy parse."""

    limits: ParseLimits = field(default_factory=ParseLimits)

    # Logging
    logger: Optional[logging.Logger] = None
