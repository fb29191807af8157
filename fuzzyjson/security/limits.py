"""
Security limits and validation for fuzzyjson.
This module provides security validation to prevent resource exhaustion attacks.
"""

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates parsing limits.

    The validator keeps no parse state so that the grammar stays free of side
    effects; callers pass the current depth explicitly.
    """

    def __init__(self, limits: ParseLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def within_depth(self, depth: int) -> bool:
        """Check a container nesting depth against the limit.

        Going deeper is a recognizer failure rather than an error, so the
        scanner simply moves on to the next offset.
        """
        return depth <= self.limits.max_nesting_depth
