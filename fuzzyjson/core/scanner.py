"""
Scanning driver for fuzzyjson.

The grammar only recognizes a value that starts exactly at a given offset.
The scanner retries it at every offset of the input, left to right, so that
prose around the data is ignored. There is deliberately no word-boundary
check: a literal found in the middle of a word is accepted.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..security.exceptions import NoValueFoundError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import get_value_start_chars
from .grammar import Grammar
from .values import Value

logger = logging.getLogger(__name__)

_VALUE_START_CHARS = get_value_start_chars()


@dataclass(frozen=True)
class ScanMatch:
    """A value found by the scanner and the character span it covers."""

    value: Value
    start: int
    end: int


class Scanner:
    """Finds the first recognizable value embedded in arbitrary text."""

    def __init__(self, config: Optional[ParseConfig] = None):
        self.config = config or ParseConfig()
        self.grammar = Grammar(self.config.limits)
        self.validator = LimitValidator(self.config.limits)
        self.logger = self.config.logger or logger

    def find(self, text: str) -> Optional[ScanMatch]:
        """Return the leftmost value in ``text``, or None.

        Whatever follows the matched value is ignored.
        """
        self.validator.validate_input_size(text)

        for offset, char in enumerate(text):
            if char not in _VALUE_START_CHARS:
                continue

            result = self.grammar.parse_value(text, offset)
            if result is not None:
                value, end = result
                self.logger.debug(
                    f"Found {type(value).__name__} at offset {offset} "
                    f"(span {offset}-{end} of {len(text)})"
                )
                return ScanMatch(value, offset, end)

        self.logger.debug(f"No value found in {len(text)} characters")
        return None

    def scan(self, text: str) -> Value:
        """Return the leftmost value in ``text``.

        Raises:
            NoValueFoundError: If no offset starts a value
            SecurityError: If the input exceeds the size limit
        """
        match = self.find(text)
        if match is None:
            raise NoValueFoundError(len(text))
        return match.value
