"""
Exceptions raised by fuzzyjson.

Recognizer failures inside the grammar never raise; the exceptions here are
the only failures a caller can observe.
"""

import json
from dataclasses import dataclass
from typing import Optional


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


class FuzzyJSONError(Exception):
    """Base class for all fuzzyjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"
        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)


class ParseError(FuzzyJSONError):
    """Raised when input text cannot be turned into a value."""


class NoValueFoundError(ParseError):
    """Raised when no offset of the input starts a recognizable value."""

    def __init__(self, input_length: int):
        self.input_length = input_length
        super().__init__(
            f"No value found in {input_length} characters of input",
            suggestions=[
                "Values are null/true/false words, numbers, quoted strings, "
                "[arrays] or {objects}",
                "Check for unbalanced brackets or unterminated strings",
            ],
        )


class SecurityError(FuzzyJSONError):
    """Raised when input exceeds a configured parse limit."""


class JSONDecodeError(json.JSONDecodeError):
    """json.JSONDecodeError raised by the drop-in loads()/load() functions."""

    def __init__(self, message: str, doc: str = "", pos: int = 0):
        super().__init__(message, doc, pos)
