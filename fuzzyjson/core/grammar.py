"""
Grammar engine for fuzzyjson.

Every recognizer takes the full input text and a character offset and returns
either ``(result, new_offset)`` or ``None``. Recognizers never mutate shared
state, so a failed attempt leaves nothing behind and the caller is free to try
the next alternative at the same offset.

Leaf recognizers are plain module functions. Containers recurse through
``Grammar.parse_value``; a container nested past the limit simply fails to match.
"""

import math
import re
from typing import Callable, Optional, TypeVar

from ..security.limits import LimitValidator
from ..utils.config import ParseLimits
from .constants import (
    COMMENT_MARKERS,
    DIGIT_SEPARATOR,
    ESCAPE_MAP,
    FALSE_SPELLINGS,
    IDENTIFIER_HEAD_EXTRA,
    INT128_MAX,
    INT128_MIN,
    NULL_SPELLINGS,
    STRING_DELIMITERS,
    TRUE_SPELLINGS,
    WHITESPACE,
)
from .values import Array, Bool, Dict, Float, Int, Null, Str, Value

T = TypeVar("T")
Match = Optional[tuple[T, int]]

_SPACES = re.compile(f"[{re.escape(WHITESPACE)}]*")
_COMMENT = re.compile("(?:" + "|".join(map(re.escape, COMMENT_MARKERS)) + r")[^\n\r]*")

_DIGIT_RUN = r"[0-9][0-9_]*"
_INT = re.compile(rf"-?{_DIGIT_RUN}")
_FLOAT = re.compile(rf"-?(?:\.{_DIGIT_RUN}|{_DIGIT_RUN}\.{_DIGIT_RUN})")

# Runs of plain string characters, per delimiter
_STRING_CHUNK = {
    delimiter: re.compile(rf"[^{re.escape(delimiter)}\\]+")
    for delimiter in STRING_DELIMITERS
}


def skip_blank(text: str, pos: int) -> int:
    """Skip whitespace interleaved with comments. Always succeeds."""
    pos = _SPACES.match(text, pos).end()
    while True:
        comment = _COMMENT.match(text, pos)
        if not comment:
            return pos
        pos = _SPACES.match(text, comment.end()).end()


def _is_identifier_head(char: str) -> bool:
    return char.isalpha() or char in IDENTIFIER_HEAD_EXTRA


def parse_identifier(text: str, pos: int) -> Match[str]:
    """Recognize an unquoted dictionary key."""
    if pos >= len(text) or not _is_identifier_head(text[pos]):
        return None

    end = pos + 1
    while end < len(text) and (text[end].isalnum() or _is_identifier_head(text[end])):
        end += 1
    return text[pos:end], end


def _match_spelling(text: str, pos: int, spellings: tuple[str, ...]) -> Optional[int]:
    for spelling in spellings:
        if text.startswith(spelling, pos):
            return pos + len(spelling)
    return None


def parse_null(text: str, pos: int) -> Match[Value]:
    end = _match_spelling(text, pos, NULL_SPELLINGS)
    if end is None:
        return None
    return Null(), end


def parse_bool(text: str, pos: int) -> Match[Value]:
    end = _match_spelling(text, pos, TRUE_SPELLINGS)
    if end is not None:
        return Bool(True), end

    end = _match_spelling(text, pos, FALSE_SPELLINGS)
    if end is not None:
        return Bool(False), end

    return None


def parse_int(text: str, pos: int) -> Match[Value]:
    """Recognize a decimal integer with optional ``_`` separators.

    Fails when the number does not fit a signed 128-bit integer.
    """
    literal = _INT.match(text, pos)
    if not literal:
        return None

    try:
        number = int(literal.group().replace(DIGIT_SEPARATOR, ""))
    except ValueError:
        # More digits than int() accepts is an overflow as well
        return None

    if not INT128_MIN <= number <= INT128_MAX:
        return None
    return Int(number), literal.end()


def parse_float(text: str, pos: int) -> Match[Value]:
    """Recognize ``.5`` or ``5.0`` style decimals (no exponent)."""
    literal = _FLOAT.match(text, pos)
    if not literal:
        return None

    number = float(literal.group().replace(DIGIT_SEPARATOR, ""))
    if not math.isfinite(number):
        return None
    return Float(number), literal.end()


def _parse_string_body(text: str, pos: int, delimiter: str) -> Match[Value]:
    chunk = _STRING_CHUNK[delimiter]
    parts = []

    while pos < len(text):
        plain = chunk.match(text, pos)
        if plain:
            parts.append(plain.group())
            pos = plain.end()
            continue

        if text[pos] == delimiter:
            return Str("".join(parts)), pos + 1

        # Backslash: unknown escapes fail the whole literal
        escaped = ESCAPE_MAP.get(text[pos + 1 : pos + 2])
        if escaped is None:
            return None
        parts.append(escaped)
        pos += 2

    return None


def parse_string(text: str, pos: int) -> Match[Value]:
    """Recognize a single- or double-quoted string literal."""
    for delimiter in STRING_DELIMITERS:
        if text.startswith(delimiter * 2, pos):
            return Str(""), pos + 2
        if text.startswith(delimiter, pos):
            return _parse_string_body(text, pos + 1, delimiter)
    return None


# Tried in order after the containers; float must precede int
LITERAL_RECOGNIZERS: tuple[Callable[[str, int], Match[Value]], ...] = (
    parse_null,
    parse_bool,
    parse_string,
    parse_float,
    parse_int,
)


class Grammar:
    """Recursive recognizers for values, arrays and dictionaries."""

    def __init__(self, limits: Optional[ParseLimits] = None):
        self.limits = limits or ParseLimits()
        self.validator = LimitValidator(self.limits)

    def parse_value(self, text: str, pos: int = 0, depth: int = 0) -> Match[Value]:
        """Try every value alternative at ``pos``; the first match wins."""
        result = self.parse_dict(text, pos, depth)
        if result is not None:
            return result

        result = self.parse_array(text, pos, depth)
        if result is not None:
            return result

        for recognizer in LITERAL_RECOGNIZERS:
            result = recognizer(text, pos)
            if result is not None:
                return result

        return None

    def parse_array(self, text: str, pos: int, depth: int = 0) -> Match[Value]:
        if not text.startswith("[", pos):
            return None
        if not self.validator.within_depth(depth + 1):
            return None

        items, pos = self._parse_separated(
            text, skip_blank(text, pos + 1), depth + 1, self.parse_value
        )
        pos = self._skip_trailing_comma(text, pos)

        if not text.startswith("]", pos):
            return None
        return Array(items), pos + 1

    def parse_dict(self, text: str, pos: int, depth: int = 0) -> Match[Value]:
        if not text.startswith("{", pos):
            return None
        if not self.validator.within_depth(depth + 1):
            return None

        entries, pos = self._parse_separated(
            text, skip_blank(text, pos + 1), depth + 1, self._parse_entry
        )
        pos = self._skip_trailing_comma(text, pos)

        if not text.startswith("}", pos):
            return None
        return Dict(entries), pos + 1

    def _parse_separated(
        self,
        text: str,
        pos: int,
        depth: int,
        item: Callable[[str, int, int], Match[T]],
    ) -> tuple[list[T], int]:
        """Zero or more items separated by commas, each followed by blanks.

        A comma that is not followed by another item is left unconsumed.
        """
        items: list[T] = []
        result = item(text, pos, depth)

        while result is not None:
            value, pos = result
            items.append(value)
            pos = skip_blank(text, pos)
            if not text.startswith(",", pos):
                break
            result = item(text, skip_blank(text, pos + 1), depth)

        return items, pos

    @staticmethod
    def _skip_trailing_comma(text: str, pos: int) -> int:
        if text.startswith(",", pos):
            return skip_blank(text, pos + 1)
        return pos

    def _parse_entry(self, text: str, pos: int, depth: int) -> Match[tuple[str, Value]]:
        key = self._parse_key(text, pos)
        if key is None:
            return None
        name, pos = key

        pos = skip_blank(text, pos)
        if not text.startswith(":", pos):
            return None

        result = self.parse_value(text, skip_blank(text, pos + 1), depth)
        if result is None:
            return None
        value, pos = result
        return (name, value), pos

    @staticmethod
    def _parse_key(text: str, pos: int) -> Match[str]:
        quoted = parse_string(text, pos)
        if quoted is not None:
            key, pos = quoted
            return key.value, pos
        return parse_identifier(text, pos)
