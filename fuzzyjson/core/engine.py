"""
Public parsing API for fuzzyjson.
"""

from typing import Any, Callable, Optional, TextIO, Union

from ..security.exceptions import JSONDecodeError, NoValueFoundError
from ..utils.config import ParseConfig
from .scanner import Scanner
from .serializer import stringify
from .values import Value, to_python


def parse(text: Union[str, TextIO], config: Optional[ParseConfig] = None) -> Value:
    """
    Parse the first value found in fuzzy JSON text.

    Args:
        text: The text to scan, or a file-like object to read it from
        config: Optional ParseConfig for limits and logging

    Returns:
        The parsed Value tree

    Raises:
        NoValueFoundError: If no value is found anywhere in the text
        SecurityError: If the input exceeds the size limit
    """
    if hasattr(text, "read"):
        text = text.read()

    if not isinstance(text, str):
        raise ValueError("Input must be a string or file-like object")

    return Scanner(config).scan(text)


def fson(text: str, config: Optional[ParseConfig] = None) -> Optional[str]:
    """Convert fuzzy JSON text to canonical JSON text, or None if no value is found."""
    try:
        return stringify(parse(text, config))
    except NoValueFoundError:
        return None


def loads(
    s: Union[str, bytes, bytearray],
    *,
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize fuzzy JSON text to plain Python data (like json.loads).

    Args:
        s: Text to parse (str, or UTF-8 bytes/bytearray)
        object_pairs_hook: Called with the ordered pairs of every dictionary
        config: Optional ParseConfig

    Returns:
        Parsed Python data structure

    Raises:
        JSONDecodeError: If no value is found (a json.JSONDecodeError)
        SecurityError: If the input exceeds the size limit
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")

    try:
        value = parse(s, config)
    except NoValueFoundError as e:
        raise JSONDecodeError(e.message, s, 0) from e

    return to_python(value, object_pairs_hook)


def load(
    fp: TextIO,
    *,
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """Same as loads() but reads from a file-like object."""
    return loads(fp.read(), object_pairs_hook=object_pairs_hook, config=config)


def dumps(value: Value, *, ensure_ascii: bool = False) -> str:
    """Serialize a Value to canonical JSON text."""
    return stringify(value, ensure_ascii=ensure_ascii)
