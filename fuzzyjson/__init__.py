"""
fuzzyjson - turns loosely written, human-authored text into strict JSON.

fuzzyjson accepts unquoted keys, single-quoted strings, trailing commas,
line comments (``//``, ``#``, ``;``, ``--``) and alternate spellings of
null/true/false. It also finds a value buried in surrounding prose:
"PI is 3.141" parses as the float 3.141.

Quick Start:
    import fuzzyjson

    fuzzyjson.fson("{x: 42, 'y': [nil, yes,],}")  # '{"x":42,"y":[null,true]}'
    fuzzyjson.loads("The answer is 42.")           # 42

    # Typed value tree, duplicate keys preserved
    value = fuzzyjson.parse("{a: 1, a: 2}")
"""

from .core.engine import dumps, fson, load, loads, parse
from .core.scanner import ScanMatch, Scanner
from .core.values import Array, Bool, Dict, Float, Int, Null, Str, Value, to_python
from .security.exceptions import (
    FuzzyJSONError,
    JSONDecodeError,
    NoValueFoundError,
    ParseError,
    SecurityError,
)
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"

__all__ = [
    # Conversion functions
    "fson", "parse", "loads", "load", "dumps",
    # Value model
    "Value", "Null", "Bool", "Int", "Float", "Str", "Array", "Dict", "to_python",
    # Scanning
    "Scanner", "ScanMatch",
    # Configuration classes
    "ParseConfig", "ParseLimits",
    # Exception classes
    "FuzzyJSONError", "ParseError", "NoValueFoundError", "SecurityError",
    "JSONDecodeError",
]
