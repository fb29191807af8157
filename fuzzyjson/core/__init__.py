"""
fuzzyjson Core Parsing Engine.

This module provides the grammar, the scanning driver and the serializer.
"""

from .engine import dumps, fson, load, loads, parse
from .grammar import Grammar
from .scanner import ScanMatch, Scanner
from .serializer import stringify
from .values import Array, Bool, Dict, Float, Int, Null, Str, Value, to_python

__all__ = [
    "parse", "fson", "loads", "load", "dumps",
    "Grammar", "Scanner", "ScanMatch", "stringify",
    "Value", "Null", "Bool", "Int", "Float", "Str", "Array", "Dict", "to_python",
]
