"""
Serializer for fuzzyjson - renders a Value tree as compact, strict JSON.
"""

import json

from .values import Array, Bool, Dict, Float, Int, Null, Str, Value


def _quote(text: str, ensure_ascii: bool) -> str:
    return json.dumps(text, ensure_ascii=ensure_ascii)


def stringify(value: Value, ensure_ascii: bool = False) -> str:
    """
    Serialize a Value as canonical JSON text.

    Output has no whitespace. Dictionary entries keep their order, duplicate
    keys included. Strings and keys use the standard JSON escaping.
    """
    if isinstance(value, Null):
        return "null"

    if isinstance(value, Bool):
        return "true" if value.value else "false"

    if isinstance(value, Int):
        return str(value.value)

    if isinstance(value, Float):
        return repr(value.value)

    if isinstance(value, Str):
        return _quote(value.value, ensure_ascii)

    if isinstance(value, Array):
        return "[" + ",".join(stringify(item, ensure_ascii) for item in value.items) + "]"

    if isinstance(value, Dict):
        members = (
            f"{_quote(key, ensure_ascii)}:{stringify(item, ensure_ascii)}"
            for key, item in value.entries
        )
        return "{" + ",".join(members) + "}"

    raise TypeError(f"Object of type {type(value).__name__} is not a fuzzyjson value")
