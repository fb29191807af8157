"""
Value model for fuzzyjson.

A parsed document is a tree of immutable ``Value`` objects. Containers own
their children exclusively, so a tree never shares nodes or forms cycles.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional


class Value:
    """Base class of every parsed value."""


@dataclass(frozen=True)
class Null(Value):
    """The null value."""


@dataclass(frozen=True)
class Bool(Value):
    value: bool


@dataclass(frozen=True)
class Int(Value):
    """Signed integer within the 128-bit range."""

    value: int


@dataclass(frozen=True)
class Float(Value):
    value: float


@dataclass(frozen=True)
class Str(Value):
    value: str


@dataclass(frozen=True)
class Array(Value):
    """Ordered sequence of values."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Dict(Value):
    """Ordered (key, value) entries.

    Keys are not required to be unique; duplicates are kept as separate
    entries in insertion order.
    """

    entries: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "entries", tuple((key, value) for key, value in self.entries)
        )

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]


def to_python(
    value: Value,
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None,
) -> Any:
    """
    Convert a Value tree into plain Python data.

    Dictionaries become ``dict`` objects, where a later duplicate key replaces
    an earlier one. Pass ``object_pairs_hook`` to receive the ordered pair list
    instead, duplicates included (same contract as ``json.loads``).
    """
    if isinstance(value, Null):
        return None

    if isinstance(value, (Bool, Int, Float, Str)):
        return value.value

    if isinstance(value, Array):
        return [to_python(item, object_pairs_hook) for item in value.items]

    if isinstance(value, Dict):
        pairs = [(key, to_python(item, object_pairs_hook)) for key, item in value.entries]
        if object_pairs_hook:
            return object_pairs_hook(pairs)
        return dict(pairs)

    raise TypeError(f"Not a fuzzyjson value: {type(value).__name__}")
