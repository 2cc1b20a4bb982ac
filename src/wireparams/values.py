"""Scalar values carried by a ``MultiValueMap``.

A wire token becomes either an ``IntegerValue`` or a ``StringValue``.
The decision is syntactic and made once, at parse time: a token made
only of ASCII digits is an integer, everything else is a string.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class IntegerValue:
    """A whole number parsed from an all-digit token."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class StringValue:
    """Any token that is not all digits, kept verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


Value: TypeAlias = IntegerValue | StringValue


def coerce(text: str) -> Value:
    """Turn a raw wire token into a typed scalar. Never raises.

    ``"42"`` becomes ``IntegerValue(42)``; ``"-1"``, ``"4.2"``, ``""``
    and non-ASCII digits such as ``"²"`` stay strings.
    """
    if text and text.isascii() and text.isdigit():
        return IntegerValue(int(text))
    return StringValue(text)


def render(value: Value) -> str:
    """Return the wire text for *value*."""
    if isinstance(value, IntegerValue):
        return str(value.value)
    return value.value


def to_value(obj: object) -> Value:
    """Lift a caller-supplied Python scalar into a ``Value``.

    ``int`` maps to ``IntegerValue`` and ``str`` to ``StringValue``.
    Strings are taken as-is: ``to_value("1")`` is a string, only
    decoding applies the all-digits rule.

    Raises:
        TypeError: For ``bool`` or any other type.
    """
    if isinstance(obj, (IntegerValue, StringValue)):
        return obj
    if isinstance(obj, bool):
        msg = "bool is not a supported parameter value; pass 'true'/'false' or 1/0"
        raise TypeError(msg)
    if isinstance(obj, int):
        return IntegerValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    msg = f"Unsupported parameter value type: {type(obj).__name__}"
    raise TypeError(msg)
