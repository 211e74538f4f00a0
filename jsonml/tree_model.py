"""Markup tree data model for JsonML documents."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Dict, List


def to_float32(value: float) -> float:
    """Round a number to the nearest IEEE-754 binary32 value.

    Magnitudes outside binary32 range, including ints too large for a
    Python float, saturate to infinity.
    """
    try:
        return struct.unpack("f", struct.pack("f", float(value)))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def float32_digits(value: float) -> str:
    """Shortest decimal string that rounds back to the same binary32 value.

    May use exponent notation (``1e+20``); callers that need plain decimal
    text convert it themselves.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    for precision in range(1, 10):
        digits = f"{value:.{precision}g}"
        if to_float32(float(digits)) == value:
            return digits
    return repr(value)


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class NumberValue:
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_float32(self.value))


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NullValue:
    pass


AttributeValue = StringValue | NumberValue | BoolValue | NullValue


@dataclass
class Text:
    text: str = ""


@dataclass
class Tag:
    name: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)


Element = Text | Tag


def text_from_str(text: str) -> Text:
    return Text(text)
