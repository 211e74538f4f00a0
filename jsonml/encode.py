"""Encode a markup tree back into JsonML wire tokens."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .tree_model import (
    AttributeValue,
    BoolValue,
    Element,
    NullValue,
    NumberValue,
    StringValue,
    Tag,
    Text,
    float32_digits,
)


def encode_attribute_value(value: AttributeValue) -> Any:
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, NumberValue):
        # Non-finite values stay floats so dumps writes NaN/Infinity, which
        # json.loads reads back; strict JSON parsers reject them.
        return float(float32_digits(value.value))
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, NullValue):
        return None
    raise TypeError(f"unsupported attribute value: {value!r}")


def encode(element: Element) -> Any:
    """Flatten an element into the token form ``decode`` reads back."""
    if isinstance(element, Text):
        return element.text
    if isinstance(element, Tag):
        tokens: List[Any] = [element.name]
        if element.attributes:
            attributes: Dict[str, Any] = {
                key: encode_attribute_value(value) for key, value in element.attributes.items()
            }
            tokens.append(attributes)
        tokens.extend(encode(child) for child in element.children)
        return tokens
    raise TypeError(f"unsupported element: {element!r}")


def dumps(element: Element, *, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    return json.dumps(encode(element), ensure_ascii=ensure_ascii, indent=indent)
