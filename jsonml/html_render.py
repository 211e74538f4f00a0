"""HTML serialization for the JsonML markup tree.

Text nodes are written verbatim. Callers that hold untrusted text must
escape it before building the tree; only attribute values are escaped here.
"""

from __future__ import annotations

import html
import math
from decimal import Decimal
from typing import Dict, List, Sequence

from .errors import InvalidAttributeNameError, InvalidTagNameError
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

# https://html.spec.whatwg.org/multipage/syntax.html#attributes-2
_FORBIDDEN_ATTRIBUTE_CHARS = frozenset(" \"'>/=")

# Left alone by html.escape but still unsafe in an unquoted attribute value.
_UNQUOTED_ATTRIBUTE_ESCAPES = str.maketrans(
    {char: f"&#x{ord(char):02X};" for char in "=`\t\n\f\r "}
)


def is_noncharacter(char: str) -> bool:
    code_point = ord(char)
    return 0xFDD0 <= code_point <= 0xFDEF or (code_point & 0xFFFE) == 0xFFFE


def validate_tag_name(name: str) -> None:
    # https://html.spec.whatwg.org/multipage/syntax.html#syntax-tag-name
    if not all(char.isascii() and char.isalnum() for char in name):
        raise InvalidTagNameError(f"invalid tag name: {name!r}")


def validate_attribute_name(name: str) -> None:
    for char in name:
        if char in _FORBIDDEN_ATTRIBUTE_CHARS or is_noncharacter(char):
            raise InvalidAttributeNameError(f"invalid attribute name: {name!r}")


def escape_attribute_value(text: str) -> str:
    return html.escape(text, quote=True).translate(_UNQUOTED_ATTRIBUTE_ESCAPES)


def _format_number(value: float) -> str:
    digits = float32_digits(value)
    if math.isnan(value) or math.isinf(value):
        return digits
    return format(Decimal(digits), "f")


def render_attribute_value(value: AttributeValue) -> str:
    if isinstance(value, StringValue):
        return escape_attribute_value(value.value)
    if isinstance(value, NumberValue):
        return _format_number(value.value)
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, NullValue):
        return "null"
    raise TypeError(f"unsupported attribute value: {value!r}")


def _render_attrs(attributes: Dict[str, AttributeValue]) -> str:
    parts: List[str] = []
    for name, value in attributes.items():
        validate_attribute_name(name)
        parts.append(f' {name}="{render_attribute_value(value)}"')
    return "".join(parts)


def _render_children(children: Sequence[Element]) -> str:
    return "".join(render_html(child) for child in children)


def render_html(element: Element) -> str:
    """Render an element as HTML, raising on the first invalid name found."""
    if isinstance(element, Text):
        return element.text
    if isinstance(element, Tag):
        validate_tag_name(element.name)
        attrs = _render_attrs(element.attributes)
        children = _render_children(element.children)
        return f"<{element.name}{attrs}>{children}</{element.name}>"
    raise TypeError(f"unsupported element: {element!r}")
