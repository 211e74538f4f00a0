"""Decode JsonML wire tokens into a markup tree.

Tokens are the plain Python values produced by ``json.loads``: ``str``,
``int``/``float``, ``bool``, ``None``, ``list`` and ``dict``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .errors import DecodeError, MalformedSequenceError, MissingNameError, TokenTypeError
from .tree_model import (
    AttributeValue,
    BoolValue,
    Element,
    NullValue,
    NumberValue,
    StringValue,
    Tag,
    Text,
)


def _describe(token: Any) -> str:
    if token is None:
        return "null"
    if isinstance(token, bool):
        return f"boolean `{str(token).lower()}`"
    if isinstance(token, (int, float)):
        return f"number `{token}`"
    if isinstance(token, str):
        return f"string {token!r}"
    if isinstance(token, (list, tuple)):
        return "sequence"
    if isinstance(token, dict):
        return "map"
    return type(token).__name__


def decode_attribute_value(token: Any) -> AttributeValue:
    if isinstance(token, str):
        return StringValue(token)
    # bool is checked before the numeric types because it subclasses int.
    if isinstance(token, bool):
        return BoolValue(token)
    if isinstance(token, (int, float)):
        return NumberValue(token)
    if token is None:
        return NullValue()
    raise TokenTypeError(f"invalid type: {_describe(token)}, expected an attribute value")


def _as_attributes(token: Any) -> Optional[Dict[str, AttributeValue]]:
    """Return the token as an attributes mapping, or None if it has another shape."""
    if not isinstance(token, dict):
        return None
    attributes: Dict[str, AttributeValue] = {}
    for key, value in token.items():
        if not isinstance(key, str):
            return None
        try:
            attributes[key] = decode_attribute_value(value)
        except TokenTypeError:
            return None
    return attributes


@dataclass(frozen=True)
class AttributesOrChild:
    """Outcome of classifying the token that follows a tag name.

    Exactly one of ``attributes`` and ``child`` is set.
    """

    attributes: Optional[Dict[str, AttributeValue]] = None
    child: Optional[Element] = None


def resolve_attributes_or_child(token: Any) -> AttributesOrChild:
    """Classify the token after a tag name as attributes or as the first child.

    The wire format carries no marker for this position, so the attributes
    shape is always tried first and the element shape only when it fails.
    """
    attributes = _as_attributes(token)
    if attributes is not None:
        return AttributesOrChild(attributes=attributes)

    if isinstance(token, (str, list, tuple)):
        try:
            return AttributesOrChild(child=decode(token))
        except DecodeError as exc:
            raise MalformedSequenceError(
                f"data did not match attributes or a JsonML element: {exc}"
            ) from exc

    raise MalformedSequenceError(
        f"invalid type: {_describe(token)}, expected attributes or a JsonML element"
    )


def _decode_tag(tokens: Sequence[Any]) -> Tag:
    if not tokens:
        raise MissingNameError("missing field `name`")

    name = tokens[0]
    if not isinstance(name, str):
        raise TokenTypeError(f"invalid type: {_describe(name)}, expected a tag name string")

    tag = Tag(name=name)
    if len(tokens) > 1:
        resolved = resolve_attributes_or_child(tokens[1])
        if resolved.attributes is not None:
            tag.attributes = resolved.attributes
        else:
            tag.children.append(resolved.child)  # type: ignore[arg-type]

    for token in tokens[2:]:
        tag.children.append(decode(token))
    return tag


def decode(token: Any) -> Element:
    """Build a markup tree from a JsonML token."""
    if isinstance(token, str):
        return Text(token)
    if isinstance(token, (list, tuple)):
        return _decode_tag(token)
    raise TokenTypeError(
        f"invalid type: {_describe(token)}, expected JsonML element, which is tag or string"
    )


def loads(text: str) -> Element:
    """Parse JSON text and decode it. JSON syntax errors propagate unchanged."""
    return decode(json.loads(text))
