"""Whole-tree rewrites that return new trees and leave the input untouched."""

from __future__ import annotations

from typing import Callable

from .tree_model import Element, Tag

ElementFn = Callable[[Element], Element]


def map_bottom_up(element: Element, function: ElementFn) -> Element:
    """Rewrite children first, then pass each rebuilt tag to ``function``.

    Text leaves are returned as they are; ``function`` only sees tags.
    """
    if isinstance(element, Tag):
        rebuilt = Tag(
            name=element.name,
            attributes=dict(element.attributes),
            children=[map_bottom_up(child, function) for child in element.children],
        )
        return function(rebuilt)
    return element


def map_top_down(element: Element, function: ElementFn) -> Element:
    """Apply ``function`` to a node, then descend into the result's children."""
    result = function(element)
    if isinstance(result, Tag):
        return Tag(
            name=result.name,
            attributes=dict(result.attributes),
            children=[map_top_down(child, function) for child in result.children],
        )
    return result
