"""Recursive descent over error trees."""

from __future__ import annotations

from typing import Any

from .join import DEFAULT_SEPARATOR, create_string
from .nodes import NodeKind, Path, classify, has_map


def transform_data(node: Any, *, separator: str = DEFAULT_SEPARATOR, path: Path = ()) -> dict[str, Any] | list[Any]:
    """Rebuild a nested node with every immediate child transformed."""
    match classify(node, path):
        case NodeKind.MAPPING:
            return {
                key: transform_collection(value, separator=separator, path=(*path, key)) for key, value in node.items()
            }
        case NodeKind.SEQUENCE:
            return [
                transform_collection(item, separator=separator, path=(*path, index)) for index, item in enumerate(node)
            ]
        case NodeKind.LEAF:
            return node


def _holds_map(node: Any, path: Path) -> bool:
    if has_map(node, path):
        return True
    if classify(node, path) is NodeKind.LEAF:
        return False
    return any(_holds_map(item, (*path, index)) for index, item in enumerate(node))


def transform_collection(node: Any, *, separator: str = DEFAULT_SEPARATOR, path: Path = ()) -> Any:
    """Recurse into nodes that still hold mappings, join the rest into a string.

    A sequence whose nested sequences reach a mapping is rebuilt element by
    element, and each element is checked again one level at a time.

    Strings are already terminal and come back unchanged, so transforming an
    already transformed tree is a no-op.
    """
    if has_map(node, path):
        return transform_data(node, separator=separator, path=path)
    if classify(node, path) is NodeKind.LEAF:
        return node
    if any(_holds_map(item, (*path, index)) for index, item in enumerate(node)):
        return transform_data(node, separator=separator, path=path)
    return create_string(node, separator, path)
