"""Collapse leaf error messages into one display string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .nodes import NodeKind, classify


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .nodes import Path


DEFAULT_SEPARATOR = ". "


def _iter_leaves(node: Any, path: Path) -> Iterator[str]:
    match classify(node, path):
        case NodeKind.LEAF:
            yield node
        case NodeKind.SEQUENCE:
            for index, item in enumerate(node):
                yield from _iter_leaves(item, (*path, index))
        case NodeKind.MAPPING:
            for key, value in node.items():
                yield from _iter_leaves(value, (*path, key))


def unique_leaves(leaves: Iterable[Any], path: Path = ()) -> list[str]:
    """Return the leaves below ``leaves`` once each, in first-seen order.

    Blank leaves are dropped.
    """
    found = (leaf for index, item in enumerate(leaves) for leaf in _iter_leaves(item, (*path, index)))
    return [leaf for leaf in dict.fromkeys(found) if leaf.strip()]


def create_string(leaves: Iterable[Any], separator: str = DEFAULT_SEPARATOR, path: Path = ()) -> str:
    """Join deduplicated leaves with ``separator``.

    A trailing empty sentinel is joined in and then trimmed off together with
    the separator it produced, so the result never ends with a separator.
    An empty input gives an empty string.
    """
    joined = separator.join([*unique_leaves(leaves, path), ""])
    return joined.removesuffix(separator).strip()
