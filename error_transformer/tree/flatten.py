"""Prune, flatten and join pipeline for fully collapsed keys."""

from __future__ import annotations

from typing import Any

from .join import DEFAULT_SEPARATOR
from .nodes import NodeKind, Path, classify
from .traversal import transform_collection


def _is_empty(value: Any, path: Path) -> bool:
    _ = classify(value, path)
    return len(value) == 0


def get_non_empty_collections(data: Any, path: Path = ()) -> dict[str, Any] | list[Any]:
    """Drop empty strings and empty containers from the immediate children of ``data``.

    A bare string is treated as a one-element list.
    """
    match classify(data, path):
        case NodeKind.MAPPING:
            return {key: value for key, value in data.items() if not _is_empty(value, (*path, key))}
        case NodeKind.SEQUENCE:
            return [item for index, item in enumerate(data) if not _is_empty(item, (*path, index))]
        case NodeKind.LEAF:
            return [data] if data else []


def _flatten(node: Any, path: Path, out: list[Any]) -> None:
    match classify(node, path):
        case NodeKind.MAPPING:
            for key, value in node.items():
                _flatten(value, (*path, key), out)
        case NodeKind.SEQUENCE:
            for index, item in enumerate(node):
                _flatten(item, (*path, index), out)
        case NodeKind.LEAF:
            out.append(node)


def flatten_collection(data: Any, path: Path = ()) -> list[Any]:
    """Return every leaf below ``data`` as one list, mapping values in key order."""
    flat: list[Any] = []
    _flatten(data, path, flat)
    return flat


def transform_collection_flat(data: Any, *, separator: str = DEFAULT_SEPARATOR, path: Path = ()) -> Any:
    """Collapse ``data`` into a single string regardless of its depth."""
    pruned = get_non_empty_collections(data, path)
    flat = flatten_collection(pruned, path)
    return transform_collection(flat, separator=separator, path=path)
