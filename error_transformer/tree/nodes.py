"""Shape dispatch for error tree nodes."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any

from error_transformer.errors import ShapeMismatchError


logger = logging.getLogger(__name__)

Path = tuple[str | int, ...]


class NodeKind(enum.Enum):
    """The three shapes an error tree node can take."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    LEAF = "leaf"


def classify(node: Any, path: Path = ()) -> NodeKind:
    """Return the kind of ``node`` or raise ``ShapeMismatchError``."""
    if isinstance(node, Mapping):
        return NodeKind.MAPPING
    if isinstance(node, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(node, str):
        return NodeKind.LEAF
    logger.debug("unclassifiable node at %s: %r", path, node)
    raise ShapeMismatchError(node, path)


def has_map(node: Any, path: Path = ()) -> bool:
    """Return True when the node is a mapping or holds one among its immediate elements.

    Only one level is inspected; deeper levels are re-checked as the
    traversal reaches them.
    """
    match classify(node, path):
        case NodeKind.MAPPING:
            return True
        case NodeKind.SEQUENCE:
            return any(isinstance(item, Mapping) for item in node)
        case NodeKind.LEAF:
            return False
