"""Error tree traversal, flattening and join utilities."""

from .flatten import flatten_collection, get_non_empty_collections, transform_collection_flat
from .join import DEFAULT_SEPARATOR, create_string, unique_leaves
from .nodes import NodeKind, classify, has_map
from .traversal import transform_collection, transform_data


__all__ = [
    "DEFAULT_SEPARATOR",
    "NodeKind",
    "classify",
    "create_string",
    "flatten_collection",
    "get_non_empty_collections",
    "has_map",
    "transform_collection",
    "transform_collection_flat",
    "transform_data",
    "unique_leaves",
]
