"""Top-level dispatch from an error mapping to display-ready messages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import ShapeMismatchError
from .tree import DEFAULT_SEPARATOR, transform_collection, transform_collection_flat


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)


def keep_nested(keys_to_keep_nested: Iterable[str], key: str) -> bool:
    """Return True when ``key`` names a value whose nested shape is preserved."""
    return key in keys_to_keep_nested


def _as_mapping(errors: Any) -> Mapping[str, Any]:
    if isinstance(errors, Mapping):
        return errors
    if isinstance(errors, (str, bytes)):
        raise ShapeMismatchError(errors, expected="mapping")
    try:
        pairs = list(errors)
    except TypeError as exc:
        raise ShapeMismatchError(errors, expected="mapping") from exc
    for index, pair in enumerate(pairs):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ShapeMismatchError(pair, (index,), expected="(key, value) pair")
    return dict(pairs)


class ErrorTransformer:
    """Normalize error trees into display strings, keeping some keys nested."""

    def __init__(self, keys_to_keep_nested: Iterable[str] = (), separator: str = DEFAULT_SEPARATOR) -> None:
        super().__init__()
        if isinstance(keys_to_keep_nested, str):
            msg = "keys_to_keep_nested must be a collection of keys, not a string"
            raise TypeError(msg)
        keys = frozenset(keys_to_keep_nested)
        if any(not isinstance(key, str) for key in keys):
            msg = "keys_to_keep_nested must only contain strings"
            raise TypeError(msg)
        if not separator:
            msg = "separator must not be empty"
            raise ValueError(msg)

        self.keys_to_keep_nested = keys
        self.separator = separator

    def __repr__(self) -> str:
        keys = sorted(self.keys_to_keep_nested)
        return f"{type(self).__name__}(keys_to_keep_nested={keys!r}, separator={self.separator!r})"

    def transform(self, errors: Any) -> dict[str, Any]:
        """Return a new mapping with every value joined or partially flattened.

        Values under kept-nested keys keep their mapping structure and only
        collapse where a subtree holds no further mappings. All other values
        collapse into one string.
        """
        transformed: dict[str, Any] = {}
        for key, value in _as_mapping(errors).items():
            if keep_nested(self.keys_to_keep_nested, key):
                logger.debug("keeping %r nested", key)
                transformed[key] = transform_collection(value, separator=self.separator, path=(key,))
            else:
                logger.debug("flattening %r", key)
                transformed[key] = transform_collection_flat(value, separator=self.separator, path=(key,))
        return transformed

    __call__ = transform


def transform_errors(
    errors: Any, keys_to_keep_nested: Iterable[str] = (), *, separator: str = DEFAULT_SEPARATOR
) -> dict[str, Any]:
    """Transform ``errors`` with a one-off :class:`ErrorTransformer`."""
    return ErrorTransformer(keys_to_keep_nested, separator).transform(errors)
