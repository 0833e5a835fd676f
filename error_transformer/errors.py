"""Exceptions raised while normalizing error trees."""

from __future__ import annotations

from typing import Any


def format_path(path: tuple[str | int, ...]) -> str:
    """Render a node path as ``name.first[0]``; the root renders as ``<root>``."""
    if not path:
        return "<root>"
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


class ErrorTransformError(Exception):
    """Base class for error-transformer failures."""


class ShapeMismatchError(ErrorTransformError, TypeError):
    """A value is not a mapping, sequence or string where one is required."""

    def __init__(
        self, value: Any, path: tuple[str | int, ...] = (), expected: str = "mapping, sequence or string"
    ) -> None:
        self.value = value
        self.path = path
        self.expected = expected
        msg = f"expected {expected} at {format_path(path)}, got {type(value).__name__}: {value!r}"
        super().__init__(msg)
