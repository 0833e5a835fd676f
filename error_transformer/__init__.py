"""error-transformer - normalize nested validation errors into display strings"""

import logging

from ._version import version as __version__
from .errors import ErrorTransformError, ShapeMismatchError
from .transformer import ErrorTransformer, transform_errors
from .tree import NodeKind


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ErrorTransformError",
    "ErrorTransformer",
    "NodeKind",
    "ShapeMismatchError",
    "__version__",
    "transform_errors",
]
