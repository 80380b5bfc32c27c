"""Higher-order collection primitives."""

from higherorder.functional.partition import partition
from higherorder.core.exceptions import HigherOrderError, InvalidInputKind

__all__ = [
    "partition",
    "HigherOrderError",
    "InvalidInputKind",
]
