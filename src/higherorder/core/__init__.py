"""Core types, enums and exceptions."""

from higherorder.core.enums import NameFormat
from higherorder.core.exceptions import HigherOrderError, InvalidInputKind
from higherorder.core.types import LabelSequence, PartitionTable, validate_labels

__all__ = [
    "NameFormat",
    "HigherOrderError",
    "InvalidInputKind",
    "LabelSequence",
    "PartitionTable",
    "validate_labels",
]
