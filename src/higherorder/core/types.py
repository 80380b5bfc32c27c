"""Reusable type definitions for the higherorder package.

Type Aliases:
    Label: A single input string, possibly containing delimiters.
    LabelSequence: An ordered, homogeneous sequence of labels.
    PartitionTable: Mapping from a label's first segment to its last segment.
    NamePairs: Mapping from first name to last name.
    NameFormatterFn: A callable rendering a ``(first, last)`` pair to text.
"""

from typing import Any, Callable, Dict, Mapping, Sequence

from higherorder.core.exceptions import InvalidInputKind

__all__ = [
    "Label",
    "LabelSequence",
    "PartitionTable",
    "NamePairs",
    "NameFormatterFn",
    "validate_labels",
]

Label = str
LabelSequence = Sequence[Label]
PartitionTable = Dict[str, str]
NamePairs = Mapping[str, str]
NameFormatterFn = Callable[[str, str], str]


def validate_labels(labels: Sequence[Any]) -> LabelSequence:
    """Validator to ensure every element of a label sequence is text.

    Args:
        labels: The sequence to validate.

    Returns:
        The original sequence if validation passes.

    Raises:
        InvalidInputKind: If ``labels`` is itself a ``str`` or ``bytes``, or
            if any element is not a ``str``.
    """
    # A bare string is a Sequence[str] of its characters
    if isinstance(labels, (str, bytes)):
        raise InvalidInputKind(None, type(labels).__name__)
    for index, label in enumerate(labels):
        if not isinstance(label, str):
            raise InvalidInputKind(index, type(label).__name__)
    return labels
