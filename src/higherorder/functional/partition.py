"""Name-Extension Partitioner.

Splits delimited labels such as filenames into a table keyed by the first
segment, holding the last segment as value::

    >>> partition(["cute_cat.jpg", "essay.final.doc"])
    {'cute_cat': 'jpg', 'essay': 'doc'}

Labels without a delimiter are kept, with the whole label as both key and
value::

    >>> partition(["readme"])
    {'readme': 'readme'}

Duplicate keys follow last-write-wins.
"""

from functools import reduce
from typing import List, Optional, Tuple

from higherorder.core.types import Label, LabelSequence, PartitionTable, validate_labels
from higherorder.functional.flattening import flat_map
from higherorder.logger.logger import logger

__all__ = [
    "split_label",
    "partition",
    "partition_pairs",
]


def split_label(label: Label, delimiter: str = ".") -> Optional[Tuple[str, str]]:
    """Split a label into its first and last segments.

    Args:
        label: Text to split.
        delimiter: Segment separator. Must be non-empty.

    Returns:
        ``(first, last)``, or ``None`` when splitting yields no segments.

    Raises:
        ValueError: If ``delimiter`` is empty.
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string.")

    segments = label.split(delimiter)
    if len(segments) == 0:
        return None
    return segments[0], segments[-1]


def partition(labels: LabelSequence, delimiter: str = ".") -> PartitionTable:
    """Build a Partition Table from a sequence of labels.

    Args:
        labels: Ordered sequence of text labels.
        delimiter: Segment separator. Must be non-empty.

    Returns:
        Mapping of first segment to last segment. Later labels overwrite
        earlier ones sharing the same first segment.

    Raises:
        InvalidInputKind: If any label is not a ``str``.
        ValueError: If ``delimiter`` is empty.
    """
    validate_labels(labels)
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string.")

    def insert(table: PartitionTable, label: str) -> PartitionTable:
        pair = split_label(label, delimiter)
        if pair is None:
            return table
        key, value = pair
        table[key] = value
        return table

    table = reduce(insert, labels, {})
    logger.debug(f"Partitioned {len(labels)} labels into {len(table)} entries")
    return table


def partition_pairs(labels: LabelSequence, delimiter: str = ".") -> List[PartitionTable]:
    """Flat-map labels into one single-entry table per label.

    Args:
        labels: Ordered sequence of text labels.
        delimiter: Segment separator. Must be non-empty.

    Returns:
        List of ``{first: last}`` tables in input order. Duplicate keys are
        not merged.

    Raises:
        InvalidInputKind: If any label is not a ``str``.
        ValueError: If ``delimiter`` is empty.
    """
    validate_labels(labels)
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string.")

    def to_table(label: str) -> List[PartitionTable]:
        pair = split_label(label, delimiter)
        if pair is None:
            return []
        key, value = pair
        return [{key: value}]

    return flat_map(to_table, labels)
