"""Functional primitives for higherorder.

This module provides small higher-order collection utilities built on
``map``, ``filter`` and ``functools.reduce``. Utilities are stateless and
side-effect-free so they can be composed into pipelines.
"""

from higherorder.functional.partition import partition, partition_pairs, split_label
from higherorder.functional.mapping import (
    NameFormatter,
    format_names,
    square,
    square_all,
    square_all_loop,
)
from higherorder.functional.flattening import compact, flat_map
from higherorder.functional.reducing import (
    concat_words,
    honoree_roll,
    total,
    total_with_steps,
)
from higherorder.functional.filtering import containing, evens, odds

__all__ = [
    "partition",
    "partition_pairs",
    "split_label",
    "NameFormatter",
    "format_names",
    "square",
    "square_all",
    "square_all_loop",
    "compact",
    "flat_map",
    "concat_words",
    "honoree_roll",
    "total",
    "total_with_steps",
    "containing",
    "evens",
    "odds",
]
