"""Flat-map style utilities."""

from itertools import chain
from typing import Callable, Iterable, List, Optional, TypeVar

__all__ = ["flat_map", "compact"]

_T = TypeVar("_T")
_U = TypeVar("_U")


def flat_map(func: Callable[[_T], Iterable[_U]], items: Iterable[_T]) -> List[_U]:
    """Apply ``func`` to every item and concatenate the results.

    Example:
        >>> flat_map(lambda word: list(word), ["ab", "c"])
        ['a', 'b', 'c']
    """
    return list(chain.from_iterable(map(func, items)))


def compact(items: Iterable[Optional[_T]]) -> List[_T]:
    """Drop ``None`` entries, keeping falsy values such as ``0``.

    Example:
        >>> compact([1, 2, None, 4, None, 5])
        [1, 2, 4, 5]
    """
    return flat_map(lambda item: [] if item is None else [item], items)
