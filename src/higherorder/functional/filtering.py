"""Filter-based selections."""

from typing import Iterable, List

__all__ = ["evens", "odds", "containing"]


def evens(numbers: Iterable[int]) -> List[int]:
    return list(filter(lambda number: number % 2 == 0, numbers))


def odds(numbers: Iterable[int]) -> List[int]:
    return list(filter(lambda number: number % 2 != 0, numbers))


def containing(words: Iterable[str], substring: str) -> List[str]:
    """Keep the words that contain ``substring`` (case-sensitive).

    Example:
        >>> containing(["map", "me", "maybe", "so"], "m")
        ['map', 'me', 'maybe']
    """
    return [word for word in words if substring in word]
