"""Reduce-based aggregations.

All folds here go through :func:`functools.reduce` with an explicit initial
value, so empty inputs return that value instead of raising.
"""

import operator
from functools import reduce
from typing import Iterable, List, Optional, Tuple

from higherorder.core.types import NamePairs
from higherorder.functional.mapping import NameFormatter, format_names
from higherorder.logger.logger import logger

__all__ = [
    "total",
    "total_with_steps",
    "concat_words",
    "honoree_roll",
]


def total(numbers: Iterable[int]) -> int:
    """Sum ``numbers`` starting from ``0``.

    Example:
        >>> total([1, 1, 2, 3, 5, 8, 13, 21])
        54
    """
    return reduce(operator.add, numbers, 0)


def total_with_steps(numbers: Iterable[int]) -> Tuple[int, List[str]]:
    """Sum ``numbers`` while recording every intermediate addition.

    Args:
        numbers: Integers to sum.

    Returns:
        The sum and the list of steps rendered as
        ``"<running> + <current> = <next>"``.
    """
    steps: List[str] = []

    def add(running_total: int, current: int) -> int:
        step = f"{running_total} + {current} = {running_total + current}"
        logger.debug(step)
        steps.append(step)
        return running_total + current

    return reduce(add, numbers, 0), steps


def concat_words(words: Iterable[str], separator: str = " ") -> str:
    """Join ``words`` with ``separator``.

    Unlike a fold seeded with ``""`` that always prepends the separator,
    the first word is taken as-is, so the result has no leading separator::

        >>> concat_words(["map", "me", "maybe"])
        'map me maybe'

    An empty string is still joined, so ``["", "a"]`` gives ``" a"``.
    """

    def join(sentence: Optional[str], word: str) -> str:
        return word if sentence is None else sentence + separator + word

    sentence = reduce(join, words, None)
    return "" if sentence is None else sentence


def honoree_roll(names: NamePairs) -> str:
    """Render one ``"Honoree: <name>"`` line per name pair.

    Names are formatted with :meth:`NameFormatter.first_initial_last_name`.

    Example:
        >>> honoree_roll({"Ada": "Lovelace"})
        'Honoree: A. Lovelace.\\n'
    """
    formatted = format_names(names, NameFormatter.first_initial_last_name)
    return reduce(lambda roll, name: roll + "Honoree: " + name + "\n", formatted, "")
