"""Map-based transforms over numbers and name pairs."""

from typing import Callable, Iterable, List, Union

from higherorder.core.enums import NameFormat
from higherorder.core.types import NameFormatterFn, NamePairs

__all__ = [
    "square",
    "square_all",
    "square_all_loop",
    "NameFormatter",
    "format_names",
]


def square(x: int) -> int:
    return x * x


def square_all(numbers: Iterable[int]) -> List[int]:
    """Square every number using ``map``."""
    return list(map(square, numbers))


def square_all_loop(numbers: Iterable[int]) -> List[int]:
    """Square every number with an explicit loop. Equivalent to :func:`square_all`."""
    squared = []
    for n in numbers:
        squared.append(square(n))
    return squared


def _initial(name: str) -> str:
    if not name:
        raise ValueError("Cannot take the initial of an empty name.")
    return name[0]


class NameFormatter:
    """Renderings of a ``(first, last)`` name pair.

    Each formatter is a plain function of two strings so it can be passed
    straight to :func:`format_names` or to ``map``.
    """

    @staticmethod
    def last_first(first: str, last: str) -> str:
        return f"{last}, {first}"

    @staticmethod
    def first_last(first: str, last: str) -> str:
        return f"{first} {last}"

    @staticmethod
    def initials_only(first: str, last: str) -> str:
        return f"{_initial(first)}. {_initial(last)}."

    @staticmethod
    def first_initial_last_name(first: str, last: str) -> str:
        return f"{_initial(first)}. {last}."

    @classmethod
    def get(cls, fmt: NameFormat) -> NameFormatterFn:
        """Return the formatter registered for ``fmt``."""
        return getattr(cls, NameFormat(fmt).value)


def format_names(
    names: NamePairs,
    formatter: Union[NameFormat, Callable[[str, str], str]],
) -> List[str]:
    """Render every ``first -> last`` pair of ``names``.

    Args:
        names: Mapping of first name to last name. Left unchanged.
        formatter: A :class:`NameFormat` member or a callable taking
            ``(first, last)``.

    Returns:
        Rendered names, in the mapping's iteration order.

    Example:
        >>> format_names({"Ada": "Lovelace"}, NameFormat.LAST_FIRST)
        ['Lovelace, Ada']
    """
    if isinstance(formatter, NameFormat):
        formatter = NameFormatter.get(formatter)
    return [formatter(first, last) for first, last in names.items()]
