"""Enumerations shared across the package."""

from enum import Enum

__all__ = ["NameFormat"]


class NameFormat(str, Enum):
    """Available renderings of a ``(first, last)`` name pair.

    Attributes:
        LAST_FIRST: ``"Turing, Alan"``
        FIRST_LAST: ``"Alan Turing"``
        INITIALS_ONLY: ``"A. T."``
        FIRST_INITIAL_LAST_NAME: ``"A. Turing."``
    """

    LAST_FIRST = "last_first"
    FIRST_LAST = "first_last"
    INITIALS_ONLY = "initials_only"
    FIRST_INITIAL_LAST_NAME = "first_initial_last_name"
