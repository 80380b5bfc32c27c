"""Custom exception classes for higherorder."""

from typing import Optional


class HigherOrderError(Exception):
    """Base exception for higherorder errors."""

    pass


class InvalidInputKind(HigherOrderError, TypeError):
    """Raised when a label sequence holds something other than text.

    Attributes:
        index: Position of the offending element, or ``None`` when the
            sequence itself is the wrong kind (e.g. a bare ``str``).
        kind: Type name of the offending value.
    """

    def __init__(self, index: Optional[int], kind: str):
        self.index = index
        self.kind = kind
        if index is None:
            message = f"Labels must be a sequence of str, got a bare '{kind}'."
        else:
            message = f"Label at index {index} must be str, got '{kind}'."
        super().__init__(message)
