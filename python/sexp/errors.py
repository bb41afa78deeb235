"""Exception types raised by the sexp package."""

from __future__ import annotations


class SExpError(Exception):
    """Base class for every error raised while reading or writing S-expressions."""


class MalformedExpression(SExpError, ValueError):
    """The source text is not a single well-formed S-expression.

    Attributes:
        offset: Character offset into the source where the problem was
            detected, or ``None`` when it was only detectable at end of input
            (unclosed parenthesis, empty document, several top-level forms).

    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class SerializationError(SExpError, TypeError):
    """A value has no S-expression representation.

    Attributes:
        type_name: ``__name__`` of the offending value's type.

    """

    def __init__(self, value: object) -> None:
        self.type_name = type(value).__name__
        super().__init__(f"Unable to serialize value of type {self.type_name}")
