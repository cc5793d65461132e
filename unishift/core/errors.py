"""Exceptions raised by the conversion routines."""

from typing import Iterable, Tuple


class UnishiftError(Exception):
    """Base class for every conversion failure."""


class IllegalArgumentsError(UnishiftError, TypeError):
    """A source or sink is not one of the recognized forms."""

    def __init__(self, *args: object) -> None:
        kinds = ", ".join(type(arg).__name__ for arg in args)
        super().__init__(f"Illegal arguments: {kinds}")


class IllegalStartingByteError(UnishiftError, ValueError):
    """A byte does not start any UTF-8 sequence.

    ``code_points`` holds what was decoded ahead of the byte when the decoding
    went through a buffer the caller never sees.
    """

    def __init__(self, byte: int) -> None:
        super().__init__(f"Illegal starting byte: {byte}")
        self.byte = byte
        self.code_points: Tuple[int, ...] = ()


class IllegalCodePointError(UnishiftError, ValueError):
    """A code point lies outside [0, 0x10FFFF]."""

    def __init__(self, code_point: int) -> None:
        super().__init__(f"Illegal code point: {code_point}")
        self.code_point = code_point


class TruncatedError(UnishiftError):
    """The source ended inside a multi-byte sequence.

    ``bytes`` holds the partial sequence, leading byte first, so the caller
    can prepend it to the next batch of input and decode again.
    """

    def __init__(self, partial: Iterable[int]) -> None:
        self.bytes: Tuple[int, ...] = tuple(partial)
        super().__init__(", ".join(str(b) for b in self.bytes))
