"""UTF-8 bytes to code points."""

from typing import Any, List

from .errors import IllegalStartingByteError, TruncatedError
from .streams import Source, adapt, binary_string_source


def _continuation(src: Source, sequence: List[int], length: int) -> List[int]:
    """Read the continuation bytes of a ``length``-byte sequence."""
    while len(sequence) < length:
        b = src()
        if b is None:
            raise TruncatedError(sequence)
        sequence.append(b)
    return sequence


def decode_utf8(src: Any, dst: Any) -> None:
    """Decode UTF-8 bytes from ``src`` and push each code point to ``dst``.

    ``src`` is a byte source, a bytes-like object, a sequence of ints or a
    binary string. ``dst`` is a code point sink or a list. Continuation bytes
    are masked, not validated.

    Raises IllegalStartingByteError on a byte that cannot start a sequence and
    TruncatedError, carrying the bytes read for it, when the source ends inside
    a sequence. Code points already pushed stay pushed.
    """
    src, dst = adapt(src, dst, text=binary_string_source)
    while True:
        a = src()
        if a is None:
            return
        if a & 0x80 == 0:
            dst(a)
        elif a & 0xE0 == 0xC0:
            _, b = _continuation(src, [a], 2)
            dst(((a & 0x1F) << 6) | (b & 0x3F))
        elif a & 0xF0 == 0xE0:
            _, b, c = _continuation(src, [a], 3)
            dst(((a & 0x0F) << 12) | ((b & 0x3F) << 6) | (c & 0x3F))
        elif a & 0xF8 == 0xF0:
            _, b, c, d = _continuation(src, [a], 4)
            dst(((a & 0x07) << 18) | ((b & 0x3F) << 12) | ((c & 0x3F) << 6) | (d & 0x3F))
        else:
            raise IllegalStartingByteError(a)
