"""Code points to UTF-8 bytes, and UTF-8 size calculation."""

from typing import Any

from .errors import IllegalCodePointError
from .streams import Sink, adapt, as_source, code_point_source

MAX_CODE_POINT = 0x10FFFF


def check_code_point(cp: int) -> int:
    if cp < 0 or cp > MAX_CODE_POINT:
        raise IllegalCodePointError(cp)
    return cp


def utf8_length(cp: int) -> int:
    """Return how many UTF-8 bytes ``cp`` needs."""
    check_code_point(cp)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def _emit(cp: int, dst: Sink) -> None:
    n = utf8_length(cp)
    if n == 1:
        dst(cp & 0x7F)
    elif n == 2:
        dst(((cp >> 6) & 0x1F) | 0xC0)
        dst((cp & 0x3F) | 0x80)
    elif n == 3:
        dst(((cp >> 12) & 0x0F) | 0xE0)
        dst(((cp >> 6) & 0x3F) | 0x80)
        dst((cp & 0x3F) | 0x80)
    else:
        dst(((cp >> 18) & 0x07) | 0xF0)
        dst(((cp >> 12) & 0x3F) | 0x80)
        dst(((cp >> 6) & 0x3F) | 0x80)
        dst((cp & 0x3F) | 0x80)


def encode_utf8(src: Any, dst: Any) -> None:
    """Encode code points from ``src`` and push each UTF-8 byte to ``dst``.

    Surrogate-range code points are encoded like any other value.
    Raises IllegalCodePointError for values outside [0, 0x10FFFF]; bytes of
    earlier code points stay pushed.
    """
    src, dst = adapt(src, dst, text=code_point_source)
    while True:
        cp = src()
        if cp is None:
            return
        _emit(cp, dst)


def encode_utf8_to_bytes(src: Any) -> bytes:
    """Encode code points from ``src`` and return the UTF-8 bytes."""
    out = bytearray()
    encode_utf8(src, out)
    return bytes(out)


def calculate_utf8(src: Any) -> int:
    """Return the number of UTF-8 bytes needed for the code points in ``src``."""
    src = as_source(src, text=code_point_source)
    n = 0
    while True:
        cp = src()
        if cp is None:
            return n
        n += utf8_length(cp)
