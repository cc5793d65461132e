"""Conversion between UTF-16 code units and code points."""

from typing import Any, List

from .encoder import check_code_point, utf8_length
from .streams import adapt, code_point_source, units_to_string

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def utf16_to_utf8(src: Any, dst: Any) -> None:
    """Convert UTF-16 code units from ``src`` to code points pushed to ``dst``.

    A high surrogate followed by a low surrogate becomes one supplementary
    code point. Unpaired surrogates are passed through unchanged, and a unit
    read as lookahead that does not complete a pair is processed next.
    """
    src, dst = adapt(src, dst)
    lookahead = None
    while True:
        c1 = src() if lookahead is None else lookahead
        lookahead = None
        if c1 is None:
            return
        if c1 in HIGH_SURROGATES:
            c2 = src()
            if c2 is None:
                dst(c1)
                return
            if c2 in LOW_SURROGATES:
                dst((c1 - 0xD800) * 0x400 + (c2 - 0xDC00) + 0x10000)
                continue
            lookahead = c2
        dst(c1)


def calculate_utf16_as_utf8(src: Any) -> int:
    """Return the number of UTF-8 bytes needed for the UTF-16 units in ``src``."""
    total = [0]

    def count(cp: int) -> None:
        total[0] += utf8_length(cp)

    utf16_to_utf8(src, count)
    return total[0]


def utf8_to_utf16(src: Any, dst: Any) -> None:
    """Convert code points from ``src`` to UTF-16 code units pushed to ``dst``.

    Raises IllegalCodePointError for values outside [0, 0x10FFFF].
    """
    src, dst = adapt(src, dst, text=code_point_source)
    while True:
        cp = src()
        if cp is None:
            return
        if check_code_point(cp) <= 0xFFFF:
            dst(cp)
        else:
            cp -= 0x10000
            dst((cp >> 10) + 0xD800)
            dst((cp % 0x400) + 0xDC00)


def utf8_to_utf16_string(src: Any) -> str:
    """Convert code points from ``src`` and return them as a ``str``."""
    units: List[int] = []
    utf8_to_utf16(src, units)
    return units_to_string(units)
