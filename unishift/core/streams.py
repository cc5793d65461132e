"""Pull sources and push sinks shared by every conversion routine.

A source is any zero-argument callable returning the next unit or ``None``
once exhausted. A sink is any one-argument callable recording a unit.
Concrete containers are adapted here before an algorithm reads anything.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableSequence, Optional, Protocol, Tuple

from .errors import IllegalArgumentsError


class Source(Protocol):
    """Yields the next unit, or ``None`` at end of stream."""

    def __call__(self) -> Optional[int]:
        ...


class Sink(Protocol):
    """Records one unit into storage owned by the caller."""

    def __call__(self, unit: int) -> None:
        ...


def iterable_source(values: Iterable[int]) -> Source:
    """Read ``values`` front to back, then yield ``None`` forever."""
    iterator = iter(values)

    def source() -> Optional[int]:
        return next(iterator, None)

    return source


def string_source(text: str) -> Source:
    """Read the UTF-16 code units of ``text``, lone surrogates included."""
    data = text.encode("utf-16-le", "surrogatepass")
    return iterable_source(data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2))


def binary_string_source(text: str) -> Source:
    """Read ``text`` as a binary string, one character per byte.

    Characters above U+00FF are an illegal argument, rejected before anything
    is read.
    """
    try:
        data = text.encode("latin-1")
    except UnicodeEncodeError:
        raise IllegalArgumentsError(text) from None
    return iterable_source(data)


def code_point_source(text: str) -> Source:
    """Read the code points of ``text``."""
    return iterable_source(ord(ch) for ch in text)


def list_sink(target: MutableSequence[int]) -> Sink:
    return target.append


def units_to_string(units: Iterable[int]) -> str:
    """Join UTF-16 code units into a ``str``; unpaired surrogates are kept."""
    data = b"".join(unit.to_bytes(2, "little") for unit in units)
    return data.decode("utf-16-le", "surrogatepass")


def as_source(obj: Any, text: Callable[[str], Source] = string_source) -> Source:
    """Adapt ``obj`` to a source.

    ``text`` decides how a ``str`` is read: as UTF-16 code units by default,
    as code points, or as a binary string for byte input.
    """
    if isinstance(obj, str):
        return text(obj)
    if callable(obj):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview, list, tuple)):
        return iterable_source(obj)
    if hasattr(obj, "__iter__") and not isinstance(obj, (dict, set, frozenset)):
        return iterable_source(obj)
    raise IllegalArgumentsError(obj)


def as_sink(obj: Any) -> Sink:
    if callable(obj):
        return obj
    if callable(getattr(obj, "append", None)):
        return list_sink(obj)
    raise IllegalArgumentsError(obj)


def adapt(src: Any, dst: Any, text: Callable[[str], Source] = string_source) -> Tuple[Source, Sink]:
    """Adapt both ends of a conversion, failing before any unit is read."""
    try:
        return as_source(src, text), as_sink(dst)
    except IllegalArgumentsError:
        raise IllegalArgumentsError(src, dst) from None

