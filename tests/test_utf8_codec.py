# UTF-8 decode/encode and size calculation.
# Run: pytest -q

from array import array
from collections import deque

import pytest

from unishift.core import (
    IllegalArgumentsError,
    IllegalCodePointError,
    IllegalStartingByteError,
    TruncatedError,
    UnishiftError,
    calculate_utf8,
    decode_utf8,
    encode_utf8,
    encode_utf8_to_bytes,
    utf8_length,
)

SAMPLE = "Hello, wörld € \U0001F600 \U0010FFFF"


def strict_source(values):
    """Source that fails if read again after reporting end of stream."""
    items = list(values)
    state = {"done": False}

    def source():
        assert not state["done"], "source read past end of stream"
        if not items:
            state["done"] = True
            return None
        return items.pop(0)

    return source


def decoded(data):
    out = []
    decode_utf8(data, out)
    return out


def test_decode_hello():
    assert decoded([0x48, 0x65, 0x6C, 0x6C, 0x6F]) == [72, 101, 108, 108, 111]


def test_decode_multibyte_sequences():
    assert decoded(SAMPLE.encode("utf-8")) == [ord(ch) for ch in SAMPLE]


def test_decode_accepts_bytes_like_and_iterables():
    data = "é€".encode("utf-8")
    expected = [0xE9, 0x20AC]
    assert decoded(bytearray(data)) == expected
    assert decoded(memoryview(data)) == expected
    assert decoded(tuple(data)) == expected
    assert decoded(b for b in data) == expected


def test_decode_binary_string_source():
    assert decoded("\xc3\xa9A") == [0xE9, 0x41]


def test_decode_callable_source_and_sink():
    seen = []
    decode_utf8(strict_source(b"a\xe2\x82\xac"), seen.append)
    assert seen == [0x61, 0x20AC]


def test_truncated_three_byte_sequence():
    with pytest.raises(TruncatedError) as excinfo:
        decoded([0xE2, 0x82])
    assert excinfo.value.bytes == (0xE2, 0x82)
    assert str(excinfo.value) == "226, 130"


def test_truncated_keeps_earlier_output():
    out = []
    with pytest.raises(TruncatedError) as excinfo:
        decode_utf8(strict_source([0x41, 0xF0, 0x9F]), out)
    assert out == [0x41]
    assert excinfo.value.bytes == (0xF0, 0x9F)


def test_truncated_after_leading_byte_only():
    with pytest.raises(TruncatedError) as excinfo:
        decoded([0xC3])
    assert excinfo.value.bytes == (0xC3,)


@pytest.mark.parametrize("byte", [0xFF, 0x80, 0xBF, 0xF8])
def test_illegal_starting_byte(byte):
    out = []
    with pytest.raises(IllegalStartingByteError) as excinfo:
        decode_utf8([0x41, byte, 0x42], out)
    assert excinfo.value.byte == byte
    assert out == [0x41]
    assert isinstance(excinfo.value, ValueError)


def test_continuation_bytes_are_masked_not_validated():
    # 0xC3 followed by an ASCII byte still yields one two-byte code point.
    assert decoded([0xC3, 0x41]) == [((0xC3 & 0x1F) << 6) | (0x41 & 0x3F)]


def test_decode_then_encode_round_trip():
    data = SAMPLE.encode("utf-8")
    assert encode_utf8_to_bytes(decoded(data)) == data


@pytest.mark.parametrize(
    "cp, size",
    [
        (0x00, 1),
        (0x7F, 1),
        (0x80, 2),
        (0x7FF, 2),
        (0x800, 3),
        (0xFFFF, 3),
        (0x10000, 4),
        (0x10FFFF, 4),
    ],
)
def test_boundary_encoding(cp, size):
    data = encode_utf8_to_bytes([cp])
    assert len(data) == size
    assert data == chr(cp).encode("utf-8")
    assert utf8_length(cp) == size


def test_encode_surrogate_code_point_is_permitted():
    assert encode_utf8_to_bytes([0xD800]) == b"\xed\xa0\x80"
    assert calculate_utf8([0xDFFF]) == 3


def test_encode_through_sink():
    out = bytearray()
    assert encode_utf8([0x20AC], out) is None
    assert bytes(out) == b"\xe2\x82\xac"

    calls = []
    encode_utf8(iter([0x41, 0x1F600]), calls.append)
    assert calls == [0x41, 0xF0, 0x9F, 0x98, 0x80]


def test_encode_string_reads_code_points():
    assert encode_utf8_to_bytes("a\U0001F600") == "a\U0001F600".encode("utf-8")


@pytest.mark.parametrize("cp", [0x110000, -1])
def test_illegal_code_point(cp):
    out = []
    with pytest.raises(IllegalCodePointError) as excinfo:
        encode_utf8([0x41, cp], out)
    assert excinfo.value.code_point == cp
    assert out == [0x41]
    with pytest.raises(IllegalCodePointError):
        calculate_utf8([cp])


def test_size_agrees_with_encoding():
    code_points = [ord(ch) for ch in SAMPLE] + [0xD800, 0x7FF, 0x800]
    assert calculate_utf8(code_points) == len(encode_utf8_to_bytes(code_points))
    assert calculate_utf8([]) == 0


def test_illegal_arguments_fail_before_reading():
    source = strict_source([0x41])
    with pytest.raises(IllegalArgumentsError):
        decode_utf8(source, 42)
    with pytest.raises(IllegalArgumentsError):
        encode_utf8(source, "not a sink")
    # Nothing was drained from the source.
    assert decoded(source) == [0x41]


@pytest.mark.parametrize("bad", [42, None, {1: 2}, 3.5])
def test_illegal_source_types(bad):
    with pytest.raises(IllegalArgumentsError) as excinfo:
        decode_utf8(bad, [])
    assert isinstance(excinfo.value, TypeError)
    with pytest.raises(IllegalArgumentsError):
        calculate_utf8(bad)


def test_binary_string_with_wide_character_is_illegal_argument():
    out = []
    with pytest.raises(UnishiftError) as excinfo:
        decode_utf8("A€", out)
    assert isinstance(excinfo.value, IllegalArgumentsError)
    assert out == []


def test_any_appendable_is_a_sink():
    units = deque()
    decode_utf8(b"a\xc3\xa9", units)
    assert list(units) == [0x61, 0xE9]

    data = array("B")
    encode_utf8([0x20AC], data)
    assert data.tobytes() == b"\xe2\x82\xac"
