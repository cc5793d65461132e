"""Unishift CLI entrypoint."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from unishift.core import (
    IncrementalUtf8Decoder,
    TraceLog,
    UnishiftError,
    calculate_utf16_as_utf8,
    calculate_utf8,
    decode_utf8,
    encode_utf8_to_bytes,
    utf8_to_utf16,
)


def parse_code_point(value: str) -> int:
    """Accept ``U+XXXX``, ``0x..`` or decimal notation."""
    text = value.strip()
    try:
        if text[:2].upper() == "U+":
            return int(text[2:], 16)
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a code point: {value!r}") from None


def format_code_point(cp: int) -> str:
    return f"U+{cp:04X}"


def make_trace(args: argparse.Namespace) -> TraceLog:
    return TraceLog(Path(args.trace_log) if args.trace_log else None)


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def decode(args: argparse.Namespace) -> None:
    trace = make_trace(args)
    data = read_input(args.path)
    trace.log(f"decode start bytes={len(data)} resume={args.resume}")

    code_points: List[int] = []
    if args.resume:
        decoder = IncrementalUtf8Decoder()
        for offset in range(0, len(data), args.chunk_size):
            code_points.extend(decoder.push(data[offset : offset + args.chunk_size]))
            if decoder.pending:
                trace.log(f"holding back {len(decoder.pending)} bytes at offset {offset}")
        code_points.extend(decoder.finish())
    else:
        decode_utf8(data, code_points)

    trace.log(f"decode done code_points={len(code_points)}")
    for cp in code_points:
        print(format_code_point(cp))


def encode(args: argparse.Namespace) -> None:
    trace = make_trace(args)
    data = encode_utf8_to_bytes(args.code_points)
    trace.log(f"encode code_points={len(args.code_points)} bytes={len(data)}")
    print(data.hex())


def size(args: argparse.Namespace) -> None:
    trace = make_trace(args)
    if args.code_points is not None:
        n = calculate_utf8(args.code_points)
    else:
        n = calculate_utf16_as_utf8(args.text)
    trace.log(f"size bytes={n}")
    print(n)


def utf16(args: argparse.Namespace) -> None:
    trace = make_trace(args)
    units: List[int] = []
    utf8_to_utf16(args.text, units)
    trace.log(f"utf16 units={len(units)}")
    print(" ".join(f"{unit:04x}" for unit in units))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unishift", description="Convert between UTF-8, code points and UTF-16"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--trace-log", default=None, help="Append trace events to this file")

    decode_parser = subparsers.add_parser(
        "decode", parents=[common], help="Decode UTF-8 bytes into code points"
    )
    decode_parser.add_argument("path", nargs="?", default="-", help="Input file, '-' for stdin")
    decode_parser.add_argument(
        "--resume", action="store_true", help="Decode in chunks, carrying split sequences over"
    )
    decode_parser.add_argument(
        "--chunk-size", type=int, default=4096, help="Chunk size in bytes for --resume"
    )
    decode_parser.set_defaults(func=decode)

    encode_parser = subparsers.add_parser(
        "encode", parents=[common], help="Encode code points as UTF-8 hex"
    )
    encode_parser.add_argument(
        "code_points", nargs="+", type=parse_code_point, help="U+XXXX, 0x.. or decimal"
    )
    encode_parser.set_defaults(func=encode)

    size_parser = subparsers.add_parser(
        "size", parents=[common], help="Count the UTF-8 bytes a text needs"
    )
    size_input = size_parser.add_mutually_exclusive_group()
    size_input.add_argument("text", nargs="?", default="", help="Text to measure")
    size_input.add_argument(
        "--code-points", nargs="+", type=parse_code_point, default=None, help="Measure code points instead"
    )
    size_parser.set_defaults(func=size)

    utf16_parser = subparsers.add_parser(
        "utf16", parents=[common], help="Show the UTF-16 code units of a text"
    )
    utf16_parser.add_argument("text", help="Text to convert")
    utf16_parser.set_defaults(func=utf16)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "chunk_size", 1) < 1:
        parser.error("--chunk-size must be positive")
    try:
        args.func(args)
    except UnishiftError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")


if __name__ == "__main__":
    main()
