"""Chunked UTF-8 decoding that carries truncated sequences forward."""

from typing import List, Tuple

from .decoder import decode_utf8
from .errors import IllegalStartingByteError, TruncatedError


class IncrementalUtf8Decoder:
    """Decode UTF-8 arriving in chunks.

    A sequence split across chunks is held back and completed by the next
    ``push``. ``finish`` reports anything still held back.
    When a chunk holds an illegal starting byte, the code points decoded
    before it travel on the raised error as ``code_points``.
    """

    def __init__(self) -> None:
        self._pending = bytearray()

    @property
    def pending(self) -> Tuple[int, ...]:
        return tuple(self._pending)

    def push(self, chunk: bytes) -> List[int]:
        if not chunk:
            return []
        data = self._pending + chunk
        self._pending = bytearray()
        result: List[int] = []
        try:
            decode_utf8(data, result)
        except TruncatedError as exc:
            self._pending = bytearray(exc.bytes)
        except IllegalStartingByteError as exc:
            exc.code_points = tuple(result)
            raise
        return result

    def finish(self) -> List[int]:
        if not self._pending:
            return []
        pending = self.pending
        self._pending = bytearray()
        raise TruncatedError(pending)
