"""Core conversion routines between UTF-8, code points and UTF-16."""

from .decoder import decode_utf8  # noqa: F401
from .encoder import (  # noqa: F401
    MAX_CODE_POINT,
    calculate_utf8,
    encode_utf8,
    encode_utf8_to_bytes,
    utf8_length,
)
from .errors import (  # noqa: F401
    IllegalArgumentsError,
    IllegalCodePointError,
    IllegalStartingByteError,
    TruncatedError,
    UnishiftError,
)
from .incremental import IncrementalUtf8Decoder  # noqa: F401
from .streams import Sink, Source  # noqa: F401
from .trace import TraceLog  # noqa: F401
from .utf16 import (  # noqa: F401
    calculate_utf16_as_utf8,
    utf16_to_utf8,
    utf8_to_utf16,
    utf8_to_utf16_string,
)
