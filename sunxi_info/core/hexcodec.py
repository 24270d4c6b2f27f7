# core/hexcodec.py
from __future__ import annotations

import string
from typing import Optional

from .errors import EncodingError

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def hex_encode(data: bytes, size: Optional[int] = None) -> str:
    """
    Render a buffer as lowercase hex, two digits per byte, no separators.

    With `size` the buffer must be exactly that many bytes (and not empty),
    otherwise an empty buffer simply gives "".
    """
    data = bytes(data)
    if size is not None:
        if not data:
            raise EncodingError(f"empty buffer, expected {size} bytes")
        if len(data) != size:
            raise EncodingError(f"expected {size} bytes, got {len(data)}")
    return data.hex()


def hex_decode(text: str) -> bytes:
    if len(text) % 2:
        raise EncodingError("odd-length hex string")
    if not set(text) <= _HEX_DIGITS:
        raise EncodingError("not a lowercase hex string")
    return bytes.fromhex(text)
