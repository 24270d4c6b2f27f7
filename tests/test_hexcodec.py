import re

import pytest

from sunxi_info.core.errors import EncodingError
from sunxi_info.core.hexcodec import hex_decode, hex_encode


def test_encode_16_bytes():
    assert hex_encode(bytes(range(16)), 16) == "000102030405060708090a0b0c0d0e0f"


def test_encode_is_lowercase_msb_first():
    out = hex_encode(b"\xab\xcd\x0f\xf0")
    assert out == "abcd0ff0"


@pytest.mark.parametrize("data", [bytes(16), b"\xff" * 16, bytes(range(240, 256))])
def test_encode_shape_and_roundtrip(data):
    out = hex_encode(data, 16)
    assert len(out) == 32
    assert re.fullmatch(r"[0-9a-f]{32}", out)
    assert hex_decode(out) == data


def test_encode_empty_without_size():
    assert hex_encode(b"") == ""


def test_encode_empty_when_size_required():
    with pytest.raises(EncodingError):
        hex_encode(b"", 16)


def test_encode_wrong_length():
    with pytest.raises(EncodingError):
        hex_encode(bytes(15), 16)


def test_encode_accepts_bytearray():
    assert hex_encode(bytearray(b"\x01\x02")) == "0102"


@pytest.mark.parametrize("text", ["abc", "0G", "ABCD", "00 11"])
def test_decode_rejects_bad_input(text):
    with pytest.raises(EncodingError):
        hex_decode(text)


def test_encoding_error_is_value_error():
    with pytest.raises(ValueError):
        hex_decode("z")
