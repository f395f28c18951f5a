#!/usr/bin/env python3
"""
Ika dWallet — public key encoding

dWallet objects carry the public key as 0x-hex, bare hex, base64 or a JSON
byte array depending on where they came from. to_bytes() turns any of those
into raw bytes.

Each string decoder returns (data, error) instead of raising; the decoders
are tried in order and the first success wins.
"""

import base64
import binascii
import re

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_BASE64_RE = re.compile(r"[A-Za-z0-9+/\-_]*={0,2}")


class UnsupportedEncoding(ValueError):
    """The public key value is not hex, base64 or a byte array."""


def _decode_hex(text: str) -> tuple[bytes | None, str | None]:
    if not text:
        return None, "empty hex string"
    if not _HEX_RE.fullmatch(text):
        return None, "non-hex character in value"
    if len(text) % 2:
        return None, f"odd number of hex digits ({len(text)})"
    return bytes.fromhex(text), None


def _decode_prefixed_hex(text: str) -> tuple[bytes | None, str | None]:
    return _decode_hex(text[2:])


def _decode_base64(text: str) -> tuple[bytes | None, str | None]:
    if not _BASE64_RE.fullmatch(text):
        return None, "invalid base64 character"
    body = text.rstrip("=")
    if len(body) % 4 == 1:
        return None, f"invalid base64 length ({len(body)} data characters)"
    if "=" in text and len(text) % 4:
        return None, "incorrect base64 padding"
    # accept URL-safe alphabet and missing padding
    body = body.replace("-", "+").replace("_", "/")
    body += "=" * (-len(body) % 4)
    try:
        return base64.b64decode(body, validate=True), None
    except binascii.Error as e:
        return None, str(e)


# (name, predicate, decoder), tried in order; a hex-looking value is never base64
_STRING_DECODERS = (
    ("0x-hex", lambda s: s.startswith("0x"), _decode_prefixed_hex),
    ("hex", lambda s: _HEX_RE.fullmatch(s) is not None, _decode_hex),
    ("base64", lambda s: not s.startswith("0x") and _HEX_RE.fullmatch(s) is None, _decode_base64),
)


def _bytes_from_str(value: str) -> bytes:
    s = value.strip()
    if not s:
        raise UnsupportedEncoding("Unsupported public_key encoding: empty value")

    errors = []
    for name, matches, decode in _STRING_DECODERS:
        if not matches(s):
            continue
        data, error = decode(s)
        if data is not None:
            return data
        errors.append(f"{name}: {error}")

    raise UnsupportedEncoding(f"Unsupported public_key encoding ({'; '.join(errors)})")


def _bytes_from_list(value: list) -> bytes:
    for i, item in enumerate(value):
        if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 255:
            raise UnsupportedEncoding(
                f"Unsupported public_key encoding: byte array item {i} is {item!r}"
            )
    return bytes(value)


def to_bytes(value) -> bytes:
    """Normalize a located public key value to raw bytes.

    >>> to_bytes("0x02ab").hex()
    '02ab'
    >>> to_bytes("  02AB  ").hex()
    '02ab'
    >>> to_bytes("Aqs=").hex()
    '02ab'
    >>> to_bytes([2, 171]).hex()
    '02ab'
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return _bytes_from_str(value)
    if isinstance(value, list):
        return _bytes_from_list(value)
    raise UnsupportedEncoding(
        f"Unsupported public_key encoding: unexpected {type(value).__name__} value"
    )


def to_hex(data: bytes) -> str:
    """0x-prefixed lowercase hex.

    >>> to_hex(b"\\x02\\xab")
    '0x02ab'
    """
    return "0x" + bytes(data).hex()
