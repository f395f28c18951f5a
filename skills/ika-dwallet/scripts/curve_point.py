#!/usr/bin/env python3
"""
Ika dWallet — secp256k1 public key decoding

Accepts the three shapes dWallet public keys show up in:

  33 bytes  02/03 + X          SEC1 compressed
  65 bytes  04 + X + Y         SEC1 uncompressed
  64 bytes  X + Y              raw coordinates, no prefix

and returns the validated uncompressed point. Decompression and the
on-curve check (y^2 = x^3 + 7 mod p) are done by `cryptography`.
"""

from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

COMPRESSED_LEN = 33
UNCOMPRESSED_LEN = 65
RAW_LEN = 64


class PublicKeyError(ValueError):
    """Decoded bytes are not a usable secp256k1 public key."""


class UnsupportedKeyLength(PublicKeyError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Unsupported public key length: {length}")


class InvalidCurvePoint(PublicKeyError):
    pass


@dataclass(frozen=True)
class CurvePoint:
    """A secp256k1 point, stored as 04 + X + Y."""

    uncompressed: bytes

    @property
    def raw(self) -> bytes:
        """X + Y without the 04 prefix (what the address is hashed from)."""
        return self.uncompressed[1:]

    @property
    def x(self) -> int:
        return int.from_bytes(self.uncompressed[1:33], "big")

    @property
    def y(self) -> int:
        return int.from_bytes(self.uncompressed[33:], "big")

    @property
    def compressed(self) -> bytes:
        prefix = b"\x03" if self.y & 1 else b"\x02"
        return prefix + self.uncompressed[1:33]


def _load_point(encoded: bytes) -> ec.EllipticCurvePublicKey:
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), encoded)
    except ValueError as e:
        raise InvalidCurvePoint(f"Point is not on secp256k1: {e}") from e


def decode_public_key(data: bytes) -> CurvePoint:
    """Decode a compressed, uncompressed or raw public key.

    >>> g = decode_public_key(bytes.fromhex(
    ...     "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"))
    >>> g.uncompressed.hex()[66:]
    '483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8'
    >>> decode_public_key(g.raw) == g
    True
    """
    data = bytes(data)
    length = len(data)

    if length == COMPRESSED_LEN:
        if data[0] not in (0x02, 0x03):
            raise InvalidCurvePoint(
                f"Compressed public key must start with 0x02 or 0x03, got 0x{data[0]:02x}"
            )
        encoded = data
    elif length == UNCOMPRESSED_LEN:
        if data[0] != 0x04:
            raise InvalidCurvePoint(
                f"Uncompressed public key must start with 0x04, got 0x{data[0]:02x}"
            )
        encoded = data
    elif length == RAW_LEN:
        encoded = b"\x04" + data
    else:
        raise UnsupportedKeyLength(length)

    key = _load_point(encoded)
    uncompressed = key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    return CurvePoint(uncompressed)
