#!/usr/bin/env python3
"""
Ika dWallet Address Utilities

secp256k1 public key → EVM (Ethereum) address.
address = keccak256(X || Y)[-20:]

Dependencies: eth-utils (pip install "eth-utils" "eth-hash[pycryptodome]")
"""

from eth_utils import encode_hex, keccak
from eth_utils import to_checksum_address as _eip55

from curve_point import CurvePoint, decode_public_key

ADDRESS_LEN = 20


def pubkey_to_ethereum_address(point: CurvePoint) -> str:
    """Lowercase 0x address for a decoded public key.

    >>> g = decode_public_key(bytes.fromhex(
    ...     "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"))
    >>> pubkey_to_ethereum_address(g)
    '0x7e5f4552091a69125d5dfcb7b8c2659029395bdf'
    """
    digest = keccak(point.raw)
    return encode_hex(digest[-ADDRESS_LEN:])


def to_checksum_address(address: str) -> str:
    """EIP-55 mixed-case form.

    >>> to_checksum_address("0x7e5f4552091a69125d5dfcb7b8c2659029395bdf")
    '0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf'
    """
    return _eip55(address)


if __name__ == "__main__":
    import sys
    if len(sys.argv) > 1:
        point = decode_public_key(bytes.fromhex(sys.argv[1].removeprefix("0x")))
        address = pubkey_to_ethereum_address(point)
        print(f"Pubkey:   0x{point.uncompressed.hex()}")
        print(f"Address:  {address}")
        print(f"Checksum: {to_checksum_address(address)}")
