import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from eth_account import Account

from address_utils import pubkey_to_ethereum_address, to_checksum_address
from curve_point import decode_public_key

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

G_COMPRESSED = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G_ADDRESS = "0x7e5f4552091a69125d5dfcb7b8c2659029395bdf"


def _compressed_pubkey(k: int) -> bytes:
    key = ec.derive_private_key(k, ec.SECP256K1()).public_key()
    return key.public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )


def test_generator_address():
    point = decode_public_key(bytes.fromhex(G_COMPRESSED))
    assert pubkey_to_ethereum_address(point) == G_ADDRESS


@pytest.mark.parametrize("k", [1, 2, 3, 0xC0FFEE, 2**255 + 19, SECP256K1_N - 1])
def test_matches_eth_account(k):
    point = decode_public_key(_compressed_pubkey(k))
    expected = Account.from_key(k.to_bytes(32, "big")).address

    address = pubkey_to_ethereum_address(point)
    assert address == expected.lower()
    assert to_checksum_address(address) == expected


def test_same_address_for_every_encoding():
    point = decode_public_key(bytes.fromhex(G_COMPRESSED))
    addresses = {
        pubkey_to_ethereum_address(decode_public_key(encoded))
        for encoded in (point.compressed, point.uncompressed, point.raw)
    }
    assert addresses == {G_ADDRESS}


def test_address_format():
    point = decode_public_key(_compressed_pubkey(0xBADC0DE))
    address = pubkey_to_ethereum_address(point)
    assert address.startswith("0x")
    assert len(address) == 42
    assert address == address.lower()
    int(address, 16)
