#!/usr/bin/env python3
"""
Ika dWallet — extract public key and Ethereum address

Reads a dWallet object (JSON, as printed by `sui client object --json` or the
Ika SDK), finds its secp256k1 public key and derives the EVM address.

Usage:
  python3 extract_dwallet_pubkey.py dwallet.json
  sui client object <id> --json | python3 extract_dwallet_pubkey.py
  python3 extract_dwallet_pubkey.py - --json < dwallet.json

Exit codes:
  0 ok, 1 unexpected error, 2 invalid JSON, 3 public key not found,
  4 undecodable public key, 5 not a valid secp256k1 key
"""

import argparse
import json
import sys
from pathlib import Path

from address_utils import pubkey_to_ethereum_address, to_checksum_address
from curve_point import PublicKeyError, decode_public_key
from key_encoding import UnsupportedEncoding, to_bytes, to_hex
from pubkey_locator import find_public_key

EXIT_OK = 0
EXIT_UNHANDLED = 1
EXIT_BAD_JSON = 2
EXIT_NOT_FOUND = 3
EXIT_BAD_ENCODING = 4
EXIT_BAD_KEY = 5


def read_input(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def extract(raw: str, as_json: bool = False) -> int:
    try:
        obj = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        print(f"❌ Input is not valid JSON: {e}", file=sys.stderr)
        return EXIT_BAD_JSON

    pk = find_public_key(obj)
    if pk is None:
        print("❌ public_key not found in provided DWallet object", file=sys.stderr)
        return EXIT_NOT_FOUND

    try:
        pk_bytes = to_bytes(pk)
    except UnsupportedEncoding as e:
        print(f"❌ Failed to decode public_key: {e}", file=sys.stderr)
        return EXIT_BAD_ENCODING

    try:
        point = decode_public_key(pk_bytes)
    except PublicKeyError as e:
        print(f"❌ Failed to compute Ethereum address: {e}", file=sys.stderr)
        return EXIT_BAD_KEY

    address = pubkey_to_ethereum_address(point)

    if as_json:
        print(json.dumps({
            "public_key": to_hex(pk_bytes),
            "uncompressed_public_key": to_hex(point.uncompressed),
            "compressed_public_key": to_hex(point.compressed),
            "ethereum_address": address,
            "checksum_address": to_checksum_address(address),
        }, indent=2))
    else:
        print("public_key (hex):", to_hex(pk_bytes))
        print("ethereum_address:", address)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract the public key from an Ika dWallet object and derive its Ethereum address"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="dWallet JSON file (default: stdin, also '-')"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )
    args = parser.parse_args(argv)

    try:
        try:
            raw = read_input(args.input)
        except UnicodeDecodeError as e:
            print(f"❌ Input is not valid JSON: {e}", file=sys.stderr)
            return EXIT_BAD_JSON
        return extract(raw, args.json)
    except Exception as e:
        print(f"❌ Unhandled error: {e}", file=sys.stderr)
        return EXIT_UNHANDLED


if __name__ == "__main__":
    sys.exit(main())
