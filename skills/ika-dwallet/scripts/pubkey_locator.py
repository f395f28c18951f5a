#!/usr/bin/env python3
"""
Ika dWallet — public key locator

Finds the public key inside an arbitrary dWallet JSON object. Field names
differ between SDK versions and RPC responses, so a handful of aliases are
accepted and the whole tree is searched.

Search order: depth-first pre-order; the first alias present (PUBKEY_ALIASES
order) decides for each object. A match nested inside an earlier child wins
over a match in a later sibling.
"""

PUBKEY_ALIASES = ("public_key", "publicKey", "pubkey", "pub_key")


def _first_alias(node: dict):
    """(True, value) for the first alias present in `node`, else (False, None)."""
    for alias in PUBKEY_ALIASES:
        if alias in node:
            return True, node[alias]
    return False, None


def find_public_key(document):
    """Return the first public key value in `document`, or None.

    The first alias present in an object decides for that object. When its
    value is empty (null, false, 0, "", [] or {}), that object and its
    children are skipped and the search moves on.

    >>> find_public_key({"pubkey": "aa", "public_key": "bb"})
    'bb'
    >>> find_public_key({"state": {"Active": {"public_output": [1, 2], "pub_key": "0x02"}}})
    '0x02'
    >>> find_public_key({"a": {"public_key": "", "pubkey": "x"}, "b": {"public_key": "y"}})
    'y'
    >>> find_public_key({"foo": 1}) is None
    True
    """
    stack = [document]
    while stack:
        node = stack.pop()

        if isinstance(node, dict):
            present, value = _first_alias(node)
            if present:
                if value:
                    return value
                continue
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            # str / int / float / bool / None
            continue

        # reversed so the first child is popped first
        stack.extend(reversed(children))

    return None


if __name__ == "__main__":
    import json
    import sys

    found = find_public_key(json.load(sys.stdin))
    print(json.dumps(found))
