import pytest

from pubkey_locator import PUBKEY_ALIASES, find_public_key


def test_alias_priority_within_one_object():
    doc = {"pub_key": "d", "pubkey": "c", "publicKey": "b", "public_key": "a"}
    assert find_public_key(doc) == "a"
    del doc["public_key"]
    assert find_public_key(doc) == "b"
    del doc["publicKey"]
    assert find_public_key(doc) == "c"


def test_aliases_order():
    assert PUBKEY_ALIASES == ("public_key", "publicKey", "pubkey", "pub_key")


def test_nested_in_list():
    doc = {"data": {"content": {"fields": [{"id": 1}, {"pubkey": "0x02aa"}]}}}
    assert find_public_key(doc) == "0x02aa"


def test_top_level_list():
    assert find_public_key([1, "x", None, [{"publicKey": "k"}]]) == "k"


def test_depth_first_preorder_across_siblings():
    doc = {
        "first": {"inner": {"public_key": "deep"}},
        "second": {"public_key": "shallow"},
    }
    assert find_public_key(doc) == "deep"


def test_own_alias_wins_over_children():
    doc = {"child": {"public_key": "inner"}, "pub_key": "outer"}
    assert find_public_key(doc) == "outer"


def test_first_present_alias_decides_even_when_empty():
    assert find_public_key({"public_key": "", "pubkey": "x"}) is None
    assert find_public_key({"public_key": None, "child": {"pub_key": "y"}}) is None


def test_empty_alias_moves_on_to_next_sibling():
    doc = {"a": {"public_key": "", "pubkey": "x"}, "b": {"public_key": "y"}}
    assert find_public_key(doc) == "y"


@pytest.mark.parametrize("empty", [None, False, 0, "", [], {}])
def test_falsy_alias_values_are_not_returned(empty):
    assert find_public_key({"public_key": empty}) is None
    assert find_public_key([{"pubkey": empty}, {"pub_key": "k"}]) == "k"


def test_not_found():
    assert find_public_key({"foo": 1}) is None
    assert find_public_key({"public_key": ""}) is None
    assert find_public_key([]) is None


def test_scalars():
    for value in ("public_key", 42, 1.5, True, None):
        assert find_public_key(value) is None


def test_non_string_value_returned_as_is():
    assert find_public_key({"public_key": [2, 3]}) == [2, 3]


def test_very_deep_document():
    doc = {"public_key": "bottom"}
    for i in range(50_000):
        doc = {"level": doc} if i % 2 else [doc]
    assert find_public_key(doc) == "bottom"
