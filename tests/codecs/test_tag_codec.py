"""Tests for tag record encoding."""

from pgcache.codecs.tags import add_tag_key, decode_tag_keys, encode_tag_keys


def test_encode_preserves_order():
    assert encode_tag_keys(["a", "b", "c"]) == b"a,b,c"


def test_decode_splits_on_comma():
    assert decode_tag_keys(b"a,b,c") == ["a", "b", "c"]


def test_decode_empty_value():
    """An empty record decodes to one empty key instead of failing."""
    assert decode_tag_keys(b"") == [""]


def test_decode_single_key():
    assert decode_tag_keys(b"only") == ["only"]


def test_keys_with_commas_are_not_escaped():
    """A comma inside a key splits it on decode."""
    assert decode_tag_keys(encode_tag_keys(["a,b", "c"])) == ["a", "b", "c"]


def test_add_tag_key_to_missing_record():
    assert add_tag_key(None, "k1") == b"k1"
    assert add_tag_key(b"", "k1") == b"k1"


def test_add_tag_key_appends():
    assert add_tag_key(b"k1,k2", "k3") == b"k1,k2,k3"


def test_add_tag_key_is_idempotent():
    value = b"k1,k2"
    assert add_tag_key(value, "k2") is value
