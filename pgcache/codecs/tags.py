"""Encoding of tag records.

A tag record is an ordinary cache entry whose value lists the keys stored
under that tag, joined with commas. Keys are not escaped, so a key that
contains a comma is split into several keys on decode.
"""

from collections.abc import Iterable

TAG_KEY_SEPARATOR = ","


def encode_tag_keys(keys: Iterable[str]) -> bytes:
    """Join keys into a tag record value, preserving order."""
    return TAG_KEY_SEPARATOR.join(keys).encode("utf-8")


def decode_tag_keys(value: bytes) -> list[str]:
    """Split a tag record value into its keys.

    An empty value decodes to a single empty-string key, matching
    ``str.split`` semantics.
    """
    return value.decode("utf-8", errors="replace").split(TAG_KEY_SEPARATOR)


def add_tag_key(value: bytes | None, key: str) -> bytes:
    """Return a tag record value with ``key`` appended if not already listed."""
    if not value:
        return encode_tag_keys([key])
    keys = decode_tag_keys(value)
    if key in keys:
        return value
    keys.append(key)
    return encode_tag_keys(keys)
