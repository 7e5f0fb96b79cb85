"""Value and tag record codecs."""

from pgcache.codecs.compression import compress, decompress
from pgcache.codecs.tags import add_tag_key, decode_tag_keys, encode_tag_keys

__all__ = [
    "compress",
    "decompress",
    "encode_tag_keys",
    "decode_tag_keys",
    "add_tag_key",
]
