"""Streaming compression for stored values.

Values are written in the snappy framing format: a stream identifier chunk
followed by CRC-checked compressed chunks. The format is self-delimiting, so
truncated or foreign data is detected on read.
"""

import logging

import cramjam

from pgcache.core.exceptions import CorruptPayloadError

logger = logging.getLogger(__name__)

# Uncompressed bytes handed to the encoder per call
BLOCK_SIZE = 65536


def compress(payload: bytes) -> bytes:
    """Compress a payload into a framed byte string.

    The payload is fed to a frame encoder in blocks. The encoder is always
    finished, also when a write fails, in which case the write error is the
    one raised.

    Args:
        payload: Bytes to compress (bytes, bytearray or memoryview)

    Returns:
        Framed compressed bytes. An empty payload compresses to ``b""``.

    Raises:
        TypeError: If payload is not bytes-like
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(f"payload must be bytes-like, got {type(payload).__name__}")

    data = bytes(payload)
    if not data:
        return b""

    encoder = cramjam.snappy.Compressor()
    try:
        for offset in range(0, len(data), BLOCK_SIZE):
            encoder.compress(data[offset : offset + BLOCK_SIZE])
    except Exception:
        try:
            encoder.finish()
        except Exception as cleanup_error:
            logger.debug(f"Ignoring encoder cleanup failure: {cleanup_error}")
        raise

    return bytes(encoder.finish())


def decompress(data: bytes) -> bytes:
    """Decompress bytes produced by :func:`compress`.

    Args:
        data: Framed compressed bytes

    Returns:
        The original payload

    Raises:
        CorruptPayloadError: If the stream is corrupt or truncated
    """
    data = bytes(data)
    if not data:
        return b""
    try:
        return bytes(cramjam.snappy.decompress(data))
    except (cramjam.DecompressionError, OSError) as e:
        raise CorruptPayloadError(f"Failed to decompress value: {e}") from e
