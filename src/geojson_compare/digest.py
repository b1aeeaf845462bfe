"""SHA-256 digests of decoded file payloads."""

from __future__ import annotations

import hashlib
import logging
import time

from geojson_compare.errors import DigestError

_logger = logging.getLogger("geojson_compare.digest")


def _encode_utf8(payload: str) -> bytes:
    try:
        return payload.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates become U+FFFD; valid pairs are joined.
        repaired = payload.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
        return repaired.encode("utf-8")


def digest_bytes(content: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of raw bytes."""
    started = time.perf_counter()
    try:
        value = hashlib.sha256(content).hexdigest()
    except (TypeError, ValueError) as exc:
        raise DigestError(f"sha256 digest failed: {exc}") from exc
    elapsed_ms = (time.perf_counter() - started) * 1000
    _logger.debug(
        "hash generated in %.2fms for %.2fKB content", elapsed_ms, len(content) / 1024
    )
    return value


def digest(payload: str) -> str:
    """Return the SHA-256 digest of the UTF-8 encoding of ``payload``.

    The result is always 64 lowercase hexadecimal characters and is stable for
    identical text.
    """
    return digest_bytes(_encode_utf8(payload))


def utf8_length(payload: str) -> int:
    return len(_encode_utf8(payload))
