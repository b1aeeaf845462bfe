"""Digest and structural comparison of two GeoJSON payloads."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from geojson_compare.digest import digest, utf8_length
from geojson_compare.errors import PayloadTypeError
from geojson_compare.text import display_text

UNPARSABLE_JSON = "Unable to parse one or both files as JSON"
CONTENT_DIFFERS = "Content differs when parsed as JSON"
FORMATTING_ONLY = "Documents are equivalent as JSON; only formatting or key order differs"

_MISSING = object()


@dataclass(frozen=True)
class ComparisonResult:
    hashes_match: bool
    content_match: bool
    digest1: str
    digest2: str
    size1: int
    size2: int
    byte_size1: int
    byte_size2: int
    differences: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "hashes_match": self.hashes_match,
            "content_match": self.content_match,
            "digest1": self.digest1,
            "digest2": self.digest2,
            "size1": self.size1,
            "size2": self.size2,
            "byte_size1": self.byte_size1,
            "byte_size2": self.byte_size2,
            "differences": list(self.differences) if self.differences is not None else None,
        }


def canonical_json(value: Any) -> str:
    """Serialize a parsed JSON value with sorted keys and compact separators."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _parse_json(payload: str) -> Any:
    return json.loads(payload, parse_constant=_reject_constant)


def _member(document: Any, key: str) -> Any:
    if isinstance(document, dict):
        return document.get(key, _MISSING)
    return _MISSING


def _format_number(value: int | float) -> str:
    """Render a number the way JavaScript's ``String(number)`` does."""
    try:
        number = float(value)
    except OverflowError:
        return "Infinity" if value > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    mantissa, marker, exponent = text.partition("e")
    if not marker:
        return text
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def _describe(value: Any) -> str:
    """Render a JSON value the way a browser template literal would."""
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return display_text(value)
    if isinstance(value, (int, float)):
        return _format_number(value)
    return display_text(json.dumps(value, separators=(",", ":"), ensure_ascii=False))


def _type_key(value: Any) -> tuple[str, Any]:
    # Booleans stay distinct from 0 and 1; 1 and 1.0 are the same number.
    if value is _MISSING:
        return ("missing", None)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    return ("json", canonical_json(value))


def _feature_count(document: Any) -> int:
    features = _member(document, "features")
    return len(features) if isinstance(features, list) else 0


def _structural_differences(payload1: str, payload2: str) -> list[str]:
    try:
        document1 = _parse_json(payload1)
        document2 = _parse_json(payload2)
    except (ValueError, RecursionError):
        return [UNPARSABLE_JSON]

    differences: list[str] = []

    type1 = _member(document1, "type")
    type2 = _member(document2, "type")
    if _type_key(type1) != _type_key(type2):
        differences.append(f"Different types: {_describe(type1)} vs {_describe(type2)}")

    count1 = _feature_count(document1)
    count2 = _feature_count(document2)
    if count1 != count2:
        differences.append(f"Different feature count: {count1} vs {count2}")

    differences.append(CONTENT_DIFFERS)
    if canonical_json(document1) == canonical_json(document2):
        differences.append(FORMATTING_ONLY)
    return differences


async def compare(payload1: str, payload2: str) -> ComparisonResult:
    """Compare two decoded payloads by digest, exact text and JSON structure.

    Both digests are computed concurrently in worker threads. JSON parse
    failures are reported in ``differences``; only a non-text payload or a
    failing hash primitive raises.
    """
    for position, payload in ((1, payload1), (2, payload2)):
        if not isinstance(payload, str):
            raise PayloadTypeError(
                f"payload{position} must be str, got {type(payload).__name__}"
            )

    digest1, digest2 = await asyncio.gather(
        asyncio.to_thread(digest, payload1),
        asyncio.to_thread(digest, payload2),
    )

    content_match = payload1 == payload2
    differences = None if content_match else _structural_differences(payload1, payload2)

    return ComparisonResult(
        hashes_match=digest1 == digest2,
        content_match=content_match,
        digest1=digest1,
        digest2=digest2,
        size1=len(payload1),
        size2=len(payload2),
        byte_size1=utf8_length(payload1),
        byte_size2=utf8_length(payload2),
        differences=tuple(differences) if differences else None,
    )
