"""File intake: extension filtering, text decoding and GeoJSON shape checks."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass

from geojson_compare.errors import InvalidGeoJSONError, UnsupportedFileTypeError
from geojson_compare.text import display_text

ACCEPTED_EXTENSIONS: tuple[str, ...] = (".geojson", ".json")

GEOJSON_TYPES = frozenset(
    {
        "FeatureCollection",
        "Feature",
        "Point",
        "LineString",
        "Polygon",
        "MultiPoint",
        "MultiLineString",
        "MultiPolygon",
        "GeometryCollection",
    }
)


@dataclass(frozen=True)
class LoadedPayload:
    filename: str
    content: str
    byte_size: int
    geojson_type: str | None = None


def is_supported_filename(filename: str, extensions: Iterable[str] = ACCEPTED_EXTENSIONS) -> bool:
    lowered = filename.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def decode_payload(content: bytes) -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM."""
    return content.decode("utf-8-sig", errors="replace")


def validate_geojson(text: str) -> str:
    """Return the top-level GeoJSON type or raise ``InvalidGeoJSONError``."""
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise InvalidGeoJSONError("Invalid JSON format") from exc

    geojson_type = document.get("type") if isinstance(document, dict) else None
    if not geojson_type:
        raise InvalidGeoJSONError('Invalid GeoJSON: missing "type" property')
    if not isinstance(geojson_type, str) or geojson_type not in GEOJSON_TYPES:
        raise InvalidGeoJSONError(
            display_text(f'Invalid GeoJSON: unsupported type "{geojson_type}"')
        )
    return geojson_type


def load_payload(
    filename: str,
    content: bytes,
    *,
    extensions: Iterable[str] = ACCEPTED_EXTENSIONS,
    validate: bool = True,
) -> LoadedPayload:
    """Accept one uploaded file and return its decoded payload."""
    extensions = tuple(extensions)
    if not is_supported_filename(filename, extensions):
        raise UnsupportedFileTypeError(
            "Please select a valid GeoJSON file (" + " or ".join(extensions) + ")"
        )
    text = decode_payload(content)
    geojson_type = validate_geojson(text) if validate else None
    return LoadedPayload(
        filename=filename,
        content=text,
        byte_size=len(content),
        geojson_type=geojson_type,
    )
