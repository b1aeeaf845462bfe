"""GeoJSON Compare package."""

from geojson_compare.comparison import ComparisonResult, canonical_json, compare
from geojson_compare.digest import digest, digest_bytes
from geojson_compare.intake import load_payload
from geojson_compare.summary import format_file_size, summarize

__all__ = [
    "ComparisonResult",
    "canonical_json",
    "compare",
    "digest",
    "digest_bytes",
    "format_file_size",
    "load_payload",
    "summarize",
]
