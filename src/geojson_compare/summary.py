"""Human-readable verdicts and sizes for comparison results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from geojson_compare.comparison import ComparisonResult

Verdict = Literal["identical", "hash_match", "different"]

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


@dataclass(frozen=True)
class ComparisonSummary:
    verdict: Verdict
    message: str


def summarize(result: ComparisonResult) -> ComparisonSummary:
    if result.hashes_match and result.content_match:
        return ComparisonSummary(
            verdict="identical",
            message="Files are identical. Both content and hashes match.",
        )
    if result.hashes_match:
        return ComparisonSummary(
            verdict="hash_match",
            message="Hash values match, but there might be minor formatting differences.",
        )
    return ComparisonSummary(
        verdict="different",
        message="Files are different. Hashes and/or content do not match.",
    )


def format_file_size(size: int) -> str:
    """Format a size with base-1024 units, e.g. ``1536 -> "1.5 KB"``."""
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    scaled = f"{size / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_SIZE_UNITS[exponent]}"
