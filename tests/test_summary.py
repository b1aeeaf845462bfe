import asyncio

from geojson_compare.comparison import ComparisonResult, compare
from geojson_compare.summary import format_file_size, summarize


def _result(*, hashes_match: bool, content_match: bool) -> ComparisonResult:
    return ComparisonResult(
        hashes_match=hashes_match,
        content_match=content_match,
        digest1="a" * 64,
        digest2="a" * 64 if hashes_match else "b" * 64,
        size1=2,
        size2=2,
        byte_size1=2,
        byte_size2=2,
        differences=None if content_match else ("Content differs when parsed as JSON",),
    )


def test_summarize_identical_files() -> None:
    summary = summarize(asyncio.run(compare("{}", "{}")))

    assert summary.verdict == "identical"
    assert "identical" in summary.message


def test_summarize_hash_match_with_content_mismatch() -> None:
    summary = summarize(_result(hashes_match=True, content_match=False))

    assert summary.verdict == "hash_match"
    assert "formatting" in summary.message


def test_summarize_different_files() -> None:
    summary = summarize(asyncio.run(compare("{}", "[]")))

    assert summary.verdict == "different"


def test_format_file_size_scales_by_1024() -> None:
    assert format_file_size(0) == "0 Bytes"
    assert format_file_size(512) == "512 Bytes"
    assert format_file_size(1024) == "1 KB"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(1024 * 1024) == "1 MB"
    assert format_file_size(int(2.25 * 1024**3)) == "2.25 GB"


def test_format_file_size_caps_at_gigabytes() -> None:
    assert format_file_size(5 * 1024**4) == "5120 GB"
