"""Compare two GeoJSON files on disk and report whether they are identical."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))
from geojson_compare.comparison import compare
from geojson_compare.errors import IntakeError
from geojson_compare.intake import load_payload
from geojson_compare.summary import format_file_size, summarize
from geojson_compare.text import display_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("file1", help="First .geojson/.json file.")
    parser.add_argument("file2", help="Second .geojson/.json file.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the comparison result as JSON.",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the GeoJSON type check on load.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log digest timings.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    payloads = []
    for raw_path in (args.file1, args.file2):
        path = Path(raw_path)
        try:
            payloads.append(
                load_payload(path.name, path.read_bytes(), validate=not args.no_validate)
            )
        except (IntakeError, OSError) as exc:
            print(display_text(f"Error loading {path}: {exc}"), file=sys.stderr)
            return 2

    result = asyncio.run(compare(payloads[0].content, payloads[1].content))
    summary = summarize(result)

    if args.json:
        print(json.dumps({**result.to_dict(), "verdict": summary.verdict}, indent=2))
    else:
        print(summary.message)
        print(f"Hashes match: {result.hashes_match}")
        print(f"Content match: {result.content_match}")
        for index, payload in enumerate(payloads, start=1):
            file_digest = result.digest1 if index == 1 else result.digest2
            size = format_file_size(payload.byte_size)
            print(f"File {index}: {display_text(payload.filename)} ({size})")
            print(f"  SHA256: {file_digest}")
        if result.differences:
            print("Detected differences:")
            for difference in result.differences:
                print(f"  - {difference}")

    return 0 if summary.verdict == "identical" else 1


if __name__ == "__main__":
    raise SystemExit(main())
