"""Command line entrypoint for LCS based string comparison."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Sequence

from Bio import SeqIO
from fastDamerauLevenshtein import damerauLevenshtein as damerau_levenshtein_distance

from alignrun_core import (
    DEFAULT_MAX_CELLS,
    AlignmentLimitError,
    Segment,
    partition,
)

FASTA_SUFFIXES = {".fa", ".fasta", ".fna", ".fas"}

METRICS_HEADER = (
    "mode",
    "length1",
    "length2",
    "min_length",
    "common_count",
    "diff_count",
    "lcs_length",
    "edit_distance",
    "elapsed",
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report maximal common and differing substrings of two strings"
    )
    parser.add_argument("text1", help="First string (or path with --files)")
    parser.add_argument("text2", help="Second string (or path with --files)")
    parser.add_argument(
        "--mode",
        choices=("common", "diff", "both"),
        default="both",
        help="Which substrings to report",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=1,
        help="Minimum length of a reported substring",
    )
    parser.add_argument(
        "--files",
        action="store_true",
        help="Read both inputs from files; FASTA files use their first record",
    )
    parser.add_argument(
        "--max-cells",
        type=int,
        default=DEFAULT_MAX_CELLS,
        help="Largest allowed len(text1) * len(text2) (0 disables the limit)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a single JSON object",
    )
    parser.add_argument(
        "--metrics-csv",
        type=Path,
        help="Optional CSV file to append comparison metrics",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.max_cells < 0:
        parser.error("--max-cells must be 0 or a positive number of cells")
    return args


def load_text(path: Path) -> str:
    if path.suffix.lower() in FASTA_SUFFIXES:
        record = next(SeqIO.parse(path, "fasta"), None)
        return str(record.seq) if record is not None else ""
    text = path.read_text(encoding="utf-8")
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def append_metrics(csv_path: Path, mode: str, report: Dict) -> None:
    """Append one comparison to ``csv_path``, starting a new file with its header."""

    summary = report["summary"]
    row = (
        mode,
        str(summary["length1"]),
        str(summary["length2"]),
        str(summary["min_length"]),
        str(len(report["common"])) if report["common"] is not None else "",
        str(len(report["diff"])) if report["diff"] is not None else "",
        str(summary["lcs_length"]) if summary["lcs_length"] is not None else "",
        str(summary["edit_distance"]),
        f"{summary['elapsed']:.6f}",
    )
    lines = [",".join(row)]
    if not csv_path.exists() or csv_path.stat().st_size == 0:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        lines.insert(0, ",".join(METRICS_HEADER))
    with csv_path.open("a", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def edit_distance(text1: str, text2: str) -> int:
    if not text1 and not text2:
        return 0
    return int(damerau_levenshtein_distance(text1, text2, similarity=False))


def compare(args: argparse.Namespace) -> Dict:
    if args.files:
        text1 = load_text(Path(args.text1))
        text2 = load_text(Path(args.text2))
    else:
        text1, text2 = args.text1, args.text2
    max_cells = args.max_cells or None
    min_length = args.min_length

    start = time.time()
    # Degenerate input yields empty results without building a table.
    segments: List[Segment] = []
    lcs_length = None
    if text1 and min_length >= 1:
        segments = partition(text1, text2, max_cells=max_cells)
        lcs_length = sum(len(seg.text) for seg in segments if seg.common)
    common = [seg.text for seg in segments if seg.common and len(seg.text) >= min_length]
    diff = [seg.text for seg in segments if not seg.common and len(seg.text) >= min_length]
    elapsed = time.time() - start

    return {
        "common": common if args.mode != "diff" else None,
        "diff": diff if args.mode != "common" else None,
        "summary": {
            "length1": len(text1),
            "length2": len(text2),
            "min_length": min_length,
            "lcs_length": lcs_length,
            "edit_distance": edit_distance(text1, text2),
            "elapsed": elapsed,
        },
    }


def print_report(report: Dict) -> None:
    for label, key in (("Common substrings", "common"), ("Differing substrings", "diff")):
        values = report[key]
        if values is None:
            continue
        print(f"{label} ({len(values)}):")
        for value in values:
            print(f"  {value!r}")

    summary = report["summary"]
    lcs_length = summary["lcs_length"]
    print(f"Length of text1       : {summary['length1']}")
    print(f"Length of text2       : {summary['length2']}")
    print(f"LCS length            : {lcs_length if lcs_length is not None else 'n/a'}")
    print(f"Edit distance         : {summary['edit_distance']}")
    print(f"Comparison time       : {summary['elapsed']:.3f}s")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = compare(args)
    except AlignmentLimitError as exc:
        print(f"alignrun: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"alignrun: cannot read input: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report)

    if args.metrics_csv is not None:
        append_metrics(args.metrics_csv, args.mode, report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
