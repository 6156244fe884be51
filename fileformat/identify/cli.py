"""CLI entry point for the File Format Identifier.

Identifies files by their magic bytes, independently of their names or
extensions, and optionally writes JSON / CSV reports.

Usage::

    file-identify upload.bin photo.jpg
    file-identify /srv/uploads -r --json-report report.json
    file-identify --list-formats

Designed for Python 3.10+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from fileformat.common.report import (
    human_size,
    print_counts,
    print_header,
    print_rows,
    print_warning,
    utc_now,
    write_csv,
    write_json,
)
from fileformat.common.safe_io import MAX_BYTES

from .catalog import CATALOG
from .identifier import IdentifyConfig, IdentifyResult, identify_paths
from .rules import RULES

logger = logging.getLogger(__name__)

_VERSION = "1.0.0"

_RESULT_COLUMNS = ["Path", "Media type", "Ext", "Name", "Kind", "Read"]
_CSV_FIELDS = [
    "path",
    "media_type",
    "extension",
    "name",
    "short_name",
    "kind",
    "bytes_read",
    "error",
]


def _handle_list_formats() -> int:
    """Print every format the identifier can report."""
    print_rows(
        ["Short name", "Name", "Media type", "Ext", "Kind"],
        (
            (info.short_name, info.name, info.media_type, info.extension, info.kind.value)
            for info in CATALOG.values()
        ),
        title=f"{len(CATALOG)} known formats ({len(RULES)} signature rules)",
    )
    return 0


def _result_row(result: IdentifyResult) -> tuple[str, ...]:
    if not result.ok:
        return (str(result.path), "", "", "unreadable", "", "")
    return (
        str(result.path),
        result.format_id.media_type,
        result.format_id.extension,
        result.info.name,
        result.info.kind.value,
        human_size(result.bytes_read),
    )


def _counts(results: list[IdentifyResult]) -> dict[str, int]:
    """Totals for the summary panel, followed by one line per kind."""
    counts = {
        "Total files": len(results),
        "Identified": sum(1 for r in results if r.recognized),
        "Unknown (bin)": sum(1 for r in results if r.ok and not r.recognized),
        "Errors": sum(1 for r in results if not r.ok),
    }
    by_kind = Counter(r.info.kind.value for r in results if r.recognized)
    for kind, count in sorted(by_kind.items()):
        counts[kind.capitalize()] = count
    return counts


def _handle_identify(args: argparse.Namespace) -> int:
    """Identify the requested paths and print / write the results."""
    config = IdentifyConfig(
        max_bytes=args.max_bytes,
        recursive=args.recursive,
        include_hidden=args.include_hidden,
        follow_symlinks=args.follow_symlinks,
    )

    results = identify_paths(args.paths, config)

    if not results:
        print_warning(f"no files found under {', '.join(args.paths)}")
        return 0

    print_rows(_RESULT_COLUMNS, (_result_row(r) for r in results))

    failed = [r for r in results if not r.ok]
    for r in failed:
        print_warning(f"cannot read {r.path}: {r.error}")

    counts = _counts(results)
    print_counts("Identification Results", counts)

    records = [r.to_dict() for r in results]
    if args.json_report:
        written = write_json(
            args.json_report,
            {
                "timestamp": utc_now(),
                "version": _VERSION,
                "inputs": list(args.paths),
                "max_bytes": config.max_bytes,
                "total_files": counts["Total files"],
                "identified": counts["Identified"],
                "errors": counts["Errors"],
                "results": records,
            },
        )
        logger.info("JSON report written to %s", written)

    if args.csv_report:
        written = write_csv(args.csv_report, records, _CSV_FIELDS)
        logger.info("CSV report written to %s", written)

    return 1 if failed else 0


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="file-identify",
        description=(
            "File Format Identifier -- determine file formats from their "
            "magic bytes, independently of file names and extensions."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to identify.",
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Descend into sub-directories.",
    )
    parser.add_argument(
        "--include-hidden",
        action="store_true",
        help="Also identify dot-files found while listing directories.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links to directories when recursing.",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=MAX_BYTES,
        help=f"Leading bytes to read from each file (0-{MAX_BYTES}, default: %(default)s).",
    )
    parser.add_argument(
        "--json-report",
        metavar="FILE",
        help="Write per-file results to a JSON report.",
    )
    parser.add_argument(
        "--csv-report",
        metavar="FILE",
        help="Write per-file results to a CSV report.",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List every format that can be identified and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the File Format Identifier."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.list_formats and not args.paths:
        parser.error("at least one path is required unless --list-formats is given")
    if not 0 <= args.max_bytes <= MAX_BYTES:
        parser.error(f"--max-bytes must be between 0 and {MAX_BYTES}")

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    print_header("File Format Identifier", f"v{_VERSION}")

    try:
        if args.list_formats:
            sys.exit(_handle_list_formats())
        sys.exit(_handle_identify(args))
    except KeyboardInterrupt:
        print("\nIdentification interrupted by user.", file=sys.stderr)
        sys.exit(130)
    except Exception as exc:
        logger.exception("Unexpected error during identification")
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
