"""
Command-line interface for checkmeta.

Usage:
  checkmeta video.mp4                # Labelled summary
  checkmeta --json video.mp4         # Normalized record as JSON
  checkmeta -q video.mp4             # One-line summary
  checkmeta --raw video.mp4          # Raw MediaInfo JSON
  checkmeta --status                 # Probe availability
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import version

from checkmeta._version import __version__
from checkmeta.analyze import probe_file
from checkmeta.config import configure_logging, get_config
from checkmeta.errors import CheckMetaError
from checkmeta.formatters import (
    format_default,
    format_json,
    format_probe_json,
    format_quiet,
    format_rows_json,
)
from checkmeta.probes import get_probe_status
from checkmeta.state import MetadataViewer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="checkmeta",
        description="Show the technical specs of a video file: duration, resolution, "
        "bit rate, frame rate and codecs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (default)    Labelled summary with resolution class and bit rate mode
  --json       Normalized record as JSON
  --rows       Display rows (label, value, badge) as JSON
  --raw        Raw MediaInfo JSON (for debugging)
  -q/--quiet   Quick one-line summary

Examples:
  checkmeta video.mp4
  checkmeta --json clip.mov
  checkmeta --date-format "%Y/%m/%d %H:%M" video.mkv
        """,
    )
    parser.add_argument("file", nargs="?", help="Video file to analyze")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--date-format",
        metavar="FORMAT",
        help="strftime pattern for the modified date",
    )

    # Mode selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--json", action="store_true", help="Output the record as JSON")
    mode_group.add_argument("--rows", action="store_true", help="Output display rows as JSON")
    mode_group.add_argument("--raw", action="store_true", help="Output raw MediaInfo JSON")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument(
        "--status",
        action="store_true",
        help="Show probe availability status",
    )
    return parser


def print_status() -> None:
    """Print probe availability status."""
    print("checkmeta status:")
    print("=" * 50)
    print(f"  checkmeta    {__version__}")
    print(f"  pymediainfo  {version('pymediainfo')}")

    print("\nProbes:")
    print("-" * 50)
    for name, available in sorted(get_probe_status().items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for checkmeta CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    # Handle --status mode (no file required)
    if args.status:
        print_status()
        return 0

    if not args.file:
        parser.error("the following arguments are required: file")

    # Raw mode skips normalization entirely
    if args.raw:
        try:
            print(format_probe_json(probe_file(args.file)))
        except (CheckMetaError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    viewer = MetadataViewer(date_format=args.date_format or get_config().display.date_format)
    state = viewer.analyze(args.file)
    if state.metadata is None:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    if args.json:
        print(format_json(state.metadata))
    elif args.rows:
        print(format_rows_json(state.metadata))
    elif args.quiet:
        print(format_quiet(state.metadata))
    else:
        print(format_default(state.metadata))

    return 0


if __name__ == "__main__":
    sys.exit(main())
