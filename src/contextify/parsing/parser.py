# contextify/parsing/parser.py
from __future__ import annotations

import argparse

from contextify.constants import DEFAULT_INPUT, DEFAULT_MAX_LINE_BYTES, DEFAULT_OUTPUT, VCS_DIR


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {raw!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Value flags default to None so configuration resolution can tell
          "not given" apart from an explicit empty value and fall back to
          the CONTEXTIFY_* environment variables.
        - Defaults shown in the help texts are applied in runtime.config.
    """
    from contextify import __version__

    p = argparse.ArgumentParser(
        prog="contextify",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "contextify – flatten a directory tree into a single annotated text file\n"
            "Each included file is written under a '## File: <path>' header inside "
            "a fenced block."
        ),
    )

    g_src = p.add_argument_group("Source & output")
    g_flt = p.add_argument_group("Filtering")
    g_misc = p.add_argument_group("Miscellaneous")

    g_src.add_argument(
        "--input",
        metavar="DIR",
        dest="input",
        help=f"Input directory path, relative or absolute (default: {DEFAULT_INPUT!r}).",
    )
    g_src.add_argument(
        "--output",
        metavar="FILE",
        dest="output",
        help=f"Output file path, created or truncated (default: {DEFAULT_OUTPUT!r}).",
    )

    g_flt.add_argument(
        "--exclude",
        metavar="LIST",
        dest="exclude",
        help=(
            "Comma-separated directory names or relative paths to exclude "
            "(e.g. node_modules,dist,build/cache).\n"
            f"{VCS_DIR!r} is always excluded."
        ),
    )
    g_flt.add_argument(
        "--extensions",
        metavar="LIST",
        dest="extensions",
        help=(
            "Comma-separated file extensions to include, leading dot included "
            "(e.g. .ts,.js,.go).\nEmpty means every file is included."
        ),
    )
    g_flt.add_argument(
        "--max-line-bytes",
        metavar="N",
        type=_positive_int,
        dest="max_line_bytes",
        help=(
            "Longest accepted line in bytes; a longer line aborts the run "
            f"(default: {DEFAULT_MAX_LINE_BYTES})."
        ),
    )

    g_misc.add_argument(
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable verbose (debug) logging.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostic logs as one JSON object per line.",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
