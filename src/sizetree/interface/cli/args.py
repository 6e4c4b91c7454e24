from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from sizetree.core.serialization.serializer import SUPPORTED_FORMATS, format_from_path
from sizetree.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sizetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sizetree",
        description="Compute the recursive size profile of a directory and save it as YAML or JSON.",
    )

    # --- Scan Target ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to scan (default: current directory).",
    )
    p.add_argument(
        "-d", "--depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum number of directory levels to descend into (default: 5).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Destination file for the size tree (default: output.yaml).",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Serialization format. Inferred from the output extension when omitted.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log an ASCII preview of the scanned tree.",
    )
    p.add_argument(
        "--error-log",
        dest="error_log_path",
        default=None,
        help="Write skipped entries to this report file.",
    )

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration and start from defaults.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and serialize without writing any file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help="Also write diagnostics to a rotating log file (default location if no path is given).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["max_depth"] = args.max_depth
    overrides["output_path"] = args.output_path
    overrides["output_format"] = args.output_format

    # An explicit output file decides the format unless --format is given
    if args.output_path and not args.output_format:
        overrides["output_format"] = format_from_path(args.output_path)

    if args.print_tree:
        overrides["print_tree"] = True
    if args.error_log_path:
        overrides["error_log_path"] = args.error_log_path
        overrides["save_error_log"] = True

    return overrides
