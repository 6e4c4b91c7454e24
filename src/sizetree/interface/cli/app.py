from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs the CLI lifecycle: logging bootstrap, configuration resolution
(defaults or saved session, then CLI overrides), the scan pipeline and
result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from sizetree.core.pipeline.engine import run_scan
from sizetree.core.pipeline.validator import validate_config
from sizetree.domain.config import get_default_config, load_config, save_config
from sizetree.domain.pipeline_models import ScanResult
from sizetree.infra.fs import normalize_path
from sizetree.infra.logging import LoggingConfig, configure_logging, get_logger
from sizetree.interface.cli import args as cli_args
from sizetree.utils.formatting import format_duration, format_size

logger = get_logger(__name__)

_CONFIG_KEYS = [
    "input_path", "max_depth", "output_path", "output_format",
    "print_tree", "save_error_log", "error_log_path",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Exit code (0 success, 1 pipeline failure, 2 missing input,
        130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"Input path does not exist or is not a directory: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(clean_conf)

    try:
        result = run_scan(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = "Scan interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    if args.json_output:
        print(json.dumps(result.summary(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides for known keys into the base config.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k in _CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScanResult) -> None:
    """Print the scan result as a short terminal report."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Scanned: {result.root_path} (depth {result.max_depth})")
    print(f"Total size: {format_size(result.total_size)} ({result.total_size:,} bytes)")
    print(f"Entries: {result.entry_count}")
    if result.issues:
        print(f"Skipped or degraded entries: {len(result.issues)}")

    print(f"Time taken to scan the directory: {format_duration(result.scan_seconds)}")
    if result.dry_run:
        print("Dry run: no output written.")
        return

    print(f"Time taken to write the {result.output_format.upper()} file: {format_duration(result.write_seconds)}")
    print(f"{result.output_format.upper()} output written to {result.output_path}")
    if result.error_log_path:
        print(f"Issues report: {result.error_log_path}")


if __name__ == "__main__":
    sys.exit(main())
