from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, stored config, CLI overrides), pipeline execution and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dirsizer.core.pipeline.engine import analyze_file
from dirsizer.core.pipeline.validator import validate_config
from dirsizer.domain.analysis_models import AnalysisResult
from dirsizer.domain.config import get_default_config, load_config, save_config
from dirsizer.infra.fs import normalize_path
from dirsizer.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirsizer.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    input_path = normalize_path(clean_conf.get("input_path", ""))
    if not input_path or not os.path.isfile(input_path):
        msg = f"Transcript file does not exist: {input_path or '(none given)'}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    try:
        result = analyze_file(input_path, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge the non-None overrides whose keys the base knows."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Total used: {result.root_size:,} ({result.directory_count} directories, "
          f"{result.file_count} files)")
    print(f"Directories of at most {result.small_directory_limit:,}: "
          f"{result.small_directories_total:,}")
    print(f"Space to free: {result.space_to_free:,}")

    if result.deletion_path is not None:
        print(f"Smallest directory to delete: {result.deletion_path} "
              f"({result.deletion_size:,})")
    else:
        print("Smallest directory to delete: none is big enough")

    if result.tree_path:
        print(f"Tree saved to: {result.tree_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
