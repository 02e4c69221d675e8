from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the analysis pipeline.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirsizer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirsizer",
        description=(
            "Rebuild a directory tree from a shell transcript of 'cd'/'ls' "
            "commands and report directory sizes."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to analyze.",
    )

    # --- Query Thresholds ---
    p.add_argument(
        "--limit",
        dest="small_directory_limit",
        type=int,
        default=None,
        help="Sum the sizes of directories at most this big.",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=int,
        default=None,
        help="Total disk capacity.",
    )
    p.add_argument(
        "--required",
        dest="required_free_space",
        type=int,
        default=None,
        help="Free space needed; drives the deletion candidate search.",
    )

    # --- Tree Output ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the sized tree.",
    )
    p.add_argument(
        "--tree-file",
        dest="tree_output_path",
        default=None,
        help="Save the sized tree to this file.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective configuration for later runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None so that they do not shadow stored values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "tree_output_path": args.tree_output_path,
        "small_directory_limit": args.small_directory_limit,
        "disk_capacity": args.disk_capacity,
        "required_free_space": args.required_free_space,
    }

    if args.tree:
        overrides["show_tree"] = True

    return overrides
