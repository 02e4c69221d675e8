from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI options to configuration keys.
2. Unset options stay None so stored values are not shadowed.
3. Integer validation of thresholds by argparse.
"""

import pytest

from dirsizer.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_thresholds_mapping():
    args = parse_args([
        "-i", "session.log",
        "--limit", "250",
        "--capacity", "1000",
        "--required", "400",
    ])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "session.log"
    assert overrides["small_directory_limit"] == 250
    assert overrides["disk_capacity"] == 1000
    assert overrides["required_free_space"] == 400


def test_cli_unset_options_are_none():
    overrides = args_to_overrides(parse_args([]))

    assert overrides["input_path"] is None
    assert overrides["small_directory_limit"] is None
    assert overrides["tree_output_path"] is None
    assert "show_tree" not in overrides


def test_cli_tree_flags():
    args = parse_args(["--tree", "--tree-file", "out/tree.txt"])
    overrides = args_to_overrides(args)

    assert overrides["show_tree"] is True
    assert overrides["tree_output_path"] == "out/tree.txt"


def test_cli_diagnostic_flags():
    args = parse_args(["--debug", "--json", "--dump-config", "--use-defaults", "--save-config"])

    assert args.debug is True
    assert args.json_output is True
    assert args.dump_config is True
    assert args.use_defaults is True
    assert args.save_config is True


def test_cli_rejects_non_integer_threshold():
    with pytest.raises(SystemExit):
        parse_args(["--limit", "lots"])
