from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the aoc2022 CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="aoc2022",
        description="Solve the 2022 daily programming puzzles.",
    )

    # --- Puzzle Selection ---
    p.add_argument(
        "-d", "--day",
        type=int,
        default=None,
        help="Day to solve (1-12).",
    )
    p.add_argument(
        "-p", "--part",
        type=int,
        choices=(1, 2),
        default=None,
        help="Part to solve; both parts when omitted.",
    )
    p.add_argument(
        "--list",
        dest="list_days",
        action="store_true",
        help="List the available days and exit.",
    )

    # --- Input Location ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Puzzle input file. Defaults to <inputs-dir>/dayNN.txt.",
    )
    p.add_argument(
        "--inputs-dir",
        dest="inputs_dir",
        default=None,
        help="Directory holding the dayNN.txt input files.",
    )

    # --- Configuration ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Configuration file to load instead of the per-user one.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any stored configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration before running.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
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
        Dict[str, Any]: Configuration overrides subset (None means unset).
    """
    overrides: Dict[str, Any] = {
        "inputs_dir": args.inputs_dir,
        "log_file": args.log_file,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
