from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, stored file, command-line overrides), input resolution, solving
and rendering of the results.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from aoc2022.core.input_reader import read_input, resolve_input_path
from aoc2022.core.registry import PARTS, available_days, get_puzzle
from aoc2022.core.runner import run_day
from aoc2022.core.validator import validate_config
from aoc2022.domain.config import get_default_config, load_config, save_config
from aoc2022.domain.errors import InvariantViolation, PuzzleNotFound
from aoc2022.domain.result_models import SolveResult
from aoc2022.infra.logging import LoggingConfig, configure_logging, get_logger
from aoc2022.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 puzzle failure, 2 usage error).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console only until the configuration is known)
    bootstrap = LoggingConfig(level="DEBUG" if args.debug else "INFO", console=True)
    configure_logging(bootstrap)

    if args.list_days:
        for day in available_days():
            print(f"{day:>2}  {get_puzzle(day).title}")
        return EXIT_OK

    # 2. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    session = LoggingConfig.from_settings(clean_conf)
    if session != bootstrap:
        configure_logging(session, force=True)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf, args.config_path)

    # 3. Puzzle and input resolution
    if args.day is None:
        print("ERROR: --day is required (use --list to see the available days).", file=sys.stderr)
        return EXIT_USAGE

    try:
        get_puzzle(args.day)
    except PuzzleNotFound as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    input_path = args.input_path or resolve_input_path(args.day, clean_conf)
    if not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    # 4. Solve
    parts = (args.part,) if args.part else PARTS
    try:
        content = read_input(input_path)
        results = run_day(args.day, content, clean_conf, parts=parts, source=input_path)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except InvariantViolation:
        # Fatal: handed to the supervisor installed by aoc2022.main
        raise
    except Exception as e:
        logger.critical(f"Day {args.day} aborted: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Output rendering
    if args.json_output:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results)

    return EXIT_OK if all(r.ok for r in results) else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of the overrides that were actually set."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def format_answer(answer: Any) -> str:
    """Render an answer on one line, or as an indented block if multi-line."""
    if isinstance(answer, (list, tuple)):
        return ", ".join(str(a) for a in answer)
    text = str(answer)
    if "\n" in text:
        return "\n" + "\n".join(f"    {line}" for line in text.splitlines())
    return text


def _print_human_summary(results: List[SolveResult]) -> None:
    if not results:
        return

    first = results[0]
    print(f"Day {first.day}: {first.title}")
    for result in results:
        if result.ok:
            print(f"  Part {result.part}: {format_answer(result.answer)}  ({result.elapsed_ms:.1f} ms)")
        else:
            print(f"  Part {result.part}: FAILED [{result.error_kind}] {result.error}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
