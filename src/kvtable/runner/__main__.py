# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for the kvtable runner.

Usage:
    python -m kvtable.runner [INPUT] [--table NAME] [--sqlite PATH] [--log-level LEVEL]

INPUT is a JSON document matching :class:`RunnerInput` (``-`` or omitted
reads stdin).  ``--table`` and ``--sqlite`` override the document's table
name and store.  Results are written to stdout as JSON; log records go to
stderr.  ``LOG_LEVEL`` in the environment sets the default log level.

Exit codes:
    0: Every operation succeeded
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from kvtable.config import StoreConfig

from .executor import Executor
from .schema import RunnerInput, RunnerOutput

logger = logging.getLogger("kvtable.runner")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("kvtable-runner")
    parser.add_argument("input", nargs="?", default="-", help="JSON input file, '-' for stdin")
    parser.add_argument("--table", help="table name, overrides the input document")
    parser.add_argument("--sqlite", metavar="PATH", help="use a SQLite store at PATH")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        help="logging level for stderr (default: $LOG_LEVEL or WARNING)",
    )
    return parser


def _load_input(args: argparse.Namespace) -> RunnerInput:
    raw = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    input_data = RunnerInput.model_validate_json(raw)
    overrides: dict[str, object] = {}
    if args.table:
        overrides["table"] = args.table
    if args.sqlite:
        overrides["store"] = StoreConfig(type="sqlite", path=args.sqlite)
    return input_data.model_copy(update=overrides) if overrides else input_data


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        input_data = _load_input(args)
        logger.info(
            "Running %d operations on table %r (%s store)",
            len(input_data.operations),
            input_data.table,
            input_data.store.type,
        )
        output = asyncio.run(Executor().execute(input_data))
    except Exception as e:
        # Unreadable or invalid input still yields a JSON document
        output = RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)

    print(output.model_dump_json())
    return 0 if output.success else 1


if __name__ == "__main__":
    sys.exit(main())
