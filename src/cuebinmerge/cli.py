#!/bin/env python
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence
from typing import cast

from cuebinmerge.consts import VERSION
from cuebinmerge.dispatch import find_cue_sheets, merge_all
from cuebinmerge.models import ParserArgs

single_process_logger = logging.getLogger("cuebinmerge")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuebinmerge",
        description="Merge every multi-bin CUE sheet of a directory into single bin/cue pairs",
    )
    _ = parser.add_argument(
        "input_dir",
        help="Directory containing the .cue sheets to merge. Bin files are looked up next to each sheet.",
    )
    _ = parser.add_argument(
        "output_dir",
        help="Directory receiving one <name>/<name>.bin + <name>.cue folder per sheet.",
    )
    _ = parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    logging_opts = parser.add_mutually_exclusive_group()
    _ = logging_opts.add_argument(
        "-q", "--quiet", help="Only log errors during merging", action="store_true"
    )
    _ = logging_opts.add_argument(
        "-V",
        "--verbose",
        help="Log more information about the merging process",
        action="store_true",
    )
    _ = parser.add_argument(
        "-t",
        "--threads",
        help="Number of subprocesses to spawn to merge sheets. Not specifying or 0 will default to core count.",
        type=int,
        action="store",
        default=0,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = cast(ParserArgs, build_parser().parse_args(argv))
    logging.getLogger().setLevel(logging.WARNING)
    if args.quiet:
        logging.getLogger().setLevel(logging.ERROR)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    input_dir = pathlib.Path(args.input_dir).expanduser().resolve()
    output_dir = pathlib.Path(args.output_dir).expanduser().resolve()
    if not input_dir.is_dir():
        single_process_logger.error(f"Error: {input_dir} is not a directory")
        sys.exit(1)
    cue_sheets = find_cue_sheets(input_dir)
    single_process_logger.info(f"Found {len(cue_sheets)} cue sheets in {input_dir}")
    processes = args.threads if args.threads != 0 else None
    failed = merge_all(cue_sheets, output_dir, processes)
    for cue_sheet in failed:
        single_process_logger.error(str(cue_sheet))
    if failed:
        single_process_logger.warning("Finished with errors.")
        sys.exit(1)
    single_process_logger.warning("Finished successfully.")


if __name__ == "__main__":
    main()
