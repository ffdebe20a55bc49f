import logging
import multiprocessing
import pathlib

from cuebinmerge.consts import CUE_SUFFIX
from cuebinmerge.cue.parse import parse_cuefile
from cuebinmerge.errors import CueBinError
from cuebinmerge.merge.image import consolidate
from cuebinmerge.models import DispatchArgs

single_process_logger = logging.getLogger("cuebinmerge")


def find_cue_sheets(directory: pathlib.Path) -> list[pathlib.Path]:
    return sorted(
        (
            loc
            for loc in directory.iterdir()
            if loc.is_file() and loc.suffix.lower() == CUE_SUFFIX
        ),
        key=lambda loc: loc.name,
    )


def dispatch_merge(args: DispatchArgs) -> tuple[str, bool]:
    logger = logging.getLogger("cuebinmerge subprocess")
    logger.info(f"Merging {args.cue_sheet}")
    try:
        disc = parse_cuefile(args.cue_sheet)
        logger.info(
            f"Parsed {args.cue_sheet.name}: {len(disc.files)} files, {disc.track_count} tracks, block size {disc.block_size}"
        )
        _ = consolidate(disc, args.output_dir, logger)
    except CueBinError as e:
        logger.error(f"Failed to merge {args.cue_sheet.name}: {e}")
        return str(args.cue_sheet), False
    except Exception as e:
        logger.exception(f"Exception when merging {args.cue_sheet.name}: {repr(e)}")
        return str(args.cue_sheet), False
    return str(args.cue_sheet), True


def merge_all(
    cue_sheets: list[pathlib.Path],
    output_dir: pathlib.Path,
    processes: int | None = None,
) -> list[pathlib.Path]:
    """Merge every sheet in a worker pool and return the ones that failed."""
    failed: list[pathlib.Path] = []
    total_amount = len(cue_sheets)
    if not total_amount:
        return failed
    args = [DispatchArgs(cue_sheet, output_dir) for cue_sheet in cue_sheets]
    with multiprocessing.Pool(processes=processes) as pool:
        iter = pool.imap_unordered(dispatch_merge, args)
        for i, (print_str, success) in enumerate(iter):
            if success:
                single_process_logger.warning(
                    f"Completed merge of {print_str}: ({i+1}/{total_amount})"
                )
            else:
                single_process_logger.error(
                    f"Failed to merge {print_str}: ({i+1}/{total_amount})"
                )
                failed.append(pathlib.Path(print_str))
    return sorted(failed)
