import logging
import pathlib
import tempfile
from collections.abc import Iterator

from cuebinmerge.consts import BIN_SUFFIX, COPY_CHUNK_SIZE, CUE_SUFFIX
from cuebinmerge.cue.models import Disc
from cuebinmerge.errors import NoSourceFiles, OutputAlreadyExists
from cuebinmerge.merge.sheet import render_merged_sheet

__all__ = ["iter_merged_bytes", "merge_bytes", "write_merged_bin", "consolidate"]

logger = logging.getLogger("cuebinmerge")


def iter_merged_bytes(
    disc: Disc, chunk_size: int = COPY_CHUNK_SIZE
) -> Iterator[bytes]:
    for file in disc.files:
        with file.path.open("rb") as infile:
            while chunk := infile.read(chunk_size):
                yield chunk


def merge_bytes(disc: Disc) -> bytes:
    return b"".join(iter_merged_bytes(disc))


def write_merged_bin(
    disc: Disc, target: pathlib.Path, chunk_size: int = COPY_CHUNK_SIZE
) -> int:
    """Concatenate every source bin of ``disc`` into the new file ``target``.

    Raises FileExistsError if ``target`` is already there. Returns the number
    of bytes written.
    """
    written = 0
    with target.open("xb") as outfile:
        for chunk in iter_merged_bytes(disc, chunk_size):
            written += outfile.write(chunk)
    return written


def consolidate(
    disc: Disc, output_dir: pathlib.Path, log: logging.Logger | None = None
) -> pathlib.Path:
    log = log or logger
    if not disc.files:
        raise NoSourceFiles(disc.base_name)
    dir_path = pathlib.Path(output_dir).joinpath(disc.base_name)
    cue_file = dir_path.joinpath(f"{disc.base_name}{CUE_SUFFIX}")
    bin_file = dir_path.joinpath(f"{disc.base_name}{BIN_SUFFIX}")
    if bin_file.exists():
        raise OutputAlreadyExists(str(bin_file))
    dir_path.mkdir(parents=True, exist_ok=True)
    log.info(
        f"Merging {len(disc.files)} files ({disc.track_count} tracks) into {bin_file}"
    )
    # Both outputs are staged next to their targets and only moved in once complete
    with tempfile.TemporaryDirectory(dir=dir_path, prefix=".cuebinmerge-") as temp_dir:
        staged_bin = pathlib.Path(temp_dir).joinpath(bin_file.name)
        staged_cue = pathlib.Path(temp_dir).joinpath(cue_file.name)
        written = write_merged_bin(disc, staged_bin)
        log.info(f"Wrote {written} bytes")
        _ = staged_cue.write_text(
            render_merged_sheet(disc, disc.base_name), encoding="utf-8"
        )
        if bin_file.exists():
            raise OutputAlreadyExists(str(bin_file))
        _ = staged_bin.rename(bin_file)
        _ = staged_cue.replace(cue_file)
    log.info(f"Done: {disc.base_name}")
    return bin_file
