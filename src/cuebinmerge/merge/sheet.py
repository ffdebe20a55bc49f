from cuebinmerge.consts import BIN_SUFFIX
from cuebinmerge.cue.models import Disc
from cuebinmerge.cue.timestamp import sectors_to_cuestamp

__all__ = ["render_merged_sheet"]


def pad_width(count: int) -> int:
    # Same as ceil(log10(count + 1)), never narrower than 2
    return max(2, len(str(count)))


def render_merged_sheet(disc: Disc, base_name: str) -> str:
    """Regenerate ``disc``'s sheet against one merged ``<base_name>.bin``.

    Each index keeps its offset within its own source file, shifted by the
    sectors of every file before it. File lengths are converted with the
    disc-wide block size and any trailing partial sector is dropped.
    """
    lines = [f'FILE "{base_name}{BIN_SUFFIX}" BINARY']
    track_width = pad_width(disc.track_count)
    sector_pos = 0
    for file in disc.files:
        for track in file.tracks:
            lines.append(
                f"  TRACK {str(track.number).zfill(track_width)} {track.track_type}"
            )
            index_width = pad_width(len(track.indexes))
            for index in track.indexes:
                lines.append(
                    f"    INDEX {str(index.id).zfill(index_width)} {sectors_to_cuestamp(sector_pos + index.sector_offset)}"
                )
        # No block size means no track anywhere, so nothing after this is emitted
        if disc.block_size:
            sector_pos += file.size // disc.block_size
    return "\n".join(lines) + "\n"
