import re

from cuebinmerge.consts import FRAMES_PER_MINUTE, FRAMES_PER_SECOND
from cuebinmerge.errors import MalformedTimestamp

__all__ = ["sectors_to_cuestamp", "cuestamp_to_sectors"]

_CUESTAMP = re.compile(r"([0-9]+):([0-9]+):([0-9]+)")


def sectors_to_cuestamp(sectors: int) -> str:
    # Minutes keep growing past 99, there is no hour field
    if sectors < 0:
        raise ValueError(f"Sector count cannot be negative: {sectors}")
    minutes, remainder = divmod(sectors, FRAMES_PER_MINUTE)
    seconds, frames = divmod(remainder, FRAMES_PER_SECOND)
    return f"{minutes:02d}:{seconds:02d}:{frames:02d}"


def cuestamp_to_sectors(text: str) -> int:
    """Decode the trailing ``MM:SS:FF`` stamp of ``text`` into a sector count.

    Anything before the last whitespace delimited token is ignored, so both
    ``"00:02:00"`` and ``"INDEX 01 00:02:00"`` decode to 150.
    """
    tokens = text.split()
    if not tokens:
        raise MalformedTimestamp(text)
    match = _CUESTAMP.fullmatch(tokens[-1])
    if match is None:
        raise MalformedTimestamp(text)
    minutes, seconds, frames = (int(group, 10) for group in match.groups())
    return frames + seconds * FRAMES_PER_SECOND + minutes * FRAMES_PER_MINUTE
