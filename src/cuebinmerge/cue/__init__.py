from .models import (
    TRACK_TYPES,
    Disc,
    File,
    Index,
    Track,
    TrackType,
    parse_track_type,
    sector_size,
)
from .parse import (
    CueLine,
    parse_cue_lines,
    parse_cue_str,
    parse_cuefile,
    tokenize_cue_line,
)
from .timestamp import cuestamp_to_sectors, sectors_to_cuestamp

__all__ = [
    "TRACK_TYPES",
    "CueLine",
    "Disc",
    "File",
    "Index",
    "Track",
    "TrackType",
    "cuestamp_to_sectors",
    "parse_cue_lines",
    "parse_cue_str",
    "parse_cuefile",
    "parse_track_type",
    "sector_size",
    "sectors_to_cuestamp",
    "tokenize_cue_line",
]
