from __future__ import annotations

import dataclasses
import pathlib

from cuebinmerge.cue.timestamp import cuestamp_to_sectors
from cuebinmerge.errors import InvalidTrackType, SourceFileNotFound

__all__ = [
    "TrackType",
    "TRACK_TYPES",
    "parse_track_type",
    "sector_size",
    "Index",
    "Track",
    "File",
    "Disc",
]


@dataclasses.dataclass(frozen=True)
class TrackType:
    name: str
    sector_size: int

    def __str__(self) -> str:
        return self.name


AUDIO = TrackType("AUDIO", 2352)
CDG = TrackType("CDG", 2448)
MODE1_2048 = TrackType("MODE1/2048", 2048)
MODE1_2352 = TrackType("MODE1/2352", 2352)
MODE2_2336 = TrackType("MODE2/2336", 2336)
MODE2_2352 = TrackType("MODE2/2352", 2352)
CDI_2336 = TrackType("CDI/2336", 2336)
CDI_2352 = TrackType("CDI/2352", 2352)

# Lookup order matters, the first name contained in a label wins
TRACK_TYPES: tuple[TrackType, ...] = (
    AUDIO,
    CDG,
    MODE1_2048,
    MODE1_2352,
    MODE2_2336,
    MODE2_2352,
    CDI_2336,
    CDI_2352,
)


def parse_track_type(label: str) -> TrackType:
    for track_type in TRACK_TYPES:
        if track_type.name in label:
            return track_type
    raise InvalidTrackType(label)


def sector_size(track_type: TrackType) -> int:
    return track_type.sector_size


@dataclasses.dataclass(frozen=True)
class Index:
    id: int
    stamp: str
    sector_offset: int = dataclasses.field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "sector_offset", cuestamp_to_sectors(self.stamp))


@dataclasses.dataclass()
class Track:
    number: int
    track_type: TrackType
    indexes: list[Index] = dataclasses.field(default_factory=list)


@dataclasses.dataclass()
class File:
    path: pathlib.Path
    size: int
    tracks: list[Track] = dataclasses.field(default_factory=list)

    @classmethod
    def from_path(cls, path: pathlib.Path) -> File:
        """Open a source bin, reading its byte length right away."""
        if not path.is_file():
            raise SourceFileNotFound(str(path))
        return cls(path, path.stat().st_size)


@dataclasses.dataclass()
class Disc:
    base_name: str
    files: list[File] = dataclasses.field(default_factory=list)
    # Sector size of the first track in the sheet, shared by every file
    block_size: int | None = None

    @property
    def track_count(self) -> int:
        return sum(len(file.tracks) for file in self.files)
