import pathlib
from collections.abc import Callable

import pytest

SheetFactory = Callable[[str, str, dict[str, bytes]], pathlib.Path]


@pytest.fixture
def make_sheet(tmp_path: pathlib.Path) -> SheetFactory:
    """Write bin files and a cue sheet into tmp_path/input, return the sheet path."""

    def factory(name: str, content: str, bins: dict[str, bytes]) -> pathlib.Path:
        input_dir = tmp_path.joinpath("input")
        input_dir.mkdir(exist_ok=True)
        for bin_name, data in bins.items():
            _ = input_dir.joinpath(bin_name).write_bytes(data)
        cue_path = input_dir.joinpath(f"{name}.cue")
        _ = cue_path.write_text(content, encoding="utf-8")
        return cue_path

    return factory


@pytest.fixture
def two_track_sheet() -> str:
    return """FILE "Game (Track 1).bin" BINARY
  TRACK 01 MODE2/2352
    INDEX 01 00:00:00
FILE "Game (Track 2).bin" BINARY
  TRACK 02 AUDIO
    INDEX 00 00:00:00
    INDEX 01 00:02:00
"""
