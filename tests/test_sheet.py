import pathlib

from cuebinmerge.cue import Disc, File, Index, Track, parse_cue_str, parse_track_type
from cuebinmerge.merge import render_merged_sheet


def one_track_file(name: str, size: int, number: int, label: str = "AUDIO") -> File:
    track = Track(number, parse_track_type(label), [Index(1, "00:00:00")])
    return File(pathlib.Path(name), size, [track])


def make_disc(*files: File, block_size: int | None = 2352) -> Disc:
    return Disc("disc", list(files), block_size)


def test_offsets_propagate_from_previous_file_length(tmp_path: pathlib.Path):
    _ = tmp_path.joinpath("a.bin").write_bytes(bytes(2352000))
    _ = tmp_path.joinpath("b.bin").write_bytes(bytes(2352))
    disc = parse_cue_str(
        'FILE "a.bin" BINARY\n  TRACK 01 MODE1/2352\n    INDEX 01 00:00:00\n'
        'FILE "b.bin" BINARY\n  TRACK 02 MODE1/2352\n    INDEX 01 00:00:00\n',
        tmp_path,
        "disc",
    )
    assert render_merged_sheet(disc, "merged") == (
        'FILE "merged.bin" BINARY\n'
        "  TRACK 01 MODE1/2352\n"
        "    INDEX 01 00:00:00\n"
        "  TRACK 02 MODE1/2352\n"
        "    INDEX 01 00:13:20\n"
    )


def test_index_offsets_are_relative_to_own_file():
    audio = parse_track_type("AUDIO")
    first = File(
        pathlib.Path("a.bin"),
        2352 * 4500,
        [Track(1, audio, [Index(1, "00:00:00")])],
    )
    second = File(
        pathlib.Path("b.bin"),
        2352 * 300,
        [Track(2, audio, [Index(0, "00:00:00"), Index(1, "00:02:00")])],
    )
    third = File(
        pathlib.Path("c.bin"),
        2352,
        [Track(3, audio, [Index(0, "00:00:00"), Index(1, "00:02:05")])],
    )
    sheet = render_merged_sheet(make_disc(first, second, third), "disc")
    assert sheet.splitlines()[1:] == [
        "  TRACK 01 AUDIO",
        "    INDEX 01 00:00:00",
        "  TRACK 02 AUDIO",
        "    INDEX 00 01:00:00",
        "    INDEX 01 01:02:00",
        "  TRACK 03 AUDIO",
        "    INDEX 00 01:04:00",
        "    INDEX 01 01:06:05",
    ]


def test_partial_trailing_sector_is_dropped():
    first = one_track_file("a.bin", 2352 * 2 + 2351, 1)
    second = one_track_file("b.bin", 2352, 2)
    sheet = render_merged_sheet(make_disc(first, second), "disc")
    assert sheet.splitlines()[-1] == "    INDEX 01 00:00:02"


def test_global_block_size_is_used_for_every_file():
    first = one_track_file("a.bin", 2048 * 75, 1, "MODE1/2048")
    second = one_track_file("b.bin", 2352 * 75, 2)
    third = one_track_file("c.bin", 0, 3)
    disc = make_disc(first, second, third, block_size=2048)
    sheet = render_merged_sheet(disc, "disc")
    # 2352 * 75 bytes read as 2048 byte sectors is 86 sectors
    assert sheet.splitlines()[-1] == "    INDEX 01 00:02:11"


def test_track_number_width_grows_with_track_count():
    audio = parse_track_type("AUDIO")
    tracks = [Track(n, audio, [Index(1, "00:00:00")]) for n in range(1, 101)]
    disc = make_disc(File(pathlib.Path("a.bin"), 0, tracks))
    sheet = render_merged_sheet(disc, "disc")
    track_lines = [line for line in sheet.splitlines() if "TRACK" in line]
    assert track_lines[0] == "  TRACK 001 AUDIO"
    assert track_lines[-1] == "  TRACK 100 AUDIO"


def test_small_counts_are_padded_to_two_digits():
    audio = parse_track_type("AUDIO")
    indexes = [Index(i, "00:00:00") for i in range(0, 9)]
    sheet = render_merged_sheet(
        make_disc(File(pathlib.Path("a.bin"), 0, [Track(1, audio, indexes)])), "disc"
    )
    assert "  TRACK 01 AUDIO" in sheet.splitlines()
    assert "    INDEX 08 00:00:00" in sheet.splitlines()


def test_index_width_is_per_track():
    audio = parse_track_type("AUDIO")
    busy = Track(1, audio, [Index(i, "00:00:00") for i in range(0, 100)])
    quiet = Track(2, audio, [Index(1, "00:00:00")])
    sheet = render_merged_sheet(
        make_disc(File(pathlib.Path("a.bin"), 0, [busy, quiet])), "disc"
    ).splitlines()
    assert "    INDEX 000 00:00:00" in sheet
    assert sheet[-1] == "    INDEX 01 00:00:00"


def test_file_without_tracks_still_advances_position():
    audio = parse_track_type("AUDIO")
    empty = File(pathlib.Path("a.bin"), 2352 * 75, [])
    second = File(pathlib.Path("b.bin"), 0, [Track(1, audio, [Index(1, "00:00:00")])])
    sheet = render_merged_sheet(make_disc(empty, second), "disc")
    assert sheet.splitlines()[-1] == "    INDEX 01 00:01:00"


def test_disc_without_tracks():
    empty = File(pathlib.Path("a.bin"), 1234, [])
    assert render_merged_sheet(make_disc(empty, block_size=None), "x") == (
        'FILE "x.bin" BINARY\n'
    )
