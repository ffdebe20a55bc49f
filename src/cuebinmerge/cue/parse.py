from __future__ import annotations

import dataclasses
import ntpath
import pathlib
from collections.abc import Iterable
from typing import NamedTuple

from lark import Lark, Token, Transformer, UnexpectedInput, v_args

from cuebinmerge.cue.models import Disc, File, Index, Track, parse_track_type
from cuebinmerge.errors import MalformedCueLine

__all__ = [
    "CueLine",
    "ParserState",
    "tokenize_cue_line",
    "parse_cue_lines",
    "parse_cue_str",
    "parse_cuefile",
]


class CueLineTransformer(Transformer):
    @v_args(inline=True)
    def field(self, token: Token) -> str:
        return str(token)

    def line(self, fields: list[str]) -> list[str]:
        return fields


lark_parser = Lark.open(
    "cue.lark",
    rel_to=__file__,
    parser="lalr",
    start="line",
    transformer=CueLineTransformer(),
)


class CueLine(NamedTuple):
    keyword: str
    middle: str
    last: str


@dataclasses.dataclass()
class ParserState:
    disc: Disc
    cue_dir: pathlib.Path
    current_file: File | None = None
    current_track: Track | None = None


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


MERGED_KEYWORDS = frozenset({"FILE", "TRACK", "INDEX"})


def tokenize_cue_line(line: str) -> CueLine:
    try:
        fields: list[str] = lark_parser.parse(line)
    except UnexpectedInput as e:
        fields = line.split()
        # Directives that are skipped anyway keep their plain whitespace fields
        if not fields or fields[0] in MERGED_KEYWORDS:
            raise MalformedCueLine(line, str(e).splitlines()[0]) from e
    if len(fields) < 3:
        raise MalformedCueLine(line, f"expected at least 3 fields, got {len(fields)}")
    return CueLine(fields[0], " ".join(fields[1:-1]), fields[-1])


def parse_number(value: str, line: str) -> int:
    try:
        return int(value, 10)
    except ValueError as e:
        raise MalformedCueLine(line, f"{value!r} is not a number") from e


def file_line(state: ParserState, cue_line: CueLine) -> None:
    # Only the file name is kept, the sheet's own directory replaces any path
    file_name = ntpath.basename(unquote(cue_line.middle))
    state.current_file = File.from_path(state.cue_dir.joinpath(file_name))
    state.disc.files.append(state.current_file)


def track_line(state: ParserState, cue_line: CueLine, line: str) -> None:
    if state.current_file is None:
        return
    track = Track(parse_number(cue_line.middle, line), parse_track_type(cue_line.last))
    if state.disc.block_size is None:
        state.disc.block_size = track.track_type.sector_size
    state.current_file.tracks.append(track)
    state.current_track = track


def index_line(state: ParserState, cue_line: CueLine, line: str) -> None:
    if state.current_track is None:
        return
    state.current_track.indexes.append(
        Index(parse_number(cue_line.middle, line), cue_line.last)
    )


def parse_cue_lines(
    lines: Iterable[str], cue_dir: pathlib.Path, base_name: str
) -> Disc:
    state = ParserState(Disc(base_name), cue_dir)
    for line in lines:
        if not line.strip():
            continue
        cue_line = tokenize_cue_line(line)
        if cue_line.keyword == "FILE":
            file_line(state, cue_line)
        elif cue_line.keyword == "TRACK":
            track_line(state, cue_line, line)
        elif cue_line.keyword == "INDEX":
            index_line(state, cue_line, line)
    return state.disc


def parse_cue_str(content: str, cue_dir: pathlib.Path, base_name: str) -> Disc:
    return parse_cue_lines(content.splitlines(), cue_dir, base_name)


def parse_cuefile(cue_path: pathlib.Path) -> Disc:
    cue_path = pathlib.Path(cue_path).expanduser().resolve()
    with cue_path.open("r", encoding="utf-8-sig") as f:
        return parse_cue_lines(f, cue_path.parent, cue_path.stem)
