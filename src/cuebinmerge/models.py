import argparse
import dataclasses
import pathlib


@dataclasses.dataclass(frozen=True)
class DispatchArgs:
    cue_sheet: pathlib.Path
    output_dir: pathlib.Path


class ParserArgs(argparse.Namespace):
    input_dir: str  # pyright: ignore[reportUninitializedInstanceVariable]
    output_dir: str  # pyright: ignore[reportUninitializedInstanceVariable]
    quiet: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    verbose: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    threads: int  # pyright: ignore[reportUninitializedInstanceVariable]
