from .image import consolidate, iter_merged_bytes, merge_bytes, write_merged_bin
from .sheet import render_merged_sheet

__all__ = [
    "consolidate",
    "iter_merged_bytes",
    "merge_bytes",
    "render_merged_sheet",
    "write_merged_bin",
]
