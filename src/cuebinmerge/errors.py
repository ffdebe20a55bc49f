"""Errors raised while reading a CUE sheet or writing its merged image."""

__all__ = [
    "CueBinError",
    "InvalidTrackType",
    "MalformedTimestamp",
    "MalformedCueLine",
    "SourceFileNotFound",
    "OutputAlreadyExists",
    "NoSourceFiles",
]


class CueBinError(Exception):
    """Base exception for every failure of a single sheet's merge."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidTrackType(CueBinError):
    """Raised when a TRACK line names a type outside the known catalogue."""

    def __init__(self, label: str):
        super().__init__("Invalid track type", label)
        self.label = label


class MalformedTimestamp(CueBinError):
    """Raised when an INDEX stamp is not a MM:SS:FF triple."""

    def __init__(self, stamp: str):
        super().__init__("Malformed cue timestamp", repr(stamp))
        self.stamp = stamp


class MalformedCueLine(CueBinError):
    def __init__(self, line: str, details: str | None = None):
        super().__init__(f"Invalid cue line {line.strip()!r}", details)
        self.line = line


class SourceFileNotFound(CueBinError):
    def __init__(self, file_path: str):
        super().__init__("Bin file not found or not readable", file_path)
        self.file_path = file_path


class OutputAlreadyExists(CueBinError):
    """Raised instead of overwriting the bin file of an earlier run."""

    def __init__(self, file_path: str):
        super().__init__("Target merged bin path already exists", file_path)
        self.file_path = file_path


class NoSourceFiles(CueBinError):
    def __init__(self, base_name: str):
        super().__init__("Cue sheet references no bin files", base_name)
        self.base_name = base_name
