import importlib.metadata

VERSION = importlib.metadata.version("cuebinmerge")
FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60
FRAMES_PER_MINUTE = FRAMES_PER_SECOND * SECONDS_PER_MINUTE
COPY_CHUNK_SIZE = 1024 * 1024
CUE_SUFFIX = ".cue"
BIN_SUFFIX = ".bin"
