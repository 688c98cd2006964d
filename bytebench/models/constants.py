"""Constants for bytebench models and commands."""

from enum import StrEnum, auto

MIB = 1024 * 1024

DEFAULT_CODEC_SIZE_MB = 4
DEFAULT_HASH_SIZE_MB = 20

DEFAULT_CODEC_WORKLOADS = ("json", "text", "random")
DEFAULT_HASH_WORKLOADS = ("zeros",)

NOT_AVAILABLE = "N/A"


class Operation(StrEnum):
    """Timed operations."""

    COMPRESS = auto()
    DECOMPRESS = auto()
    HASH = auto()


class BenchKind(StrEnum):
    """Benchmark families exposed on the command line."""

    COMPRESS = auto()
    HASH = auto()
