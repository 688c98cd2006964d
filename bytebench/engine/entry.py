"""Algorithm entries and the capabilities they expose.

An entry binds an implementation name ("zstandard", "cramjam") and a
variant name ("zstd-3") to exactly one capability. Capabilities are
closed over their parameters when the entry is built, so a compression
level is part of the entry rather than a runtime argument.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

Transform = Callable[[bytes], bytes]


class EntryKind(Enum):
    """Kind of transform an entry benchmarks."""

    CODEC = "codec"
    HASH = "hash"


@dataclass(frozen=True)
class CodecCapability:
    """A compressor: a compress/decompress pair of pure functions."""

    compress: Transform
    decompress: Transform


@dataclass(frozen=True)
class HashCapability:
    """A hash function returning its digest as bytes."""

    hash: Transform


Capability = CodecCapability | HashCapability


@dataclass(frozen=True)
class AlgorithmEntry:
    """One benchmarkable implementation of one algorithm variant."""

    implementation_name: str
    variant_name: str
    capability: Capability

    @property
    def kind(self) -> EntryKind:
        """Return whether this entry is a codec or a hash."""
        if isinstance(self.capability, CodecCapability):
            return EntryKind.CODEC
        return EntryKind.HASH

    @property
    def label(self) -> str:
        """Return "implementation/variant" for logs and error keys."""
        return f"{self.implementation_name}/{self.variant_name}"


def codec_entry(
    implementation_name: str,
    variant_name: str,
    compress: Transform,
    decompress: Transform,
) -> AlgorithmEntry:
    """Build a codec entry."""
    return AlgorithmEntry(
        implementation_name, variant_name, CodecCapability(compress, decompress)
    )


def hash_entry(
    implementation_name: str, variant_name: str, hash_fn: Transform
) -> AlgorithmEntry:
    """Build a hash entry."""
    return AlgorithmEntry(implementation_name, variant_name, HashCapability(hash_fn))
