"""Zstandard codecs via the ``zstandard`` package."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


class ZstandardBackend(Backend):
    """zstd at a spread of levels.

    Compressor and decompressor objects are not shared between threads, so
    each call builds its own.
    """

    LEVELS = (1, 2, 3, 11, 20)

    @property
    def name(self) -> str:
        """Return the implementation name."""
        return "zstandard"

    @property
    def kind(self) -> EntryKind:
        """Return the entry kind."""
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        """Return the distribution name."""
        return "zstandard"

    def modules(self) -> tuple[str, ...]:
        """Return the modules this backend imports."""
        return ("zstandard",)

    def build_entries(self) -> list[AlgorithmEntry]:
        """Build one entry per compression level."""
        zstd = self.require("zstandard")

        def decompress(data: bytes) -> bytes:
            # Streaming decode does not need the content size in the header
            return zstd.ZstdDecompressor().decompressobj().decompress(data)

        return [
            codec_entry(
                self.name,
                f"zstd-{level}",
                lambda b, level=level: zstd.ZstdCompressor(level=level).compress(b),
                decompress,
            )
            for level in self.LEVELS
        ]
