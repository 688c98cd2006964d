"""LZ4 codecs via the ``lz4`` package (frame and block formats)."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


class Lz4FrameBackend(Backend):
    """LZ4 frame format at two compression levels."""

    LEVELS = (1, 6)

    @property
    def name(self) -> str:
        return "lz4-frame"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "lz4"

    def modules(self) -> tuple[str, ...]:
        return ("lz4.frame",)

    def build_entries(self) -> list[AlgorithmEntry]:
        frame = self.require("lz4.frame")
        return [
            codec_entry(
                self.name,
                f"lz4-{level}",
                lambda b, level=level: frame.compress(b, compression_level=level),
                frame.decompress,
            )
            for level in self.LEVELS
        ]


class Lz4BlockBackend(Backend):
    """Raw LZ4 blocks with the uncompressed size prepended."""

    @property
    def name(self) -> str:
        return "lz4-block"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "lz4"

    def modules(self) -> tuple[str, ...]:
        return ("lz4.block",)

    def build_entries(self) -> list[AlgorithmEntry]:
        block = self.require("lz4.block")
        return [
            codec_entry(
                self.name,
                "lz4",
                lambda b: block.compress(b, store_size=True),
                block.decompress,
            )
        ]
