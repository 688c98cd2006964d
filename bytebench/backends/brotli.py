"""Brotli codecs via the ``brotli`` package."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


class BrotliBackend(Backend):
    """Brotli at qualities 3, 6 (default window) and 9."""

    QUALITIES = (3, 6, 9)

    @property
    def name(self) -> str:
        return "brotli"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "brotli"

    def modules(self) -> tuple[str, ...]:
        return ("brotli",)

    def build_entries(self) -> list[AlgorithmEntry]:
        brotli = self.require("brotli")
        return [
            codec_entry(
                self.name,
                f"brotli-{quality}",
                lambda b, quality=quality: brotli.compress(b, quality=quality),
                brotli.decompress,
            )
            for quality in self.QUALITIES
        ]
