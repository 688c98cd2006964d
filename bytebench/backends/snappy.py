"""Snappy raw format via the ``python-snappy`` package."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


class SnappyBackend(Backend):
    """Snappy raw (unframed) compression."""

    @property
    def name(self) -> str:
        return "python-snappy"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "python-snappy"

    def modules(self) -> tuple[str, ...]:
        return ("snappy",)

    def build_entries(self) -> list[AlgorithmEntry]:
        snappy = self.require("snappy")
        return [codec_entry(self.name, "snappy", snappy.compress, snappy.decompress)]
