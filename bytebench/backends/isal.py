"""Intel ISA-L accelerated zlib and gzip via the ``isal`` package.

ISA-L ships hand-written assembly for x86-64 and aarch64 only; on any
other machine the backend is omitted even if a wheel happens to import.
"""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


class IsalBackend(Backend):
    """zlib at ISA-L levels 1 and 3, and gzip at level 2."""

    SUPPORTED_MACHINES = ("x86_64", "amd64", "aarch64", "arm64")

    LEVELS = (1, 3)

    @property
    def name(self) -> str:
        return "isal"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "isal"

    def modules(self) -> tuple[str, ...]:
        return ("isal.isal_zlib", "isal.igzip")

    def build_entries(self) -> list[AlgorithmEntry]:
        isal_zlib = self.require("isal.isal_zlib")
        igzip = self.require("isal.igzip")
        entries = [
            codec_entry(
                self.name,
                f"zlib-{level}",
                lambda b, level=level: isal_zlib.compress(b, level),
                isal_zlib.decompress,
            )
            for level in self.LEVELS
        ]
        entries.append(
            codec_entry(
                self.name,
                "gzip",
                lambda b: igzip.compress(b, compresslevel=2),
                igzip.decompress,
            )
        )
        return entries
