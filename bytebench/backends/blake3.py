"""BLAKE3 via the ``blake3`` package, single- and multi-threaded."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, hash_entry


class Blake3Backend(Backend):
    """BLAKE3 hashed on the calling thread."""

    @property
    def name(self) -> str:
        return "blake3"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    @property
    def requirement(self) -> str:
        return "blake3"

    def modules(self) -> tuple[str, ...]:
        return ("blake3",)

    def build_entries(self) -> list[AlgorithmEntry]:
        blake3 = self.require("blake3")
        return [
            hash_entry(self.name, "BLAKE3", lambda b: blake3.blake3(b).digest())
        ]


class Blake3ThreadedBackend(Blake3Backend):
    """BLAKE3 with the library's internal thread pool (max_threads=AUTO)."""

    @property
    def name(self) -> str:
        return "blake3-mt"

    def build_entries(self) -> list[AlgorithmEntry]:
        blake3 = self.require("blake3")
        auto = blake3.blake3.AUTO
        return [
            hash_entry(
                self.name,
                "BLAKE3",
                lambda b: blake3.blake3(b, max_threads=auto).digest(),
            )
        ]
