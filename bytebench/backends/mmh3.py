"""MurmurHash3 via the ``mmh3`` package."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, hash_entry


class Mmh3Backend(Backend):
    """MurmurHash3 x86 32-bit and x64 128-bit, seed 0."""

    @property
    def name(self) -> str:
        return "mmh3"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    @property
    def requirement(self) -> str:
        return "mmh3"

    def modules(self) -> tuple[str, ...]:
        return ("mmh3",)

    def build_entries(self) -> list[AlgorithmEntry]:
        mmh3 = self.require("mmh3")
        return [
            hash_entry(
                self.name,
                "MurmurHash3-32",
                lambda b: mmh3.hash(b, 0, signed=False).to_bytes(4, "little"),
            ),
            hash_entry(self.name, "MurmurHash3-128", lambda b: mmh3.hash_bytes(b)),
        ]
