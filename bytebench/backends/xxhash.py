"""xxHash family via the ``xxhash`` package."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, hash_entry


class XxhashBackend(Backend):
    """XXH32, XXH64 and the XXH3 64/128-bit variants, seed 0."""

    # (variant, hasher class name)
    ALGORITHMS = (
        ("XXH-32", "xxh32"),
        ("XXH-64", "xxh64"),
        ("XXH3-64", "xxh3_64"),
        ("XXH3-128", "xxh3_128"),
    )

    @property
    def name(self) -> str:
        return "xxhash"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    @property
    def requirement(self) -> str:
        return "xxhash"

    def modules(self) -> tuple[str, ...]:
        return ("xxhash",)

    def build_entries(self) -> list[AlgorithmEntry]:
        xxhash = self.require("xxhash")
        entries = []
        for variant, attr in self.ALGORITHMS:
            hasher = getattr(xxhash, attr, None)
            # XXH3 needs xxhash >= 2.0
            if hasher is None:
                continue
            entries.append(
                hash_entry(
                    self.name,
                    variant,
                    lambda b, hasher=hasher: hasher(b, seed=0).digest(),
                )
            )
        return entries
