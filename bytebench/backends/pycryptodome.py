"""Pure-C digests from ``pycryptodome``, including the original Keccak."""

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, hash_entry


class PycryptodomeBackend(Backend):
    """MD5, SHA-256, SHA3-256 and Keccak-256/384/512 from Crypto.Hash."""

    KECCAK_BITS = (256, 384, 512)

    @property
    def name(self) -> str:
        return "pycryptodome"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    @property
    def requirement(self) -> str:
        return "pycryptodome"

    def modules(self) -> tuple[str, ...]:
        return ("Crypto.Hash",)

    def build_entries(self) -> list[AlgorithmEntry]:
        md5 = self.require("Crypto.Hash.MD5")
        sha256 = self.require("Crypto.Hash.SHA256")
        sha3_256 = self.require("Crypto.Hash.SHA3_256")
        keccak = self.require("Crypto.Hash.keccak")

        entries = [
            hash_entry(self.name, "MD5", lambda b: md5.new(b).digest()),
            hash_entry(self.name, "SHA-256", lambda b: sha256.new(b).digest()),
            hash_entry(self.name, "SHA3-256", lambda b: sha3_256.new(b).digest()),
        ]
        for bits in self.KECCAK_BITS:
            entries.append(
                hash_entry(
                    self.name,
                    f"Keccak-{bits}",
                    lambda b, bits=bits: keccak.new(digest_bits=bits, data=b).digest(),
                )
            )
        return entries
