"""Standard-library codecs and hashes.

These backends are always available; they double as the reference set
that every other implementation is compared against.
"""

import bz2
import gzip
import hashlib
import lzma
import zlib

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry, hash_entry


def _raw_deflate(level: int):
    def compress(data: bytes) -> bytes:
        compressor = zlib.compressobj(level, zlib.DEFLATED, -zlib.MAX_WBITS)
        return compressor.compress(data) + compressor.flush()

    return compress


def _raw_inflate(data: bytes) -> bytes:
    return zlib.decompress(data, wbits=-zlib.MAX_WBITS)


class ZlibBackend(Backend):
    """zlib-wrapped deflate at three levels."""

    LEVELS = (1, 6, 9)

    @property
    def name(self) -> str:
        return "zlib"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    def build_entries(self) -> list[AlgorithmEntry]:
        return [
            codec_entry(
                self.name,
                f"zlib-{level}",
                lambda b, level=level: zlib.compress(b, level),
                zlib.decompress,
            )
            for level in self.LEVELS
        ]


class DeflateBackend(Backend):
    """Raw deflate streams (no zlib header or checksum)."""

    @property
    def name(self) -> str:
        return "deflate"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    def build_entries(self) -> list[AlgorithmEntry]:
        compress = _raw_deflate(zlib.Z_DEFAULT_COMPRESSION)
        return [codec_entry(self.name, "deflate", compress, _raw_inflate)]


class GzipBackend(Backend):
    """gzip framing from the gzip module (mtime pinned for stable output)."""

    @property
    def name(self) -> str:
        return "gzip"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    def build_entries(self) -> list[AlgorithmEntry]:
        return [
            codec_entry(
                self.name,
                "gzip",
                lambda b: gzip.compress(b, compresslevel=6, mtime=0),
                gzip.decompress,
            )
        ]


class Bz2Backend(Backend):
    """bzip2 at fast, default and best levels."""

    LEVELS = (("bzip2-fast", 1), ("bzip2", 6), ("bzip2-best", 9))

    @property
    def name(self) -> str:
        return "bz2"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    def build_entries(self) -> list[AlgorithmEntry]:
        return [
            codec_entry(
                self.name,
                variant,
                lambda b, level=level: bz2.compress(b, compresslevel=level),
                bz2.decompress,
            )
            for variant, level in self.LEVELS
        ]


class LzmaBackend(Backend):
    """xz container from the lzma module at the default preset."""

    @property
    def name(self) -> str:
        return "lzma"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    def build_entries(self) -> list[AlgorithmEntry]:
        return [
            codec_entry(
                self.name,
                "xz",
                lambda b: lzma.compress(b, format=lzma.FORMAT_XZ),
                lzma.decompress,
            )
        ]


class HashlibBackend(Backend):
    """Cryptographic digests from hashlib (OpenSSL where available)."""

    # (variant, hashlib name)
    ALGORITHMS = (
        ("MD5", "md5"),
        ("SHA-1", "sha1"),
        ("SHA-224", "sha224"),
        ("SHA-256", "sha256"),
        ("SHA-384", "sha384"),
        ("SHA-512", "sha512"),
        ("SHA-512-256", "sha512_256"),
        ("SHA3-224", "sha3_224"),
        ("SHA3-256", "sha3_256"),
        ("SHA3-384", "sha3_384"),
        ("SHA3-512", "sha3_512"),
        ("BLAKE2b", "blake2b"),
        ("BLAKE2s", "blake2s"),
    )

    @property
    def name(self) -> str:
        return "hashlib"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    def build_entries(self) -> list[AlgorithmEntry]:
        entries = []
        for variant, algorithm in self.ALGORITHMS:
            # sha512_256 depends on the OpenSSL build
            if algorithm not in hashlib.algorithms_available:
                continue
            entries.append(
                hash_entry(
                    self.name,
                    variant,
                    lambda b, algorithm=algorithm: hashlib.new(algorithm, b).digest(),
                )
            )
            if algorithm == "blake2b":
                entries.append(
                    hash_entry(
                        self.name,
                        "BLAKE2b-256",
                        lambda b: hashlib.blake2b(b, digest_size=32).digest(),
                    )
                )
        return entries


class ChecksumBackend(Backend):
    """Non-cryptographic checksums from the zlib module."""

    @property
    def name(self) -> str:
        return "zlib"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.HASH

    def build_entries(self) -> list[AlgorithmEntry]:
        return [
            hash_entry(
                self.name, "CRC-32", lambda b: zlib.crc32(b).to_bytes(4, "little")
            ),
            hash_entry(
                self.name, "Adler-32", lambda b: zlib.adler32(b).to_bytes(4, "little")
            ),
        ]
