"""Rust-backed codecs via the ``cramjam`` package.

cramjam ships its own builds of several algorithms that also have native
Python bindings, which makes it a useful second implementation of the same
variants. Its functions return ``cramjam.Buffer`` objects, so outputs are
copied into ``bytes``.
"""

from collections.abc import Callable
from types import ModuleType

from bytebench.backends.base import Backend
from bytebench.engine.entry import AlgorithmEntry, EntryKind, codec_entry


def _as_bytes(fn: Callable[[bytes], object]) -> Callable[[bytes], bytes]:
    def call(data: bytes) -> bytes:
        return bytes(fn(data))

    return call


def _at_level(codec: ModuleType, level: int) -> Callable[[bytes], object]:
    return lambda b: codec.compress(b, level=level)


class CramjamBackend(Backend):
    """snappy, lz4, zstd, brotli, gzip, deflate and bzip2 from cramjam."""

    @property
    def name(self) -> str:
        return "cramjam"

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CODEC

    @property
    def requirement(self) -> str:
        return "cramjam"

    def modules(self) -> tuple[str, ...]:
        return ("cramjam",)

    def build_entries(self) -> list[AlgorithmEntry]:
        cj = self.require("cramjam")
        table = [
            ("snappy", cj.snappy.compress_raw, cj.snappy.decompress_raw),
            ("lz4", cj.lz4.compress_block, cj.lz4.decompress_block),
            ("zstd-3", _at_level(cj.zstd, 3), cj.zstd.decompress),
            ("brotli-6", _at_level(cj.brotli, 6), cj.brotli.decompress),
            ("gzip", _at_level(cj.gzip, 6), cj.gzip.decompress),
            ("deflate", _at_level(cj.deflate, 6), cj.deflate.decompress),
            ("bzip2", _at_level(cj.bzip2, 6), cj.bzip2.decompress),
        ]
        return [
            codec_entry(self.name, variant, _as_bytes(compress), _as_bytes(decompress))
            for variant, compress, decompress in table
        ]
