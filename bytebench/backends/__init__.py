"""Codec and hash backends.

The two lists below fix registration order: codec backends first, then
hash backends, each in declaration order.
"""

from bytebench.backends.base import Backend
from bytebench.backends.blake3 import Blake3Backend, Blake3ThreadedBackend
from bytebench.backends.brotli import BrotliBackend
from bytebench.backends.cramjam import CramjamBackend
from bytebench.backends.isal import IsalBackend
from bytebench.backends.lz4 import Lz4BlockBackend, Lz4FrameBackend
from bytebench.backends.mmh3 import Mmh3Backend
from bytebench.backends.pycryptodome import PycryptodomeBackend
from bytebench.backends.snappy import SnappyBackend
from bytebench.backends.stdlib import (
    Bz2Backend,
    ChecksumBackend,
    DeflateBackend,
    GzipBackend,
    HashlibBackend,
    LzmaBackend,
    ZlibBackend,
)
from bytebench.backends.xxhash import XxhashBackend
from bytebench.backends.zstandard import ZstandardBackend
from bytebench.engine.entry import EntryKind

__all__ = [
    "Backend",
    "Blake3Backend",
    "Blake3ThreadedBackend",
    "BrotliBackend",
    "Bz2Backend",
    "ChecksumBackend",
    "CramjamBackend",
    "DeflateBackend",
    "GzipBackend",
    "HashlibBackend",
    "IsalBackend",
    "LzmaBackend",
    "Lz4BlockBackend",
    "Lz4FrameBackend",
    "Mmh3Backend",
    "PycryptodomeBackend",
    "SnappyBackend",
    "XxhashBackend",
    "ZlibBackend",
    "ZstandardBackend",
    "default_backends",
    "get_backend",
]


_CODEC_BACKENDS: list[Backend] = [
    # Standard library
    ZlibBackend(),
    GzipBackend(),
    DeflateBackend(),
    Bz2Backend(),
    LzmaBackend(),
    # Native bindings
    ZstandardBackend(),
    BrotliBackend(),
    Lz4FrameBackend(),
    Lz4BlockBackend(),
    SnappyBackend(),
    # Alternative builds
    CramjamBackend(),
    IsalBackend(),
]

_HASH_BACKENDS: list[Backend] = [
    HashlibBackend(),
    ChecksumBackend(),
    XxhashBackend(),
    Blake3Backend(),
    Blake3ThreadedBackend(),
    PycryptodomeBackend(),
    Mmh3Backend(),
]


def default_backends(kind: EntryKind | None = None) -> list[Backend]:
    """Return the built-in backends in registration order.

    Args:
        kind: Restrict to codec or hash backends; None returns both.
    """
    if kind == EntryKind.CODEC:
        return list(_CODEC_BACKENDS)
    if kind == EntryKind.HASH:
        return list(_HASH_BACKENDS)
    return _CODEC_BACKENDS + _HASH_BACKENDS


def get_backend(name: str, kind: EntryKind) -> Backend | None:
    """Find a built-in backend by implementation name and kind."""
    for backend in default_backends(kind):
        if backend.name == name:
            return backend
    return None
