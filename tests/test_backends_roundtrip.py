"""Round-trip and digest checks for every registered backend."""

import hashlib
import os
import zlib

import pytest

from bytebench.backends import (
    Blake3Backend,
    Blake3ThreadedBackend,
    BrotliBackend,
    Bz2Backend,
    ChecksumBackend,
    CramjamBackend,
    DeflateBackend,
    GzipBackend,
    HashlibBackend,
    IsalBackend,
    LzmaBackend,
    Lz4BlockBackend,
    Lz4FrameBackend,
    Mmh3Backend,
    PycryptodomeBackend,
    SnappyBackend,
    XxhashBackend,
    ZlibBackend,
    ZstandardBackend,
)
from bytebench.engine.gate import verify
from bytebench.engine.registry import EntryRegistry
from bytebench.models.constants import MIB

BUFFERS = {
    "empty": b"",
    "one": b"\x7f",
    "zeros-4k": bytes(4096),
    "random-4k": os.urandom(4096),
    "repetitive-1m": (b"bytebench " * (MIB // 10 + 1))[:MIB],
    "random-1m": os.urandom(MIB),
}

STDLIB_CODECS = [ZlibBackend, GzipBackend, DeflateBackend, Bz2Backend, LzmaBackend]


def _codec_entries(backend):
    return [(e.label, e) for e in backend.build_entries()]


@pytest.mark.parametrize("backend_cls", STDLIB_CODECS)
@pytest.mark.parametrize("buffer", sorted(BUFFERS))
def test_stdlib_codec_round_trip(backend_cls, buffer):
    """Test that every stdlib codec passes the gate on every buffer."""
    data = BUFFERS[buffer]
    for _label, entry in _codec_entries(backend_cls()):
        compressed = verify(entry.capability, data)
        assert isinstance(compressed, bytes)


def test_stdlib_codec_variants():
    """Test the variant names of the stdlib codecs."""
    assert [e.variant_name for e in ZlibBackend().build_entries()] == [
        "zlib-1",
        "zlib-6",
        "zlib-9",
    ]
    assert [e.variant_name for e in Bz2Backend().build_entries()] == [
        "bzip2-fast",
        "bzip2",
        "bzip2-best",
    ]
    assert [e.variant_name for e in DeflateBackend().build_entries()] == ["deflate"]


def test_gzip_output_is_deterministic():
    """Test that gzip output does not depend on the clock."""
    (entry,) = GzipBackend().build_entries()
    assert entry.capability.compress(b"abc") == entry.capability.compress(b"abc")


def test_raw_deflate_has_no_header():
    """Test that raw deflate is not zlib-framed."""
    (entry,) = DeflateBackend().build_entries()
    compressed = entry.capability.compress(b"hello" * 100)
    with pytest.raises(zlib.error):
        zlib.decompress(compressed)


def test_hashlib_digests():
    """Test hashlib entries against direct calls."""
    entries = {e.variant_name: e for e in HashlibBackend().build_entries()}
    data = b"bytebench"
    assert entries["MD5"].capability.hash(data) == hashlib.md5(data).digest()
    assert entries["SHA-256"].capability.hash(data) == hashlib.sha256(data).digest()
    assert len(entries["BLAKE2b-256"].capability.hash(data)) == 32
    assert len(entries["BLAKE2b"].capability.hash(data)) == 64


def test_hashlib_registration_order():
    """Test that BLAKE2b-256 follows BLAKE2b."""
    names = [e.variant_name for e in HashlibBackend().build_entries()]
    assert names[0] == "MD5"
    assert names.index("BLAKE2b-256") == names.index("BLAKE2b") + 1


def test_checksums():
    """Test CRC-32 and Adler-32 entries."""
    crc, adler = ChecksumBackend().build_entries()
    assert crc.variant_name == "CRC-32"
    assert crc.capability.hash(b"abc") == zlib.crc32(b"abc").to_bytes(4, "little")
    assert adler.capability.hash(b"") == (1).to_bytes(4, "little")


@pytest.mark.parametrize(
    ("backend_cls", "module"),
    [
        (ZstandardBackend, "zstandard"),
        (BrotliBackend, "brotli"),
        (Lz4FrameBackend, "lz4.frame"),
        (Lz4BlockBackend, "lz4.block"),
        (SnappyBackend, "snappy"),
        (CramjamBackend, "cramjam"),
    ],
)
def test_optional_codec_round_trip(backend_cls, module):
    """Test optional codecs when their library is installed."""
    pytest.importorskip(module)
    for buffer in BUFFERS.values():
        for _label, entry in _codec_entries(backend_cls()):
            assert isinstance(verify(entry.capability, buffer), bytes)


def test_isal_round_trip():
    """Test ISA-L codecs where supported."""
    pytest.importorskip("isal")
    backend = IsalBackend()
    if not backend.is_available():
        pytest.skip("ISA-L not supported on this machine")
    for buffer in BUFFERS.values():
        for _label, entry in _codec_entries(backend):
            assert isinstance(verify(entry.capability, buffer), bytes)


def test_xxhash_digests():
    """Test xxhash entries."""
    xxhash = pytest.importorskip("xxhash")
    entries = {e.variant_name: e for e in XxhashBackend().build_entries()}
    assert entries["XXH-64"].capability.hash(b"abc") == xxhash.xxh64(b"abc").digest()
    assert len(entries["XXH-32"].capability.hash(b"abc")) == 4


def test_blake3_single_and_threaded_agree():
    """Test that both BLAKE3 implementations produce the same digest."""
    pytest.importorskip("blake3")
    (single,) = Blake3Backend().build_entries()
    (threaded,) = Blake3ThreadedBackend().build_entries()
    data = os.urandom(MIB)
    assert single.variant_name == threaded.variant_name == "BLAKE3"
    assert single.capability.hash(data) == threaded.capability.hash(data)


def test_pycryptodome_matches_hashlib():
    """Test that pycryptodome's MD5 and SHA-256 agree with hashlib."""
    pytest.importorskip("Crypto.Hash")
    entries = {e.variant_name: e for e in PycryptodomeBackend().build_entries()}
    data = b"bytebench"
    assert entries["MD5"].capability.hash(data) == hashlib.md5(data).digest()
    assert entries["SHA-256"].capability.hash(data) == hashlib.sha256(data).digest()
    assert len(entries["Keccak-512"].capability.hash(data)) == 64


def test_mmh3_digest_sizes():
    """Test MurmurHash3 digest widths."""
    pytest.importorskip("mmh3")
    small, large = Mmh3Backend().build_entries()
    assert len(small.capability.hash(b"abc")) == 4
    assert len(large.capability.hash(b"abc")) == 16


def test_every_registered_codec_round_trips():
    """Test the round-trip law for everything available in this environment."""
    for entry in EntryRegistry().get_codec_entries():
        for name, buffer in BUFFERS.items():
            assert verify(entry.capability, buffer) is not None, (entry.label, name)


def test_every_registered_hash_returns_bytes():
    """Test that every hash yields a non-empty bytes digest."""
    for entry in EntryRegistry().get_hash_entries():
        digest = entry.capability.hash(BUFFERS["random-4k"])
        assert isinstance(digest, bytes) and digest, entry.label
