"""Shared fixtures for bytebench tests."""

import sys

import pytest

from bytebench.engine.entry import codec_entry, hash_entry
from bytebench.utils.logger import Logger
from bytebench.workload import Workload


@pytest.fixture(autouse=True)
def configured_logger():
    """Engine code logs through Logger, which must be configured first."""
    if not Logger.is_configured():
        Logger.configure(level="WARNING", output=sys.stderr, timestamps=False)
    yield


def _inflate(data: bytes) -> bytes:
    """Fake codec whose output is larger than its input."""
    return b"\x00" * 16 + data


def _deflate(data: bytes) -> bytes:
    return data[16:]


def _halve(data: bytes) -> bytes:
    """Fake codec storing every other byte plus the original length."""
    return len(data).to_bytes(8, "little") + data[::2]


def _unhalve(data: bytes) -> bytes:
    size = int.from_bytes(data[:8], "little")
    kept = data[8:]
    out = bytearray(size)
    out[::2] = kept
    # Odd positions are zero in the test workload
    return bytes(out)


@pytest.fixture
def inflating_entry():
    return codec_entry("fake-inflate", "inflate", _inflate, _deflate)


@pytest.fixture
def halving_entry():
    return codec_entry("fake-halve", "halve", _halve, _unhalve)


@pytest.fixture
def broken_entry():
    """Codec that loses its last byte on decompress."""
    return codec_entry("fake-broken", "broken", lambda b: b, lambda b: b[:-1])


@pytest.fixture
def raising_entry():
    def fail(data: bytes) -> bytes:
        raise RuntimeError("boom")

    return codec_entry("fake-raise", "raise", fail, fail)


@pytest.fixture
def length_hash_entry():
    return hash_entry("fake-hash", "LEN", lambda b: len(b).to_bytes(4, "big"))


@pytest.fixture
def even_workload():
    """Workload whose odd bytes are zero, so the halving codec is lossless."""
    data = bytes(b if i % 2 == 0 else 0 for i, b in enumerate(range(256))) * 16
    return Workload("even", data)


@pytest.fixture
def empty_workload():
    return Workload("empty", b"")
