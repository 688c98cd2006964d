"""Correctness gate for codec entries.

A codec's timings are only trusted once its own output decompresses back
to the exact input. The gate's compress and decompress calls are the
single-threaded timed calls, so no extra work is done to verify.
"""

from collections.abc import Callable
from dataclasses import dataclass

from bytebench.engine.entry import CodecCapability
from bytebench.engine.errors import RoundTripMismatchError, TransformFailure
from bytebench.engine.timing import time_once


@dataclass(frozen=True)
class VerifiedSample:
    """Output of a passed gate: the compressed bytes and both call durations."""

    compressed: bytes
    compress_seconds: float
    decompress_seconds: float


def invoke(operation: str, fn: Callable[[bytes], bytes], data: bytes) -> bytes:
    """Call a transform, wrapping any exception in TransformFailure."""
    try:
        return fn(data)
    except Exception as e:
        raise TransformFailure(operation, e) from e


def check_round_trip(original: bytes, recovered: bytes) -> None:
    """Raise RoundTripMismatchError unless ``recovered`` equals ``original``."""
    if recovered != original:
        raise RoundTripMismatchError(original, recovered)


def timed_verify(codec: CodecCapability, data: bytes) -> VerifiedSample:
    """Compress and decompress ``data`` once each, timing both calls.

    Raises:
        TransformFailure: If either call raised.
        RoundTripMismatchError: If the recovered bytes differ from ``data``.
    """
    compressed, compress_seconds = time_once(
        lambda: invoke("compress", codec.compress, data)
    )
    recovered, decompress_seconds = time_once(
        lambda: invoke("decompress", codec.decompress, compressed)
    )
    check_round_trip(data, recovered)
    return VerifiedSample(compressed, compress_seconds, decompress_seconds)


def verify(codec: CodecCapability, data: bytes) -> bytes:
    """Run the correctness gate and return the compressed bytes.

    Raises:
        TransformFailure: If either call raised.
        RoundTripMismatchError: If the recovered bytes differ from ``data``.
    """
    return timed_verify(codec, data).compressed
