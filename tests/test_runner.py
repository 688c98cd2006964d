"""Tests for the benchmark runner."""

import threading
import zlib

import pytest

from bytebench.engine.entry import AlgorithmEntry, codec_entry
from bytebench.engine.errors import RoundTripMismatchError, TransformFailure
from bytebench.engine.runner import BenchmarkRunner
from bytebench.models.constants import BenchKind, Operation
from bytebench.workload import Workload, WorkloadError


def test_scenario_inflate_halve_broken(
    inflating_entry, halving_entry, broken_entry, even_workload
):
    """Test that good codecs are measured and a lossy one becomes a failure."""
    runner = BenchmarkRunner(threads=2)
    results = runner.run(
        [inflating_entry, halving_entry, broken_entry], [even_workload]
    )

    assert len(results) == 2
    assert len(results.failures) == 1
    assert results.has_failures

    failure = results.failures[0]
    assert failure.entry == broken_entry
    assert isinstance(failure.error, RoundTripMismatchError)

    size = even_workload.size
    records = {r.variant: r for r in results.records()}
    assert set(records) == {"inflate", "halve"}
    assert records["inflate"].output_size == size + 16
    assert records["inflate"].compression_ratio == pytest.approx(size / (size + 16))
    assert records["halve"].output_size == size // 2 + 8
    assert records["halve"].compression_ratio == pytest.approx(size / (size // 2 + 8))

    # Ordered by compressed size
    assert [r.variant for r in results.records()] == ["halve", "inflate"]


def test_failed_entry_never_measured(broken_entry, raising_entry, even_workload):
    """Test that failed entries are absent from measurements."""
    runner = BenchmarkRunner(threads=1)
    results = runner.run([broken_entry, raising_entry], [even_workload])
    assert results.measurements == []
    assert [f.error_type for f in results.failures] == [
        "RoundTripMismatchError",
        "TransformFailure",
    ]


def test_empty_workload(empty_workload):
    """Test that empty input never divides by zero."""
    entry = codec_entry("zlib", "zlib-6", zlib.compress, zlib.decompress)
    runner = BenchmarkRunner(threads=2)
    results = runner.run([entry], [empty_workload])

    assert not results.has_failures
    record = results.records()[0]
    assert record.input_size == 0
    assert record.output_size == len(zlib.compress(b""))
    assert record.compression_ratio == 0
    for op in (Operation.COMPRESS, Operation.DECOMPRESS):
        report = record.operation(op)
        assert report.single_thread_mbps in (0, None)


def test_measure_codec_timings_order(halving_entry, even_workload):
    """Test that a codec measurement has compress then decompress timings."""
    runner = BenchmarkRunner(threads=2)
    measurement = runner.measure(halving_entry, even_workload)
    runner.pool.shutdown()

    assert [t.operation for t in measurement.timings] == [
        Operation.COMPRESS,
        Operation.DECOMPRESS,
    ]
    assert all(t.single_thread >= 0 for t in measurement.timings)
    assert all(t.multi_thread is not None for t in measurement.timings)


def test_multithread_disabled(halving_entry, even_workload):
    """Test that disabling the parallel pass leaves multi_thread unset."""
    runner = BenchmarkRunner(threads=2, multithread=False)
    measurement = runner.measure(halving_entry, even_workload)
    assert all(t.multi_thread is None for t in measurement.timings)


def test_measure_hash(length_hash_entry, even_workload):
    """Test hash measurement records the digest and one timing."""
    runner = BenchmarkRunner(threads=2)
    measurement = runner.measure(length_hash_entry, even_workload)
    runner.pool.shutdown()

    assert measurement.digest == even_workload.size.to_bytes(4, "big")
    assert measurement.output_size is None
    timing = measurement.timing(Operation.HASH)
    assert timing is not None
    assert timing.multi_thread is not None


def test_hash_failure_is_recorded(even_workload):
    """Test that a raising hash is recorded as TransformFailure."""
    from bytebench.engine.entry import hash_entry

    def fail(data):
        raise ValueError("no")

    entry = hash_entry("fake", "FAIL", fail)
    results = BenchmarkRunner(threads=1).run(
        [entry], [even_workload], kind=BenchKind.HASH
    )
    assert isinstance(results.failures[0].error, TransformFailure)


def test_stop_on_error(broken_entry, halving_entry, even_workload):
    """Test that stop_on_error abandons the remaining entries."""
    runner = BenchmarkRunner(threads=1, stop_on_error=True)
    results = runner.run([broken_entry, halving_entry], [even_workload])
    assert len(results.failures) == 1
    assert len(results) == 0


def test_failure_is_per_workload(even_workload):
    """Test that an entry failing on one workload is still measured on others."""

    def compress(data):
        if data == b"bad":
            raise RuntimeError("refuses this input")
        return data

    entry = codec_entry("picky", "picky", compress, lambda b: b)
    workloads = [Workload("bad", b"bad"), even_workload]
    results = BenchmarkRunner(threads=1).run([entry], workloads)

    assert [f.workload for f in results.failures] == ["bad"]
    assert [m.workload for m in results.measurements] == ["even"]
    assert results.workload_names == ["bad", "even"]


def test_unsupported_capability(even_workload):
    """Test that an unknown capability type is rejected."""
    entry = AlgorithmEntry("odd", "odd", object())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BenchmarkRunner(threads=1).measure(entry, even_workload)


def test_runner_rejects_zero_threads():
    """Test that a zero-sized pool is rejected."""
    with pytest.raises(ValueError):
        BenchmarkRunner(threads=0)


class RecordingCodec:
    """Fake codec that logs each call with whether it ran on the main thread."""

    def __init__(self, lossy: bool = False):
        self.lossy = lossy
        self.calls: list[tuple[str, bool]] = []
        self._lock = threading.Lock()

    def _record(self, op: str) -> None:
        on_main = threading.current_thread() is threading.main_thread()
        with self._lock:
            self.calls.append((op, on_main))

    def compress(self, data: bytes) -> bytes:
        self._record("compress")
        return data

    def decompress(self, data: bytes) -> bytes:
        self._record("decompress")
        return data[:-1] if self.lossy else data

    def entry(self) -> AlgorithmEntry:
        name = "lossy" if self.lossy else "recorded"
        return codec_entry(f"fake-{name}", name, self.compress, self.decompress)


def test_codec_call_order(even_workload):
    """Test the single-threaded round trip runs before the parallel pass."""
    codec = RecordingCodec()
    runner = BenchmarkRunner(threads=2)
    runner.measure(codec.entry(), even_workload)
    runner.pool.shutdown()

    assert codec.calls == [
        ("compress", True),
        ("decompress", True),
        ("compress", False),
        ("compress", False),
        ("decompress", False),
        ("decompress", False),
    ]


def test_gate_failure_skips_parallel_pass(even_workload):
    """Test that a codec failing the round trip is never run in parallel."""
    codec = RecordingCodec(lossy=True)
    results = BenchmarkRunner(threads=2).run([codec.entry()], [even_workload])

    assert codec.calls == [("compress", True), ("decompress", True)]
    assert len(results.failures) == 1
    assert isinstance(results.failures[0].error, RoundTripMismatchError)
    assert len(results) == 0


def test_duplicate_workload_names_rejected(halving_entry):
    """Test that workloads sharing a name are refused before any measurement."""
    small = Workload("data.bin", bytes(1000))
    large = Workload("data.bin", bytes(102400))

    with pytest.raises(WorkloadError, match="data.bin"):
        BenchmarkRunner(threads=1).run([halving_entry], [small, large])
