"""Benchmark engine: entries, registry, gate, timing, runner and results.

Usage:
    from bytebench.engine import BenchmarkRunner, EntryRegistry, select

    registry = EntryRegistry()
    entries = select(registry.get_codec_entries(), "zstd")
    results = BenchmarkRunner(threads=4).run(entries, workloads)
    results.emit_stdout()
"""

from bytebench.engine.aggregate import SortKey, aggregate, to_record
from bytebench.engine.entry import (
    AlgorithmEntry,
    CodecCapability,
    EntryKind,
    HashCapability,
    codec_entry,
    hash_entry,
)
from bytebench.engine.errors import (
    BenchError,
    CapabilityUnavailable,
    CorrectnessError,
    RoundTripMismatchError,
    TransformFailure,
)
from bytebench.engine.gate import timed_verify, verify
from bytebench.engine.measurement import FailureRecord, Measurement, OperationTiming
from bytebench.engine.registry import EntryRegistry
from bytebench.engine.results import BenchmarkResults, OutputFormat
from bytebench.engine.runner import BenchmarkRunner
from bytebench.engine.selector import select, variant_names
from bytebench.engine.timing import WorkerPool, time_once, time_parallel

__all__ = [
    # Entries
    "AlgorithmEntry",
    "BenchError",
    # Results
    "BenchmarkResults",
    # Runner
    "BenchmarkRunner",
    "CapabilityUnavailable",
    "CodecCapability",
    "CorrectnessError",
    # Registry
    "EntryRegistry",
    "EntryKind",
    "FailureRecord",
    "HashCapability",
    "Measurement",
    "OperationTiming",
    "OutputFormat",
    "RoundTripMismatchError",
    "SortKey",
    "TransformFailure",
    # Timing
    "WorkerPool",
    "aggregate",
    "codec_entry",
    "hash_entry",
    "select",
    "time_once",
    "time_parallel",
    "timed_verify",
    "to_record",
    "variant_names",
    "verify",
]
