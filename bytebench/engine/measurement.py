"""Raw per-entry measurements produced by the runner.

Measurements hold only what was measured. Throughput, ratios and speedups
are derived when a report is built (see bytebench.engine.aggregate).
"""

from dataclasses import dataclass

from bytebench.engine.entry import AlgorithmEntry
from bytebench.models.constants import Operation


@dataclass(frozen=True)
class OperationTiming:
    """Durations of one operation, in seconds.

    ``multi_thread`` is None when the parallel pass was disabled.
    """

    operation: Operation
    single_thread: float
    multi_thread: float | None = None


@dataclass(frozen=True)
class Measurement:
    """Everything measured for one entry on one workload."""

    entry: AlgorithmEntry
    workload: str
    input_size: int
    timings: tuple[OperationTiming, ...]
    output_size: int | None = None
    digest: bytes | None = None

    def timing(self, operation: Operation) -> OperationTiming | None:
        """Return the timing for one operation, if it was measured."""
        for timing in self.timings:
            if timing.operation == operation:
                return timing
        return None


@dataclass(frozen=True)
class FailureRecord:
    """An entry abandoned on a workload, with the error that caused it."""

    entry: AlgorithmEntry
    workload: str
    error: Exception

    @property
    def error_type(self) -> str:
        """Return the exception class name."""
        return type(self.error).__name__
