"""Pydantic models for benchmark report export."""

from typing import Literal

from pydantic import BaseModel, Field

from bytebench.models.constants import Operation

# ============================================================================
# Per-entry records
# ============================================================================


class OperationReport(BaseModel):
    """Timings and derived throughput for one operation of one entry."""

    operation: Operation = Field(..., description="compress, decompress or hash")
    single_thread_seconds: float = Field(
        ..., ge=0, description="Duration of the single isolated call"
    )
    single_thread_mbps: float | None = Field(
        None, ge=0, description="Single-threaded throughput in MiB/s"
    )
    multi_thread_seconds: float | None = Field(
        None,
        ge=0,
        description="Wall time of the parallel pass divided by worker count",
    )
    multi_thread_mbps: float | None = Field(
        None, ge=0, description="Per-call throughput under contention in MiB/s"
    )
    speedup: float | None = Field(
        None,
        ge=0,
        description="single_thread_seconds / multi_thread_seconds (None if undefined)",
    )


class ReportRecord(BaseModel):
    """Display-ready result for one entry on one workload."""

    workload: str = Field(..., description="Workload name (e.g., 'json')")
    implementation: str = Field(..., description="Implementation name (e.g., 'zlib')")
    variant: str = Field(..., description="Algorithm variant (e.g., 'zlib-6')")
    kind: Literal["codec", "hash"] = Field(..., description="Entry kind")
    input_size: int = Field(..., ge=0, description="Workload size in bytes")
    output_size: int | None = Field(
        None, ge=0, description="Compressed size in bytes (codecs only)"
    )
    compression_ratio: float | None = Field(
        None, ge=0, description="input_size / output_size (None if undefined)"
    )
    operations: list[OperationReport] = Field(
        default_factory=list, description="Per-operation timings"
    )
    digest: str | None = Field(
        None, description="Hex digest of the workload (hashes, when requested)"
    )

    def operation(self, operation: Operation) -> OperationReport | None:
        """Return the report for one operation, if present."""
        for op in self.operations:
            if op.operation == operation:
                return op
        return None


class FailureReport(BaseModel):
    """An entry that was abandoned on a workload."""

    workload: str = Field(..., description="Workload name")
    implementation: str = Field(..., description="Implementation name")
    variant: str = Field(..., description="Algorithm variant")
    error_type: str = Field(
        ..., description="Exception class (e.g., 'RoundTripMismatchError')"
    )
    message: str = Field(..., description="Human-readable failure description")


# ============================================================================
# Run-level export
# ============================================================================


class RunMetadata(BaseModel):
    """Configuration and environment of one benchmark run."""

    kind: Literal["compress", "hash"] = Field(..., description="Benchmark family")
    threads: int = Field(..., ge=1, description="Worker pool size")
    multithread: bool = Field(..., description="Whether the parallel pass ran")
    filter: str | None = Field(None, description="Implementation name filter")
    workloads: dict[str, int] = Field(
        default_factory=dict, description="Workload name to size in bytes"
    )
    timestamp_start: str = Field(..., description="ISO timestamp (UTC)")
    timestamp_end: str | None = Field(None, description="ISO timestamp (UTC)")
    bytebench_version: str = Field(..., description="bytebench version")


class RunSummary(BaseModel):
    """Counts of measured and failed entries."""

    total_entries: int = Field(..., ge=0)
    measured: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)


class RunReport(BaseModel):
    """Complete structured report of one run."""

    metadata: RunMetadata
    records: list[ReportRecord] = Field(default_factory=list)
    failures: list[FailureReport] = Field(default_factory=list)
    summary: RunSummary
