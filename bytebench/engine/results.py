"""Benchmark results collection and emission.

Supports JSON, YAML, CSV and human-readable text.

Usage:
    from bytebench.engine.results import BenchmarkResults, OutputFormat

    results.emit("results.json", OutputFormat.JSON)
    results.emit(sys.stdout, OutputFormat.CSV)
    results.emit_stdout()
"""

import csv
import json
import sys
from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

from bytebench.engine.aggregate import (
    SortKey,
    aggregate,
    to_failure_report,
    to_record,
)
from bytebench.engine.measurement import FailureRecord, Measurement
from bytebench.models.constants import NOT_AVAILABLE, BenchKind, Operation
from bytebench.models.report_models import (
    FailureReport,
    OperationReport,
    ReportRecord,
    RunMetadata,
    RunReport,
    RunSummary,
)
from bytebench.workload import Workload


class OutputFormat(Enum):
    """Supported output formats for benchmark results."""

    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    TEXT = "text"


_CODEC_CSV_FIELDS = (
    "workload",
    "implementation",
    "variant",
    "input_size",
    "output_size",
    "ratio",
    "compress_st_mbps",
    "compress_mt_mbps",
    "compress_speedup",
    "decompress_st_mbps",
    "decompress_mt_mbps",
    "decompress_speedup",
)

_HASH_CSV_FIELDS = (
    "workload",
    "implementation",
    "hash",
    "st_mbps",
    "mt_mbps",
    "speedup",
    "digest",
)


def _fmt(value: float | None, format_spec: str, suffix: str = "") -> str:
    """Format a derived number, rendering None as N/A at the same width."""
    width = "".join(ch for ch in format_spec.split(".")[0] if ch.isdigit())
    if value is None:
        return f"{NOT_AVAILABLE:>{width or 0}}{suffix}"
    return f"{value:{format_spec}}{suffix}"


def _csv_number(value: float | None, digits: int = 2) -> str:
    return "" if value is None else f"{value:.{digits}f}"


class BenchmarkResults:
    """Measurements and failures of one run, with flexible emission.

    Records are grouped per workload (in workload order). Within a workload,
    compress runs are ordered by ascending output size and hash runs by
    variant name.

    Example:
        >>> results = BenchmarkResults(BenchKind.HASH, threads=8, multithread=True)
        >>> results.add_measurement(measurement)
        >>> results.emit(sys.stdout, OutputFormat.CSV)
    """

    def __init__(
        self,
        kind: BenchKind,
        threads: int,
        multithread: bool,
        filter: str | None = None,
        workloads: Iterable[Workload] = (),
        sort_key: SortKey | None = None,
        show_hashes: bool = False,
    ) -> None:
        """Initialize an empty results collection.

        Args:
            kind: Benchmark family.
            threads: Worker pool size used for the run.
            multithread: Whether the parallel pass ran.
            filter: Implementation filter used for selection.
            workloads: Workloads of the run, in run order.
            sort_key: Ordering within a workload; defaults by kind.
            show_hashes: Include hex digests in hash records.
        """
        self.kind = BenchKind(kind)
        self.threads = threads
        self.multithread = multithread
        self.filter = filter
        self.sort_key = sort_key or (
            SortKey.SIZE if self.kind == BenchKind.COMPRESS else SortKey.NAME
        )
        self.show_hashes = show_hashes
        self._workload_sizes: dict[str, int] = {w.name: w.size for w in workloads}
        self._measurements: list[Measurement] = []
        self._failures: list[FailureRecord] = []
        self._timestamp_start = datetime.now(UTC).isoformat()
        self._timestamp_end: str | None = None

    def add_measurement(self, measurement: Measurement) -> None:
        """Add a successful measurement."""
        self._workload_sizes.setdefault(measurement.workload, measurement.input_size)
        self._measurements.append(measurement)

    def add_failure(self, failure: FailureRecord) -> None:
        """Record an abandoned entry."""
        self._failures.append(failure)

    def finalize(self) -> None:
        """Mark results as complete, setting the end timestamp."""
        self._timestamp_end = datetime.now(UTC).isoformat()

    @property
    def measurements(self) -> list[Measurement]:
        """Get measurements in insertion order."""
        return list(self._measurements)

    @property
    def failures(self) -> list[FailureRecord]:
        """Get failures in insertion order."""
        return list(self._failures)

    @property
    def workload_names(self) -> list[str]:
        """Get workload names in run order."""
        return list(self._workload_sizes)

    def records(self) -> list[ReportRecord]:
        """Build ordered report records, grouped by workload."""
        records: list[ReportRecord] = []
        for name in self.workload_names:
            in_workload = [m for m in self._measurements if m.workload == name]
            for measurement in aggregate(in_workload, self.sort_key):
                records.append(to_record(measurement, show_digest=self.show_hashes))
        return records

    def failure_reports(self) -> list[FailureReport]:
        """Build export records for every failure."""
        return [to_failure_report(f) for f in self._failures]

    def to_report(self) -> RunReport:
        """Convert results to the structured export model."""
        from bytebench import __version__

        return RunReport(
            metadata=RunMetadata(
                kind=self.kind.value,
                threads=self.threads,
                multithread=self.multithread,
                filter=self.filter,
                workloads=dict(self._workload_sizes),
                timestamp_start=self._timestamp_start,
                timestamp_end=self._timestamp_end,
                bytebench_version=__version__,
            ),
            records=self.records(),
            failures=self.failure_reports(),
            summary=RunSummary(
                total_entries=len(self._measurements) + len(self._failures),
                measured=len(self._measurements),
                failed=len(self._failures),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a JSON-compatible dictionary."""
        return self.to_report().model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.TEXT,
        indent: int = 2,
    ) -> None:
        """Emit results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format.
            indent: Indentation level for JSON/YAML.
        """
        if self._timestamp_end is None:
            self.finalize()

        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent)
        elif format == OutputFormat.YAML:
            content = self._to_yaml(indent)
        elif format == OutputFormat.CSV:
            content = self._to_csv()
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_yaml(self, indent: int = 2) -> str:
        """Convert results to a YAML string."""
        import yaml

        result: str = yaml.safe_dump(
            self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
        )
        return result

    def _to_csv(self) -> str:
        """Convert records to CSV, one row per record."""
        output = StringIO()
        if self.kind == BenchKind.COMPRESS:
            writer = csv.DictWriter(output, fieldnames=_CODEC_CSV_FIELDS)
            writer.writeheader()
            for record in self.records():
                writer.writerow(self._codec_row(record))
        else:
            writer = csv.DictWriter(output, fieldnames=_HASH_CSV_FIELDS)
            writer.writeheader()
            for record in self.records():
                writer.writerow(self._hash_row(record))
        return output.getvalue()

    @staticmethod
    def _codec_row(record: ReportRecord) -> dict[str, str | int | None]:
        row: dict[str, str | int | None] = {
            "workload": record.workload,
            "implementation": record.implementation,
            "variant": record.variant,
            "input_size": record.input_size,
            "output_size": record.output_size,
            "ratio": _csv_number(record.compression_ratio),
        }
        for op in (Operation.COMPRESS, Operation.DECOMPRESS):
            report = record.operation(op)
            row[f"{op}_st_mbps"] = _csv_number(report and report.single_thread_mbps, 0)
            row[f"{op}_mt_mbps"] = _csv_number(report and report.multi_thread_mbps, 0)
            row[f"{op}_speedup"] = _csv_number(report and report.speedup)
        return row

    @staticmethod
    def _hash_row(record: ReportRecord) -> dict[str, str | int | None]:
        report = record.operation(Operation.HASH)
        return {
            "workload": record.workload,
            "implementation": record.implementation,
            "hash": record.variant,
            "st_mbps": _csv_number(report and report.single_thread_mbps, 0),
            "mt_mbps": _csv_number(report and report.multi_thread_mbps, 0),
            "speedup": _csv_number(report and report.speedup),
            "digest": record.digest or "",
        }

    def _to_text(self) -> str:
        """Convert results to the human-readable column layout."""
        output = StringIO()
        output.write(f"threads: {self.threads}\n")

        records = self.records()
        for name in self.workload_names:
            output.write(f"----- data: {name:7} " + "-" * 40 + "\n")
            for record in records:
                if record.workload != name:
                    continue
                if self.kind == BenchKind.COMPRESS:
                    output.write(self._codec_line(record) + "\n")
                else:
                    output.write(self._hash_line(record) + "\n")

        if self._failures:
            output.write("\nFAILED\n")
            output.write("-" * 40 + "\n")
            for failure in self.failure_reports():
                output.write(
                    f"  {failure.implementation}/{failure.variant} "
                    f"[{failure.workload}] {failure.error_type}: {failure.message}\n"
                )

        return output.getvalue()

    @staticmethod
    def _pair(report: OperationReport | None, width: int) -> str:
        """Format "st MB/s mt MB/s, speedup" for one operation."""
        if report is None:
            return ""
        return (
            f"{_fmt(report.single_thread_mbps, f'>{width}.0f', ' MB/s')} "
            f"{_fmt(report.multi_thread_mbps, f'>{width}.0f', ' MB/s')}, "
            f"{_fmt(report.speedup, '>4.1f', 'x')}"
        )

    def _codec_line(self, record: ReportRecord) -> str:
        return (
            f"{record.implementation:20} {record.variant:12} "
            f"{_fmt(record.compression_ratio, '.2f', 'x')} "
            f"{self._pair(record.operation(Operation.COMPRESS), 5)}  "
            f"{self._pair(record.operation(Operation.DECOMPRESS), 5)}"
        )

    def _hash_line(self, record: ReportRecord) -> str:
        line = (
            f"{record.variant:15} {record.implementation:13} "
            f"{self._pair(record.operation(Operation.HASH), 6)}"
        )
        if record.digest is not None:
            line += f"  {record.digest}"
        return line

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        """Write content to file or stream."""
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def emit_stdout(self, format: OutputFormat = OutputFormat.TEXT) -> None:
        """Emit results to stdout."""
        self.emit(sys.stdout, format)

    @property
    def has_failures(self) -> bool:
        """Return True if any entry was abandoned."""
        return bool(self._failures)

    def __len__(self) -> int:
        """Return number of measurements."""
        return len(self._measurements)
