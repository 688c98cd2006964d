"""Ordering of measurements and derivation of report records.

Derived quantities are computed here, never stored on a Measurement:

- compression ratio: input_size / output_size
- throughput: input_size in MiB / seconds
- speedup: single-thread seconds / multi-thread seconds

Any of these with a zero denominator is None, which reporters render as
"N/A".
"""

from collections.abc import Iterable
from enum import Enum

from bytebench.engine.measurement import FailureRecord, Measurement, OperationTiming
from bytebench.models.constants import MIB
from bytebench.models.report_models import FailureReport, OperationReport, ReportRecord


class SortKey(Enum):
    """Orderings available to aggregate()."""

    SIZE = "size"  # ascending output size, unsized entries last
    NAME = "name"  # variant name (case-insensitive), then implementation
    REGISTRATION = "registration"  # input order


def aggregate(
    measurements: Iterable[Measurement], key: SortKey = SortKey.SIZE
) -> list[Measurement]:
    """Order measurements by ``key``.

    The sort is stable, so entries with equal keys keep their input order.
    The result is always a permutation of the input.
    """
    items = list(measurements)
    if key == SortKey.SIZE:
        return sorted(
            items,
            key=lambda m: (m.output_size is None, m.output_size or 0),
        )
    if key == SortKey.NAME:
        return sorted(
            items,
            key=lambda m: (
                m.entry.variant_name.lower(),
                m.entry.implementation_name.lower(),
            ),
        )
    return items


# -------------------------------------------------------------------------
# Derived quantities
# -------------------------------------------------------------------------


def ratio(numerator: float, denominator: float | None) -> float | None:
    """Return numerator / denominator, or None when undefined."""
    if denominator is None or denominator <= 0:
        return None
    return numerator / denominator


def throughput_mbps(size: int, seconds: float | None) -> float | None:
    """Return MiB/s for ``size`` bytes processed in ``seconds``."""
    return ratio(size / MIB, seconds)


def compression_ratio(measurement: Measurement) -> float | None:
    """Return input_size / output_size for codec measurements."""
    if measurement.output_size is None:
        return None
    return ratio(measurement.input_size, measurement.output_size)


def _operation_report(size: int, timing: OperationTiming) -> OperationReport:
    return OperationReport(
        operation=timing.operation,
        single_thread_seconds=timing.single_thread,
        single_thread_mbps=throughput_mbps(size, timing.single_thread),
        multi_thread_seconds=timing.multi_thread,
        multi_thread_mbps=throughput_mbps(size, timing.multi_thread),
        speedup=ratio(timing.single_thread, timing.multi_thread),
    )


def to_record(measurement: Measurement, show_digest: bool = False) -> ReportRecord:
    """Build the display-ready record for one measurement."""
    digest = None
    if show_digest and measurement.digest is not None:
        digest = measurement.digest.hex()

    return ReportRecord(
        workload=measurement.workload,
        implementation=measurement.entry.implementation_name,
        variant=measurement.entry.variant_name,
        kind=measurement.entry.kind.value,
        input_size=measurement.input_size,
        output_size=measurement.output_size,
        compression_ratio=compression_ratio(measurement),
        operations=[
            _operation_report(measurement.input_size, timing)
            for timing in measurement.timings
        ],
        digest=digest,
    )


def to_failure_report(failure: FailureRecord) -> FailureReport:
    """Build the export record for an abandoned entry."""
    return FailureReport(
        workload=failure.workload,
        implementation=failure.entry.implementation_name,
        variant=failure.entry.variant_name,
        error_type=failure.error_type,
        message=str(failure.error),
    )
