"""Benchmark runner: drives the gate and timing engine over entries.

Usage:
    from bytebench.engine.registry import EntryRegistry
    from bytebench.engine.runner import BenchmarkRunner
    from bytebench.workload import generate_workloads

    registry = EntryRegistry()
    runner = BenchmarkRunner(threads=8)
    workloads = generate_workloads(MIB, ["json"])
    results = runner.run(registry.get_codec_entries(), workloads)
    results.emit_stdout()

For every codec entry and workload the order of work is fixed:

1. gate + single-threaded compress (one call, timed)
2. single-threaded decompress (timed, then checked against the input)
3. multi-threaded compress (if enabled)
4. multi-threaded decompress (if enabled)

Hash entries have a single timed hash followed by the optional parallel
pass. A failure at any step abandons the entry for that workload only.
"""

import logging
from collections.abc import Iterable

from bytebench.engine.entry import AlgorithmEntry, CodecCapability, HashCapability
from bytebench.engine.errors import CorrectnessError, TransformFailure
from bytebench.engine.gate import invoke, timed_verify
from bytebench.engine.measurement import FailureRecord, Measurement, OperationTiming
from bytebench.engine.results import BenchmarkResults
from bytebench.engine.timing import WorkerPool, time_once, time_parallel
from bytebench.models.constants import BenchKind, Operation
from bytebench.utils.logger import Logger
from bytebench.workload import Workload, check_unique_names


class BenchmarkRunner:
    """Measures entries on workloads and collects the results.

    Correctness and transform failures are recorded and the run continues
    with the next entry, unless ``stop_on_error`` is set.

    Example:
        >>> runner = BenchmarkRunner(threads=4, multithread=False)
        >>> measurement = runner.measure(entry, workload)
    """

    def __init__(
        self,
        threads: int | None = None,
        multithread: bool = True,
        stop_on_error: bool = False,
    ) -> None:
        """Initialize the runner.

        Args:
            threads: Worker pool size; defaults to the logical CPU count.
            multithread: Run the multi-threaded pass after the single one.
            stop_on_error: Stop at the first failed entry.

        Raises:
            ValueError: If threads is less than 1.
        """
        self.pool = WorkerPool(threads)
        self.multithread = multithread
        self.stop_on_error = stop_on_error

    @property
    def threads(self) -> int:
        """Return the worker pool size."""
        return self.pool.workers

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the runner."""
        return Logger.get("engine.runner")

    # -------------------------------------------------------------------------
    # Single entry
    # -------------------------------------------------------------------------

    def measure(self, entry: AlgorithmEntry, workload: Workload) -> Measurement:
        """Measure one entry on one workload.

        Raises:
            CorrectnessError: If a codec fails its round trip.
            TransformFailure: If the capability raised.
        """
        capability = entry.capability
        if isinstance(capability, CodecCapability):
            return self._measure_codec(entry, capability, workload)
        if isinstance(capability, HashCapability):
            return self._measure_hash(entry, capability, workload)
        raise TypeError(f"Unsupported capability: {type(capability).__name__}")

    def _measure_codec(
        self, entry: AlgorithmEntry, codec: CodecCapability, workload: Workload
    ) -> Measurement:
        data = workload.data
        sample = timed_verify(codec, data)
        compressed = sample.compressed

        mt_compress = mt_decompress = None
        if self.multithread:
            mt_compress = time_parallel(
                lambda: codec.compress(data),
                self.threads,
                self.pool,
                operation=Operation.COMPRESS,
            )
            mt_decompress = time_parallel(
                lambda: codec.decompress(compressed),
                self.threads,
                self.pool,
                operation=Operation.DECOMPRESS,
            )

        return Measurement(
            entry=entry,
            workload=workload.name,
            input_size=workload.size,
            output_size=len(compressed),
            timings=(
                OperationTiming(
                    Operation.COMPRESS, sample.compress_seconds, mt_compress
                ),
                OperationTiming(
                    Operation.DECOMPRESS, sample.decompress_seconds, mt_decompress
                ),
            ),
        )

    def _measure_hash(
        self, entry: AlgorithmEntry, hasher: HashCapability, workload: Workload
    ) -> Measurement:
        data = workload.data
        digest, st_hash = time_once(lambda: invoke(Operation.HASH, hasher.hash, data))

        mt_hash = None
        if self.multithread:
            mt_hash = time_parallel(
                lambda: hasher.hash(data),
                self.threads,
                self.pool,
                operation=Operation.HASH,
            )

        return Measurement(
            entry=entry,
            workload=workload.name,
            input_size=workload.size,
            timings=(OperationTiming(Operation.HASH, st_hash, mt_hash),),
            digest=digest,
        )

    # -------------------------------------------------------------------------
    # Whole run
    # -------------------------------------------------------------------------

    def run(
        self,
        entries: Iterable[AlgorithmEntry],
        workloads: Iterable[Workload],
        kind: BenchKind = BenchKind.COMPRESS,
        filter: str | None = None,
        show_hashes: bool = False,
    ) -> BenchmarkResults:
        """Measure every entry on every workload.

        Args:
            entries: Entries to benchmark, already selected.
            workloads: Workloads, loaded before the run starts.
            kind: Benchmark family, recorded in the report metadata.
            filter: Filter used for selection, recorded in the report metadata.
            show_hashes: Include hex digests in hash records.

        Returns:
            BenchmarkResults holding measurements and failures.

        Raises:
            WorkloadError: If two workloads share a name.
        """
        entries = list(entries)
        workloads = list(workloads)
        check_unique_names(workloads)
        results = BenchmarkResults(
            kind=kind,
            threads=self.threads,
            multithread=self.multithread,
            filter=filter,
            workloads=workloads,
            show_hashes=show_hashes,
        )

        self.logger.info(f"threads: {self.threads}")
        try:
            for workload in workloads:
                self.logger.info(
                    f"Workload '{workload.name}' ({workload.size} bytes), "
                    f"{len(entries)} entries"
                )
                if not self._run_workload(entries, workload, results):
                    break
        finally:
            self.pool.shutdown()

        results.finalize()
        return results

    def _run_workload(
        self,
        entries: list[AlgorithmEntry],
        workload: Workload,
        results: BenchmarkResults,
    ) -> bool:
        """Measure all entries on one workload. Returns False to stop the run."""
        for entry in entries:
            self.logger.debug(f"Benchmarking {entry.label} on '{workload.name}'")
            try:
                measurement = self.measure(entry, workload)
            except (CorrectnessError, TransformFailure) as e:
                self.logger.warning(f"{entry.label} on '{workload.name}': {e}")
                results.add_failure(FailureRecord(entry, workload.name, e))
                if self.stop_on_error:
                    return False
                continue
            results.add_measurement(measurement)
        return True
