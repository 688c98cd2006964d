"""Timing engine: single-threaded and multi-threaded measurement.

Single-threaded timing brackets one call with two monotonic timestamps.
Multi-threaded timing submits N copies of the same call to a fixed-size
worker pool, waits for every copy to finish and divides the wall time by
N. The result is the per-call cost under N-way contention (cache, memory
bandwidth, allocator), not the isolated latency of one call.

Usage:
    from bytebench.engine.timing import WorkerPool, time_once, time_parallel

    digest, seconds = time_once(lambda: hashlib.sha256(data).digest())

    with WorkerPool() as pool:
        per_call = time_parallel(lambda: zlib.compress(data), pool.workers, pool)
"""

import os
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, wait
from typing import TypeVar

import psutil

from bytebench.engine.errors import TransformFailure

T = TypeVar("T")


def default_worker_count() -> int:
    """Return the number of logical processing units, at least 1."""
    count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
    return max(1, count)


class WorkerPool:
    """Fixed-size thread pool used for the multi-threaded pass.

    The pool is created explicitly and handed to time_parallel(); nothing
    about it is process-global.

    Example:
        >>> with WorkerPool(workers=8) as pool:
        ...     per_call = time_parallel(op, pool.workers, pool)
    """

    def __init__(self, workers: int | None = None) -> None:
        """Initialize the pool.

        Args:
            workers: Number of worker threads. Defaults to the logical CPU count.

        Raises:
            ValueError: If workers is less than 1.
        """
        self.workers = workers if workers is not None else default_worker_count()
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        self._executor: ThreadPoolExecutor | None = None

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Return the underlying executor, starting it on first use."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="bytebench"
            )
        return self._executor

    def shutdown(self) -> None:
        """Stop the worker threads."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


def time_once(op: Callable[[], T]) -> tuple[T, float]:
    """Run ``op`` once and time it.

    Args:
        op: Zero-argument callable.

    Returns:
        Tuple of (op's return value, elapsed seconds).
    """
    start = time.perf_counter()
    result = op()
    elapsed = time.perf_counter() - start
    return result, elapsed


def time_parallel(
    op: Callable[[], object],
    worker_count: int,
    pool: WorkerPool,
    operation: str = "operation",
) -> float:
    """Run ``worker_count`` concurrent copies of ``op`` and time them.

    All copies are submitted at once and the call returns only after every
    copy has finished. Inputs must be prepared by the caller; ``op`` is
    invoked as-is by every worker.

    Args:
        op: Zero-argument callable, safe to call concurrently.
        worker_count: Number of invocations to dispatch.
        pool: Worker pool to dispatch on.
        operation: Name used when wrapping a worker exception.

    Returns:
        Elapsed wall time divided by ``worker_count``, in seconds.

    Raises:
        ValueError: If worker_count is less than 1.
        TransformFailure: If any invocation raised.
    """
    if worker_count < 1:
        raise ValueError("worker_count must be >= 1")

    executor = pool.executor

    start = time.perf_counter()
    futures = [executor.submit(op) for _ in range(worker_count)]
    wait(futures)
    elapsed = time.perf_counter() - start

    for future in futures:
        error = future.exception()
        if error is not None:
            raise TransformFailure(operation, error) from error

    return elapsed / worker_count
