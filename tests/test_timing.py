"""Tests for the timing engine."""

import threading
import time

import pytest

from bytebench.engine.errors import TransformFailure
from bytebench.engine.timing import (
    WorkerPool,
    default_worker_count,
    time_once,
    time_parallel,
)


def test_time_once_returns_result_and_duration():
    """Test that time_once returns op's value and a non-negative duration."""
    result, seconds = time_once(lambda: 42)
    assert result == 42
    assert seconds >= 0


def test_time_once_measures_sleep():
    """Test that time_once brackets the call."""
    _, seconds = time_once(lambda: time.sleep(0.02))
    assert seconds >= 0.015


def test_time_parallel_non_negative():
    """Test that time_parallel returns a non-negative per-call duration."""
    with WorkerPool(workers=4) as pool:
        for n in (1, 2, 4, 8):
            assert time_parallel(lambda: sum(range(1000)), n, pool) >= 0


def test_time_parallel_divides_by_worker_count():
    """Test that wall time is divided by the number of invocations."""
    with WorkerPool(workers=4) as pool:
        per_call = time_parallel(lambda: time.sleep(0.05), 4, pool)
    # Four sleeps in parallel take ~0.05s of wall time
    assert per_call < 0.05
    assert per_call >= 0.05 / 4 * 0.5


def test_time_parallel_runs_every_invocation():
    """Test that every copy of op runs before time_parallel returns."""
    calls = []
    lock = threading.Lock()

    def op():
        with lock:
            calls.append(threading.current_thread().name)

    with WorkerPool(workers=3) as pool:
        time_parallel(op, 7, pool)

    assert len(calls) == 7
    assert all(name.startswith("bytebench") for name in calls)


def test_time_parallel_single_worker_close_to_time_once():
    """Test that one parallel invocation costs about one direct call."""
    _, once = time_once(lambda: time.sleep(0.02))
    with WorkerPool(workers=1) as pool:
        parallel = time_parallel(lambda: time.sleep(0.02), 1, pool)
    assert parallel == pytest.approx(once, abs=0.02)


def test_time_parallel_rejects_zero_workers():
    """Test that worker_count < 1 is a ValueError."""
    with WorkerPool(workers=1) as pool:
        with pytest.raises(ValueError):
            time_parallel(lambda: None, 0, pool)


def test_time_parallel_reraises_worker_exception():
    """Test that a worker exception surfaces as TransformFailure."""

    def op():
        raise RuntimeError("worker failed")

    with WorkerPool(workers=2) as pool:
        with pytest.raises(TransformFailure) as excinfo:
            time_parallel(op, 2, pool, operation="compress")

    assert excinfo.value.operation == "compress"
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_worker_pool_defaults_to_cpu_count():
    """Test default pool sizing."""
    pool = WorkerPool()
    assert pool.workers == default_worker_count()
    assert pool.workers >= 1


def test_worker_pool_rejects_zero():
    """Test that an empty pool is rejected."""
    with pytest.raises(ValueError):
        WorkerPool(workers=0)


def test_worker_pool_restarts_after_shutdown():
    """Test that the executor is recreated lazily after shutdown."""
    pool = WorkerPool(workers=2)
    first = pool.executor
    pool.shutdown()
    second = pool.executor
    assert first is not second
    pool.shutdown()
