"""Workload buffers shared by every entry in a run.

A workload is a named ``bytes`` object, so it cannot be mutated once the
run starts. Generated workloads are deterministic for a given size.

Usage:
    from bytebench.workload import generate_workloads, load_workloads

    workloads = generate_workloads(4 * MIB, ["json", "random"])
    workloads += load_workloads(["corpus/enwik8"])
"""

import json
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

_SEED = 0x5EED

_WORDS = (
    "the quick brown fox jumps over lazy dog while compression ratio "
    "throughput buffer thread worker latency entropy block frame stream"
).split()


@dataclass(frozen=True)
class Workload:
    """A named, immutable input buffer."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        """Return the buffer length in bytes."""
        return len(self.data)


class WorkloadError(Exception):
    """Raised when a workload cannot be generated or loaded."""

    pass


def _zeros(size: int) -> bytes:
    return bytes(size)


def _random(size: int) -> bytes:
    return random.Random(_SEED).randbytes(size)


def _repeat_to(chunk: bytes, size: int) -> bytes:
    if size == 0:
        return b""
    repeats = size // len(chunk) + 1
    return (chunk * repeats)[:size]


def _json(size: int) -> bytes:
    """Synthetic JSON records, similar in shape to an API log dump."""
    rng = random.Random(_SEED)
    records = []
    for i in range(256):
        records.append(
            {
                "id": i,
                "name": " ".join(rng.choices(_WORDS, k=3)),
                "score": round(rng.random() * 100, 3),
                "tags": rng.sample(_WORDS, k=4),
                "active": rng.random() > 0.5,
            }
        )
    chunk = json.dumps(records, separators=(",", ":")).encode()
    return _repeat_to(chunk, size)


def _text(size: int) -> bytes:
    """Word-level prose with a small vocabulary."""
    rng = random.Random(_SEED)
    chunk = " ".join(rng.choices(_WORDS, k=8192)).encode()
    return _repeat_to(chunk, size)


GENERATORS: dict[str, Callable[[int], bytes]] = {
    "zeros": _zeros,
    "random": _random,
    "json": _json,
    "text": _text,
}


def generate_workload(kind: str, size: int) -> Workload:
    """Generate one workload of ``size`` bytes.

    Raises:
        WorkloadError: If the kind is unknown or size is negative.
    """
    if kind not in GENERATORS:
        valid = ", ".join(sorted(GENERATORS))
        raise WorkloadError(f"Unknown workload '{kind}'. Valid: {valid}")
    if size < 0:
        raise WorkloadError("Workload size must be >= 0")
    return Workload(kind, GENERATORS[kind](size))


def generate_workloads(size: int, kinds: Iterable[str]) -> list[Workload]:
    """Generate one workload per kind, all of ``size`` bytes."""
    return [generate_workload(kind, size) for kind in kinds]


def load_workloads(paths: Iterable[str | Path]) -> list[Workload]:
    """Read each file into a workload named after the file.

    Raises:
        WorkloadError: If a file cannot be read.
    """
    workloads = []
    for path in paths:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise WorkloadError(f"Cannot read workload {path}: {e}") from e
        workloads.append(Workload(path.name, data))
    return workloads


def check_unique_names(workloads: Iterable[Workload]) -> None:
    """Reject workloads that share a name.

    Results are grouped and keyed by workload name, so two workloads with
    the same name would be merged in the report.

    Raises:
        WorkloadError: If any name occurs more than once.
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    for workload in workloads:
        if workload.name in seen and workload.name not in duplicates:
            duplicates.append(workload.name)
        seen.add(workload.name)
    if duplicates:
        raise WorkloadError(f"Duplicate workload name(s): {', '.join(duplicates)}")
