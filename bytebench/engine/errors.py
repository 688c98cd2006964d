"""Exceptions raised by the benchmark engine.

Hierarchy:
    BenchError
    ├── CorrectnessError
    │   └── RoundTripMismatchError
    ├── TransformFailure
    └── CapabilityUnavailable

CorrectnessError and TransformFailure abandon a single entry; the runner
records them and moves on. CapabilityUnavailable never leaves the registry.
"""


class BenchError(Exception):
    """Base exception for benchmark engine errors."""

    pass


class CorrectnessError(BenchError):
    """Raised when a codec fails its correctness gate."""

    pass


class RoundTripMismatchError(CorrectnessError):
    """Raised when decompress(compress(data)) does not reproduce data."""

    def __init__(self, expected: bytes, actual: bytes) -> None:
        self.expected_size = len(expected)
        self.actual_size = len(actual)
        self.first_difference = _first_difference(expected, actual)
        super().__init__(
            f"Round-trip mismatch: expected {self.expected_size} bytes, "
            f"got {self.actual_size} bytes "
            f"(first difference at offset {self.first_difference})"
        )


class TransformFailure(BenchError):
    """Raised when a compress, decompress or hash call itself fails."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {type(cause).__name__}: {cause}")


class CapabilityUnavailable(BenchError):
    """Raised by a backend that cannot provide entries on this system."""

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        self.reason = reason
        super().__init__(f"Backend '{backend}' unavailable: {reason}")


def _first_difference(expected: bytes, actual: bytes) -> int:
    """Return the offset of the first differing byte."""
    for offset, (a, b) in enumerate(zip(expected, actual, strict=False)):
        if a != b:
            return offset
    return min(len(expected), len(actual))
