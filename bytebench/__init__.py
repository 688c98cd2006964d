"""Bytebench - micro-benchmarks for compressors and hash functions."""

__version__ = "0.1.0"

__all__ = ["__version__"]
