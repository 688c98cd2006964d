#!/usr/bin/env python3
"""Bytebench CLI - Command-line interface for Bytebench."""

from collections.abc import Callable
from typing import Any

import click

from bytebench.models.constants import BenchKind
from bytebench.utils.env import get_env
from bytebench.utils.logger import Logger


@click.group()
def bytebench():
    """Micro-benchmarks for compressors and hash functions."""
    # Configure logger at startup if not already configured
    if not Logger.is_configured():
        # Reports go to stdout, so logs go to stderr
        Logger.configure(
            level=get_env("BYTEBENCH_LOG_LEVEL", default="WARNING"),
            output="stderr",
            timestamps=True,
        )


def bench_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the compress and hash commands."""
    options = [
        click.option(
            "--list",
            "-l",
            "list_only",
            is_flag=True,
            help="List distinct variant names and exit",
        ),
        click.option(
            "--size",
            "-s",
            "size_mb",
            type=click.FloatRange(min=0),
            default=None,
            help="Generated workload size in MiB",
        ),
        click.option(
            "--filter",
            "-f",
            "filter",
            default=None,
            help="Only implementations whose name contains this (case-sensitive)",
        ),
        click.option(
            "--threads",
            "-t",
            type=click.IntRange(min=1),
            default=None,
            help="Worker threads for the parallel pass (default: logical CPUs)",
        ),
        click.option(
            "--multithread/--no-multithread",
            default=None,
            help="Run the multi-threaded pass (default: on)",
        ),
        click.option(
            "--workload",
            "-w",
            "workloads",
            multiple=True,
            help="Generated workload kind: zeros, random, json, text. Repeatable.",
        ),
        click.option(
            "--data",
            "-d",
            "data_files",
            multiple=True,
            type=click.Path(exists=True, dir_okay=False),
            help="Benchmark on file contents. Repeatable.",
        ),
        click.option(
            "--output",
            "-o",
            "outputs",
            multiple=True,
            help="Output file(s) - format from suffix (.json/.yaml/.csv). Repeatable.",
        ),
        click.option(
            "--format",
            "fmt",
            type=click.Choice(["text", "csv", "json", "yaml"], case_sensitive=False),
            default=None,
            help="Stdout format (default: text)",
        ),
        click.option(
            "--config",
            type=click.Path(exists=True),
            default=None,
            help="YAML config file with run settings",
        ),
        click.option(
            "--stop-on-error",
            is_flag=True,
            default=None,
            help="Stop at the first failed entry",
        ),
        click.option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Verbose (DEBUG) logging",
        ),
    ]

    for option in reversed(options):
        func = option(func)
    return func


@bytebench.command()
@bench_options
def compress(verbose, **kwargs):
    r"""Benchmark compressors.

    Each codec is checked for an exact round trip before its timings are
    reported. Results are ordered by compressed size.

    \b
    Examples:
      bytebench compress                   # All codecs
      bytebench compress --list            # List variants
      bytebench compress -f zstd -s 16     # zstandard, 16 MiB workloads
      bytebench compress -d enwik8         # Benchmark on a file
      bytebench compress -o results.csv    # Save to CSV
    """
    from bytebench.commands.bench_cmd import run_bench

    if verbose:
        Logger.set_level("DEBUG")

    run_bench(BenchKind.COMPRESS, **kwargs)


@bytebench.command()
@bench_options
@click.option(
    "--show-hashes",
    is_flag=True,
    default=None,
    help="Include the digest of each hash as lowercase hex (not multibase base58btc)",
)
def hash(verbose, **kwargs):
    r"""Benchmark hash functions.

    The default workload is a zero-filled 20 MiB buffer. Results are
    ordered by hash name.

    \b
    Examples:
      bytebench hash                       # All hashes
      bytebench hash --list                # List hash names
      bytebench hash -f xxhash -s 100      # xxhash, 100 MiB buffer
      bytebench hash --show-hashes         # Include digests
    """
    from bytebench.commands.bench_cmd import run_bench

    if verbose:
        Logger.set_level("DEBUG")

    run_bench(BenchKind.HASH, **kwargs)


@bytebench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show why backends are missing")
def backends(verbose):
    """List codec and hash backends and their availability."""
    from bytebench.commands.bench_cmd import list_backends
    from bytebench.engine import EntryRegistry

    list_backends(EntryRegistry(), verbose=verbose)


@bytebench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display bytebench version information."""
    from bytebench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    bytebench()
