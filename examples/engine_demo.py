#!/usr/bin/env python3
"""Demo script driving the benchmark engine without the CLI."""

import json
import sys

from bytebench.engine import (
    BenchmarkRunner,
    EntryRegistry,
    OutputFormat,
    codec_entry,
    select,
)
from bytebench.models.constants import MIB
from bytebench.utils.logger import Logger
from bytebench.workload import generate_workloads


def main():
    """Benchmark the zlib codecs plus a custom codec on two workloads."""
    Logger.configure(level="INFO", output="stderr")

    print("=" * 60)
    print("Engine Demo")
    print("=" * 60)
    print()

    registry = EntryRegistry()
    entries = select(registry.get_codec_entries(), "zlib")

    # Any pair of bytes -> bytes functions can be benchmarked
    entries.append(codec_entry("identity", "copy", bytes, bytes))

    workloads = generate_workloads(MIB, ["json", "random"])
    results = BenchmarkRunner(threads=4).run(entries, workloads)

    results.emit_stdout(OutputFormat.TEXT)
    print()

    # Structured output for integration with other tools
    print("=" * 60)
    print("JSON summary:")
    print("=" * 60)
    print(json.dumps(results.to_dict()["summary"], indent=2))

    return 1 if results.has_failures else 0


if __name__ == "__main__":
    sys.exit(main())
