"""Benchmark commands - run codec or hash benchmarks via the registry.

CLI Examples:
    bytebench compress                       # All codecs on json/text/random
    bytebench compress --list                # Distinct codec variant names
    bytebench compress -f zstd -s 16         # zstandard only, 16 MiB workloads
    bytebench compress -d corpus/enwik8      # Benchmark on a file
    bytebench compress --no-multithread      # Single-threaded pass only
    bytebench hash --show-hashes             # Include digests
    bytebench hash --format csv              # CSV on stdout
    bytebench hash -o a.json -o b.yaml       # Multiple outputs
    bytebench compress --config run.yaml     # Use config file
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from bytebench.engine import (
    BenchmarkRunner,
    EntryKind,
    EntryRegistry,
    OutputFormat,
    select,
    variant_names,
)
from bytebench.models.config_models import RunConfig
from bytebench.models.constants import (
    DEFAULT_CODEC_SIZE_MB,
    DEFAULT_CODEC_WORKLOADS,
    DEFAULT_HASH_SIZE_MB,
    DEFAULT_HASH_WORKLOADS,
    MIB,
    BenchKind,
)
from bytebench.utils.env import EnvVarTypeError, env_is_set, get_env
from bytebench.utils.logger import Logger
from bytebench.workload import (
    Workload,
    WorkloadError,
    check_unique_names,
    generate_workloads,
    load_workloads,
)

ENTRY_KINDS: dict[BenchKind, EntryKind] = {
    BenchKind.COMPRESS: EntryKind.CODEC,
    BenchKind.HASH: EntryKind.HASH,
}

DEFAULT_SIZES: dict[BenchKind, float] = {
    BenchKind.COMPRESS: DEFAULT_CODEC_SIZE_MB,
    BenchKind.HASH: DEFAULT_HASH_SIZE_MB,
}

DEFAULT_WORKLOADS: dict[BenchKind, tuple[str, ...]] = {
    BenchKind.COMPRESS: DEFAULT_CODEC_WORKLOADS,
    BenchKind.HASH: DEFAULT_HASH_WORKLOADS,
}


def load_config(config_path: str) -> RunConfig:
    """Load run settings from a YAML file.

    Config format:
        size_mb: 8
        filter: zstd
        threads: 4
        multithread: true
        workloads: [json, random]
        data_files: [corpus/enwik8]
        format: csv

    Raises:
        click.ClickException: If the file is missing, is not valid YAML or
            does not match RunConfig.
    """
    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    import yaml

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Error parsing config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise click.ClickException("Config must be a YAML dictionary")

    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e


def get_output_format(output: str | None, fmt: str | None) -> OutputFormat:
    """Determine output format from an explicit format or a filename."""
    if fmt:
        return OutputFormat(fmt.lower())

    if output:
        suffix = Path(output).suffix.lower()
        if suffix == ".json":
            return OutputFormat.JSON
        elif suffix in (".yaml", ".yml"):
            return OutputFormat.YAML
        elif suffix == ".csv":
            return OutputFormat.CSV

    return OutputFormat.TEXT


def default_threads() -> int | None:
    """Worker count from BYTEBENCH_THREADS, or None for the CPU count.

    An empty BYTEBENCH_THREADS counts as unset.
    """
    if not env_is_set("BYTEBENCH_THREADS"):
        return None
    try:
        threads = get_env("BYTEBENCH_THREADS", as_type=int)
    except EnvVarTypeError as e:
        raise click.ClickException(str(e)) from e
    if threads is not None and threads < 1:
        raise click.ClickException("BYTEBENCH_THREADS must be at least 1")
    return threads


def build_workloads(kind: BenchKind, config: RunConfig) -> list[Workload]:
    """Generate and load the workloads of a run.

    Files are loaded when ``data_files`` is set. Generated workloads are
    added when ``workloads`` is set explicitly or when no file was given.
    """
    size_mb = config.size_mb if config.size_mb is not None else DEFAULT_SIZES[kind]
    size = int(size_mb * MIB)

    workloads: list[Workload] = []
    try:
        if config.workloads or not config.data_files:
            kinds = config.workloads or DEFAULT_WORKLOADS[kind]
            workloads.extend(generate_workloads(size, kinds))
        if config.data_files:
            workloads.extend(load_workloads(config.data_files))
        check_unique_names(workloads)
    except WorkloadError as e:
        raise click.ClickException(str(e)) from e
    return workloads


def list_variants(registry: EntryRegistry, kind: BenchKind, filter: str | None) -> None:
    """Print distinct variant names, one per line, sorted."""
    entries = select(registry.get_entries(ENTRY_KINDS[kind]), filter)
    for name in variant_names(entries):
        click.echo(name)


def list_backends(registry: EntryRegistry, verbose: bool = False) -> None:
    """Print every backend with its availability and entry count."""
    backends = registry.list_backends()

    click.echo("\nBackends\n")
    click.echo("-" * 60)
    for kind in EntryKind:
        click.echo(f"\n[{kind.value.upper()}]")
        for info in backends:
            if info["kind"] != kind.value:
                continue
            status = "Available" if info["available"] else "Not Available"
            count = info["entries"]
            click.echo(f"  {info['name']:<16} {status:<14} {count:>3} entries")
            if verbose and not info["available"]:
                click.echo(f"      {info['reason']}")

    available = sum(1 for info in backends if info["available"])
    click.echo("\n" + "-" * 60)
    click.echo(f"\nTotal: {available}/{len(backends)} backends available")
    if not verbose:
        click.echo("Use --verbose for details")


def run_bench(
    kind: BenchKind,
    size_mb: float | None = None,
    filter: str | None = None,
    threads: int | None = None,
    multithread: bool | None = None,
    workloads: tuple[str, ...] = (),
    data_files: tuple[str, ...] = (),
    outputs: tuple[str, ...] = (),
    fmt: str | None = None,
    config: str | None = None,
    list_only: bool = False,
    show_hashes: bool | None = None,
    stop_on_error: bool | None = None,
) -> None:
    """Run a compress or hash benchmark from CLI arguments.

    Command-line values override config file values; unset values fall
    back to the defaults of ``kind``. Exits with status 1 when any entry
    failed, after every report has been written.
    """
    kind = BenchKind(kind)
    logger = Logger.get("commands.bench")

    run_config = load_config(config) if config else RunConfig()
    run_config = run_config.merged(
        size_mb=size_mb,
        filter=filter,
        threads=threads,
        multithread=multithread,
        workloads=list(workloads) or None,
        data_files=list(data_files) or None,
        format=fmt,
        show_hashes=show_hashes,
        stop_on_error=stop_on_error,
    )

    registry = EntryRegistry()

    # Handle --list
    if list_only:
        list_variants(registry, kind, run_config.filter)
        return

    bench_workloads = build_workloads(kind, run_config)
    entries = select(registry.get_entries(ENTRY_KINDS[kind]), run_config.filter)
    if not entries:
        click.echo(f"No {kind.value} entries match filter '{run_config.filter}'.")
        click.echo(f"Use 'bytebench {kind.value} --list' to see available variants.")
        sys.exit(1)

    logger.info(
        f"{len(entries)} entries, workloads: "
        + ", ".join(f"{w.name} ({w.size} bytes)" for w in bench_workloads)
    )

    try:
        runner = BenchmarkRunner(
            threads=run_config.threads or default_threads(),
            multithread=(
                run_config.multithread if run_config.multithread is not None else True
            ),
            stop_on_error=bool(run_config.stop_on_error),
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    results = runner.run(
        entries,
        bench_workloads,
        kind=kind,
        filter=run_config.filter,
        show_hashes=kind == BenchKind.HASH and bool(run_config.show_hashes),
    )

    # Emit results to multiple outputs
    for out_path in outputs:
        results.emit(out_path, get_output_format(out_path, None))
        click.echo(f"Results saved to: {out_path}", err=True)

    # Emit to stdout if no outputs or explicit format requested
    if not outputs or run_config.format:
        results.emit_stdout(get_output_format(None, run_config.format))

    summary = results.to_report().summary
    click.echo(
        f"Completed: {summary.measured}/{summary.total_entries} measured, "
        f"{summary.failed} failed",
        err=True,
    )

    if results.has_failures:
        sys.exit(1)

