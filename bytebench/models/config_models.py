"""Pydantic model for run configuration files.

Config format (YAML):
    size_mb: 8
    filter: zstd
    threads: 4
    multithread: true
    workloads: [json, random]
    data_files: [corpus/enwik8]
    format: csv
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RunConfig(BaseModel):
    """Settings for one compress or hash run.

    Every field is optional; unset fields fall back to command defaults and
    command-line flags override file values.
    """

    model_config = ConfigDict(extra="forbid")

    size_mb: float | None = Field(
        None, ge=0, description="Generated workload size in MiB"
    )
    filter: str | None = Field(None, description="Implementation name substring")
    threads: int | None = Field(None, ge=1, description="Worker pool size")
    multithread: bool | None = Field(None, description="Run the parallel pass")
    workloads: list[str] | None = Field(None, description="Generated workload kinds")
    data_files: list[str] | None = Field(None, description="Files loaded as workloads")
    format: Literal["text", "csv", "json", "yaml"] | None = Field(
        None, description="Stdout format"
    )
    show_hashes: bool | None = Field(None, description="Include digests (hash runs)")
    stop_on_error: bool | None = Field(None, description="Abort on first failed entry")

    def merged(self, **overrides: object) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return RunConfig.model_validate({**self.model_dump(), **updates})
