"""Pydantic models for structured output and configuration."""

from bytebench.models.config_models import RunConfig
from bytebench.models.report_models import (
    FailureReport,
    OperationReport,
    ReportRecord,
    RunMetadata,
    RunReport,
    RunSummary,
)

__all__ = [
    "FailureReport",
    "OperationReport",
    "ReportRecord",
    "RunConfig",
    "RunMetadata",
    "RunReport",
    "RunSummary",
]
