"""Command-line argument model for the resource-dump tool."""

from __future__ import annotations

from resource_dump.arguments import DumpArguments, WorkOrder
from resource_dump.errors import (
    ConfigurationError,
    PathResolutionError,
    ResourceDumpError,
    UsageError,
)
from resource_dump.schemas import DumpSettings

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DumpArguments",
    "DumpSettings",
    "PathResolutionError",
    "ResourceDumpError",
    "UsageError",
    "WorkOrder",
]
