"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from resource_dump.arguments import WorkOrder
from resource_dump.errors import ResourceDumpError


@dataclass(frozen=True)
class WorkOrderResult:
    """Successful processing of one work order."""

    order: WorkOrder
    output_path: Path


@dataclass(frozen=True)
class WorkOrderFailure:
    """Failure attached to one command-line path."""

    nominal_path: str
    error: ResourceDumpError


@dataclass(frozen=True)
class DumpReport:
    """Structured outcome of a resource-dump run."""

    completed: tuple[WorkOrderResult, ...] = ()
    failures: tuple[WorkOrderFailure, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when no path failed."""
        return not self.failures

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return 0 if self.ok else 1
