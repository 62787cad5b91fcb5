"""Application ports for the work-order processing boundary."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from resource_dump.arguments import WorkOrder


class WorkOrderProcessor(Protocol):
    """Consume one work order and produce its output."""

    def process(self, order: WorkOrder) -> Path:
        """Process ``order`` and return the path written (or planned)."""
