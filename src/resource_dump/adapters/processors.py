"""Work-order processors."""

from __future__ import annotations

from pathlib import Path

from resource_dump.arguments import WorkOrder
from resource_dump.types import EchoFn


class PlanReporter:
    """Report the planned ``input -> output`` mapping without writing anything."""

    def __init__(self, echo: EchoFn = print) -> None:
        self._echo = echo

    def process(self, order: WorkOrder) -> Path:
        """Echo the mapping for ``order`` and return its planned output path."""
        self._echo(f"{order.nominal_path} -> {order.output_path}")
        return order.output_path
