"""Application use-cases driving work orders through a processor."""

from __future__ import annotations

import logging

from resource_dump.application.ports import WorkOrderProcessor
from resource_dump.application.results import (
    DumpReport,
    WorkOrderFailure,
    WorkOrderResult,
)
from resource_dump.arguments import DumpArguments
from resource_dump.errors import ResourceDumpError, UsageError

logger = logging.getLogger(__name__)


def dump_work_orders(
    arguments: DumpArguments,
    *,
    processor: WorkOrderProcessor,
    fail_fast: bool = False,
) -> DumpReport:
    """Run every resolved work order through ``processor``.

    Parameters
    ----------
    arguments : DumpArguments
        Parsed command line.
    processor : WorkOrderProcessor
        Consumer of each work order.
    fail_fast : bool, default=False
        Re-raise the first failure instead of recording it.

    Returns
    -------
    DumpReport
        Completed orders and per-path failures, in command-line order per
        category. Unresolved paths are reported before processor failures.

    Raises
    ------
    UsageError
        If the arguments requested help rather than work.
    ResourceDumpError
        With ``fail_fast``, the first unresolved path or processor failure.
    """
    if arguments.show_help:
        raise UsageError("Help was requested; there are no work orders to run.")

    failures: list[WorkOrderFailure] = []
    for error in arguments.unresolved:
        if fail_fast:
            raise error
        logger.info("skipping %s: %s", error.nominal_path, error)
        failures.append(WorkOrderFailure(nominal_path=error.nominal_path, error=error))

    completed: list[WorkOrderResult] = []
    for order in arguments.work_orders:
        try:
            output_path = processor.process(order)
        except ResourceDumpError as exc:
            if fail_fast:
                raise
            logger.info("failed to process %s: %s", order.nominal_path, exc)
            failures.append(WorkOrderFailure(nominal_path=order.nominal_path, error=exc))
            continue
        completed.append(WorkOrderResult(order=order, output_path=output_path))

    return DumpReport(completed=tuple(completed), failures=tuple(failures))
