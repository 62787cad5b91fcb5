#!/usr/bin/env python3
"""
resource_dump.cli.cli

Typer-based CLI that turns command-line paths into resource-dump work orders.

Every token is forwarded to
:class:`resource_dump.arguments.DumpArguments`, which owns the option syntax,
except ``--debug`` switches, which are removed first. The value slot after
``-o``/``--output`` is never taken for ``--debug``.

Examples
--------
Plan dumps next to each input:

    resource-dump System.rsrc Finder.rsrc

Plan dumps into a shared directory:

    resource-dump -o dumps/ System.rsrc Finder.rsrc

Notes
-----
- Click consumes the first literal ``--`` before the tokens are forwarded, so
  inputs whose names begin with ``-`` should be written as ``./-name``.
"""

from __future__ import annotations

import logging
import traceback

import typer

from resource_dump.adapters.processors import PlanReporter
from resource_dump.application.use_cases import dump_work_orders
from resource_dump.arguments import OUTPUT_LONG, OUTPUT_SHORT, USAGE, DumpArguments
from resource_dump.errors import ConfigurationError, ResourceDumpError, UsageError
from resource_dump.schemas import OUTPUT_ROOT_ENV, OUTPUT_SUFFIX_ENV, DumpSettings

HELP_TEXT = f"""{USAGE}

Resolve resource files into input -> output work orders.

positional arguments:
  FILE                  resource file to dump (repeatable, order preserved)

options:
  -h, --help            show this help message and exit
  -o DIR, --output DIR  write every dump into DIR instead of next to its input
  --debug               show debug logging and full tracebacks on error

environment:
  {OUTPUT_SUFFIX_ENV}   suffix appended to output names (default: .dump)
  {OUTPUT_ROOT_ENV}     default output directory when -o is not given
"""

DEBUG_FLAG = "--debug"

app = typer.Typer(
    name="resource-dump",
    help="Resolve resource files into input -> output work orders.",
    add_completion=False,
)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _print_failure(exc: BaseException, debug: bool) -> int:
    """Print a user-friendly failure line.

    Parameters
    ----------
    exc : BaseException
        Failure to report.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code suggested by the failure.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug and exc.__traceback__ is not None:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _split_debug(tokens: list[str]) -> tuple[list[str], bool]:
    """Remove ``--debug`` switches, leaving option values in place.

    The token after ``-o``/``--output`` is always that option's value, even
    when it reads ``--debug``.
    """
    forwarded: list[str] = []
    debug = False
    take_value = False
    for token in tokens:
        if take_value:
            forwarded.append(token)
            take_value = False
        elif token == DEBUG_FLAG:
            debug = True
        else:
            forwarded.append(token)
            take_value = token in (OUTPUT_SHORT, OUTPUT_LONG)
    return forwarded, debug


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def main(
    tokens: list[str] | None = typer.Argument(
        None,
        metavar="[--debug] [-h] [-o DIR] FILE...",
        help="Options and resource file paths.",
        show_default=False,
    ),
) -> None:
    """Resolve resource files into input -> output work orders.

    Parameters
    ----------
    tokens : list[str] | None
        Raw command-line tokens after the program name, ``--debug`` included.
    """
    forwarded, debug = _split_debug(tokens or [])
    _configure_logging(debug)

    try:
        settings = DumpSettings.from_env()
        arguments = DumpArguments.parse(forwarded, settings=settings)
    except UsageError as exc:
        typer.echo(HELP_TEXT.splitlines()[0], err=True)
        raise typer.Exit(code=_print_failure(exc, debug))
    except ConfigurationError as exc:
        raise typer.Exit(code=_print_failure(exc, debug))

    if arguments.show_help:
        typer.echo(HELP_TEXT)
        return

    if not arguments.work_orders and not arguments.unresolved:
        typer.echo("Nothing to do: no input files given.", err=True)
        return

    try:
        report = dump_work_orders(arguments, processor=PlanReporter(echo=typer.echo))
    except ResourceDumpError as exc:
        raise typer.Exit(code=_print_failure(exc, debug))

    for failure in report.failures:
        _print_failure(failure.error, debug)
    if not report.ok:
        raise typer.Exit(code=report.exit_code)


if __name__ == "__main__":
    app()
