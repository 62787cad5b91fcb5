"""Command-line argument model: help detection, output root and work orders."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from resource_dump.errors import PathResolutionError, UsageError
from resource_dump.schemas import DEFAULT_OUTPUT_SUFFIX, DumpSettings
from resource_dump.types import ArgumentVector

logger = logging.getLogger(__name__)

HELP_FLAGS = frozenset({"-h", "--help"})
OUTPUT_SHORT = "-o"
OUTPUT_LONG = "--output"
END_OF_OPTIONS = "--"

USAGE = "usage: resource-dump [-h] [-o DIR] [--] FILE..."


@dataclass(frozen=True)
class WorkOrder:
    """An input file and the output path its dump should be written to."""

    nominal_path: str
    input_path: Path
    output_path: Path

    @classmethod
    def resolve(
        cls,
        nominal_path: str,
        *,
        cwd: Path,
        output_root: Path | None = None,
        suffix: str = DEFAULT_OUTPUT_SUFFIX,
    ) -> WorkOrder:
        """Resolve a command-line path into a work order.

        Parameters
        ----------
        nominal_path : str
            Path exactly as typed by the user.
        cwd : Path
            Directory relative paths are resolved against.
        output_root : Path | None, default=None
            Shared output directory. When omitted the output is placed next
            to the input.
        suffix : str, default=".dump"
            Suffix appended to the input's file name to form the output name.

        Returns
        -------
        WorkOrder
            Work order with absolute input and output paths.

        Notes
        -----
        - Existence of the input is not checked here.
        - Symlinks are not followed: the output name comes from the typed
          path, not from the link target.
        """
        input_path = _absolute(cwd / nominal_path)
        output_name = f"{input_path.name}{suffix}"
        output_dir = output_root if output_root is not None else input_path.parent
        return cls(
            nominal_path=nominal_path,
            input_path=input_path,
            output_path=output_dir / output_name,
        )


@dataclass(frozen=True)
class DumpArguments:
    """Parsed resource-dump command line.

    ``work_orders`` and ``unresolved`` are empty when ``show_help`` is set.
    """

    show_help: bool = False
    work_orders: tuple[WorkOrder, ...] = ()
    output_root: Path | None = None
    unresolved: tuple[PathResolutionError, ...] = ()

    @classmethod
    def from_argv(
        cls,
        argv: ArgumentVector,
        argc: int | None = None,
        *,
        cwd: Path | None = None,
        settings: DumpSettings | None = None,
    ) -> DumpArguments:
        """Parse a full argument vector whose first entry is the program name.

        Parameters
        ----------
        argv : Sequence[str]
            Raw argument vector, ``argv[0]`` being the program name.
        argc : int | None, default=None
            Number of valid entries in ``argv``. Defaults to ``len(argv)``.
        cwd : Path | None, default=None
            Working directory for path resolution. Defaults to ``Path.cwd()``.
        settings : DumpSettings | None, default=None
            Output settings. Defaults to ``DumpSettings()``.

        Raises
        ------
        UsageError
            If ``argc`` is out of range, an option is unknown, or an option
            is missing its value.
        """
        count = len(argv) if argc is None else argc
        if count < 0 or count > len(argv):
            raise UsageError(f"Argument count {count} does not match {len(argv)} entries.")
        return cls.parse(list(argv[1:count]), cwd=cwd, settings=settings)

    @classmethod
    def parse(
        cls,
        tokens: Sequence[str],
        *,
        cwd: Path | None = None,
        settings: DumpSettings | None = None,
    ) -> DumpArguments:
        """Parse command-line tokens that follow the program name.

        Parameters
        ----------
        tokens : Sequence[str]
            Tokens in command-line order.
        cwd : Path | None, default=None
            Working directory for path resolution. Defaults to ``Path.cwd()``.
        settings : DumpSettings | None, default=None
            Output settings. Defaults to ``DumpSettings()``.

        Returns
        -------
        DumpArguments
            Fully parsed arguments.

        Raises
        ------
        UsageError
            If an option is unknown or is missing its value.
        """
        base = Path.cwd() if cwd is None else cwd
        config = DumpSettings() if settings is None else settings

        show_help = False
        output_value: str | None = None
        positionals: list[str] = []

        index = 0
        options_done = False
        while index < len(tokens):
            token = tokens[index]
            index += 1
            if options_done or token == "-" or not token.startswith("-"):
                positionals.append(token)
            elif token == END_OF_OPTIONS:
                options_done = True
            elif token in HELP_FLAGS:
                show_help = True
            elif token in (OUTPUT_SHORT, OUTPUT_LONG):
                if index >= len(tokens):
                    raise UsageError(f"Option '{token}' requires a directory argument.", token)
                output_value = _require_value(token, tokens[index])
                index += 1
            elif token.startswith(f"{OUTPUT_LONG}="):
                output_value = _require_value(token, token[len(OUTPUT_LONG) + 1 :])
            elif token.startswith(OUTPUT_SHORT) and not token.startswith("--"):
                output_value = token[len(OUTPUT_SHORT) :]
            else:
                raise UsageError(f"Unrecognized option '{token}'.", token)

        if output_value is not None:
            output_root: Path | None = _absolute(base / output_value)
        elif config.output_root is not None:
            output_root = _absolute(base / config.output_root)
        else:
            output_root = None

        if show_help:
            return cls(show_help=True, output_root=output_root)

        work_orders: list[WorkOrder] = []
        unresolved: list[PathResolutionError] = []
        for nominal_path in positionals:
            order = WorkOrder.resolve(
                nominal_path,
                cwd=base,
                output_root=output_root,
                suffix=config.output_suffix,
            )
            if nominal_path and order.input_path.is_file():
                logger.debug("work order %s -> %s", order.input_path, order.output_path)
                work_orders.append(order)
            else:
                logger.debug("unresolved input %r (%s)", nominal_path, order.input_path)
                unresolved.append(PathResolutionError(nominal_path, order.input_path))

        return cls(
            show_help=False,
            work_orders=tuple(work_orders),
            output_root=output_root,
            unresolved=tuple(unresolved),
        )


def _require_value(token: str, value: str) -> str:
    if not value:
        raise UsageError(f"Option '{token}' requires a directory argument.", token)
    return value


def _absolute(path: Path) -> Path:
    # Absolute and normalised; symlinks are not followed.
    return Path(os.path.normpath(path.absolute()))
