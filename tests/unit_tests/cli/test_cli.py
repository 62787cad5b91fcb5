"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from resource_dump.application.results import DumpReport
from resource_dump.arguments import DumpArguments
from resource_dump.cli import cli as cli_module
from resource_dump.errors import PathResolutionError, ResourceDumpError, UsageError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory with a clean environment."""
    monkeypatch.delenv("RESOURCE_DUMP_OUTPUT_SUFFIX", raising=False)
    monkeypatch.delenv("RESOURCE_DUMP_OUTPUT_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_prints_usage(flag: str) -> None:
    """Both help spellings print usage and exit 0."""
    result = runner.invoke(cli_module.app, [flag])
    assert result.exit_code == 0
    assert "usage: resource-dump" in result.output
    assert "-o DIR, --output DIR" in result.output


def test_help_does_not_process(monkeypatch: pytest.MonkeyPatch) -> None:
    """Help short-circuits before any work order is run."""

    def fail(*_: object, **__: object) -> None:
        raise AssertionError("should not run")

    monkeypatch.setattr(cli_module, "dump_work_orders", fail)
    result = runner.invoke(cli_module.app, ["x.rsrc", "-h"])
    assert result.exit_code == 0


def test_unknown_option_exits_with_usage_error() -> None:
    result = runner.invoke(cli_module.app, ["--bogus"])
    assert result.exit_code == 2
    assert "UsageError" in result.output
    assert "--bogus" in result.output


def test_output_option_without_value() -> None:
    result = runner.invoke(cli_module.app, ["-o"])
    assert result.exit_code == 2
    assert "requires a directory" in result.output


def test_no_inputs_is_nothing_to_do() -> None:
    result = runner.invoke(cli_module.app, [])
    assert result.exit_code == 0
    assert "Nothing to do" in result.output


def test_invalid_environment_is_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESOURCE_DUMP_OUTPUT_SUFFIX", "dump")
    result = runner.invoke(cli_module.app, ["a.rsrc"])
    assert result.exit_code == 2
    assert "ConfigurationError" in result.output


def test_tokens_are_forwarded_in_order(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Raw tokens reach the argument model untouched, minus --debug."""
    (tmp_path / "b.rsrc").write_bytes(b"")
    (tmp_path / "a.rsrc").write_bytes(b"")
    seen: dict[str, DumpArguments] = {}

    def fake_dump(arguments: DumpArguments, **_: object) -> DumpReport:
        seen["arguments"] = arguments
        return DumpReport()

    monkeypatch.setattr(cli_module, "dump_work_orders", fake_dump)

    result = runner.invoke(cli_module.app, ["b.rsrc", "--debug", "-o", "out", "a.rsrc"])

    assert result.exit_code == 0
    arguments = seen["arguments"]
    assert [order.nominal_path for order in arguments.work_orders] == ["b.rsrc", "a.rsrc"]
    assert arguments.output_root == tmp_path.resolve() / "out"


def test_output_value_slot_is_never_debug(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """``-o --debug`` names a directory and leaves the input in place."""
    (tmp_path / "a.rsrc").write_bytes(b"")
    seen: dict[str, DumpArguments] = {}

    def fake_dump(arguments: DumpArguments, **_: object) -> DumpReport:
        seen["arguments"] = arguments
        return DumpReport()

    monkeypatch.setattr(cli_module, "dump_work_orders", fake_dump)

    result = runner.invoke(cli_module.app, ["-o", "--debug", "a.rsrc"])

    assert result.exit_code == 0
    arguments = seen["arguments"]
    assert arguments.output_root == tmp_path.resolve() / "--debug"
    assert [order.nominal_path for order in arguments.work_orders] == ["a.rsrc"]


@pytest.mark.parametrize(
    ("tokens", "forwarded", "debug"),
    [
        (["a", "--debug", "b"], ["a", "b"], True),
        (["--output", "--debug"], ["--output", "--debug"], False),
        (["-o", "out", "--debug"], ["-o", "out"], True),
        (["-oout", "--debug", "a"], ["-oout", "a"], True),
        (["a", "b"], ["a", "b"], False),
    ],
)
def test_split_debug(tokens: list[str], forwarded: list[str], debug: bool) -> None:
    assert cli_module._split_debug(tokens) == (forwarded, debug)


def test_processing_error_exit_code(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """An error escaping the use-case is printed and mapped to its exit code."""
    (tmp_path / "a.rsrc").write_bytes(b"")

    def fake_dump(*_: object, **__: object) -> None:
        raise ResourceDumpError("disk full")

    monkeypatch.setattr(cli_module, "dump_work_orders", fake_dump)
    result = runner.invoke(cli_module.app, ["a.rsrc"])
    assert result.exit_code == 1
    assert "ResourceDumpError: disk full" in result.output


def test_print_failure_debug_path(capsys: pytest.CaptureFixture[str]) -> None:
    """Print traceback details in debug mode and return the error's exit code."""
    try:
        raise UsageError("bad flag", "--x")
    except UsageError as exc:
        code = cli_module._print_failure(exc, debug=True)
    captured = capsys.readouterr()
    assert code == 2
    assert "Traceback" in captured.err


def test_print_failure_without_traceback(capsys: pytest.CaptureFixture[str]) -> None:
    """Never-raised errors print only their summary line."""
    code = cli_module._print_failure(PathResolutionError("x", Path("/x")), debug=True)
    captured = capsys.readouterr()
    assert code == 1
    assert "PathResolutionError" in captured.err
    assert "Traceback" not in captured.err
