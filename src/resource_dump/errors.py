"""Exception hierarchy shared by the argument model, use-cases and CLI."""

from __future__ import annotations

from pathlib import Path


class ResourceDumpError(Exception):
    """Base class for user-facing resource-dump failures."""

    exit_code: int = 1


class UsageError(ResourceDumpError):
    """Raised for a malformed argument list.

    Parameters
    ----------
    message : str
        Human-readable description of the problem.
    token : str | None, default=None
        Offending command-line token, when there is one.
    """

    exit_code = 2

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class PathResolutionError(ResourceDumpError):
    """Raised when a positional path does not resolve to an existing input."""

    def __init__(self, nominal_path: str, path: Path) -> None:
        super().__init__(f"No such file: '{nominal_path}' (resolved to {path})")
        self.nominal_path = nominal_path
        self.path = path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathResolutionError):
            return NotImplemented
        return (self.nominal_path, self.path) == (other.nominal_path, other.path)

    def __hash__(self) -> int:
        return hash((self.nominal_path, self.path))


class ConfigurationError(ResourceDumpError):
    """Raised when environment-provided settings are invalid."""

    exit_code = 2
