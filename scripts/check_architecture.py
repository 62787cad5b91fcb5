#!/usr/bin/env python3
"""Layering checks: only the CLI may depend on typer."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/resource_dump"
CLI_ONLY = ("import typer", "from typer")
NO_UPWARD = {
    "arguments.py": ("resource_dump.application", "resource_dump.adapters", "resource_dump.cli"),
    "schemas.py": ("resource_dump.arguments", "resource_dump.application", "resource_dump.cli"),
    "errors.py": ("resource_dump.",),
}


def _violations(path: Path, banned: tuple[str, ...]) -> list[str]:
    text = path.read_text(encoding="utf-8")
    return [f"{path.relative_to(ROOT)}: found '{token}'" for token in banned if token in text]


def main() -> None:
    """Run repository architecture boundary checks."""
    problems: list[str] = []
    for path in PACKAGE.rglob("*.py"):
        if "cli" not in path.relative_to(PACKAGE).parts:
            problems.extend(_violations(path, CLI_ONLY))
    for name, banned in NO_UPWARD.items():
        problems.extend(_violations(PACKAGE / name, banned))
    if problems:
        raise SystemExit("Architecture violations:\n" + "\n".join(problems))
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
