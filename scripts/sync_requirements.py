#!/usr/bin/env python3
"""Write or verify requirements.txt from pyproject.toml dependencies."""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
SYNC_EXTRAS = ("cli",)
HEADER = (
    f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})\n"
    "# Do not edit manually; run: uv run python scripts/sync_requirements.py\n"
    "\n"
)


def _declared() -> set[str]:
    pyproject = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    deps = set(pyproject["project"].get("dependencies", []))
    optional = pyproject["project"].get("optional-dependencies", {})
    for extra in SYNC_EXTRAS:
        deps.update(optional.get(extra, []))
    return {dep.strip() for dep in deps if dep.strip()}


def _pinned() -> set[str]:
    entries = (line.split("#", 1)[0].strip() for line in REQUIREMENTS.read_text(encoding="utf-8").splitlines())
    return {entry for entry in entries if entry}


def _check() -> None:
    declared = _declared()
    pinned = _pinned()
    if declared == pinned:
        print("Dependency sync check passed.")
        return
    parts = ["requirements.txt is out of sync with pyproject.toml."]
    parts.extend(f"- missing: {entry}" for entry in sorted(declared - pinned))
    parts.extend(f"- unexpected: {entry}" for entry in sorted(pinned - declared))
    raise SystemExit("\n".join(parts))


def main() -> None:
    """Regenerate requirements.txt, or only compare it with ``--check``."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--check", action="store_true", help="Fail instead of writing when out of sync.")
    args = parser.parse_args()
    if args.check:
        _check()
        return
    reqs = sorted(_declared())
    REQUIREMENTS.write_text(HEADER + "\n".join(reqs) + "\n", encoding="utf-8")
    print(f"Wrote {len(reqs)} requirements to {REQUIREMENTS.name}")


if __name__ == "__main__":
    main()
