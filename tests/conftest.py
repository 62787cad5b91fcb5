"""Shared pytest configuration: suite markers follow the test directory."""

from __future__ import annotations

from pathlib import Path

import pytest

SUITE_MARKERS = {
    "e2e_tests": pytest.mark.e2e,
    "integration_tests": pytest.mark.integration,
    "unit_tests": pytest.mark.unit,
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each collected test by the suite directory it lives in."""
    del config
    for item in items:
        parts = Path(str(item.path)).parts
        for directory, marker in SUITE_MARKERS.items():
            if directory in parts:
                item.add_marker(marker)
                break
