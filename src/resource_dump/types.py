"""Shared type aliases for the argument model."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeAlias

ArgumentVector: TypeAlias = Sequence[str]
Environment: TypeAlias = Mapping[str, str]
EchoFn: TypeAlias = Callable[[str], object]
