"""Pydantic schemas for runtime validation of resource-dump settings."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from resource_dump.errors import ConfigurationError
from resource_dump.types import Environment

DEFAULT_OUTPUT_SUFFIX = ".dump"
OUTPUT_SUFFIX_ENV = "RESOURCE_DUMP_OUTPUT_SUFFIX"
OUTPUT_ROOT_ENV = "RESOURCE_DUMP_OUTPUT_ROOT"


class DumpSettings(BaseModel):
    """Validated settings that shape default output locations."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    output_root: Path | None = None

    @field_validator("output_suffix")
    @classmethod
    def _validate_output_suffix(cls, value: str) -> str:
        if len(value) < 2 or not value.startswith("."):
            raise ValueError("output_suffix must start with '.' followed by a name.")
        if "/" in value or os.sep in value:
            raise ValueError("output_suffix cannot contain a path separator.")
        return value

    @classmethod
    def from_env(cls, environ: Environment | None = None) -> DumpSettings:
        """Build settings from ``RESOURCE_DUMP_*`` environment variables.

        Parameters
        ----------
        environ : Mapping[str, str] | None, default=None
            Environment to read. Defaults to ``os.environ``.

        Returns
        -------
        DumpSettings
            Validated settings; unset or empty variables keep their defaults.

        Raises
        ------
        ConfigurationError
            If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        payload: dict[str, str] = {}
        suffix = env.get(OUTPUT_SUFFIX_ENV, "").strip()
        if suffix:
            payload["output_suffix"] = suffix
        root = env.get(OUTPUT_ROOT_ENV, "").strip()
        if root:
            payload["output_root"] = root
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid resource-dump settings: {exc}") from exc
