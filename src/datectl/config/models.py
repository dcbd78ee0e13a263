"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datectl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from datectl.domain.clock import zone_clock
from datectl.domain.errors import InvalidArgumentError
from datectl.domain.locales import is_supported
from datectl.domain.patterns import compile_pattern
from datectl.domain.types import ResolverStyle


class DatesConfig(BaseModel):
    """[dates] section."""

    model_config = {"frozen": True}

    input_pattern: str = "yyyy-MM-dd"
    output_pattern: str = "yyyy-MM-dd"
    locale: str = "en"
    resolver: ResolverStyle = ResolverStyle.SMART

    @field_validator("input_pattern", "output_pattern")
    @classmethod
    def _valid_pattern(cls, v: str) -> str:
        compile_pattern(v)
        return v

    @field_validator("locale")
    @classmethod
    def _supported_locale(cls, v: str) -> str:
        if not is_supported(v):
            raise ValueError(f"unsupported locale {v!r}")
        return v


class ClockConfig(BaseModel):
    """[clock] section.

    An empty timezone means the process's local date.
    """

    model_config = {"frozen": True}

    timezone: str = ""

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        if v:
            try:
                zone_clock(v)
            except InvalidArgumentError as exc:
                raise ValueError(str(exc)) from exc
        return v
