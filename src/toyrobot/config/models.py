"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, toyrobot.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GridConfig(BaseModel):
    """[grid] section — table size; valid cells are [0, width) x [0, height)."""

    model_config = {"frozen": True}

    width: int = Field(default=5, ge=1)
    height: int = Field(default=5, ge=1)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    echo_commands: bool = False
