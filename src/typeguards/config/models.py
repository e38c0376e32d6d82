"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typeguards.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    json_output: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
