# okchain/infrastructure/config/settings.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Literal, Mapping, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field

ENV_PREFIX = "OKCHAIN_"
DEFAULT_ENV_FILE = ".env"


class OkChainSettings(BaseModel):
    """Runtime knobs for the default executor."""

    log_level: str = Field(default="INFO", description="Minimum level for okchain events, applied by both logger adapters")
    log_sink: Literal["loguru", "console"] = Field(default="loguru", description="Logger adapter")
    trace_steps: bool = Field(default=False, description="Emit step.start / step.end events")
    log_values: bool = Field(default=False, description="Log value reprs instead of type names")
    max_value_length: int = Field(default=80, ge=8, description="Truncation for logged values")


def load_settings(
    env_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> OkChainSettings:
    """
    Build settings from ``OKCHAIN_*`` variables.

    Values in ``env_file`` (default: ``.env`` in the working directory) take
    precedence over the process environment; pydantic's ``ValidationError``
    is raised for bad values.
    """
    if env_file is None:
        env_file = Path.cwd() / DEFAULT_ENV_FILE

    source: Dict[str, Optional[str]] = {}
    if env_file.exists():
        source.update(dotenv_values(env_file))

    for key, value in (os.environ if environ is None else environ).items():
        if key not in source:
            source[key] = value

    values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in source.items()
        if key.startswith(ENV_PREFIX) and value is not None
    }
    return OkChainSettings.model_validate(values)
