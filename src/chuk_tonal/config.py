"""
Configuration - tuning reference and parse cache policy.

Config can come from:
1. Defaults (A4 = 440 Hz, unbounded parse caches)
2. A YAML file loaded with load_config()

    reference_hz: 442
    cache_size: 4096
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_tonal.constants import DEFAULT_REFERENCE_HZ, ErrorMessages

logger = logging.getLogger(__name__)


class TonalConfig(BaseModel):
    """Process-wide settings for parsing and frequency conversion."""

    reference_hz: float = Field(
        DEFAULT_REFERENCE_HZ, gt=0, description="Frequency of A4 in Hz for freq()"
    )
    cache_size: int | None = Field(
        None, ge=1, description="Max entries per parse cache, None for unbounded"
    )

    model_config = {"frozen": True, "extra": "forbid"}


def load_config(path: Path | str) -> TonalConfig:
    """
    Load a config from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        The validated config

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a YAML mapping
        pydantic.ValidationError: If a value is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            ErrorMessages.CONFIG_NOT_MAPPING.format(path=path, kind=type(data).__name__)
        )

    config = TonalConfig.model_validate(data)
    logger.info(f"Loaded config from {path}: {config}")
    return config


_config = TonalConfig()


def get_config() -> TonalConfig:
    """Get the active config."""
    return _config


def set_config(config: TonalConfig) -> None:
    """
    Replace the active config.

    The default name parser is rebuilt on next use so a new cache_size
    takes effect.
    """
    global _config
    _config = config

    from chuk_tonal.notation.parser import reset_parser

    reset_parser()
