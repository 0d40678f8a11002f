"""
Config loader - reads the instrument configuration from YAML.

Example scales.yaml:

    note_duration_ms: 500
    midi:
      port_name: "IAC Driver Bus 1"
      program: 0
    selection:
      key: D
      octave: 3
      mode: minor
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chuk_mcp_scales.models.config import InstrumentConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "scales.yaml"


def load_config(path: Path | None = None) -> InstrumentConfig:
    """
    Load the instrument configuration.

    Args:
        path: YAML file to read; a missing file (or None) gives the defaults

    Returns:
        Validated InstrumentConfig

    Raises:
        ValueError: If the file is not valid YAML or fails validation
    """
    if path is None or not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return InstrumentConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return InstrumentConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}: {path}")

    config = InstrumentConfig.model_validate(data)
    logger.info(f"Loaded config from {path}")
    return config
