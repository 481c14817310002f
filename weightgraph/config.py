"""Configuration loader — search and display settings with defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from weightgraph.logger import logger
from weightgraph.model import WeightGraphConfig
from weightgraph.yamlfile import YamlFileError, read_mapping

if TYPE_CHECKING:
    from pathlib import Path


def load_config(path: Path | None = None) -> WeightGraphConfig:
    """Load settings from *path*, falling back to defaults on any unusable file."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return WeightGraphConfig()

    try:
        return WeightGraphConfig.model_validate(read_mapping(path))
    except YamlFileError as e:
        logger.warning("Config ignored: %s; using defaults", e)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s; using defaults", path, e)
    return WeightGraphConfig()
