"""YAML mapping files shared by the config and graph-file loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


class YamlFileError(Exception):
    """A YAML file could not be read, parsed, or does not hold a mapping."""


def read_mapping(path: Path | str) -> dict[str, Any]:
    """Return the top-level mapping stored in *path*."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise YamlFileError(f"{path} not found") from None
    except OSError as e:
        raise YamlFileError(f"cannot read {path}: {e}") from e

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise YamlFileError(f"malformed YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise YamlFileError(f"{path} is not a YAML mapping")
    return raw
