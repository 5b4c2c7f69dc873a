# Copyright (c) Syntropy Systems
"""Configuration management for shipsplit."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import cast

import yaml

from shipsplit.policy import (
    ATTRIBUTE_SOURCES,
    DEFAULT_ATTRIBUTE_KEY,
    EXEMPTIONS,
    VisibilityPolicy,
)

CONFIG_DIR_NAME = ".shipsplit"
CONFIG_FILE_NAME = "config.yaml"


@dataclass
class FilterConfig:
    """Configuration for the variant filter."""

    # Cart attribute carrying the assigned variant
    attribute_key: str = DEFAULT_ATTRIBUTE_KEY

    # Where the variant is read from: any, flat, structured
    attribute_source: str = "any"

    # Cart-level exemption: subscription, none
    exemption: str = "subscription"

    # Valid variant tokens; None accepts any single alphanumeric
    allowed_tokens: list[str] | None = None

    def to_policy(self) -> VisibilityPolicy:
        """Build the visibility policy described by this config."""
        if self.attribute_source not in ATTRIBUTE_SOURCES:
            msg = f"Unknown attribute_source: {self.attribute_source}"
            raise ValueError(msg)
        if self.exemption not in EXEMPTIONS:
            msg = f"Unknown exemption: {self.exemption}"
            raise ValueError(msg)

        allowed = None
        if self.allowed_tokens is not None:
            allowed = frozenset(self.allowed_tokens)

        return VisibilityPolicy(
            attribute_key=self.attribute_key,
            resolve_variant=ATTRIBUTE_SOURCES[self.attribute_source],
            is_exempt=EXEMPTIONS[self.exemption],
            allowed_tokens=allowed,
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to a dictionary for writing config.yaml."""
        return asdict(self)


def find_config_dir(start_path: Path | None = None) -> Path | None:
    """Find the nearest .shipsplit directory by walking up from start_path.

    Returns None if no .shipsplit directory is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        config_dir = current / CONFIG_DIR_NAME
        if config_dir.is_dir():
            return config_dir
        current = current.parent

    # Check root
    config_dir = current / CONFIG_DIR_NAME
    if config_dir.is_dir():
        return config_dir

    return None


def get_global_config_dir() -> Path:
    """Get the global shipsplit config directory (~/.shipsplit)."""
    return Path.home() / CONFIG_DIR_NAME


def _find_config_path() -> Path | None:
    found_dir = find_config_dir()
    if found_dir is not None:
        return found_dir / CONFIG_FILE_NAME
    global_config = get_global_config_dir() / CONFIG_FILE_NAME
    if global_config.exists():
        return global_config
    return None


def load_config(config_path: Path | None = None) -> FilterConfig:
    """Load configuration from a YAML file or defaults.

    Looks for config in:
    1. Provided config_path
    2. Nearest .shipsplit directory walking up
    3. ~/.shipsplit/config.yaml
    4. Defaults
    """
    config = FilterConfig()

    if config_path is None:
        config_path = _find_config_path()

    if config_path is None or not config_path.exists():
        return config

    with config_path.open() as f:
        data = cast("dict[str, object]", yaml.safe_load(f) or {})

    if not isinstance(data, dict):
        msg = f"{config_path} must contain a mapping"
        raise ValueError(msg)

    attribute_key = data.get("attribute_key")
    if isinstance(attribute_key, str) and attribute_key:
        config.attribute_key = attribute_key
    attribute_source = data.get("attribute_source")
    if isinstance(attribute_source, str):
        config.attribute_source = attribute_source
    exemption = data.get("exemption")
    if isinstance(exemption, str):
        config.exemption = exemption
    allowed_tokens = data.get("allowed_tokens")
    if isinstance(allowed_tokens, list):
        config.allowed_tokens = [
            str(token) for token in cast("list[object]", allowed_tokens)
        ]

    return config
