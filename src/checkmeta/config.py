"""Configuration management for checkmeta.

Supports loading configuration from:
1. Environment variables (CHECKMETA_*)
2. Config file (~/.checkmeta/config.yaml)
3. Default values

Example config file (~/.checkmeta/config.yaml):
    display:
      date_format: "%Y/%m/%d %H:%M:%S"
    probe:
      chunk_size: 65536
      parse_speed: 0.5
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from checkmeta.normalize.assemble import DEFAULT_DATE_FORMAT
from checkmeta.probes.mediainfo import DEFAULT_BUFFER_SIZE, DEFAULT_PARSE_SPEED

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".checkmeta" / "config.yaml",
    Path.home() / ".config" / "checkmeta" / "config.yaml",
    Path(".checkmeta.yaml"),
]


@dataclass
class DisplayConfig:
    """Display configuration."""

    date_format: str = DEFAULT_DATE_FORMAT


@dataclass
class ProbeConfig:
    """Probe configuration."""

    chunk_size: int = DEFAULT_BUFFER_SIZE
    parse_speed: float = DEFAULT_PARSE_SPEED


@dataclass
class CheckMetaConfig:
    """Main configuration for checkmeta."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations if locations is not None else CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
                continue
            return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with CHECKMETA_ prefix."""
    return os.environ.get(f"CHECKMETA_{key}", default)


def load_config(locations: list[Path] | None = None) -> CheckMetaConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (CHECKMETA_*)
    2. Config file (~/.checkmeta/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)

    # Display config
    display_config = file_config.get("display") or {}
    display = DisplayConfig(
        date_format=_get_env("DATE_FORMAT")
        or display_config.get("date_format", DEFAULT_DATE_FORMAT),
    )

    # Probe config
    probe_config = file_config.get("probe") or {}
    probe = ProbeConfig(
        chunk_size=int(_get_env("CHUNK_SIZE") or probe_config.get("chunk_size", DEFAULT_BUFFER_SIZE)),
        parse_speed=float(
            _get_env("PARSE_SPEED") or probe_config.get("parse_speed", DEFAULT_PARSE_SPEED)
        ),
    )

    return CheckMetaConfig(display=display, probe=probe)


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global config instance (lazy loaded)
_config: CheckMetaConfig | None = None


def get_config() -> CheckMetaConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
