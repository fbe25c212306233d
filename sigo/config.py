"""
Configuration loading for sigo.

Reads an optional YAML config file and applies environment overrides.

Expected format:
---
home: ~/.sigo
lock: true
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from sigo.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_HOME,
    HOME_ENV_VAR,
)
from sigo.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"home", "lock"}


@dataclass(frozen=True)
class SigoConfig:
    """Explicit configuration passed to every store operation.

    Attributes:
        home: Directory holding the three store files
        lock: Serialize multi-step operations with a data-directory lock
    """

    home: Path
    lock: bool = True

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "home", Path(self.home))

    @classmethod
    def for_home(cls, home: Union[str, Path], lock: bool = True) -> "SigoConfig":
        """Build a config for a home directory, expanding ``~``."""
        return cls(home=Path(home).expanduser(), lock=lock)


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve config file path: argument, then $SIGO_CONFIG, then the default.

    Args:
        path: Explicit config path, if any.

    Returns:
        Absolute config file path (may not exist).
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def _parse_config_file(config_path: Path) -> Dict[str, Any]:
    """Parse YAML mapping from config file.

    Raises:
        ConfigError: If the file is unreadable, not YAML, or not a mapping.
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}")

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must be a YAML mapping.")

    unknown = set(data.keys()) - KNOWN_KEYS
    if unknown:
        logger.warning(
            "Ignoring unknown config keys in %s: %s",
            config_path,
            ", ".join(sorted(str(k) for k in unknown)),
        )

    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    home_override: Optional[Union[str, Path]] = None,
) -> SigoConfig:
    """Load sigo configuration.

    Precedence for the home directory: ``home_override`` argument, then
    $SIGO_HOME, then ``home`` from the config file, then ``~/.sigo``.

    Args:
        path: Config file path. Defaults to $SIGO_CONFIG or ~/.config/sigo/config.yaml.
        home_override: Home directory taking precedence over everything else.

    Returns:
        SigoConfig instance.

    Raises:
        ConfigError: If the config file exists but is malformed.
    """
    config_path = resolve_config_path(path)

    data: Dict[str, Any] = {}
    if config_path.is_file():
        data = _parse_config_file(config_path)
    else:
        logger.debug("No config file at %s, using defaults", config_path)

    home = data.get("home", DEFAULT_HOME)
    if not isinstance(home, str) or not home.strip():
        raise ConfigError(f"Config key 'home' must be a non-empty string, got {home!r}")

    lock = data.get("lock", True)
    if not isinstance(lock, bool):
        raise ConfigError(f"Config key 'lock' must be true or false, got {lock!r}")

    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        home = env_home

    if home_override:
        home = str(home_override)

    return SigoConfig.for_home(home, lock=lock)


def write_default_config(path: Union[str, Path], home: Union[str, Path]) -> Path:
    """Write a starter config file.

    Args:
        path: Destination config file path.
        home: Home directory to record.

    Returns:
        Path of the written config file.
    """
    config_path = Path(path).expanduser()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    yaml_content = yaml.dump(
        {"home": str(home), "lock": True}, default_flow_style=False, sort_keys=False
    )
    config_path.write_text(yaml_content, encoding="utf-8")
    logger.info("Wrote config file %s", config_path)
    return config_path
