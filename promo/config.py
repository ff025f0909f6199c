"""User configuration loaded from ``~/.config/promo/config.yaml``."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from promo.types import ConfigError, HomeDirError

logger = logging.getLogger(__name__)

CONFIG_SUBPATH = Path(".config") / "promo" / "config.yaml"


@dataclass(frozen=True)
class Config:
    """Immutable program configuration.

    Attributes:
        sound_path: Audio file played when the countdown expires. Empty
            disables the notification.
    """

    sound_path: str = ""


def config_path(home: Path | None = None) -> Path:
    """Return the per-user config file location.

    Raises ``HomeDirError`` if no home directory can be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except (KeyError, RuntimeError) as exc:
            raise HomeDirError(f"Error getting home dir: {exc}") from exc
    return home / CONFIG_SUBPATH


def load_config(path: Path) -> Config:
    """Read ``path`` into a Config. A missing file yields the defaults."""
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("no config file at %s, using defaults", path)
        return Config()
    except OSError as exc:
        raise ConfigError(path, f"Error opening config file: {exc}") from exc

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(path, f"Error opening config file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"Error decoding config file: {exc}") from exc

    logger.debug("loaded config from %s", path)
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(
            path,
            f"Error decoding config file: expected a mapping, got {type(data).__name__}",
        )
    return Config(sound_path=_sound_path(path, data.get("sound_path")))


def _sound_path(path: Path, value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(
            path, f"Error decoding config file: sound_path must be a string, got {type(value).__name__}"
        )
    return os.path.expanduser(str(value))
