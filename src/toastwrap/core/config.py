"""User configuration for toastwrap.

Settings come from ``~/.config/toastwrap/toastwrap.conf`` (``key = value``
lines) and can be overridden with ``TOASTWRAP_<KEY>`` environment variables.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "toastwrap" / "toastwrap.conf"
ENV_PREFIX = "TOASTWRAP_"


@dataclass
class Settings:
    """Runtime knobs for staging and dispatch."""

    powershell: str = "PowerShell"
    timeout: float = 30.0  # seconds before a hung PowerShell is killed
    temp_dir: str | None = None  # None: system temp dir
    debug_script: bool = False  # log the full rendered script
    app_id: str = ""
    display_name: str = ""
    icon: str = ""


def _read_config(path: Path) -> dict[str, str]:
    """Read a ``key = value`` config file into a dict."""
    config = {}
    if not path.exists():
        return config
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return config
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, _, value = line.partition("=")
            config[key.strip().lower()] = value.strip()
    return config


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _apply(settings: Settings, raw: dict[str, str]) -> None:
    known = {f.name for f in fields(Settings)}
    for key, value in raw.items():
        if key not in known:
            continue
        if key == "timeout":
            try:
                settings.timeout = float(value)
            except ValueError:
                logger.warning("Ignoring invalid timeout %r", value)
        elif key == "debug_script":
            settings.debug_script = _to_bool(value)
        elif key == "temp_dir":
            settings.temp_dir = value or None
        else:
            setattr(settings, key, value)


def load_settings(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> Settings:
    """Build settings from defaults, the config file, then the environment."""
    settings = Settings()
    _apply(settings, _read_config(path or CONFIG_PATH))

    env = os.environ if environ is None else environ
    overrides = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX)
    }
    _apply(settings, overrides)
    return settings
