"""Configuration management for Odometer."""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any
import yaml

from .chain import MAX_VALUE
from .runner import DEFAULT_FRAME_RATE, RUN_DOWN_INTERVAL_US, RUN_UP_INTERVAL_US

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/odometer/config.yaml"


class ConfigManager:
    """Manage Odometer configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()

        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}

        if content is None:
            return {}
        if not isinstance(content, dict):
            _log.warning("Ignoring config %s: expected a mapping at top level", self.config_path)
            return {}
        return content

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(default_config(), f, default_flow_style=False)
        except OSError as e:
            _log.warning("Could not write default config %s: %s", self.config_path, e)

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str):
            return value
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _section(self, section: str) -> Dict[str, Any]:
        """Get a config section, or an empty one if it is missing or malformed."""
        value = self.data.get(section)
        if value is None:
            return {}
        if not isinstance(value, dict):
            _log.warning("Ignoring config section %r: expected a mapping", section)
            return {}
        return value

    def _get_int(self, section: str, key: str, default: int) -> int:
        raw = self._resolve_env_var(self._section(section).get(key, default))
        if raw in ("", None):
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"{section}.{key} must be an integer, got {raw!r}") from None

    def get_run_config(self) -> Dict[str, int]:
        """Get pacing for animated runs.

        Raises:
            ValueError: if a value is not a positive integer.
        """
        config = {
            "up_interval_us": self._get_int("run", "up_interval_us", RUN_UP_INTERVAL_US),
            "down_interval_us": self._get_int("run", "down_interval_us", RUN_DOWN_INTERVAL_US),
            "frame_rate": self._get_int("run", "frame_rate", DEFAULT_FRAME_RATE),
        }
        for key, value in config.items():
            if value <= 0:
                raise ValueError(f"run.{key} must be positive, got {value}")
        return config

    def get_start_value(self) -> int:
        """Get the value shown when the odometer starts."""
        value = self._get_int("display", "start_value", 0)
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"display.start_value must be between 0 and {MAX_VALUE}, got {value}")
        return value

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)


def default_config() -> Dict[str, Any]:
    return {
        "run": {
            "up_interval_us": RUN_UP_INTERVAL_US,
            "down_interval_us": RUN_DOWN_INTERVAL_US,
            "frame_rate": DEFAULT_FRAME_RATE,
        },
        "display": {
            "start_value": 0,
        },
    }
