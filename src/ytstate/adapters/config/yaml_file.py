"""
YAML Config Provider - Load configuration from a YAML file.

Supports, lowest to highest precedence:
- A YAML file with a `youtrack` section (config.yml by default)
- Environment variables (YOUTRACK_HOST, YOUTRACK_TOKEN, ...)
- Command line argument overrides
"""

import math
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ...core.exceptions import ConfigError
from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    TrackerConfig,
    DEFAULT_TIMEOUT,
)


DEFAULT_CONFIG_FILE = "config.yml"


def _to_bool(raw_value: Any) -> Any:
    """Convert boolean-ish strings, leave anything else untouched."""
    if isinstance(raw_value, str):
        if raw_value.lower() in ("true", "1", "yes"):
            return True
        if raw_value.lower() in ("false", "0", "no"):
            return False
    return raw_value


class YamlConfigProvider(ConfigProviderPort):
    """
    Configuration provider that merges a YAML file, the environment and
    command line overrides into one immutable AppConfig.
    """

    SECTION = "youtrack"

    # Keys accepted inside the `youtrack` section
    FILE_KEYS = ("host", "token", "project", "prefix", "insecure", "timeout")

    ENV_MAPPING = {
        "YOUTRACK_HOST": "host",
        "YOUTRACK_TOKEN": "token",
        "YOUTRACK_PROJECT": "project",
        "YOUTRACK_PREFIX": "prefix",
        "YOUTRACK_INSECURE": "insecure",
        "YOUTRACK_TIMEOUT": "timeout",
    }

    # Keys whose string values are read as booleans
    BOOL_KEYS = ("insecure",)

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            config_file: Path to the YAML file. When omitted, config.yml in the
                current directory is used if it exists.
            cli_overrides: Command line argument overrides (None values ignored)
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._sources: list[str] = []
        self._explicit_file = config_file is not None
        self._config_file = Path(config_file or DEFAULT_CONFIG_FILE)
        self._cli_overrides = {
            k: v for k, v in (cli_overrides or {}).items() if v is not None
        }
        self._environ = os.environ if environ is None else environ

        # Load configuration
        self._load_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "YAML"

    def load(self) -> AppConfig:
        """
        Load complete configuration.

        Raises:
            ConfigError: If required values are missing or invalid
        """
        errors = self.validate()
        if errors:
            raise ConfigError("; ".join(errors))

        tracker = TrackerConfig(
            host=str(self.get("host")),
            token=str(self.get("token")),
            project=self._optional_str("project"),
            prefix=self._optional_str("prefix"),
            verify_ssl=not self.get("insecure", False),
            timeout=float(self.get("timeout", DEFAULT_TIMEOUT)),
        )

        return AppConfig(
            tracker=tracker,
            task=self.get("task", ""),
            new_state=self.get("ns", ""),
            dry_run=bool(self.get("dry_run", False)),
            sources=tuple(self._sources),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("host"):
            errors.append(
                f"Missing host - set youtrack.host in {self._config_file}, "
                "YOUTRACK_HOST or --host"
            )
        if not self.get("token"):
            errors.append(
                f"Missing token - set youtrack.token in {self._config_file}, "
                "YOUTRACK_TOKEN or --token"
            )

        timeout = self.get("timeout", DEFAULT_TIMEOUT)
        try:
            seconds = float(timeout)
        except (TypeError, ValueError):
            errors.append(f"Timeout must be a number, got {timeout!r}")
        else:
            if not math.isfinite(seconds) or seconds <= 0:
                errors.append(f"Timeout must be a positive number, got {timeout}")

        insecure = self.get("insecure", False)
        if not isinstance(insecure, bool):
            errors.append(
                f"insecure must be true or false, got {insecure!r}"
            )

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _optional_str(self, key: str) -> Optional[str]:
        value = self.get(key)
        return str(value) if value not in (None, "") else None

    def _load_file(self) -> None:
        """Load values from the `youtrack` section of the YAML file."""
        if not self._config_file.exists():
            if self._explicit_file:
                raise ConfigError(f"Config file not found: {self._config_file}")
            return

        try:
            with open(self._config_file, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {self._config_file}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"{self._config_file} must contain a mapping")

        section = data.get(self.SECTION) or {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'{self.SECTION}' in {self._config_file} must be a mapping"
            )

        for key in self.FILE_KEYS:
            if section.get(key) is None:
                continue
            if key in self.BOOL_KEYS:
                self._values[key] = _to_bool(section[key])
            else:
                self._values[key] = section[key]

        self._sources.append(str(self._config_file))

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        found = False
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                if config_key in self.BOOL_KEYS:
                    self._values[config_key] = _to_bool(raw_value)
                else:
                    self._values[config_key] = raw_value
                found = True

        if found:
            self._sources.append("environment")

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, value in self._cli_overrides.items():
            self._values[cli_key.lower().replace("-", "_")] = value

        if self._cli_overrides:
            self._sources.append("command line")
