"""ConfigManager — layered loading of hashing options."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from treehash.config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, ENV_PREFIX
from treehash.engine.errors import ConfigError
from treehash.engine.options import HashOptions

logger = logging.getLogger(__name__)

# All known option keys with their descriptions
_OPTION_KEYS: dict[str, str] = {
    "follow_symlinks": "Descend into linked directories and hash linked files",
    "include_hidden": "Hash entries whose name starts with a dot",
    "ignore_invalid_types": "Skip devices, FIFOs and sockets instead of failing",
    "set_root": "Render paths relative to the hashed directory",
}


class ConfigManager:
    """Merge hashing options from defaults, a JSON file, the environment and overrides."""

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load_options(
        self,
        config_path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> HashOptions:
        """Load merged options: defaults -> config file -> env vars -> overrides.

        Keys in *overrides* whose value is None are ignored, so CLI
        flags that were not given leave lower layers in effect.

        Raises :class:`ConfigError` when *config_path* is given but is
        missing, unreadable or not a JSON object, and when a merged value
        is not a valid boolean.
        """
        merged: dict[str, Any] = {}

        # 1. Config file
        if config_path is not None:
            merged.update(self._read_file(Path(config_path)))

        # 2. Environment variables
        for key in _OPTION_KEYS:
            env_val = self._environ.get(ENV_PREFIX + key.upper())
            if env_val is not None:
                merged[key] = env_val

        # 3. Explicit overrides
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value

        try:
            return HashOptions(**merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid option value: {exc}") from exc

    def log_level(self) -> str:
        """Return the configured logging level name."""
        return self._environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()

    def describe(self) -> list[str]:
        """Return one ``KEY  description`` line per supported environment variable."""
        return [f"{ENV_PREFIX}{key.upper()}  {text}" for key, text in _OPTION_KEYS.items()]

    @staticmethod
    def _read_file(path: Path) -> dict[str, Any]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Could not read config file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} is not a JSON object")
        unknown = sorted(k for k in data if k not in _OPTION_KEYS)
        if unknown:
            logger.debug("Ignoring unknown keys in %s: %s", path, ", ".join(unknown))
        return {k: v for k, v in data.items() if k in _OPTION_KEYS}
