"""
Configuration — loads settings from .diffreview.yaml, environment variables,
and built-in defaults (in that priority order: CLI args > env > YAML > defaults).
"""

import os

import yaml


_DEFAULTS = {
    "log_dir": ".diffreview/logs",
    "log_level": "INFO",
    "encoding": "utf-8",
    "pending_default": "accept",
    "json_indent": 2,
}

# Config file search locations
_CONFIG_FILENAMES = [".diffreview.yaml", ".diffreview.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


class Config:
    """Application configuration.

    Settings are resolved in priority order:
    1. CLI arguments (handled by caller)
    2. Environment variables
    3. .diffreview.yaml config file
    4. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default; values that fail the cast fall back
        def _get(env_key: str, yaml_key: str, default, cast=str):
            raw = os.getenv(env_key)
            if raw is None:
                raw = yd.get(yaml_key)
            if raw is None:
                return default
            try:
                return cast(raw)
            except (TypeError, ValueError):
                return default

        self.LOG_DIR = _get("DIFFREVIEW_LOG_DIR", "log_dir",
                            _DEFAULTS["log_dir"])
        self.LOG_LEVEL = _get("DIFFREVIEW_LOG_LEVEL", "log_level",
                              _DEFAULTS["log_level"]).upper()
        self.ENCODING = _get("DIFFREVIEW_ENCODING", "encoding",
                             _DEFAULTS["encoding"])
        self.JSON_INDENT = _get("DIFFREVIEW_JSON_INDENT", "json_indent",
                                _DEFAULTS["json_indent"], cast=int)

        # How still-pending changes resolve: "accept" or "reject"
        self.PENDING_DEFAULT = _get("DIFFREVIEW_PENDING_DEFAULT",
                                    "pending_default",
                                    _DEFAULTS["pending_default"]).lower()
        if self.PENDING_DEFAULT not in ("accept", "reject"):
            self.PENDING_DEFAULT = _DEFAULTS["pending_default"]

    @property
    def accept_pending(self) -> bool:
        """True when pending changes should be treated as accepted."""
        return self.PENDING_DEFAULT == "accept"

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
