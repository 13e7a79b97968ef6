from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "roster_parser.yml"


class RPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))

    def resolve_path(self, key: str, default: str) -> Path:
        """Resolve a ``paths`` entry against the project root."""
        path = Path(self.paths.get(key) or default)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


def load_config(path: Optional[Union[str, Path]] = None) -> RPConfig:
    # Only an explicitly requested file is required to exist.
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return RPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return RPConfig(data)


_config_cache = None


def get_config() -> RPConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
