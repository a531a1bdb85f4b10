"""
Configuration constants for the file parser.
Loads from a YAML file with environment variable overrides.
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml


def _load_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    config_paths = [
        Path("fileparser.yaml"),  # Working directory
        Path(__file__).parent.parent.parent / "config.yaml",  # Local dev
    ]
    if os.getenv("FILEPARSER_CONFIG"):
        config_paths.insert(0, Path(os.environ["FILEPARSER_CONFIG"]))

    for path in config_paths:
        if path.exists():
            with open(path) as f:
                return yaml.safe_load(f) or {}

    return {}


_config = _load_config()


def _get(section: str, key: str, default: Any, env_var: str | None = None) -> Any:
    """Get config value with env override."""
    if env_var and os.getenv(env_var):
        val = os.getenv(env_var)
        if isinstance(default, bool):
            return val.lower() == "true"
        if isinstance(default, int):
            return int(val)
        return val
    return (_config.get(section) or {}).get(key, default)


# Parsing
DEFAULT_ENCODING = _get("parsing", "encoding", "utf-8-sig", "FILEPARSER_ENCODING")
BATCH_SEPARATOR = "\n"

# Extension -> file type name, resolved by FileType.from_name()
_DEFAULT_EXTENSIONS: Dict[str, str] = {
    ".sql": "sql",
    ".conf": "config",
    ".cfg": "config",
    ".config": "config",
    ".ini": "config",
    ".properties": "config",
}
EXTENSION_MAP: Dict[str, str] = {**_DEFAULT_EXTENSIONS, **(_config.get("file_types") or {})}

# Logging
LOG_LEVEL = str(_get("logging", "level", "WARNING", "FILEPARSER_LOG_LEVEL")).upper()
