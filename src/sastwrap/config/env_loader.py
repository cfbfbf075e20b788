"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

LOCAL_ENV_NAME = ".sastwrap.env"


def get_global_config_dir() -> Path:
    """Return the global ~/.sastwrap config directory."""
    return Path.home() / ".sastwrap"


def get_global_config_path() -> Path:
    """Return the global config.yml path."""
    return get_global_config_dir() / "config.yml"


def get_local_env_path(base_dir: Path | None = None) -> Path:
    """Return the local .sastwrap.env path for ``base_dir`` (default: cwd)."""
    return (base_dir or Path.cwd()) / LOCAL_ENV_NAME


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.sastwrap/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return data if isinstance(data, dict) else {}
    return {}


def load_local_config(base_dir: Path | None = None) -> dict[str, str]:
    """Load the .sastwrap.env file from ``base_dir`` (default: cwd)."""
    return load_env_file(get_local_env_path(base_dir))
