"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_local_config

SUPPORTED_RUNTIMES = ("docker", "podman")
TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, base_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Local .sastwrap.env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        base_dir: Directory holding the local .sastwrap.env (default: cwd)
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    local_config = load_local_config(base_dir)
    if key in local_config:
        return local_config[key]

    global_config = load_global_config()
    if key in global_config and global_config[key] is not None:
        return global_config[key]

    return default


def _is_truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def get_container_runtime(base_dir: Path | None = None) -> str:
    """Get the container runtime binary (docker or podman; default docker)."""
    value = str(get_config("SASTWRAP_CONTAINER_RUNTIME", base_dir, default="docker"))
    runtime = value.strip().lower()
    return runtime if runtime in SUPPORTED_RUNTIMES else "docker"


def is_verbose(base_dir: Path | None = None) -> bool:
    """Whether verbose output is enabled by configuration."""
    return _is_truthy(get_config("SASTWRAP_VERBOSE", base_dir, default=False))


def should_skip_pull(base_dir: Path | None = None) -> bool:
    """Whether the image pull step is disabled by configuration."""
    return _is_truthy(get_config("SASTWRAP_SKIP_PULL", base_dir, default=False))
