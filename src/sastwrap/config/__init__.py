"""
Configuration management for sastwrap.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Local .sastwrap.env file in the working directory
3. Global config file (~/.sastwrap/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    LOCAL_ENV_NAME,
    get_global_config_dir,
    get_global_config_path,
    get_local_env_path,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .files import DEFAULT_GLOBAL_CONFIG, create_global_config
from .getters import (
    SUPPORTED_RUNTIMES,
    get_config,
    get_container_runtime,
    is_verbose,
    should_skip_pull,
)

__all__ = [
    # env_loader
    "LOCAL_ENV_NAME",
    "get_global_config_dir",
    "get_global_config_path",
    "get_local_env_path",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # files
    "DEFAULT_GLOBAL_CONFIG",
    "create_global_config",
    # getters
    "SUPPORTED_RUNTIMES",
    "get_config",
    "get_container_runtime",
    "is_verbose",
    "should_skip_pull",
]
