"""Creation of the global configuration file."""

from pathlib import Path

import yaml

from .env_loader import get_global_config_dir, get_global_config_path

DEFAULT_GLOBAL_CONFIG = {
    "SASTWRAP_CONTAINER_RUNTIME": "docker",
    "SASTWRAP_VERBOSE": False,
    "SASTWRAP_SKIP_PULL": False,
}


def create_global_config() -> Path:
    """Create global config directory and file if they don't exist."""
    get_global_config_dir().mkdir(parents=True, exist_ok=True)

    config_path = get_global_config_path()
    if not config_path.exists():
        with open(config_path, "w") as f:
            f.write("# sastwrap global configuration\n")
            f.write("# Environment variables and ./.sastwrap.env take precedence.\n")
            yaml.dump(DEFAULT_GLOBAL_CONFIG, f, default_flow_style=False)

    return config_path
