import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import collections.abc

import structlog

from .defaults import DEFAULT_CONFIG

logger = structlog.get_logger(__name__)

GLOBAL_CONFIG_DIR = ".trendsage"
PROJECT_CONFIG_FILE = ".trendsage.yaml"


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges two dictionaries.
    'override' values take precedence over 'base' values.
    Lists are overridden, not merged.
    """
    result = base.copy()
    for key, value in override.items():
        if (
            isinstance(value, collections.abc.Mapping)
            and key in result
            and isinstance(result[key], collections.abc.Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(project_path: str = ".", config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations from default, global, and project-specific files.
    An explicit config_file replaces the project's .trendsage.yaml.
    """
    config = DEFAULT_CONFIG.copy()

    global_config_path = Path.home() / GLOBAL_CONFIG_DIR / "config.yaml"
    if global_config_path.is_file():
        try:
            with open(global_config_path, "r") as f:
                global_config = yaml.safe_load(f)
                if global_config:
                    config = deep_merge(config, global_config)
        except yaml.YAMLError as e:
            logger.warning("global_config_unparseable", path=str(global_config_path), error=str(e))

    if config_file:
        project_config_path = Path(config_file)
        if not project_config_path.is_file():
            raise ValueError(f"Config file not found: {project_config_path}")
    else:
        project_config_path = Path(project_path) / PROJECT_CONFIG_FILE
    if project_config_path.is_file():
        try:
            with open(project_config_path, "r") as f:
                project_config = yaml.safe_load(f)
                if project_config:
                    config = deep_merge(config, project_config)
        except yaml.YAMLError as e:
            raise ValueError(
                f"Error parsing project config file at {project_config_path}: {e}"
            ) from e

    if "history" not in config:
        raise ValueError("Configuration must contain a 'history' section.")

    return config
