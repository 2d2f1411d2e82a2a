"""Runtime configuration for log-strip - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from logstrip.utils.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_EXTENSIONS,
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_JOBS,
    DEFAULT_SKIP_DIRS,
    DEFAULT_SNIPPET_CHARS,
    ENV_PREFIX,
    STATE_DIR_NAME,
)
from logstrip.utils.logging import logger

DEFAULTS = {
    "scan": {
        "extensions": list(DEFAULT_EXTENSIONS),
        "skip_dirs": list(DEFAULT_SKIP_DIRS),
        "keep": [],
        "jobs": DEFAULT_JOBS,
    },
    "git": {
        "timeout": DEFAULT_GIT_TIMEOUT,
    },
    "report": {
        "snippet_chars": DEFAULT_SNIPPET_CHARS,
    },
}

# Integer settings that must be at least 1
POSITIVE_KEYS = {("scan", "jobs"), ("git", "timeout"), ("report", "snippet_chars")}


def config_path(root: str | Path = ".") -> Path:
    return Path(root) / STATE_DIR_NAME / CONFIG_FILE_NAME


def _coerce_env(value: str, default_value: Any) -> Any:
    if isinstance(default_value, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default_value, int):
        return int(value)
    if isinstance(default_value, float):
        return float(value)
    if isinstance(default_value, list):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


def _is_valid(section: str, key: str, value: Any, default_value: Any) -> bool:
    """Whether value may replace default_value for section.key."""
    if isinstance(value, bool) != isinstance(default_value, bool):
        return False
    if not isinstance(value, type(default_value)):
        return False
    if isinstance(value, list) and not all(isinstance(item, str) for item in value):
        return False
    if (section, key) in POSITIVE_KEYS and value < 1:
        return False
    return True


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .logstrip/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (LOGSTRIP_<SECTION>_<KEY>)
    2. .logstrip/config.json file
    3. Built-in defaults

    Unknown keys, values of the wrong type and out-of-range numbers are
    ignored with a warning.

    Args:
        root: Root directory to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = config_path(root)
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and _is_valid(section, key, value, cfg[section][key]):
                                cfg[section][key] = value
                            else:
                                logger.warning(
                                    "Ignoring config key {section}.{key} in {path}",
                                    section=section,
                                    key=key,
                                    path=str(path),
                                )
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    coerced = _coerce_env(value, cfg[section][key])
                    if not _is_valid(section, key, coerced, cfg[section][key]):
                        raise ValueError("out of range")
                    cfg[section][key] = coerced
                except (ValueError, AttributeError) as e:
                    logger.warning(
                        f"Invalid value for environment variable {env_var}: '{value}' - {e}"
                    )
                    logger.info(f"Using value: {cfg[section][key]}")

    return cfg
