# Area: Shared
"""
career_link.config — Runner configuration
=========================================

Configuration is a plain dict. Values are layered, later wins:

    DEFAULT_CONFIG  <  JSON config file  <  environment (.env loaded)  <  CLI flags

``validate_config`` checks the merged result before a runner is built.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("career_link")

DEFAULT_CONFIG: Dict[str, Any] = {
    "anthropic_api_key": None,
    "model": "claude-3-haiku-20240307",
    "max_tokens": 1000,
    "challenge_temperature": 0.7,
    "request_timeout_seconds": 30.0,
    "feedback_pause_seconds": 4.0,
    "strict_gateway": False,
    "demo_mode": False,
    "log_file": "career_link.log",
    "poll_interval_seconds": 0.1,
}

# Environment variable -> (config key, converter)
ENV_MAPPINGS = {
    "ANTHROPIC_API_KEY": ("anthropic_api_key", str),
    "CAREER_LINK_MODEL": ("model", str),
    "CAREER_LINK_STRICT": ("strict_gateway", "bool"),
    "CAREER_LINK_PAUSE_SECONDS": ("feedback_pause_seconds", float),
    "CAREER_LINK_TIMEOUT_SECONDS": ("request_timeout_seconds", float),
    "CAREER_LINK_LOG_FILE": ("log_file", str),
    "DEMO_MODE": ("demo_mode", "bool"),
}

TRUE_VALUES = ("true", "1", "yes", "on")
BOOL_KEYS = ("strict_gateway", "demo_mode")


def parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


def load_config(config_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the config from defaults, an optional JSON file and the environment.

    Args:
        config_path: Path to a JSON config file (missing file is ignored)
        env_file: Path to a .env file; defaults to searching from the cwd

    Returns:
        The merged config dict

    Raises:
        ValueError: If the file is not a JSON object or an env value does not convert
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Config file must hold a JSON object: {config_path}")
            config.update(data)
            for key in BOOL_KEYS:
                if isinstance(config.get(key), str):
                    config[key] = parse_bool(config[key])
        else:
            logger.warning(f"Config file not found: {config_path}")

    load_dotenv(dotenv_path=env_file)

    for env_key, (config_key, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value = os.environ[env_key]
            config[config_key] = parse_bool(value) if convert == "bool" else convert(value)

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate the merged configuration.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If a required key is missing or a value is out of range
    """
    for key in BOOL_KEYS:
        if not isinstance(config.get(key), bool):
            raise ValueError(f"{key} must be true or false, got {config.get(key)!r}")
    if not config.get("demo_mode") and not config.get("anthropic_api_key"):
        raise ValueError(
            "Missing required config: anthropic_api_key "
            "(set ANTHROPIC_API_KEY or run with --demo)"
        )
    for key in ("feedback_pause_seconds", "request_timeout_seconds", "poll_interval_seconds"):
        value = config.get(key)
        if not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"{key} must be a positive number, got {value!r}")
    if not isinstance(config.get("max_tokens"), int) or config["max_tokens"] <= 0:
        raise ValueError(f"max_tokens must be a positive integer, got {config.get('max_tokens')!r}")
