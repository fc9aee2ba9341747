"""
Configuration utilities for focus-timer.

Provides configuration loading, saving, and management.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from focus_timer.models.config import FocusTimerConfig
from focus_timer.utils.exceptions import ConfigError


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> FocusTimerConfig:
    """
    Load focus-timer configuration from file.

    Supports YAML and JSON formats. Environment variables override file values.

    Args:
        config_path: Path to config file (YAML or JSON)
        env_file: Path to .env file for environment variables

    Returns:
        Loaded configuration

    Raises:
        ConfigError: If configuration cannot be loaded

    Example:
        >>> config = load_config("focus_timer.yaml")
        >>> config = load_config(env_file=".env")
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    config_dict: Dict[str, Any] = {}

    if config_path:
        config_path_obj = Path(config_path)

        if not config_path_obj.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        if not config_path.endswith((".yaml", ".yml", ".json")):
            raise ConfigError(f"Unsupported config file format: {config_path}")

        try:
            with open(config_path_obj, "r", encoding="utf-8") as f:
                if config_path.endswith(".json"):
                    config_dict = json.load(f)
                else:
                    config_dict = yaml.safe_load(f) or {}
        except Exception as e:
            raise ConfigError(
                f"Failed to load configuration from {config_path}",
                cause=e,
            )

    try:
        config_dict = _apply_env_overrides(config_dict)
    except ValueError as e:
        raise ConfigError("Invalid environment override", cause=e)

    try:
        return FocusTimerConfig(**config_dict)
    except Exception as e:
        raise ConfigError("Invalid configuration", cause=e)


def save_config(config: FocusTimerConfig, config_path: str, format: str = "yaml") -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to
        format: Format ("yaml" or "json")

    Raises:
        ConfigError: If configuration cannot be saved
    """
    if format not in ("yaml", "json"):
        raise ConfigError(f"Unsupported format: {format}")

    config_dict = config.model_dump(exclude_none=True)

    try:
        config_path_obj = Path(config_path)
        config_path_obj.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path_obj, "w", encoding="utf-8") as f:
            if format == "yaml":
                yaml.safe_dump(
                    config_dict, f, default_flow_style=False, indent=2, allow_unicode=True
                )
            else:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
    except Exception as e:
        raise ConfigError(f"Failed to save configuration to {config_path}", cause=e)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Override values take precedence over base values.

    Example:
        >>> base = {"timer": {"tick_interval": 1.0}}
        >>> override = {"timer": {"checkpoint_every": 5}}
        >>> merge_configs(base, override)
        {'timer': {'tick_interval': 1.0, 'checkpoint_every': 5}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Environment variables are in format: FOCUS_TIMER_SECTION_KEY
    e.g., FOCUS_TIMER_STORAGE_PATH, FOCUS_TIMER_ALARM_START_MUTED

    Args:
        config: Base configuration

    Returns:
        Configuration with environment overrides
    """
    # Storage overrides
    if "storage" not in config:
        config["storage"] = {}

    if os.getenv("FOCUS_TIMER_STORAGE_BACKEND"):
        config["storage"]["backend"] = os.getenv("FOCUS_TIMER_STORAGE_BACKEND")
    if os.getenv("FOCUS_TIMER_STORAGE_PATH"):
        config["storage"]["path"] = os.getenv("FOCUS_TIMER_STORAGE_PATH")
    if os.getenv("FOCUS_TIMER_STORAGE_KEY"):
        config["storage"]["key"] = os.getenv("FOCUS_TIMER_STORAGE_KEY")

    # Timer overrides
    if "timer" not in config:
        config["timer"] = {}

    if os.getenv("FOCUS_TIMER_TICK_INTERVAL"):
        config["timer"]["tick_interval"] = float(os.getenv("FOCUS_TIMER_TICK_INTERVAL"))
    if os.getenv("FOCUS_TIMER_CHECKPOINT_EVERY"):
        config["timer"]["checkpoint_every"] = int(os.getenv("FOCUS_TIMER_CHECKPOINT_EVERY"))

    # Alarm overrides
    if "alarm" not in config:
        config["alarm"] = {}

    if os.getenv("FOCUS_TIMER_ALARM_REPEAT_INTERVAL"):
        config["alarm"]["repeat_interval"] = float(os.getenv("FOCUS_TIMER_ALARM_REPEAT_INTERVAL"))
    if os.getenv("FOCUS_TIMER_ALARM_START_MUTED"):
        config["alarm"]["start_muted"] = os.getenv("FOCUS_TIMER_ALARM_START_MUTED").lower() in (
            "1",
            "true",
            "yes",
            "on",
        )

    # Log level override
    if os.getenv("FOCUS_TIMER_LOG_LEVEL"):
        config["log_level"] = os.getenv("FOCUS_TIMER_LOG_LEVEL")

    return config
