#!/usr/bin/env python3
"""
Configuration management for the Compatibility Engine web service.
"""

import os
import yaml
from pathlib import Path
from functools import lru_cache
from typing import Dict, Any
from pydantic import BaseModel, Field

from core.config_loader import EngineConfig, load_config


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class RateLimitConfig(BaseModel):
    """Per-client request limits (slowapi limit strings)."""
    analysis: str = Field(default="60/minute")
    dialogue: str = Field(default="120/minute")
    applications: str = Field(default="30/minute")


class AppConfig(BaseModel):
    """Main application configuration."""
    web: WebConfig = Field(default_factory=WebConfig)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)


def _load_yaml_config() -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = get_project_root() / 'config.yaml'

    if config_path.exists():
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    return {}


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    if 'WEB_HOST' in os.environ:
        if 'web' not in config_dict:
            config_dict['web'] = {}
        config_dict['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        if 'web' not in config_dict:
            config_dict['web'] = {}
        config_dict['web']['port'] = int(os.environ['WEB_PORT'])

    return config_dict


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file and applies environment variable overrides.
    The engine section is read by core.config_loader.load_config.

    Returns:
        AppConfig: The application configuration.
    """
    raw_config = _load_yaml_config()
    raw_config = _apply_env_overrides(raw_config)
    raw_config['engine'] = load_config(str(get_project_root() / 'config.yaml'))

    return AppConfig(**raw_config)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
