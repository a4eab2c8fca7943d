#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

logger = logging.getLogger("orgtagger")

TOKEN_ENV_VAR = "GITHUB_TOKEN"


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. ORGTAGGER_CONFIG environment variable
    2. ~/.orgtagger/ directory

    Returns None when no config file exists; orgtagger runs fine on defaults.
    """
    if 'ORGTAGGER_CONFIG' in os.environ:
        path = Path(os.environ['ORGTAGGER_CONFIG'])
        if path.exists():
            return path
        raise ConfigError(f"config file not found: {path}")

    config_dir = Path.home() / '.orgtagger'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists():
            return path

    return None


def load_config():
    """Load configuration from defaults, config file and environment."""
    config = get_default_config()

    config_path = get_config_path()
    if config_path is not None:
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"error loading config from {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"config file {config_path} must contain a mapping")

        logger.debug(f"Using config from {config_path}")
        config = merge_configs(config, file_config)

    return apply_env_overrides(config)


def get_default_config():
    """Get default configuration."""
    return {
        "github": {
            "host": "github.com",
            "api_url": "https://api.github.com",
            "per_page": 100,
            "timeout_seconds": 30,
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s",
        },
    }


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: ORGTAGGER_SECTION_KEY
    For example: ORGTAGGER_GITHUB_API_URL=https://ghe.example.com/api/v3
    """
    env_prefix = "ORGTAGGER_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "ORGTAGGER_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        if value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Longest config key that prefixes the remaining parts wins,
            # so GITHUB_API_URL resolves to github -> api_url.
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                break
            current_level = current_level[matched_key]
            i += best_match_len

    return config


def get_token(environ=None):
    """Return the GitHub access token or raise ConfigError when it is unset."""
    environ = os.environ if environ is None else environ
    token = environ.get(TOKEN_ENV_VAR, "")
    if not token:
        raise ConfigError(f"environment variable not set: {TOKEN_ENV_VAR}")
    return token


def setup_logging(config, verbose=False):
    """Send orgtagger's diagnostics to stderr.

    stdout is reserved for data lines so the fetcher can be piped into the
    creator.
    """
    log_config = config.get("logging", {})
    level = "DEBUG" if verbose else str(log_config.get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown logging level: {log_config.get('level')}")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_config.get("format", "%(levelname)s: %(message)s")))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
