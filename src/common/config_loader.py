################################################################################
# File Name: config_loader.py
# Purpose/Description: JSON configuration loading with environment placeholders
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Configuration loading module.

Provides:
- Loading environment variables from a .env file (python-dotenv)
- Resolving ${VAR_NAME} placeholders in configuration values
- Supporting default values: ${VAR_NAME:default}

Usage:
    from common.config_loader import loadConfig

    config = loadConfig('vincodec_config.json', envPath='.env')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def loadEnvFile(envPath: str | None = None) -> list[str]:
    """
    Load environment variables from a .env file.

    Existing environment variables are never overridden.

    Args:
        envPath: Path to .env file. Defaults to .env in current directory.

    Returns:
        Names of the variables that were added to the environment
    """
    envFile = Path(envPath or '.env')

    if not envFile.exists():
        logger.debug(f".env file not found at {envFile}")
        return []

    loadedNames = []
    for key, value in dotenv_values(envFile).items():
        if value is None or key in os.environ:
            continue
        os.environ[key] = value
        loadedNames.append(key)

    logger.info(f"Loaded {len(loadedNames)} variables from {envFile}")
    return loadedNames


def resolvePlaceholders(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolvePlaceholders(value) for key, value in config.items()}

    elif isinstance(config, list):
        return [resolvePlaceholders(item) for item in config]

    elif isinstance(config, str):
        return _resolveString(config)

    else:
        return config


def _resolveString(value: str) -> str:
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        elif defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue
        else:
            logger.warning(f"Environment variable {varName} not set and no default")
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, value)


def loadConfig(configPath: str, envPath: str | None = None) -> dict[str, Any]:
    """
    Load a configuration file and resolve all placeholders.

    Args:
        configPath: Path to configuration JSON file
        envPath: Optional path to .env file

    Returns:
        Configuration dictionary with placeholders resolved

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.exists():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.info(f"Loading configuration from {configPath}")

    with open(configFile, 'r', encoding='utf-8') as f:
        config = json.load(f)

    return resolvePlaceholders(config)
