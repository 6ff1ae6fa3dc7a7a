################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with required fields and defaults
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-14    | M. Cornelison | Added field type checks for vinCodec section
# 2026-10-19    | M. Cornelison | WARNING logging default, removed validateConfig
# ================================================================================
################################################################################

"""
Configuration validation module.

Provides validation of configuration files with:
- Required field checking
- Field type checking
- Default value application
- Clear error messages for missing/invalid fields

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator()
    config = validator.validate(rawConfig)
"""

from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        missingFields: Optional[List[str]] = None,
        invalidFields: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.missingFields = missingFields or []
        self.invalidFields = invalidFields or []


REQUIRED_KEYS: List[str] = []

DEFAULTS: Dict[str, Any] = {
    'application.name': 'vincodec',
    'logging.level': 'WARNING',
    'logging.maskPII': True,
    'vinCodec.referenceYear': 0,
    'vinCodec.manufacturerLookup': True,
}

# Expected types for optional settings (checked only when present)
FIELD_TYPES: Dict[str, tuple] = {
    'logging.level': (str,),
    'logging.maskPII': (bool,),
    'logging.file': (str,),
    'vinCodec.referenceYear': (int,),
    'vinCodec.manufacturerLookup': (bool,),
    'vinCodec.manufacturerDataPath': (str,),
}


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Attributes:
        requiredKeys: List of required configuration keys (dot notation)
        defaults: Dictionary of default values for optional fields
        fieldTypes: Dictionary of expected types for optional fields
    """

    def __init__(
        self,
        requiredKeys: Optional[List[str]] = None,
        defaults: Optional[Dict[str, Any]] = None,
        fieldTypes: Optional[Dict[str, tuple]] = None
    ):
        """
        Initialize the validator.

        Args:
            requiredKeys: List of required keys in dot notation (e.g., 'vinCodec.referenceYear')
            defaults: Dictionary of default values in dot notation
            fieldTypes: Dictionary of dot-notation key to accepted types
        """
        self.requiredKeys = requiredKeys if requiredKeys is not None else REQUIRED_KEYS
        self.defaults = defaults if defaults is not None else DEFAULTS
        self.fieldTypes = fieldTypes if fieldTypes is not None else FIELD_TYPES

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and enhance configuration.

        Performs:
        1. Required field validation
        2. Field type validation
        3. Default value application

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigValidationError: If required fields are missing or have the wrong type
        """
        missingFields = self._validateRequired(config)
        if missingFields:
            fieldList = ', '.join(missingFields)
            raise ConfigValidationError(
                f"Missing required configuration fields: {fieldList}",
                missingFields=missingFields
            )

        invalidFields = self._validateTypes(config)
        if invalidFields:
            fieldList = ', '.join(invalidFields)
            raise ConfigValidationError(
                f"Invalid configuration field types: {fieldList}",
                invalidFields=invalidFields
            )

        config = self._applyDefaults(config)

        logger.info("Configuration validated successfully")
        return config

    def _validateRequired(self, config: Dict[str, Any]) -> List[str]:
        missingFields = []

        for key in self.requiredKeys:
            if self._getNestedValue(config, key) is None:
                missingFields.append(key)

        return missingFields

    def _validateTypes(self, config: Dict[str, Any]) -> List[str]:
        """
        Check types of present fields.

        bool is rejected where int is expected, since True/False would
        otherwise pass as a year.
        """
        invalidFields = []

        for key, expectedTypes in self.fieldTypes.items():
            value = self._getNestedValue(config, key)
            if value is None:
                continue
            if isinstance(value, bool) and bool not in expectedTypes:
                invalidFields.append(key)
            elif not isinstance(value, expectedTypes):
                invalidFields.append(key)

        return invalidFields

    def _applyDefaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        for key, defaultValue in self.defaults.items():
            if self._getNestedValue(config, key) is None:
                self._setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def _getNestedValue(self, config: Dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'vinCodec.referenceYear')

        Returns:
            Value if found, None otherwise
        """
        value = config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def _setNestedValue(self, config: Dict[str, Any], key: str, value: Any) -> None:
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value
