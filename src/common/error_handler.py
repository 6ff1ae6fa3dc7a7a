################################################################################
# File Name: error_handler.py
# Purpose/Description: Error categories and last-resort error reporting
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Reduced to the categories and handler the CLI uses
# ================================================================================
################################################################################

"""
Error handling module.

Every custom exception carries an ErrorCategory:
- CONFIGURATION: settings or reference data are missing or broken; stop
- DATA: a single input was rejected; report it and move on
- SYSTEM: anything else

Usage:
    from common.error_handler import ConfigurationError, handleError

    try:
        codec.decode(vin)
    except Exception as e:
        details = handleError(e, context={'vin': vin}, reraise=False)
"""

import json
import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification."""
    CONFIGURATION = 'config'
    DATA = 'data'
    SYSTEM = 'system'


class BaseError(Exception):
    """
    Base exception for all custom errors.

    Attributes:
        message: Human readable description
        details: Structured context for logs and JSON output
    """

    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def toDict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'type': self.__class__.__name__,
            'category': self.category.value,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(BaseError):
    """Configuration or reference data cannot be used."""
    category = ErrorCategory.CONFIGURATION


def classifyError(error: Exception) -> ErrorCategory:
    """
    Classify an error into a category.

    Custom errors report their own category. Missing files count as
    configuration problems and undecodable JSON as bad data.

    Args:
        error: Exception to classify

    Returns:
        ErrorCategory for the error
    """
    if isinstance(error, BaseError):
        return error.category

    if isinstance(error, (FileNotFoundError, PermissionError)):
        return ErrorCategory.CONFIGURATION

    if isinstance(error, (json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCategory.DATA

    return ErrorCategory.SYSTEM


def handleError(
    error: Exception,
    context: dict[str, Any] | None = None,
    reraise: bool = True
) -> dict[str, Any]:
    """
    Log an error at the level its category calls for.

    Data errors log a warning; configuration errors log an error; system
    errors log an error with the traceback.

    Args:
        error: Exception that occurred
        context: Additional context information
        reraise: Whether to re-raise the exception

    Returns:
        Error details dictionary (type, category, message, details, context)

    Raises:
        The given exception if reraise is True
    """
    category = classifyError(error)

    errorDetails = {
        'type': type(error).__name__,
        'category': category.value,
        'message': str(error),
        'details': error.details if isinstance(error, BaseError) else {},
        'context': context or {},
    }

    if category == ErrorCategory.DATA:
        logger.warning(f"Data error: {error}")
    elif category == ErrorCategory.CONFIGURATION:
        logger.error(f"Configuration error: {error}")
    else:
        logger.error(f"Unexpected error: {error}", exc_info=error)

    if reraise:
        raise error

    return errorDetails
