################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
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
Common utilities package.

This package provides shared functionality used across the application:
- Configuration loading and validation
- Logging configuration
- Error handling

Usage:
    from common.config_validator import ConfigValidator
    from common.config_loader import loadConfig
    from common.logging_config import getLogger
    from common.error_handler import ConfigurationError
"""

from .config_loader import loadConfig
from .config_validator import ConfigValidationError, ConfigValidator
from .error_handler import ConfigurationError, ErrorCategory, classifyError, handleError
from .logging_config import getLogger, setupLogging

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'loadConfig',
    'getLogger',
    'setupLogging',
    'ConfigurationError',
    'ErrorCategory',
    'classifyError',
    'handleError'
]
