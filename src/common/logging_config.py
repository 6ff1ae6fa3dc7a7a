################################################################################
# File Name: logging_config.py
# Purpose/Description: Structured logging configuration and utilities
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-15    | M. Cornelison | Mask VIN serial numbers in log output
# 2026-10-19    | M. Cornelison | Context fields travel on the record; close replaced handlers
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console and file output
- PII masking (emails, phone numbers, VIN serial numbers)
- Context fields rendered as key=value pairs after the message

Usage:
    from common.logging_config import setupLogging, getLogger, logWithContext

    setupLogging(level='INFO', stream=sys.stderr)
    logger = getLogger(__name__)
    logWithContext(logger, 'info', "Decoded VINs", count=42)
    # ... | Decoded VINs | count=42
"""

import logging
import re
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# LogRecord attribute holding logWithContext() fields
CONTEXT_ATTRIBUTE = 'context'

# PII patterns and their replacements, applied in order
PII_PATTERNS = {
    # Keep WMI and descriptor sections, hide the production serial
    'vin': (
        re.compile(r'\b([A-HJ-NPR-Z0-9]{11})[A-HJ-NPR-Z0-9]{6}\b'),
        r'\1******'
    ),
    'email': (
        re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b'),
        '[EMAIL_MASKED]'
    ),
    'phone': (
        re.compile(r'\b\d{3}[-.]?\d{3}[-.]?\d{4}\b'),
        '[PHONE_MASKED]'
    ),
}


class PIIMaskingFilter(logging.Filter):
    """
    Logging filter that masks PII in log messages.

    Detects and masks:
    - VIN serial numbers (last six characters of a 17-character VIN)
    - Email addresses
    - Phone numbers
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter and mask PII in log record.

        Args:
            record: Log record to filter

        Returns:
            True (always allows record, but modifies it)
        """
        if hasattr(record, 'msg') and isinstance(record.msg, str):
            record.msg = self._maskPII(record.msg)

        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if isinstance(context, dict):
            setattr(record, CONTEXT_ATTRIBUTE, {
                key: self._maskPII(value) if isinstance(value, str) else value
                for key, value in context.items()
            })

        return True

    def _maskPII(self, message: str) -> str:
        for pattern, replacement in PII_PATTERNS.values():
            message = pattern.sub(replacement, message)

        return message


def formatContext(context: dict[str, Any]) -> str:
    """Render context fields as a ' | key=value key=value' suffix."""
    return ' | ' + ' '.join(f'{key}={value}' for key, value in context.items())


class StructuredFormatter(logging.Formatter):
    """
    Formatter that appends the record's context fields.

    Context is attached by logWithContext() and rendered after the
    message as key=value pairs.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if context and isinstance(context, dict):
            message += formatContext(context)

        return message


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
    enablePIIMasking: bool = True,
    stream: Any = None
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output
        enablePIIMasking: Whether to mask PII in logs
        stream: Console stream (defaults to sys.stdout)

    Returns:
        Root logger instance
    """
    # Get root logger
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace existing handlers, releasing any open log files
    for handler in list(rootLogger.handlers):
        handler.close()
    rootLogger.handlers.clear()

    # Create formatter
    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    # Console handler
    consoleHandler = logging.StreamHandler(stream or sys.stdout)
    consoleHandler.setFormatter(formatter)
    if enablePIIMasking:
        consoleHandler.addFilter(PIIMaskingFilter())
    rootLogger.addHandler(consoleHandler)

    # File handler (optional)
    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.FileHandler(logFile, encoding='utf-8')
        fileHandler.setFormatter(formatter)
        if enablePIIMasking:
            fileHandler.addFilter(PIIMaskingFilter())
        rootLogger.addHandler(fileHandler)

    rootLogger.info(f"Logging configured | level={level}")

    return rootLogger


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    The context rides on the record and StructuredFormatter appends it,
    so the PII filter sees the fields separately from the message.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        logFunc(message, extra={CONTEXT_ATTRIBUTE: context})
    else:
        logFunc(message)
