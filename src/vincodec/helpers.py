################################################################################
# File Name: helpers.py
# Purpose/Description: VIN codec factory and convenience functions
# Author: Michael Cornelison
# Creation Date: 2026-10-13
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-13    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
VIN codec helper functions module.

Provides factory functions and convenience helpers for:
- VinCodec creation from configuration
- One-shot decoding of a batch of VINs
"""

import logging
from collections.abc import Iterable
from typing import Any

from common.logging_config import logWithContext

from .codec import VinCodec
from .types import VinReport

logger = logging.getLogger(__name__)


def createVinCodecFromConfig(config: dict[str, Any]) -> VinCodec:
    """
    Create a VinCodec from configuration.

    Args:
        config: Configuration dictionary with 'vinCodec' section

    Returns:
        Configured VinCodec instance

    Example:
        config = loadConfig('vincodec_config.json')
        codec = createVinCodecFromConfig(config)
    """
    return VinCodec(config)


def isManufacturerLookupEnabled(config: dict[str, Any]) -> bool:
    """
    Check if manufacturer lookup is enabled in configuration.

    Args:
        config: Configuration dictionary

    Returns:
        True if manufacturer lookup is enabled
    """
    codecConfig = config.get('vinCodec', {})
    return codecConfig.get('manufacturerLookup', True)


def decodeVins(
    vins: Iterable[str],
    codec: VinCodec,
    currentYear: int | None = None
) -> list[VinReport]:
    """
    Decode several VINs with the same codec.

    Args:
        vins: VINs to decode
        codec: Codec to decode with
        currentYear: Calendar year to decode against (defaults to now)

    Returns:
        One VinReport per VIN, in input order
    """
    reports = [codec.decode(vin, currentYear=currentYear) for vin in vins]

    invalidCount = sum(1 for report in reports if not report.valid)
    logWithContext(logger, 'info', f"Decoded {len(reports)} VINs", invalid=invalidCount)

    return reports
