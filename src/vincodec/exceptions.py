################################################################################
# File Name: exceptions.py
# Purpose/Description: VIN codec exceptions
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | ManufacturerDataError is a ConfigurationError
# ================================================================================
################################################################################

"""
VIN codec exceptions module.

Malformed VINs are routine input and are reported through sentinel return
values, not exceptions. The exceptions here cover:
- VinCodecError: Base exception for the codec
- ManufacturerDataError: Manufacturer reference data is missing or corrupt
- VinFormatError: VIN rejected by the strict validation helper
"""

from common.error_handler import BaseError, ConfigurationError, ErrorCategory


class VinCodecError(BaseError):
    """Base exception for VIN codec errors."""
    pass


class ManufacturerDataError(VinCodecError, ConfigurationError):
    """Manufacturer reference data could not be loaded."""
    category = ErrorCategory.CONFIGURATION


class VinFormatError(VinCodecError):
    """VIN failed strict validation."""
    category = ErrorCategory.DATA
