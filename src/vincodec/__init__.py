################################################################################
# File Name: __init__.py
# Purpose/Description: VIN codec package for validation and decoding
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial package creation
# 2026-10-13    | M. Cornelison | Added VinCodec facade and helpers
# ================================================================================
################################################################################
"""
VIN Codec Package.

Validates Vehicle Identification Numbers against the ISO 3779 / NHTSA check
digit, decodes the model year and resolves the World Manufacturer Identifier.

Types:
    ManufacturerRecord: One manufacturer reference data entry
    VinReport: Combined result of a VIN decode

Exceptions:
    VinCodecError: Base exception for the codec
    ManufacturerDataError: Manufacturer reference data missing or corrupt
    VinFormatError: VIN rejected by requireValidVin()

Classes:
    VinCodec: Configurable facade over all operations
    ManufacturerTable: Lazily loaded WMI lookup table

Operations:
    isValid: Check the VIN check digit
    getModelYear: Decode the model year against a reference year
    getVinYear: Decode the model year with the legacy scan
    getWorldManufacturer: Resolve the WMI using the packaged data

Helper Functions:
    computeChecksum: Weighted checksum remainder
    expectedCheckCharacter: Check character a VIN should carry
    requireValidVin: Strict validation raising VinFormatError
    loadManufacturerRecords: Read manufacturer reference data
    getDefaultManufacturerTable: Process-wide manufacturer table
    createVinCodecFromConfig: Create a VinCodec from configuration
    decodeVins: Decode a batch of VINs

Usage:
    from vincodec import isValid, getModelYear, getWorldManufacturer
    from vincodec import VinCodec, createVinCodecFromConfig
"""

__version__ = '1.0.0'

# Types
from .types import (
    ManufacturerRecord,
    VinReport,
)

# Exceptions
from .exceptions import (
    VinCodecError,
    ManufacturerDataError,
    VinFormatError,
)

# Operations
from .validator import (
    isValid,
    computeChecksum,
    expectedCheckCharacter,
    requireValidVin,
)

from .year_decoder import (
    getModelYear,
    getVinYear,
)

from .manufacturer import (
    ManufacturerTable,
    getWorldManufacturer,
    getDefaultManufacturerTable,
    loadManufacturerRecords,
    DEFAULT_MANUFACTURER_DATA_PATH,
)

# Classes
from .codec import VinCodec

# Helpers
from .helpers import (
    createVinCodecFromConfig,
    isManufacturerLookupEnabled,
    decodeVins,
)

__all__ = [
    # Types
    'ManufacturerRecord',
    'VinReport',
    # Exceptions
    'VinCodecError',
    'ManufacturerDataError',
    'VinFormatError',
    # Operations
    'isValid',
    'getModelYear',
    'getVinYear',
    'getWorldManufacturer',
    # Classes
    'VinCodec',
    'ManufacturerTable',
    # Constants
    'DEFAULT_MANUFACTURER_DATA_PATH',
    # Helpers
    'computeChecksum',
    'expectedCheckCharacter',
    'requireValidVin',
    'loadManufacturerRecords',
    'getDefaultManufacturerTable',
    'createVinCodecFromConfig',
    'isManufacturerLookupEnabled',
    'decodeVins',
]
