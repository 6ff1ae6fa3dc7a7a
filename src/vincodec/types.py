################################################################################
# File Name: types.py
# Purpose/Description: VIN codec types, records and dataclasses
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
VIN codec types module.

Contains:
- ManufacturerRecord: One entry of the manufacturer reference data
- VinReport: Combined result of validating and decoding a VIN
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

# ================================================================================
# Manufacturer Reference Data
# ================================================================================

class ManufacturerRecord(BaseModel):
    """World Manufacturer Identifier entry as stored in the reference data."""

    code: str = Field(..., min_length=1, description="WMI code, usually 3 characters")
    name: str = Field(..., description="Manufacturer display name")


# ================================================================================
# Decode Results
# ================================================================================

@dataclass
class VinReport:
    """
    Result of a full VIN decode.

    Attributes:
        vin: The VIN as given
        valid: Whether the check digit matches
        modelYear: Year from the reference-window decoder (0 if unknown)
        legacyYear: Year from the legacy scan decoder (0 if unknown)
        manufacturer: Manufacturer name ('' if unknown or lookup disabled)
        expectedCheckCharacter: Check character the VIN should carry, if computable
    """
    vin: str
    valid: bool = False
    modelYear: int = 0
    legacyYear: int = 0
    manufacturer: str = ''
    expectedCheckCharacter: str | None = None

    def toDict(self) -> dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            'vin': self.vin,
            'valid': self.valid,
            'modelYear': self.modelYear,
            'legacyYear': self.legacyYear,
            'manufacturer': self.manufacturer,
            'expectedCheckCharacter': self.expectedCheckCharacter,
        }

    def getSummary(self) -> str:
        """Get a one-line human-readable summary."""
        parts = []
        if self.modelYear:
            parts.append(str(self.modelYear))
        if self.manufacturer:
            parts.append(self.manufacturer)

        vehicle = ' '.join(parts) if parts else 'Unknown vehicle'
        status = 'valid' if self.valid else 'INVALID'
        return f"{self.vin}: {vehicle} ({status})"
