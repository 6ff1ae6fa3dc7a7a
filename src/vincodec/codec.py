################################################################################
# File Name: codec.py
# Purpose/Description: VinCodec facade over validation, year and WMI decoding
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
VIN codec module.

Bundles the validator, the two year decoders and a manufacturer table behind
one configurable object.

Usage:
    from vincodec import VinCodec

    codec = VinCodec(config)
    report = codec.decode('1HGCM82633A004352')
    print(report.getSummary())
"""

import logging
from typing import Any

from .manufacturer import ManufacturerTable, getDefaultManufacturerTable
from .types import VinReport
from .validator import expectedCheckCharacter, isValid
from .year_decoder import getModelYear, getVinYear

logger = logging.getLogger(__name__)


class VinCodec:
    """
    Validates and decodes Vehicle Identification Numbers.

    All operations are safe to call from multiple threads. Invalid input
    yields sentinel values (False, 0, '') rather than exceptions; only a
    failure to load the manufacturer reference data raises.

    Attributes:
        config: Configuration dictionary with optional 'vinCodec' section
        manufacturerTable: Table used for WMI lookups

    Example:
        codec = VinCodec({'vinCodec': {'referenceYear': 2000}})
        codec.isValid('1HGCM82633A004352')           # True
        codec.getModelYear('1HGCM82633A004352')      # 2003
        codec.getWorldManufacturer('1HGCM82633A004352')  # 'Honda'
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        manufacturerTable: ManufacturerTable | None = None
    ):
        """
        Initialize the codec.

        Args:
            config: Configuration dictionary with 'vinCodec' section
            manufacturerTable: Table to use; built from config when omitted
        """
        self.config = config or {}

        codecConfig = self.config.get('vinCodec', {})
        self._referenceYear = codecConfig.get('referenceYear') or 0
        self._manufacturerLookup = codecConfig.get('manufacturerLookup', True)

        if manufacturerTable is not None:
            self.manufacturerTable = manufacturerTable
        elif codecConfig.get('manufacturerDataPath'):
            self.manufacturerTable = ManufacturerTable(codecConfig['manufacturerDataPath'])
        else:
            self.manufacturerTable = getDefaultManufacturerTable()

    @property
    def referenceYear(self) -> int:
        """Configured reference year (0 means current cycle)."""
        return self._referenceYear

    def isValid(self, vin: str | None) -> bool:
        """Check the VIN check digit. See validator.isValid()."""
        return isValid(vin)

    def getModelYear(
        self,
        vin: str | None,
        referenceYear: int = 0,
        currentYear: int | None = None
    ) -> int:
        """
        Decode the model year using the reference-window decoder.

        Args:
            vin: VIN (at least 10 characters)
            referenceYear: Overrides the configured reference year when non-zero
            currentYear: Calendar year to decode against (defaults to now)

        Returns:
            Model year, or 0 if undecodable
        """
        return getModelYear(vin, referenceYear or self._referenceYear, currentYear)

    def getVinYear(self, vin: str | None, currentYear: int | None = None) -> int:
        """Decode the model year using the legacy scan. See year_decoder.getVinYear()."""
        return getVinYear(vin, currentYear)

    def getWorldManufacturer(self, vinOrWmi: str | None) -> str:
        """
        Resolve a VIN or WMI prefix to a manufacturer name.

        Returns:
            Manufacturer name, or '' if not found or lookup is disabled

        Raises:
            ManufacturerDataError: If the reference data cannot be loaded
        """
        if not self._manufacturerLookup:
            return ''
        return self.manufacturerTable.lookup(vinOrWmi)

    def decode(self, vin: str, currentYear: int | None = None) -> VinReport:
        """
        Run every operation on a VIN and collect the results.

        Args:
            vin: VIN to decode
            currentYear: Calendar year to decode against (defaults to now)

        Returns:
            VinReport for the VIN
        """
        report = VinReport(
            vin=vin,
            valid=self.isValid(vin),
            modelYear=self.getModelYear(vin, currentYear=currentYear),
            legacyYear=self.getVinYear(vin, currentYear=currentYear),
            manufacturer=self.getWorldManufacturer(vin),
            expectedCheckCharacter=expectedCheckCharacter(vin),
        )

        logger.debug(f"VIN decoded | {report.getSummary()}")
        return report
