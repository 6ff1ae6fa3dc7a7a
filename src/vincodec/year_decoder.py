################################################################################
# File Name: year_decoder.py
# Purpose/Description: Model year decoding from the VIN year character
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-13    | M. Cornelison | Kept legacy getVinYear scan as separate operation
# ================================================================================
################################################################################

"""
Model year decoding module.

The 10th VIN character encodes the model year on a 30-year cycle, so every
symbol maps to two or more calendar years. Two decoders are provided and they
do NOT always agree:

- getModelYear: base-plus-offset against a reference year, folded back by
  one cycle when the result lands after next year. It can return the current
  year and next year.
- getVinYear: legacy scan from 1980 up to (excluding) the current year,
  returning the most recent year with a matching symbol. It never returns
  the current or next year, so symbols for recent model years decode one
  cycle earlier than with getModelYear.

Both return 0 when the year cannot be decoded.

Usage:
    from vincodec.year_decoder import getModelYear

    year = getModelYear('1HGCM82633A004352', referenceYear=2000)
"""

import logging
from datetime import datetime

from .constants import (
    LEGACY_YEAR_START,
    YEAR_ALPHABET,
    YEAR_CHARACTER_INDEX,
    YEAR_CHARACTERS,
    YEAR_CYCLE_LENGTH,
)

logger = logging.getLogger(__name__)


def _currentYear() -> int:
    return datetime.now().year


def getCycleStart(year: int) -> int:
    """Get the first year of the 30-year cycle containing year."""
    return (year // YEAR_CYCLE_LENGTH) * YEAR_CYCLE_LENGTH


def decodeYearCharacter(
    yearCharacter: str,
    referenceYear: int = 0,
    currentYear: int | None = None
) -> int:
    """
    Decode a single model year character.

    Args:
        yearCharacter: Year symbol from the VIN
        referenceYear: Base year the offset is added to; 0 selects the start
            of the current 30-year cycle
        currentYear: Calendar year to decode against (defaults to now)

    Returns:
        Decoded model year, or 0 if the symbol is not a year character
    """
    if currentYear is None:
        currentYear = _currentYear()

    offset = YEAR_CHARACTERS.get(yearCharacter)
    if offset is None:
        return 0

    if not referenceYear:
        referenceYear = getCycleStart(currentYear)

    year = referenceYear + offset
    if year > currentYear + 1:
        year -= YEAR_CYCLE_LENGTH

    return year


def getModelYear(
    vin: str | None,
    referenceYear: int = 0,
    currentYear: int | None = None
) -> int:
    """
    Decode the model year of a VIN.

    Args:
        vin: VIN (at least 10 characters)
        referenceYear: Base year for the 30-year cycle; 0 uses the start of
            the cycle containing the current year
        currentYear: Calendar year to decode against (defaults to now)

    Returns:
        Model year, or 0 if the VIN is too short or the symbol is unknown
    """
    if not vin or len(vin) <= YEAR_CHARACTER_INDEX:
        return 0

    return decodeYearCharacter(vin[YEAR_CHARACTER_INDEX], referenceYear, currentYear)


def getVinYear(vin: str | None, currentYear: int | None = None) -> int:
    """
    Decode the model year with the legacy forward scan.

    Walks calendar years from 1980, one year alphabet symbol per year, and
    keeps the last year whose symbol matches. The scan stops before the
    current year.

    Args:
        vin: VIN (at least 10 characters)
        currentYear: Calendar year the scan stops at (defaults to now)

    Returns:
        Most recent matching year before currentYear, or 0 if none
    """
    if not vin or len(vin) <= YEAR_CHARACTER_INDEX:
        return 0

    if currentYear is None:
        currentYear = _currentYear()

    yearCharacter = vin[YEAR_CHARACTER_INDEX]
    matchedYear = 0

    for year in range(LEGACY_YEAR_START, currentYear):
        symbol = YEAR_ALPHABET[(year - LEGACY_YEAR_START) % len(YEAR_ALPHABET)]
        if symbol == yearCharacter:
            matchedYear = year

    if not matchedYear:
        logger.debug(f"No legacy year match for symbol {yearCharacter!r}")

    return matchedYear
