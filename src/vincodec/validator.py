################################################################################
# File Name: validator.py
# Purpose/Description: VIN check digit validation (ISO 3779 / NHTSA)
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-14    | M. Cornelison | Added expectedCheckCharacter and requireValidVin
# ================================================================================
################################################################################

"""
VIN validation module.

Each of the 17 characters is transliterated to a number, multiplied by its
positional weight and summed. The remainder of the sum modulo 11 must equal
the value of the check character at position 9 (index 8), where 'X' stands
for 10.

Input is taken as-is: lowercase letters, whitespace and separators make a
VIN invalid rather than being cleaned up.

Usage:
    from vincodec.validator import isValid

    if isValid('1HGCM82633A004352'):
        print("Checksum OK")
"""

import logging

from .constants import (
    CHARACTER_TRANSLITERATION,
    CHARACTER_WEIGHTS,
    CHECK_CHARACTERS,
    CHECK_DIGIT_INDEX,
    CHECKSUM_MODULUS,
    VIN_LENGTH,
)
from .exceptions import VinFormatError

logger = logging.getLogger(__name__)

# Remainder to check character, 10 -> 'X'
_REMAINDER_CHARACTERS = {value: character for character, value in CHECK_CHARACTERS.items()}


def computeChecksum(vin: str | None) -> int | None:
    """
    Compute the weighted checksum remainder of a VIN.

    The check digit position has weight 0, so its own character does not
    affect the result, but it must still be a transliterable character.

    Args:
        vin: 17-character VIN

    Returns:
        Sum of weighted character values modulo 11, or None if the VIN has
        the wrong length or contains a character outside the VIN alphabet
    """
    if vin is None or len(vin) != VIN_LENGTH:
        return None

    total = 0
    for weight, character in zip(CHARACTER_WEIGHTS, vin):
        value = CHARACTER_TRANSLITERATION.get(character)
        if value is None:
            return None
        total += weight * value

    return total % CHECKSUM_MODULUS


def isValid(vin: str | None) -> bool:
    """
    Check whether a VIN carries a correct check digit.

    Args:
        vin: Candidate VIN

    Returns:
        True if the VIN is 17 valid characters and its check digit matches
    """
    if vin is None or len(vin) != VIN_LENGTH:
        return False

    checkCharacter = vin[CHECK_DIGIT_INDEX]
    if checkCharacter not in CHECK_CHARACTERS:
        return False

    remainder = computeChecksum(vin)
    if remainder is None:
        return False

    return remainder == CHECK_CHARACTERS[checkCharacter]


def expectedCheckCharacter(vin: str | None) -> str | None:
    """
    Get the check character a VIN should carry at index 8.

    Args:
        vin: 17-character VIN (its current check character is ignored
            as long as it is a VIN alphabet character)

    Returns:
        '0'-'9' or 'X', or None if the checksum cannot be computed
    """
    remainder = computeChecksum(vin)
    if remainder is None:
        return None
    return _REMAINDER_CHARACTERS[remainder]


def requireValidVin(vin: str | None) -> str:
    """
    Strict variant of isValid() for callers that want an exception.

    Args:
        vin: Candidate VIN

    Returns:
        The VIN unchanged

    Raises:
        VinFormatError: If the VIN fails validation
    """
    if isValid(vin):
        return vin

    details = {'vin': vin}
    if vin is None or len(vin) != VIN_LENGTH:
        details['reason'] = 'length'
        details['length'] = 0 if vin is None else len(vin)
    else:
        expected = expectedCheckCharacter(vin)
        if expected is None:
            details['reason'] = 'characters'
        else:
            details['reason'] = 'checkDigit'
            details['expected'] = expected
            details['actual'] = vin[CHECK_DIGIT_INDEX]

    logger.debug(f"VIN rejected | reason={details['reason']}")
    raise VinFormatError(f"Invalid VIN: {vin!r}", details=details)
