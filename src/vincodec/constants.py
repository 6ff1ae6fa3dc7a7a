################################################################################
# File Name: constants.py
# Purpose/Description: Fixed lookup tables for VIN checksum and year decoding
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
VIN constants module.

Contains the immutable tables shared by the validator and year decoder:
- CHARACTER_WEIGHTS: Per-position checksum weights (ISO 3779 / NHTSA)
- CHARACTER_TRANSLITERATION: Character to numeric value mapping
- CHECK_CHARACTERS: Allowed check digit characters and their values
- YEAR_CHARACTERS: Model year alphabet and its 30-year cycle offsets
"""

from types import MappingProxyType

# ================================================================================
# VIN Layout
# ================================================================================

VIN_LENGTH = 17

# 0-indexed positions
CHECK_DIGIT_INDEX = 8
YEAR_CHARACTER_INDEX = 9

WMI_LENGTH = 3
WMI_PREFIX_LENGTH = 2

# ================================================================================
# Checksum Tables
# ================================================================================

# Check digit position carries weight 0
CHARACTER_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

# I, O and Q are never valid VIN characters
CHARACTER_TRANSLITERATION = MappingProxyType({
    'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
    'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9,
    'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
    '0': 0, '1': 1, '2': 2, '3': 3, '4': 4,
    '5': 5, '6': 6, '7': 7, '8': 8, '9': 9,
})

CHECKSUM_MODULUS = 11

CHECK_CHARACTERS = MappingProxyType({
    '0': 0, '1': 1, '2': 2, '3': 3, '4': 4,
    '5': 5, '6': 6, '7': 7, '8': 8, '9': 9,
    'X': 10,
})

# ================================================================================
# Model Year Tables
# ================================================================================

YEAR_CYCLE_LENGTH = 30

# Excludes I, O, Q, U, Z and 0
YEAR_ALPHABET = 'ABCDEFGHJKLMNPRSTVWXY123456789'

YEAR_CHARACTERS = MappingProxyType({
    character: offset for offset, character in enumerate(YEAR_ALPHABET)
})

# First model year of the legacy year scan ('A' == 1980)
LEGACY_YEAR_START = 1980
