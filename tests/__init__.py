################################################################################
# File Name: __init__.py
# Purpose/Description: Test package initialization
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
################################################################################

"""
Test package for the VIN codec.

Run tests with:
    pytest tests/
    pytest tests/ -m "not slow"
"""
