################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
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
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(sampleConfig, manufacturerDataFile):
        # sampleConfig and manufacturerDataFile are automatically injected
        pass
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))


# ================================================================================
# VIN Fixtures
# ================================================================================

# Check digit verified by hand: weighted sum 311, 311 % 11 == 3
KNOWN_GOOD_VIN = '1HGCM82633A004352'
KNOWN_BAD_VIN = '1HGCM82633A004353'


@pytest.fixture
def validVins() -> List[str]:
    """
    Provide VINs with correct check digits.

    Returns:
        List of valid VINs (including one with check character 'X')
    """
    return [
        KNOWN_GOOD_VIN,
        '11111111111111111',
        '1M8GDM9AXKP042788',
    ]


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'application': {
            'name': 'TestVinCodec'
        },
        'logging': {
            'level': 'DEBUG',
            'maskPII': True
        },
        'vinCodec': {
            'referenceYear': 2000,
            'manufacturerLookup': True
        }
    }


# ================================================================================
# Manufacturer Data Fixtures
# ================================================================================

@pytest.fixture
def manufacturerRecords() -> List[Dict[str, str]]:
    """
    Provide manufacturer reference records, including a duplicate code.

    Returns:
        List of {'code', 'name'} dictionaries in load order
    """
    return [
        {'code': '1HG', 'name': 'Honda'},
        {'code': '1G1', 'name': 'Chevrolet'},
        {'code': '1GC', 'name': 'Chevrolet Truck'},
        {'code': 'WBA', 'name': 'BMW'},
        {'code': '1HG', 'name': 'Honda (duplicate)'},
        {'code': 'JHM', 'name': 'Honda Japan'},
    ]


@pytest.fixture
def manufacturerDataFile(tmp_path: Path, manufacturerRecords: List[Dict[str, str]]) -> Path:
    """
    Write manufacturer records to a temporary JSON file.

    Args:
        tmp_path: Pytest temp directory fixture
        manufacturerRecords: Records fixture

    Returns:
        Path to the data file
    """
    dataFile = tmp_path / 'manufacturers.json'
    dataFile.write_text(json.dumps(manufacturerRecords), encoding='utf-8')
    return dataFile


# ================================================================================
# File System Fixtures
# ================================================================================

@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleConfig: Dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Args:
        tmp_path: Pytest temp directory fixture
        sampleConfig: Sample configuration fixture

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'config.json'
    with open(configFile, 'w') as f:
        json.dump(sampleConfig, f)

    return configFile


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before test, restores after.
    """
    varsToRemove = [
        'VINCODEC_LOG_LEVEL', 'VINCODEC_MANUFACTURER_DATA', 'TEST_VAR',
    ]

    saved = {}
    for var in varsToRemove:
        saved[var] = os.environ.pop(var, None)

    yield

    for var, value in saved.items():
        os.environ.pop(var, None)
        if value is not None:
            os.environ[var] = value


@pytest.fixture
def restoreLogging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after tests that reconfigure logging."""
    rootLogger = logging.getLogger()
    savedHandlers = list(rootLogger.handlers)
    savedLevel = rootLogger.level

    yield

    rootLogger.handlers[:] = savedHandlers
    rootLogger.setLevel(savedLevel)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
