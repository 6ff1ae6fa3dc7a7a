################################################################################
# File Name: test_config_validator.py
# Purpose/Description: Tests for configuration validation
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | WARNING logging default
# ================================================================================
################################################################################

"""
Tests for the config_validator module.

Run with:
    pytest tests/test_config_validator.py -v
"""

import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

import common.config_validator as configValidator
from common.config_validator import (
    DEFAULTS,
    ConfigValidationError,
    ConfigValidator,
)


class TestConfigValidatorDefaults:
    """Tests for default application."""

    def test_validate_emptyConfig_appliesAllDefaults(self):
        """
        Given: Empty configuration
        When: validate() is called
        Then: Every default is applied in nested form
        """
        config = ConfigValidator().validate({})

        assert config == {
            'application': {'name': 'vincodec'},
            'logging': {'level': 'WARNING', 'maskPII': True},
            'vinCodec': {'referenceYear': 0, 'manufacturerLookup': True},
        }

    def test_validate_existingValues_notOverwritten(self, sampleConfig):
        """
        Given: Config with reference year 2000 and DEBUG logging
        When: validate() is called
        Then: Existing values are kept
        """
        config = ConfigValidator().validate(sampleConfig)

        assert config['vinCodec']['referenceYear'] == 2000
        assert config['logging']['level'] == 'DEBUG'

    def test_validate_falseValue_keptAsIs(self):
        """
        Given: manufacturerLookup explicitly False
        When: validate() is called
        Then: False is not replaced by the default
        """
        config = ConfigValidator().validate({'vinCodec': {'manufacturerLookup': False}})

        assert config['vinCodec']['manufacturerLookup'] is False

    def test_defaults_loggingLevelWarning(self):
        """
        Given: DEFAULTS
        When: Inspected
        Then: Logging defaults to WARNING so a plain run prints only reports
        """
        assert DEFAULTS['logging.level'] == 'WARNING'

    def test_defaults_referenceYearZero(self):
        """
        Given: DEFAULTS
        When: Inspected
        Then: Reference year defaults to 0, meaning the current cycle
        """
        assert DEFAULTS['vinCodec.referenceYear'] == 0


class TestConfigValidatorRequired:
    """Tests for required field checks."""

    def test_validate_missingRequired_raisesWithFields(self):
        """
        Given: Validator requiring vinCodec.manufacturerDataPath
        When: validate() is called on empty config
        Then: ConfigValidationError lists the missing field
        """
        validator = ConfigValidator(requiredKeys=['vinCodec.manufacturerDataPath'])

        with pytest.raises(ConfigValidationError) as excInfo:
            validator.validate({})

        assert excInfo.value.missingFields == ['vinCodec.manufacturerDataPath']
        assert excInfo.value.invalidFields == []

    def test_validate_noRequiredKeys_emptyConfigPasses(self):
        """
        Given: Default validator
        When: validate() is called on empty config
        Then: No error is raised
        """
        ConfigValidator().validate({})


class TestConfigValidatorTypes:
    """Tests for field type checks."""

    def test_validate_stringReferenceYear_raises(self):
        """
        Given: referenceYear given as a string
        When: validate() is called
        Then: ConfigValidationError names the field
        """
        with pytest.raises(ConfigValidationError) as excInfo:
            ConfigValidator().validate({'vinCodec': {'referenceYear': '2010'}})

        assert excInfo.value.invalidFields == ['vinCodec.referenceYear']

    def test_validate_boolReferenceYear_raises(self):
        """
        Given: referenceYear given as True
        When: validate() is called
        Then: bool is not accepted as an int
        """
        with pytest.raises(ConfigValidationError) as excInfo:
            ConfigValidator().validate({'vinCodec': {'referenceYear': True}})

        assert excInfo.value.invalidFields == ['vinCodec.referenceYear']

    def test_validate_multipleInvalid_listsAll(self):
        """
        Given: Two fields with wrong types
        When: validate() is called
        Then: Both are reported
        """
        config = {
            'logging': {'maskPII': 'yes'},
            'vinCodec': {'manufacturerDataPath': 42},
        }

        with pytest.raises(ConfigValidationError) as excInfo:
            ConfigValidator().validate(config)

        assert set(excInfo.value.invalidFields) == {
            'logging.maskPII', 'vinCodec.manufacturerDataPath'
        }

    def test_validate_customFieldTypes_used(self):
        """
        Given: Validator with custom field types and no defaults
        When: validate() is called with a matching value
        Then: Config is returned unchanged
        """
        validator = ConfigValidator(defaults={}, fieldTypes={'a.b': (int, float)})

        assert validator.validate({'a': {'b': 1.5}}) == {'a': {'b': 1.5}}

    def test_module_exposesValidatorClassOnly(self):
        """
        Given: config_validator module
        When: Inspected
        Then: Validation goes through ConfigValidator, with no module-level shortcut
        """
        assert not hasattr(configValidator, 'validateConfig')
