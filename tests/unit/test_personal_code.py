"""Unit tests for the Estonian personal code validator"""

import pytest
from datetime import date
from loan_decision.domain.exceptions import InvalidPersonalCodeError
from loan_decision.infrastructure.identity.personal_code import EstonianPersonalCodeValidator
from tests.identity_fakes import (
    INVALID_PERSONAL_CODE,
    SEGMENT_1_PERSONAL_CODE,
    TOO_OLD_PERSONAL_CODE,
    UNDERAGE_PERSONAL_CODE,
)


def test_is_valid_personal_code(identity_validator: EstonianPersonalCodeValidator):
    """Test checksum and birth date validation"""
    assert identity_validator.is_valid_personal_code(SEGMENT_1_PERSONAL_CODE) is True
    assert identity_validator.is_valid_personal_code(INVALID_PERSONAL_CODE) is False
    assert identity_validator.is_valid_personal_code("50307172741") is False  # bad check digit
    assert identity_validator.is_valid_personal_code("") is False


def test_birth_date(identity_validator: EstonianPersonalCodeValidator):
    """Test birth date extraction including the century digit"""
    assert identity_validator.birth_date(SEGMENT_1_PERSONAL_CODE) == date(2003, 7, 17)
    assert identity_validator.birth_date(TOO_OLD_PERSONAL_CODE) == date(1950, 6, 6)


def test_age_in_months(identity_validator: EstonianPersonalCodeValidator):
    """Test age is counted in whole months up to the reference date"""
    # 2006-12-01 -> 2023-06-01
    assert identity_validator.age_in_months(UNDERAGE_PERSONAL_CODE) == 198
    # 1950-06-06 -> 2023-06-01, June not yet completed
    assert identity_validator.age_in_months(TOO_OLD_PERSONAL_CODE) == 875


def test_age_in_months_invalid_code(identity_validator: EstonianPersonalCodeValidator):
    """Test malformed codes raise a domain error"""
    with pytest.raises(InvalidPersonalCodeError):
        identity_validator.age_in_months(INVALID_PERSONAL_CODE)


def test_country_of_defaults_to_configured_country():
    """Test every code reports the configured country"""
    assert EstonianPersonalCodeValidator().country_of(SEGMENT_1_PERSONAL_CODE) == "EE"
    assert EstonianPersonalCodeValidator(country="LV").country_of(SEGMENT_1_PERSONAL_CODE) == "LV"
