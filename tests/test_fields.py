"""Tests for the primitive field validators"""

import pytest

import rrvalidator


@pytest.mark.parametrize("ttl, expected", [
    (0, True),
    (300, True),
    (2147483647, True),
    (2147483648, False),
    (-1, False),
    (300.0, True),
    (1.5, False),
    (True, False),
    ("300", False),
    (None, False),
])
def test_ttl_boundaries(ttl, expected):
    assert rrvalidator.is_valid_ttl(ttl) is expected


@pytest.mark.parametrize("check", [
    rrvalidator.is_valid_port,
    rrvalidator.is_valid_priority,
    rrvalidator.is_valid_weight,
])
def test_uint16_fields(check):
    assert check(0)
    assert check(65535)
    assert not check(65536)
    assert not check(-1)
    assert not check(False)


def test_caa_flags():
    assert rrvalidator.is_valid_caa_flags(128)
    assert rrvalidator.is_valid_caa_flags(255)
    assert not rrvalidator.is_valid_caa_flags(256)


@pytest.mark.parametrize("flags", ["S", "a", "U", "p", ""])
def test_naptr_flags_valid(flags):
    assert rrvalidator.is_valid_naptr_flags(flags)


@pytest.mark.parametrize("flags", ["X", "SA", None, 1])
def test_naptr_flags_invalid(flags):
    assert not rrvalidator.is_valid_naptr_flags(flags)


def test_tlsa_ranges():
    assert rrvalidator.is_valid_tlsa_usage(3)
    assert not rrvalidator.is_valid_tlsa_usage(4)
    assert rrvalidator.is_valid_tlsa_selector(1)
    assert not rrvalidator.is_valid_tlsa_selector(2)
    assert rrvalidator.is_valid_tlsa_matching_type(2)
    assert not rrvalidator.is_valid_tlsa_matching_type(3)


def test_hex_string():
    assert rrvalidator.is_valid_hex_string("deadBEEF09")
    assert not rrvalidator.is_valid_hex_string("")
    assert not rrvalidator.is_valid_hex_string("xyz")
    assert not rrvalidator.is_valid_hex_string(b"beef")


def test_text_record():
    assert rrvalidator.is_valid_text_record("")
    assert rrvalidator.is_valid_text_record("v=spf1 include:_spf.example.com ~all")
    assert not rrvalidator.is_valid_text_record("tab\there")
    assert not rrvalidator.is_valid_text_record(None)
