"""Tests for the error types and validation context"""

import pytest

import rrvalidator
from rrvalidator import (
    DNSValidationError,
    InvalidFieldValueError,
    ValidationContext,
    ValidationErrorFactory,
)


def test_error_hierarchy():
    error = rrvalidator.InvalidRecordTypeError("HINFO")
    assert isinstance(error, DNSValidationError)
    assert isinstance(error, ValueError)
    assert error.code == "INVALID_RECORD_TYPE"
    assert error.field == "type"
    assert str(error) == "Invalid or unsupported DNS record type: HINFO"


@pytest.mark.parametrize("error, code", [
    (rrvalidator.MalformedRecordError("broken"), "MALFORMED_RECORD"),
    (rrvalidator.InvalidFieldValueError("ttl", -1), "INVALID_FIELD_VALUE"),
    (rrvalidator.MissingRequiredFieldError("address", "A"), "MISSING_REQUIRED_FIELD"),
    (rrvalidator.InvalidQueryStructureError("no question"), "INVALID_QUERY_STRUCTURE"),
])
def test_error_codes(error, code):
    assert error.code == code


def test_to_dict_omits_empty_fields():
    error = DNSValidationError("bad", "SOME_CODE")
    assert error.to_dict() == {"name": "DNSValidationError", "message": "bad", "code": "SOME_CODE"}
    detailed = InvalidFieldValueError("port", 70000, "integer between 0 and 65535")
    assert detailed.to_dict()["field"] == "port"
    assert detailed.to_dict()["value"] == 70000
    assert detailed.message == "Invalid value for field 'port': 70000. Expected: integer between 0 and 65535"


def test_missing_field_message():
    error = ValidationErrorFactory.missing_required_field("exchange", "MX")
    assert error.message == "Missing required field 'exchange' for MX record"


def test_factory():
    error = ValidationErrorFactory.invalid_ip_address("1.2.3", 4)
    assert error.field == "address"
    assert error.message.endswith("Expected: valid IPv4 address")
    assert ValidationErrorFactory.invalid_fqdn("x", "exchange").field == "exchange"
    assert ValidationErrorFactory.invalid_hex_string("zz").field == "certificate"
    assert ValidationErrorFactory.invalid_record_type("FOO").code == "INVALID_RECORD_TYPE"


def test_context_path():
    ctx = ValidationContext()
    assert ctx.current_path == "root"
    with ctx.field("soa"), ctx.field("admin"):
        assert ctx.current_path == "soa.admin"
    assert ctx.current_path == "root"
    ctx.exit_field()
    assert ctx.current_path == "root"


def test_context_collects():
    ctx = ValidationContext()
    with ctx.field("mx"):
        ctx.add_error(rrvalidator.MalformedRecordError("bad exchange"))
        ctx.add_error(ValidationErrorFactory.invalid_priority(-1))
    ctx.add_warning("low ttl")

    result = ctx.get_result()
    assert not result.is_valid
    assert [e.field for e in result.errors] == ["mx", "priority"]
    assert result.warnings == ["low ttl"]
    assert result.suggestions is None

    ctx.add_suggestion("use a longer ttl")
    assert ctx.get_result().suggestions == ["use a longer ttl"]

    ctx.reset()
    assert ctx.get_result().is_valid


def test_node_error_codes():
    assert rrvalidator.is_node_dns_error_code("SERVFAIL")
    assert rrvalidator.is_node_dns_error_code("NOTFOUND")
    assert not rrvalidator.is_node_dns_error_code("INVALID_RECORD_TYPE")
    assert "TIMEOUT" in rrvalidator.NODE_DNS_ERROR_CODES
