"""Tests for query result validation"""

import pytest

import rrvalidator
from rrvalidator import InvalidQueryStructureError


def test_record_types():
    assert rrvalidator.is_valid_record_type("NSEC3")
    assert not rrvalidator.is_valid_record_type("HINFO")
    assert not rrvalidator.is_valid_record_type("a")


def test_loose_record_check():
    assert rrvalidator.is_valid_dns_record({"type": "DNSKEY"})
    assert not rrvalidator.is_valid_dns_record({"type": "A", "ttl": 1.5})
    assert not rrvalidator.is_valid_dns_record({"type": "HINFO"})
    assert not rrvalidator.is_valid_dns_record([])


def test_valid_query_result(query_result):
    assert rrvalidator.is_valid_dns_query_result(query_result)


def test_query_result_missing_class(query_result):
    del query_result["question"]["class"]
    assert not rrvalidator.is_valid_dns_query_result(query_result)


def test_query_result_bad_answer(query_result):
    query_result["answers"].append({"type": "BOGUS"})
    assert not rrvalidator.is_valid_dns_query_result(query_result)


def test_validate_response_ok(query_result):
    result = rrvalidator.validate_dns_response(query_result)
    assert result.is_valid
    assert result.warnings == []


def test_validate_response_type_mismatch(query_result):
    query_result["answers"].append({"type": "CNAME", "value": "alias.example.com"})
    result = rrvalidator.validate_dns_response(query_result)
    assert result.is_valid
    assert result.warnings == ["Answer type CNAME does not match question type A"]


def test_validate_response_any_question(query_result):
    query_result["question"]["type"] = "ANY"
    query_result["answers"].append({"type": "MX", "priority": 1, "exchange": "mx.example.com"})
    assert rrvalidator.validate_dns_response(query_result).warnings == []


def test_validate_response_empty(query_result):
    query_result["answers"] = []
    result = rrvalidator.validate_dns_response(query_result)
    assert result.warnings == ["No answers found in DNS response"]


def test_validate_response_bad_name(query_result):
    query_result["question"]["name"] = "not a domain"
    result = rrvalidator.validate_dns_response(query_result)
    assert not result.is_valid
    assert result.errors == ["Invalid domain name in question: not a domain"]


def test_validate_response_broken_structure(query_result):
    with pytest.raises(InvalidQueryStructureError) as exc_info:
        rrvalidator.validate_dns_response({"answers": []})
    assert exc_info.value.code == "INVALID_QUERY_STRUCTURE"

    query_result["answers"] = None
    with pytest.raises(InvalidQueryStructureError):
        rrvalidator.validate_dns_response(query_result)
