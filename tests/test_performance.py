"""Tests for the pattern cache, pre-validation and tracker"""

import pytest

import rrvalidator
from rrvalidator import (
    PatternCache,
    ValidationPatterns,
    ValidationPerformanceTracker,
    fast_pre_validate,
    track_performance,
)


@pytest.fixture
def patterns():
    return ValidationPatterns.compile(PatternCache())


def test_pattern_cache_hits_and_misses():
    cache = PatternCache()
    first = cache.get(r"[0-9]+")
    assert cache.get(r"[0-9]+") is first
    assert cache.hits == 1
    assert cache.misses == 1
    assert len(cache) == 1

    cache.get(r"[0-9]+", flags=2)
    assert len(cache) == 2

    cache.clear()
    assert len(cache) == 0
    assert cache.hits == 0


def test_pattern_cache_reports_to_tracker():
    tracker = ValidationPerformanceTracker()
    cache = PatternCache(tracker)
    ValidationPatterns.compile(cache)
    ValidationPatterns.compile(cache)
    metrics = tracker.get_metrics()
    assert metrics.cache_misses == 4
    assert metrics.cache_hits == 4


@pytest.mark.parametrize("value, pattern, expected", [
    ("192.168.1.1", "ipv4", None),
    ("256.1.1.1", "ipv4", False),
    ("", "hex", False),
    (None, "hex", False),
    ("beef", "hex", None),
    ("mail.example.com", "fqdn", None),
    ("-bad.example.com", "fqdn", False),
    ("admin@example.com", "email", None),
    ("admin.example.com", "email", False),
])
def test_fast_pre_validate(patterns, value, pattern, expected):
    assert fast_pre_validate(value, pattern, patterns) is expected


def test_plain_object():
    assert rrvalidator.is_plain_object({"a": 1})
    assert not rrvalidator.is_plain_object([])
    assert not rrvalidator.is_plain_object(None)


def test_integer_in_range():
    assert rrvalidator.is_valid_integer_in_range(5, 0, 10)
    assert not rrvalidator.is_valid_integer_in_range(11, 0, 10)
    assert not rrvalidator.is_valid_integer_in_range(5.5, 0, 10)


def test_field_accessors():
    record = {"name": "example.com", "ttl": 300, "flag": True, "meta": {"a": 1}}
    assert rrvalidator.get_required_field(record, "name", "string") == "example.com"
    assert rrvalidator.get_required_field(record, "ttl", "string") is None
    assert rrvalidator.get_required_field(record, "missing", "number") is None
    assert rrvalidator.get_required_field(record, "flag", "boolean") is True
    assert rrvalidator.get_required_field(record, "flag", "number") is None
    assert rrvalidator.get_required_field(record, "meta", "object") == {"a": 1}

    missing = object()
    assert rrvalidator.get_optional_field(record, "missing", "number", missing) is missing
    assert rrvalidator.get_optional_field(record, "ttl", "string", missing) is None
    assert rrvalidator.get_optional_field(record, "ttl", "number") == 300


def test_tracker_counts():
    tracker = ValidationPerformanceTracker()
    stop = tracker.start_validation()
    stop()
    tracker.record_success()

    metrics = tracker.get_metrics()
    assert metrics.total_validations == 1
    assert metrics.successful_validations == 1
    assert metrics.average_time_ms >= 0

    metrics.total_validations = 99
    assert tracker.get_metrics().total_validations == 1

    tracker.reset()
    assert tracker.get_metrics().to_dict() == {
        "totalValidations": 0,
        "successfulValidations": 0,
        "averageTimeMs": 0.0,
        "cacheHits": 0,
        "cacheMisses": 0,
    }


def test_track_performance_decorator():
    tracker = ValidationPerformanceTracker()

    @track_performance(tracker)
    def check(record):
        return rrvalidator.validate_dns_record(record)

    assert check({"type": "A", "address": "192.0.2.1"}).is_valid
    assert not check({"type": "A", "address": "bad"}).is_valid
    assert check.__name__ == "check"

    metrics = tracker.get_metrics()
    assert metrics.total_validations == 2
    assert metrics.successful_validations == 1


def test_track_performance_with_predicates_and_errors():
    tracker = ValidationPerformanceTracker()
    is_a = track_performance(tracker)(rrvalidator.is_a_record)
    validate_ds = track_performance(tracker)(rrvalidator.validate_ds)

    assert is_a({"type": "A", "address": "192.0.2.1"})
    with pytest.raises(rrvalidator.DNSValidationError):
        validate_ds({"keyTag": -1})

    metrics = tracker.get_metrics()
    assert metrics.total_validations == 2
    assert metrics.successful_validations == 1


def test_trackers_are_independent():
    first, second = ValidationPerformanceTracker(), ValidationPerformanceTracker()
    track_performance(first)(rrvalidator.is_a_record)({"type": "A", "address": "192.0.2.1"})
    assert second.get_metrics().total_validations == 0
