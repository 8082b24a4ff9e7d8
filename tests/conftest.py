import pytest


@pytest.fixture
def soa_record():
    return {
        "type": "SOA",
        "primary": "ns1.example.com",
        "admin": "hostmaster.example.com",
        "serial": 2024010101,
        "refresh": 3600,
        "retry": 600,
        "expiration": 604800,
        "minimum": 86400,
    }


@pytest.fixture
def node_soa_record():
    return {
        "type": "SOA",
        "nsname": "ns1.example.com",
        "hostmaster": "hostmaster.example.com",
        "serial": 2024010101,
        "refresh": 3600,
        "retry": 600,
        "expire": 604800,
        "minttl": 86400,
    }


@pytest.fixture
def rrsig_record():
    return {
        "typeCovered": "A",
        "algorithm": 8,
        "labels": 2,
        "originalTTL": 3600,
        "signatureExpiration": 1700000000,
        "signatureInception": 1690000000,
        "keyTag": 12345,
        "signerName": "example.com.",
        "signature": "dGVzdA==",
    }


@pytest.fixture
def nsec3_record():
    return {
        "hashAlgorithm": 1,
        "flags": 0,
        "iterations": 10,
        "salt": "AABBCCDD",
        "nextHashedOwnerName": "ABCDEFGHIJKLMNOP234567",
        "types": ["A", "RRSIG"],
    }


@pytest.fixture
def query_result():
    return {
        "question": {"name": "example.com", "type": "A", "class": "IN"},
        "answers": [
            {"type": "A", "address": "192.0.2.1", "ttl": 300},
            {"type": "A", "address": "192.0.2.2", "ttl": 300},
        ],
    }
