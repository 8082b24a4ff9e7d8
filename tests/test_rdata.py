"""Tests for converting dnspython rdata into records"""

import dns.rdata
import dns.rrset
import pytest

import rrvalidator
from rrvalidator import InvalidRecordTypeError, parse_rdata, parse_rrset


def _rdata(rtype, text):
    return dns.rdata.from_text("IN", rtype, text)


def test_a_and_aaaa():
    assert parse_rdata(_rdata("A", "192.0.2.1")) == {"type": "A", "address": "192.0.2.1"}
    assert parse_rdata(_rdata("AAAA", "2001:db8::1"), ttl=60) == {
        "type": "AAAA",
        "address": "2001:db8::1",
        "ttl": 60,
    }


def test_names_lose_trailing_dot():
    record = parse_rdata(_rdata("CNAME", "alias.example.com."))
    assert record == {"type": "CNAME", "value": "alias.example.com"}
    assert rrvalidator.is_cname_record(record)


def test_mx():
    record = parse_rdata(_rdata("MX", "10 mail.example.com."), ttl=300)
    assert record == {"type": "MX", "priority": 10, "exchange": "mail.example.com", "ttl": 300}
    assert rrvalidator.is_mx_record(record)


def test_soa():
    record = parse_rdata(_rdata("SOA", "ns1.example.com. hostmaster.example.com. 1 7200 3600 1209600 3600"))
    assert record["primary"] == "ns1.example.com"
    assert record["admin"] == "hostmaster.example.com"
    assert record["expiration"] == 1209600
    assert rrvalidator.is_soa_record(record)


def test_txt_chunks():
    record = parse_rdata(_rdata("TXT", '"v=spf1" "-all"'))
    assert record == {"type": "TXT", "entries": ["v=spf1", "-all"]}


def test_srv():
    record = parse_rdata(_rdata("SRV", "10 5 5060 sip.example.com."))
    assert record["name"] == "sip.example.com"
    assert rrvalidator.is_srv_record(record)


def test_caa():
    record = parse_rdata(_rdata("CAA", '0 issue "letsencrypt.org"'))
    assert record == {"type": "CAA", "critical": 0, "issue": "letsencrypt.org"}
    assert rrvalidator.is_caa_record(record)


def test_naptr_root_replacement():
    record = parse_rdata(_rdata("NAPTR", '100 10 "U" "E2U+sip" "!^.*$!sip:info@example.com!" .'))
    assert record["replacement"] == ""
    assert rrvalidator.is_naptr_record(record)


def test_tlsa():
    record = parse_rdata(_rdata("TLSA", "3 1 1 " + "ab" * 32))
    assert record["certificate"] == "ab" * 32
    assert record["matchingType"] == 1
    assert rrvalidator.is_tlsa_record(record)


def test_dnskey_and_ds_are_hex():
    dnskey = parse_rdata(_rdata("DNSKEY", "257 3 8 AwEAAQ=="))
    assert dnskey["publicKey"] == "03010001"
    assert rrvalidator.is_dnskey_record(dnskey)

    ds = parse_rdata(_rdata("DS", "12345 8 2 " + "cd" * 32))
    assert ds == {"type": "DS", "keyTag": 12345, "algorithm": 8, "digestType": 2, "digest": "cd" * 32}
    assert rrvalidator.is_ds_record(ds)


def test_nsec_type_bitmap():
    record = parse_rdata(_rdata("NSEC", "host.example.com. A MX RRSIG NSEC"))
    assert record["nextDomainName"] == "host.example.com"
    assert record["typeBitMaps"] == ["A", "MX", "RRSIG", "NSEC"]
    assert rrvalidator.is_nsec_record(record)


def test_nsec3():
    record = parse_rdata(_rdata("NSEC3", "1 0 10 AABBCCDD 2T7B4G4VSA5SMI47K61MV5BV1A22BOJR A RRSIG"))
    assert record["salt"] == "aabbccdd"
    assert record["nextHashedOwnerName"] == "2t7b4g4vsa5smi47k61mv5bv1a22bojr"
    assert record["typeBitMaps"] == ["A", "RRSIG"]
    assert rrvalidator.is_nsec3_record(record)


def test_rrsig():
    record = parse_rdata(_rdata("RRSIG", "A 8 2 3600 20240101000000 20231201000000 12345 example.com. dGVzdA=="))
    assert record["typeCovered"] == "A"
    assert record["signerName"] == "example.com"
    assert record["signature"] == "74657374"
    assert record["signatureInception"] < record["signatureExpiration"]
    assert rrvalidator.is_rrsig_record(record)


def test_sshfp():
    record = parse_rdata(_rdata("SSHFP", "4 2 " + "ef" * 32))
    assert record == {"type": "SSHFP", "algorithm": 4, "fpType": 2, "fingerprint": "ef" * 32}
    assert rrvalidator.is_sshfp_record(record)


@pytest.mark.parametrize("rtype, text", [
    ("HINFO", '"x86" "linux"'),
    ("CDS", "12345 8 2 " + "cd" * 32),
])
def test_unsupported_rdata(rtype, text):
    with pytest.raises(InvalidRecordTypeError) as exc_info:
        parse_rdata(_rdata(rtype, text))
    assert exc_info.value.value == rtype


def test_rrset_ttl_applied():
    rrset = dns.rrset.from_text("example.com.", 300, "IN", "A", "192.0.2.1", "192.0.2.2")
    records = parse_rrset(rrset)
    assert sorted(r["address"] for r in records) == ["192.0.2.1", "192.0.2.2"]
    assert all(r["ttl"] == 300 for r in records)
    assert all(rrvalidator.is_a_record(r) for r in records)
