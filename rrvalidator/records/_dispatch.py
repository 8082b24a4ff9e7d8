'''
Dispatch on the `type` tag of a record to the matching predicate.
'''
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Final, TypeGuard

from rrvalidator.dnssec._predicates import (
    is_dnskey_record,
    is_ds_record,
    is_nsec3_record,
    is_nsec_record,
    is_rrsig_record,
    is_sshfp_record,
)
from rrvalidator.records._models import DNSRecord, ValidationResult
from rrvalidator.records._predicates import (
    is_a_record,
    is_aaaa_record,
    is_any_record,
    is_caa_record,
    is_cname_record,
    is_mx_record,
    is_naptr_record,
    is_ns_record,
    is_ptr_record,
    is_soa_record,
    is_srv_record,
    is_tlsa_record,
    is_txt_record,
)

log = logging.getLogger(__name__)

Predicate = Callable[[object], bool]

RECORD_PREDICATES: Final[Mapping[str, Predicate]] = MappingProxyType({
    'A': is_a_record,
    'AAAA': is_aaaa_record,
    'CNAME': is_cname_record,
    'MX': is_mx_record,
    'TXT': is_txt_record,
    'NS': is_ns_record,
    'PTR': is_ptr_record,
    'SOA': is_soa_record,
    'SRV': is_srv_record,
    'CAA': is_caa_record,
    'NAPTR': is_naptr_record,
    'TLSA': is_tlsa_record,
    'ANY': is_any_record,
    'DNSKEY': is_dnskey_record,
    'DS': is_ds_record,
    'NSEC': is_nsec_record,
    'NSEC3': is_nsec3_record,
    'RRSIG': is_rrsig_record,
    'SSHFP': is_sshfp_record,
})

RECORD_REQUIREMENTS: Final[Mapping[str, str]] = MappingProxyType({
    'A': "A records require: type='A', address (valid IPv4), optional ttl",
    'AAAA': "AAAA records require: type='AAAA', address (valid IPv6), optional ttl",
    'MX': (
        "MX records require: type='MX', priority (0-65535), "
        "exchange (valid FQDN), optional ttl"
    ),
    'CNAME': "CNAME records require: type='CNAME', value (valid FQDN), optional ttl",
    'TXT': "TXT records require: type='TXT', entries (array of strings), optional ttl",
    'NS': "NS records require: type='NS', value (valid FQDN), optional ttl",
    'PTR': "PTR records require: type='PTR', value (valid FQDN), optional ttl",
    'SOA': (
        "SOA records require: type='SOA', (primary|nsname), (admin|hostmaster), "
        "serial, refresh, retry, (expiration|expire), (minimum|minttl), optional ttl"
    ),
    'SRV': (
        "SRV records require: type='SRV', priority, weight, port, "
        "name (valid FQDN), optional ttl"
    ),
    'CAA': (
        "CAA records require: type='CAA', critical (0-255), and at least one "
        "property (issue, issuewild, iodef, etc.)"
    ),
    'NAPTR': (
        "NAPTR records require: type='NAPTR', order, preference, flags, "
        "service, regexp, replacement"
    ),
    'TLSA': (
        "TLSA records require: type='TLSA', (usage|certUsage) (0-3), selector (0-1), "
        "(matchingType|match) (0-2), (certificate|data) (hex string or binary)"
    ),
    'ANY': (
        "ANY records require: type='ANY', and either value or records "
        "(array of records with a type field), optional ttl"
    ),
    'DNSKEY': (
        "DNSKEY records require: type='DNSKEY', flags (0-65535), protocol (3), "
        "algorithm (valid DNSSEC), publicKey (hex string)"
    ),
    'DS': (
        "DS records require: type='DS', keyTag (0-65535), algorithm (valid DNSSEC), "
        "digestType (1-4), digest (hex string)"
    ),
    'NSEC': (
        "NSEC records require: type='NSEC', nextDomainName (valid FQDN), "
        "typeBitMaps (array of strings)"
    ),
    'NSEC3': (
        "NSEC3 records require: type='NSEC3', hashAlgorithm (1), flags (0-255), "
        "iterations (0-65535), salt (hex), nextHashedOwnerName, typeBitMaps"
    ),
    'RRSIG': (
        "RRSIG records require: type='RRSIG', typeCovered, algorithm, labels, "
        "originalTTL, signatureExpiration, signatureInception, keyTag, "
        "signerName, signature"
    ),
    'SSHFP': (
        "SSHFP records require: type='SSHFP', algorithm (1,2,3,4,6), "
        "fpType (1,2), fingerprint (hex string)"
    ),
})

_UNSUPPORTED_HINT: Final = (
    'Unsupported record type: {}. Supported types: A, AAAA, CNAME, MX, TXT, NS, '
    'PTR, SOA, SRV, CAA, NAPTR, TLSA, DNSKEY, DS, NSEC, NSEC3, RRSIG, SSHFP, ANY'
)


def is_dns_record(record: object) -> TypeGuard[DNSRecord]:
    '''
    Check a record of any supported type, dispatching on its `type` tag.
    Unknown tags are never valid.

    Parameters
    ----------
    record : object

    Returns
    -------
    bool
    '''
    if not isinstance(record, Mapping):
        return False

    rtype = record.get('type')
    if not isinstance(rtype, str) or not (predicate := RECORD_PREDICATES.get(rtype)):
        log.debug(f'No predicate for record type {rtype!r}')
        return False
    return predicate(record)


def requirements_hint(record_type: str) -> str:
    if hint := RECORD_REQUIREMENTS.get(record_type):
        return hint
    return _UNSUPPORTED_HINT.format(record_type)


def validate_dns_record(record: object) -> ValidationResult:
    '''
    Validate a record of any supported type and explain what is wrong.

    A record that fails its predicate gets two errors: a generic
    "Invalid <type> record" message and the list of fields that type
    requires. Never raises.

    Parameters
    ----------
    record : object

    Returns
    -------
    ValidationResult
    '''
    if not isinstance(record, Mapping):
        return ValidationResult.from_messages(['Record must be an object'])

    rtype = record.get('type')
    if not rtype or not isinstance(rtype, str):
        return ValidationResult.from_messages(['Record must have a valid type field'])

    errors: list[str] = []
    if not is_dns_record(record):
        errors.append(
            f'Invalid {rtype} record: Please check required fields and value formats'
        )
        errors.append(requirements_hint(rtype))

    return ValidationResult.from_messages(errors)
