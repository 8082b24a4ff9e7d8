'''
Boolean predicates for the DNSSEC record types.

Opaque binary fields (`publicKey`, `digest`, `signature`, `fingerprint`)
are expected as hex here. The strict validators in
`rrvalidator.dnssec._strict` expect `publicKey` and `signature` as
base64 instead; both behaviours are relied upon and kept apart.
'''
from __future__ import annotations

from typing import TypeGuard

from rrvalidator import _fields as fields
from rrvalidator import _formats
from rrvalidator.dnssec._enums import (
    VALID_DIGEST_TYPES,
    VALID_DNSSEC_ALGORITHMS,
    VALID_NSEC3_HASH_ALGORITHMS,
    VALID_SSH_ALGORITHMS,
    VALID_SSH_FINGERPRINT_TYPES,
)
from rrvalidator.records._models import (
    DNSKEYRecord,
    DSRecord,
    NSEC3Record,
    NSECRecord,
    RRSIGRecord,
    SSHFPRecord,
)


def _member(value: object, registry: frozenset[int]) -> bool:
    return fields.is_integer(value) and value in registry


def is_valid_dnssec_algorithm(algorithm: object) -> bool:
    return _member(algorithm, VALID_DNSSEC_ALGORITHMS)


def is_valid_digest_type(digest_type: object) -> bool:
    return _member(digest_type, VALID_DIGEST_TYPES)


def is_valid_nsec3_hash_algorithm(algorithm: object) -> bool:
    return _member(algorithm, VALID_NSEC3_HASH_ALGORITHMS)


def is_valid_ssh_algorithm(algorithm: object) -> bool:
    return _member(algorithm, VALID_SSH_ALGORITHMS)


def is_valid_ssh_fingerprint_type(fp_type: object) -> bool:
    return _member(fp_type, VALID_SSH_FINGERPRINT_TYPES)


def _is_type_list(value: object) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(t, str) for t in value)


def is_dnskey_record(record: object) -> TypeGuard[DNSKEYRecord]:
    if not (r := fields.tagged(record, 'DNSKEY')):
        return False
    return (
        fields.in_range(r.get('flags'), 0, fields.MAX_UINT16)
        and fields.is_integer(r.get('protocol'))
        and r['protocol'] == 3
        and is_valid_dnssec_algorithm(r.get('algorithm'))
        and fields.is_valid_hex_string(r.get('publicKey'))
        and fields.has_valid_ttl(r)
    )


def is_ds_record(record: object) -> TypeGuard[DSRecord]:
    if not (r := fields.tagged(record, 'DS')):
        return False
    return (
        fields.in_range(r.get('keyTag'), 0, fields.MAX_UINT16)
        and is_valid_dnssec_algorithm(r.get('algorithm'))
        and is_valid_digest_type(r.get('digestType'))
        and fields.is_valid_hex_string(r.get('digest'))
        and fields.has_valid_ttl(r)
    )


def is_nsec_record(record: object) -> TypeGuard[NSECRecord]:
    if not (r := fields.tagged(record, 'NSEC')):
        return False
    return (
        _formats.is_fqdn(r.get('nextDomainName'), require_tld=True)
        and _is_type_list(r.get('typeBitMaps'))
        and fields.has_valid_ttl(r)
    )


def is_nsec3_record(record: object) -> TypeGuard[NSEC3Record]:
    if not (r := fields.tagged(record, 'NSEC3')):
        return False

    salt = r.get('salt')
    return (
        is_valid_nsec3_hash_algorithm(r.get('hashAlgorithm'))
        and fields.in_range(r.get('flags'), 0, fields.MAX_UINT8)
        and fields.in_range(r.get('iterations'), 0, fields.MAX_UINT16)
        and isinstance(salt, str)
        and (salt == '' or fields.is_valid_hex_string(salt))
        and isinstance(r.get('nextHashedOwnerName'), str)
        and bool(r['nextHashedOwnerName'])
        and _is_type_list(r.get('typeBitMaps'))
        and fields.has_valid_ttl(r)
    )


def is_rrsig_record(record: object) -> TypeGuard[RRSIGRecord]:
    '''
    Field shapes only: inception/expiration ordering is left to
    `validate_rrsig`.
    '''
    if not (r := fields.tagged(record, 'RRSIG')):
        return False
    return (
        isinstance(r.get('typeCovered'), str)
        and is_valid_dnssec_algorithm(r.get('algorithm'))
        and fields.in_range(r.get('labels'), 0, fields.MAX_UINT8)
        and fields.is_valid_ttl(r.get('originalTTL'))
        and fields.is_non_negative_integer(r.get('signatureExpiration'))
        and fields.is_non_negative_integer(r.get('signatureInception'))
        and fields.in_range(r.get('keyTag'), 0, fields.MAX_UINT16)
        and _formats.is_fqdn(r.get('signerName'), require_tld=True)
        and fields.is_valid_hex_string(r.get('signature'))
        and fields.has_valid_ttl(r)
    )


def is_sshfp_record(record: object) -> TypeGuard[SSHFPRecord]:
    if not (r := fields.tagged(record, 'SSHFP')):
        return False
    return (
        is_valid_ssh_algorithm(r.get('algorithm'))
        and is_valid_ssh_fingerprint_type(r.get('fpType'))
        and fields.is_valid_hex_string(r.get('fingerprint'))
        and fields.has_valid_ttl(r)
    )
