'''
Strict DNSSEC validators.

Each `validate_*` checks its fields in a fixed order and raises a
`DNSValidationError` for the first constraint that fails, so a record
with several problems always reports the same code. On success the
normalized record is returned.

`publicKey` and `signature` are expected base64 encoded here (hex in
the boolean predicates).
'''
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Final

from rrvalidator import _fields as fields
from rrvalidator.dnssec._enums import DS_DIGEST_HEX_LENGTHS, RR_TYPE_MNEMONICS
from rrvalidator.dnssec._models import (
    DNSKEYData,
    DSData,
    NSEC3Data,
    NSEC3PARAMData,
    NSECData,
    RRSIGData,
)
from rrvalidator.errors import DNSValidationError

log = logging.getLogger(__name__)

_DOMAIN_RE: Final = re.compile(r'([a-zA-Z0-9-]+\.)*[a-zA-Z0-9-]+\.?')
_BASE64_RE: Final = re.compile(r'[A-Za-z0-9+/]+=*')
_BASE32_RE: Final = re.compile(r'[A-Z2-7]+=*')
_HEX_RE: Final = re.compile(r'[0-9a-fA-F]+')
_SALT_RE: Final = re.compile(r'[0-9a-fA-F]*')


def _check(
    ok: bool,
    message: str,
    code: str,
    field: str | None = None,
    value: Any = None,
) -> None:
    if not ok:
        log.debug(f'{code}: {message} ({field}={value!r})')
        raise DNSValidationError(message, code, field, value)


def _check_object(record: object, rtype: str) -> Mapping[str, Any]:
    _check(
        isinstance(record, Mapping),
        f'{rtype} record must be an object',
        f'INVALID_{rtype}_STRUCTURE',
    )
    return record  # type: ignore[return-value]


def _is_text(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def _matches(pattern: re.Pattern[str], value: str) -> bool:
    return pattern.fullmatch(value) is not None


def _check_hash_params(record: Mapping[str, Any], rtype: str) -> None:
    '''
    The fields NSEC3 and NSEC3PARAM share, checked in record order.
    '''
    hash_algorithm = record.get('hashAlgorithm')
    _check(
        fields.is_integer(hash_algorithm) and hash_algorithm == 1,
        f'{rtype} hashAlgorithm must be 1 (SHA-1)',
        f'INVALID_{rtype}_HASH_ALGORITHM',
        'hashAlgorithm',
        hash_algorithm,
    )
    _check(
        fields.in_range(record.get('flags'), 0, fields.MAX_UINT8),
        f'{rtype} flags must be between 0 and 255',
        f'INVALID_{rtype}_FLAGS',
        'flags',
        record.get('flags'),
    )
    _check(
        fields.in_range(record.get('iterations'), 0, fields.MAX_UINT16),
        f'{rtype} iterations must be between 0 and 65535',
        f'INVALID_{rtype}_ITERATIONS',
        'iterations',
        record.get('iterations'),
    )

    salt = record.get('salt')
    _check(
        isinstance(salt, str),
        f'{rtype} salt must be a string',
        f'INVALID_{rtype}_SALT_TYPE',
        'salt',
        salt,
    )
    _check(
        salt == '-' or _matches(_SALT_RE, salt),
        f'{rtype} salt must be hexadecimal or "-" for no salt',
        f'INVALID_{rtype}_SALT_FORMAT',
        'salt',
        salt,
    )


def _check_type_list(record: Mapping[str, Any], rtype: str) -> list[str]:
    types = record.get('types')
    _check(
        isinstance(types, (list, tuple)),
        f'{rtype} types must be an array',
        f'INVALID_{rtype}_TYPES',
        'types',
        types,
    )
    for rr_type in types:
        _check(
            isinstance(rr_type, str) and rr_type in RR_TYPE_MNEMONICS,
            f'{rtype} type "{rr_type}" is not a valid DNS record type',
            f'INVALID_{rtype}_TYPE',
            'types',
            rr_type,
        )
    return types if isinstance(types, list) else list(types)


def validate_rrsig(record: object) -> RRSIGData:
    '''
    Validate an RRSIG record.

    Parameters
    ----------
    record : object

    Returns
    -------
    RRSIGData

    Raises
    ------
    DNSValidationError
        With the code of the first failing check, notably
        `INVALID_RRSIG_TIMESTAMP_ORDER` when the inception is not
        strictly before the expiration.
    '''
    r = _check_object(record, 'RRSIG')

    _check(
        _is_text(r.get('typeCovered')),
        'RRSIG record must have a valid typeCovered field',
        'INVALID_RRSIG_TYPE_COVERED',
        'typeCovered',
        r.get('typeCovered'),
    )
    _check(
        fields.in_range(r.get('algorithm'), 1, 16),
        'RRSIG record must have a valid algorithm',
        'INVALID_RRSIG_ALGORITHM',
        'algorithm',
        r.get('algorithm'),
    )
    _check(
        fields.in_range(r.get('labels'), 0, 127),
        'RRSIG labels must be between 0 and 127',
        'INVALID_RRSIG_LABELS',
        'labels',
        r.get('labels'),
    )
    _check(
        fields.is_non_negative_integer(r.get('originalTTL')),
        'RRSIG originalTTL must be a non-negative integer',
        'INVALID_RRSIG_TTL',
        'originalTTL',
        r.get('originalTTL'),
    )
    _check(
        fields.is_non_negative_integer(r.get('signatureExpiration')),
        'RRSIG signatureExpiration must be a valid timestamp',
        'INVALID_RRSIG_EXPIRATION',
        'signatureExpiration',
        r.get('signatureExpiration'),
    )
    _check(
        fields.is_non_negative_integer(r.get('signatureInception')),
        'RRSIG signatureInception must be a valid timestamp',
        'INVALID_RRSIG_INCEPTION',
        'signatureInception',
        r.get('signatureInception'),
    )
    _check(
        r['signatureInception'] < r['signatureExpiration'],
        'RRSIG signatureInception must be before signatureExpiration',
        'INVALID_RRSIG_TIMESTAMP_ORDER',
    )
    _check(
        fields.in_range(r.get('keyTag'), 0, fields.MAX_UINT16),
        'RRSIG keyTag must be between 0 and 65535',
        'INVALID_RRSIG_KEY_TAG',
        'keyTag',
        r.get('keyTag'),
    )

    signer = r.get('signerName')
    _check(
        _is_text(signer),
        'RRSIG record must have a valid signerName',
        'INVALID_RRSIG_SIGNER_NAME',
        'signerName',
        signer,
    )
    _check(
        _matches(_DOMAIN_RE, signer),
        'RRSIG signerName must be a valid domain name',
        'INVALID_RRSIG_SIGNER_FORMAT',
        'signerName',
        signer,
    )

    signature = r.get('signature')
    _check(
        _is_text(signature),
        'RRSIG record must have a valid signature',
        'INVALID_RRSIG_SIGNATURE',
        'signature',
        signature,
    )
    _check(
        _matches(_BASE64_RE, signature),
        'RRSIG signature must be base64-encoded',
        'INVALID_RRSIG_SIGNATURE_FORMAT',
        'signature',
        signature,
    )

    return RRSIGData(
        type_covered=r['typeCovered'],
        algorithm=r['algorithm'],
        labels=r['labels'],
        original_ttl=r['originalTTL'],
        signature_expiration=r['signatureExpiration'],
        signature_inception=r['signatureInception'],
        key_tag=r['keyTag'],
        signer_name=signer,
        signature=signature,
    )


def validate_dnskey(record: object) -> DNSKEYData:
    '''
    Validate a DNSKEY record, `protocol` must be exactly 3.

    Raises
    ------
    DNSValidationError
    '''
    r = _check_object(record, 'DNSKEY')

    _check(
        fields.in_range(r.get('flags'), 0, fields.MAX_UINT16),
        'DNSKEY flags must be between 0 and 65535',
        'INVALID_DNSKEY_FLAGS',
        'flags',
        r.get('flags'),
    )
    protocol = r.get('protocol')
    _check(
        fields.is_integer(protocol) and protocol == 3,
        'DNSKEY protocol must be 3 for DNSSEC',
        'INVALID_DNSKEY_PROTOCOL',
        'protocol',
        protocol,
    )
    _check(
        fields.in_range(r.get('algorithm'), 1, 16),
        'DNSKEY record must have a valid algorithm',
        'INVALID_DNSKEY_ALGORITHM',
        'algorithm',
        r.get('algorithm'),
    )

    public_key = r.get('publicKey')
    _check(
        _is_text(public_key),
        'DNSKEY record must have a valid publicKey',
        'INVALID_DNSKEY_PUBLIC_KEY',
        'publicKey',
        public_key,
    )
    _check(
        _matches(_BASE64_RE, public_key),
        'DNSKEY publicKey must be base64-encoded',
        'INVALID_DNSKEY_PUBLIC_KEY_FORMAT',
        'publicKey',
        public_key,
    )

    return DNSKEYData(
        flags=r['flags'],
        protocol=protocol,
        algorithm=r['algorithm'],
        public_key=public_key,
    )


def validate_ds(record: object) -> DSData:
    '''
    Validate a DS record. The digest length must match the digest type
    exactly: 40 hex characters for SHA-1, 64 for SHA-256 and GOST, 96
    for SHA-384.

    Raises
    ------
    DNSValidationError
    '''
    r = _check_object(record, 'DS')

    _check(
        fields.in_range(r.get('keyTag'), 0, fields.MAX_UINT16),
        'DS keyTag must be between 0 and 65535',
        'INVALID_DS_KEY_TAG',
        'keyTag',
        r.get('keyTag'),
    )
    _check(
        fields.in_range(r.get('algorithm'), 1, 16),
        'DS record must have a valid algorithm',
        'INVALID_DS_ALGORITHM',
        'algorithm',
        r.get('algorithm'),
    )
    digest_type = r.get('digestType')
    _check(
        fields.in_range(digest_type, 1, 4),
        'DS digestType must be between 1 and 4',
        'INVALID_DS_DIGEST_TYPE',
        'digestType',
        digest_type,
    )

    digest = r.get('digest')
    _check(
        _is_text(digest),
        'DS record must have a valid digest',
        'INVALID_DS_DIGEST',
        'digest',
        digest,
    )
    _check(
        _matches(_HEX_RE, digest),
        'DS digest must be hexadecimal',
        'INVALID_DS_DIGEST_FORMAT',
        'digest',
        digest,
    )

    expected = DS_DIGEST_HEX_LENGTHS[int(digest_type)]
    _check(
        len(digest) == expected,
        f'DS digest length must be {expected} characters for digest type {int(digest_type)}',
        'INVALID_DS_DIGEST_LENGTH',
        'digest',
        digest,
    )

    return DSData(
        key_tag=r['keyTag'],
        algorithm=r['algorithm'],
        digest_type=digest_type,
        digest=digest,
    )


def validate_nsec(record: object) -> NSECData:
    '''
    Validate an NSEC record, reading the covered types from `types`.

    Raises
    ------
    DNSValidationError
    '''
    r = _check_object(record, 'NSEC')

    next_name = r.get('nextDomainName')
    _check(
        _is_text(next_name),
        'NSEC record must have a valid nextDomainName',
        'INVALID_NSEC_NEXT_DOMAIN',
        'nextDomainName',
        next_name,
    )
    _check(
        _matches(_DOMAIN_RE, next_name),
        'NSEC nextDomainName must be a valid domain name',
        'INVALID_NSEC_DOMAIN_FORMAT',
        'nextDomainName',
        next_name,
    )
    types = _check_type_list(r, 'NSEC')

    return NSECData(next_domain_name=next_name, type_bit_maps=types)


def validate_nsec3(record: object) -> NSEC3Data:
    '''
    Validate an NSEC3 record. The salt is hex or `-`, the next hashed
    owner name is base32.

    Raises
    ------
    DNSValidationError
    '''
    r = _check_object(record, 'NSEC3')
    _check_hash_params(r, 'NSEC3')

    next_hashed = r.get('nextHashedOwnerName')
    _check(
        _is_text(next_hashed),
        'NSEC3 record must have a valid nextHashedOwnerName',
        'INVALID_NSEC3_NEXT_HASHED_NAME',
        'nextHashedOwnerName',
        next_hashed,
    )
    _check(
        _matches(_BASE32_RE, next_hashed),
        'NSEC3 nextHashedOwnerName must be base32-encoded',
        'INVALID_NSEC3_NEXT_HASHED_FORMAT',
        'nextHashedOwnerName',
        next_hashed,
    )
    types = _check_type_list(r, 'NSEC3')

    return NSEC3Data(
        hash_algorithm=r['hashAlgorithm'],
        flags=r['flags'],
        iterations=r['iterations'],
        salt=r['salt'],
        next_hashed_owner_name=next_hashed,
        type_bit_maps=types,
    )


def validate_nsec3param(record: object) -> NSEC3PARAMData:
    '''
    Validate an NSEC3PARAM record.

    Raises
    ------
    DNSValidationError
    '''
    r = _check_object(record, 'NSEC3PARAM')
    _check_hash_params(r, 'NSEC3PARAM')

    return NSEC3PARAMData(
        hash_algorithm=r['hashAlgorithm'],
        flags=r['flags'],
        iterations=r['iterations'],
        salt=r['salt'],
    )
