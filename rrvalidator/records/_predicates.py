'''
Boolean predicates for the traditional record types.

Each `is_*_record` takes any value and answers True only when it is a
mapping carrying the right `type` tag and every required field is
present, correctly typed and in range. Optional fields are only checked
when present. They never raise.

>>> is_a_record({'type': 'A', 'address': '192.168.1.1', 'ttl': 300})
True
>>> is_a_record({'type': 'A', 'address': '999.999.999.999'})
False
'''
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final, TypeGuard

from rrvalidator import _fields as fields
from rrvalidator import _formats
from rrvalidator.records._models import (
    AAAARecord,
    ANYRecord,
    ARecord,
    CAARecord,
    CNAMERecord,
    MXRecord,
    NAPTRRecord,
    NSRecord,
    PTRRecord,
    SOARecord,
    SRVRecord,
    TLSARecord,
    TXTRecord,
)

BINARY_TYPES: Final = (bytes, bytearray, memoryview)
_CAA_TEXT_PROPERTIES: Final = ('issue', 'issuewild', 'iodef', 'contactphone')


def _is_text(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def first_present(
    record: Mapping[str, Any],
    *keys: str,
    accept: Callable[[object], bool],
) -> Any | None:
    '''
    Resolve a field that may be spelled more than one way, the first
    key whose value is accepted wins.

    Parameters
    ----------
    record : Mapping[str, Any]
    *keys : str
        The candidate spellings in priority order.
    accept : Callable[[object], bool]
        Decides whether a value counts as present.

    Returns
    -------
    Any | None
    '''
    for key in keys:
        value = record.get(key)
        if value is not None and accept(value):
            return value
    return None


def _is_fqdn_field(record: Mapping[str, Any], key: str) -> bool:
    return _formats.is_fqdn(record.get(key), require_tld=True)


def is_a_record(record: object) -> TypeGuard[ARecord]:
    if not (r := fields.tagged(record, 'A')):
        return False
    return _formats.is_ip(r.get('address'), 4) and fields.has_valid_ttl(r)


def is_aaaa_record(record: object) -> TypeGuard[AAAARecord]:
    if not (r := fields.tagged(record, 'AAAA')):
        return False
    return _formats.is_ip(r.get('address'), 6) and fields.has_valid_ttl(r)


def is_cname_record(record: object) -> TypeGuard[CNAMERecord]:
    if not (r := fields.tagged(record, 'CNAME')):
        return False
    return _is_fqdn_field(r, 'value') and fields.has_valid_ttl(r)


def is_ns_record(record: object) -> TypeGuard[NSRecord]:
    if not (r := fields.tagged(record, 'NS')):
        return False
    return _is_fqdn_field(r, 'value') and fields.has_valid_ttl(r)


def is_ptr_record(record: object) -> TypeGuard[PTRRecord]:
    if not (r := fields.tagged(record, 'PTR')):
        return False
    return _is_fqdn_field(r, 'value') and fields.has_valid_ttl(r)


def is_mx_record(record: object) -> TypeGuard[MXRecord]:
    if not (r := fields.tagged(record, 'MX')):
        return False
    return (
        _is_fqdn_field(r, 'exchange')
        and fields.is_valid_priority(r.get('priority'))
        and fields.has_valid_ttl(r)
    )


def is_txt_record(record: object) -> TypeGuard[TXTRecord]:
    if not (r := fields.tagged(record, 'TXT')):
        return False
    entries = r.get('entries')
    if not isinstance(entries, (list, tuple)):
        return False
    return (
        all(fields.is_valid_text_record(entry) for entry in entries)
        and fields.has_valid_ttl(r)
    )


def is_soa_mailbox(admin: object) -> bool:
    '''
    SOA admin mailboxes are written with a dot in place of the `@`
    (`hostmaster.example.com`), only the first dot is swapped before
    checking it as an email address.
    '''
    return isinstance(admin, str) and _formats.is_email(admin.replace('.', '@', 1))


def is_soa_record(record: object) -> TypeGuard[SOARecord]:
    '''
    Accepts `primary`/`admin`/`expiration`/`minimum` as well as the
    resolver style `nsname`/`hostmaster`/`expire`/`minttl`, a field is
    satisfied by whichever spelling is present.
    '''
    if not (r := fields.tagged(record, 'SOA')):
        return False

    primary = first_present(r, 'primary', 'nsname', accept=_is_text)
    admin = first_present(r, 'admin', 'hostmaster', accept=_is_text)
    expiration = first_present(r, 'expiration', 'expire', accept=fields.is_number)
    minimum = first_present(r, 'minimum', 'minttl', accept=fields.is_number)

    return (
        _formats.is_fqdn(primary, require_tld=True)
        and is_soa_mailbox(admin)
        and fields.is_non_negative_integer(r.get('serial'))
        and fields.is_non_negative_integer(r.get('refresh'))
        and fields.is_non_negative_integer(r.get('retry'))
        and fields.is_non_negative_integer(expiration)
        and fields.is_non_negative_integer(minimum)
        and fields.has_valid_ttl(r)
    )


def is_srv_record(record: object) -> TypeGuard[SRVRecord]:
    if not (r := fields.tagged(record, 'SRV')):
        return False
    return (
        _is_fqdn_field(r, 'name')
        and fields.is_valid_priority(r.get('priority'))
        and fields.is_valid_weight(r.get('weight'))
        and fields.is_valid_port(r.get('port'))
        and fields.has_valid_ttl(r)
    )


def has_caa_property(record: Mapping[str, Any]) -> bool:
    '''
    Every CAA property is optional on its own, but a record carrying
    none of them says nothing.
    '''
    if any(isinstance(record.get(key), str) for key in _CAA_TEXT_PROPERTIES):
        return True
    return _formats.is_email(record.get('contactemail'))


def is_caa_record(record: object) -> TypeGuard[CAARecord]:
    if not (r := fields.tagged(record, 'CAA')):
        return False
    return (
        fields.is_valid_caa_flags(r.get('critical'))
        and has_caa_property(r)
        and fields.has_valid_ttl(r)
    )


def is_naptr_record(record: object) -> TypeGuard[NAPTRRecord]:
    if not (r := fields.tagged(record, 'NAPTR')):
        return False

    replacement = r.get('replacement')
    return (
        fields.in_range(r.get('order'), 0, fields.MAX_UINT16)
        and fields.in_range(r.get('preference'), 0, fields.MAX_UINT16)
        and fields.is_valid_naptr_flags(r.get('flags'))
        and isinstance(r.get('service'), str)
        and isinstance(r.get('regexp'), str)
        and isinstance(replacement, str)
        and (replacement == '' or _formats.is_fqdn(replacement, require_tld=True))
        and fields.has_valid_ttl(r)
    )


def is_tlsa_certificate(record: Mapping[str, Any]) -> bool:
    '''
    Certificate data is a hex string under `certificate` or `data`, or
    raw bytes under `data` (taken as-is).
    '''
    cert = first_present(record, 'certificate', 'data', accept=_is_text)
    if cert is not None and fields.is_valid_hex_string(cert):
        return True
    return isinstance(record.get('data'), BINARY_TYPES)


def is_tlsa_record(record: object) -> TypeGuard[TLSARecord]:
    if not (r := fields.tagged(record, 'TLSA')):
        return False

    usage = first_present(r, 'usage', 'certUsage', accept=fields.is_number)
    matching = first_present(r, 'matchingType', 'match', accept=fields.is_number)
    return (
        fields.is_valid_tlsa_usage(usage)
        and fields.is_valid_tlsa_selector(r.get('selector'))
        and fields.is_valid_tlsa_matching_type(matching)
        and is_tlsa_certificate(r)
        and fields.has_valid_ttl(r)
    )


def is_any_record(record: object) -> TypeGuard[ANYRecord]:
    '''
    ANY is a container: it is valid with a `value`, or with a `records`
    list whose entries each carry a `type`. Entries are not validated
    any deeper.
    '''
    if not (r := fields.tagged(record, 'ANY')):
        return False

    records = r.get('records')
    has_records = isinstance(records, list) and all(
        isinstance(entry, Mapping) and 'type' in entry
        for entry in records
    )
    has_value = not fields.is_absent(r, 'value')
    return (has_value or has_records) and fields.has_valid_ttl(r)
