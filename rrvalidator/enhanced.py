'''
**rrvalidator.enhanced**
------------------------

Validators that explain themselves. Unlike the `is_*_record` predicates
these keep going after the first problem and return every error found
in a `ValidationResult`, each message quoting the offending value and
an example of a good one.

Only A, AAAA and MX have a dedicated validator here, every other type
goes through `rrvalidator.validate_dns_record`.
'''
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from rrvalidator import _fields as fields
from rrvalidator import _formats
from rrvalidator.records._models import ValidationResult

_SUGGESTIONS: Final[dict[str, tuple[str, ...]]] = {
    'A': (
        'A records should contain valid IPv4 addresses (e.g., 192.168.1.1)',
        'Consider setting a reasonable TTL value (300-3600 seconds for dynamic IPs)',
    ),
    'AAAA': (
        'AAAA records should contain valid IPv6 addresses (e.g., 2001:db8::1)',
        'IPv6 addresses can be compressed using :: notation',
    ),
    'MX': (
        'MX records require both priority and exchange fields',
        'Lower priority values indicate higher precedence',
        'Exchange must be a fully qualified domain name',
    ),
    'CNAME': (
        'CNAME records cannot coexist with other record types for the same name',
        'The target must be a fully qualified domain name',
    ),
}
_GENERIC_SUGGESTIONS: Final = (
    'Ensure all required fields are present and correctly typed',
    'Check that string values are properly formatted',
)


def _render(value: Any) -> str:
    match value:
        case None:
            return 'null'
        case bool():
            return str(value).lower()
        case float() if value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def _open(record: object, rtype: str) -> tuple[Mapping[str, Any] | None, list[str]]:
    '''
    The shared preamble: the record must be a mapping tagged `rtype`.
    On failure the returned errors are final and the record is None.
    '''
    if not isinstance(record, Mapping):
        return None, ['Record must be an object']
    if fields.is_absent(record, 'type'):
        return None, [f"Expected record type '{rtype}', got 'undefined'"]
    if (actual := record['type']) != rtype:
        return None, [f"Expected record type '{rtype}', got '{_render(actual)}'"]
    return record, []


def _check_ttl(record: Mapping[str, Any], errors: list[str]) -> None:
    if fields.is_absent(record, 'ttl'):
        return
    ttl = record['ttl']
    if not (fields.is_number(ttl) and fields.is_valid_ttl(ttl)):
        errors.append(
            f'Invalid TTL value: {_render(ttl)}. '
            'Must be between 0 and 2147483647 seconds'
        )


def _validate_address(record: object, rtype: str, version: int, example: str) -> ValidationResult:
    r, errors = _open(record, rtype)
    if r is None:
        return ValidationResult.from_messages(errors)

    address = r.get('address')
    if not isinstance(address, str):
        errors.append(f"{rtype} record must have a 'address' field of type string")
    elif not _formats.is_ip(address, version):
        errors.append(f"Invalid IPv{version} address: '{address}'. Example: {example}")

    _check_ttl(r, errors)
    return ValidationResult.from_messages(errors)


def validate_a_record(record: object) -> ValidationResult:
    '''
    Validate an A record, reporting every problem found.

    Parameters
    ----------
    record : object

    Returns
    -------
    ValidationResult

    Example
    -------
    >>> validate_a_record({'type': 'A', 'address': '999.999.999.999'}).errors
    ["Invalid IPv4 address: '999.999.999.999'. Example: 192.168.1.1"]
    '''
    return _validate_address(record, 'A', 4, '192.168.1.1')


def validate_aaaa_record(record: object) -> ValidationResult:
    return _validate_address(record, 'AAAA', 6, '2001:db8::1')


def validate_mx_record(record: object) -> ValidationResult:
    '''
    Validate an MX record. `exchange` and `priority` are checked
    independently, so a record with both wrong gets two errors.
    '''
    r, errors = _open(record, 'MX')
    if r is None:
        return ValidationResult.from_messages(errors)

    exchange = r.get('exchange')
    if not isinstance(exchange, str):
        errors.append("MX record must have an 'exchange' field of type string")
    elif not _formats.is_fqdn(exchange, require_tld=True):
        errors.append(
            f"Invalid FQDN for exchange: '{exchange}'. Example: mail.example.com"
        )

    priority = r.get('priority')
    if not fields.is_number(priority):
        errors.append("MX record must have a 'priority' field of type number")
    elif not fields.is_valid_priority(priority):
        errors.append(
            f'Invalid priority value: {_render(priority)}. '
            'Must be between 0 and 65535 (lower = higher priority)'
        )

    _check_ttl(r, errors)
    return ValidationResult.from_messages(errors)


def get_validation_suggestions(record_type: str) -> list[str]:
    '''
    Advisory tips for a record type, case insensitive, with a generic
    fallback for types without specific advice.
    '''
    return list(_SUGGESTIONS.get(record_type.upper(), _GENERIC_SUGGESTIONS))
